from stores.models import DetailLevel, SectionStyle, Template, TemplateSection
from utils.prompt import SECTIONS_INTRO, compile_prompt, parse_prompt_sections


def _template(sections=(), general=""):
    return Template(id="t1", title="T", general_instructions=general, sections=tuple(sections))


def test_compile_orders_header_instructions_and_transcript():
    t = _template([TemplateSection(title="Subjective", style=SectionStyle.PARAGRAPH,
                                   detail_level=DetailLevel.NORMAL, instructions="do X")])
    out = compile_prompt("hello", t)

    i_header = out.index("## Subjective")
    i_instr = out.index("do X")
    i_transcript = out.index("TRANSCRIPT:\n\nhello")
    assert i_header < i_instr < i_transcript


def test_compile_exact_layout():
    t = _template(
        [
            TemplateSection(title="Subjective", style=SectionStyle.BULLET_LIST,
                            detail_level=DetailLevel.HIGH, instructions="  list complaints  "),
            TemplateSection(title="Plan", style=SectionStyle.AUTO, instructions=""),
        ],
        general="  Be concise.  ",
    )
    out = compile_prompt("  patient says hi \n", t)
    assert out == (
        "Be concise.\n\n"
        f"{SECTIONS_INTRO}\n\n"
        "## Subjective\nStyle: Bullet List\nDetail Level: High\nlist complaints\n\n"
        "## Plan\n\n"
        "---\nTRANSCRIPT:\n\n"
        "patient says hi"
    )


def test_compile_skips_defaults_and_blank_general_instructions():
    t = _template([TemplateSection(title="Assessment", style=SectionStyle.AUTO,
                                   detail_level=DetailLevel.NORMAL, instructions="   ")],
                  general="   ")
    out = compile_prompt("x", t)
    assert out.startswith(SECTIONS_INTRO)
    assert "Style:" not in out
    assert "Detail Level:" not in out
    assert "## Assessment\n\n---" in out


def test_compile_paragraph_style_is_emitted():
    t = _template([TemplateSection(title="S", style=SectionStyle.PARAGRAPH)])
    assert "## S\nStyle: Paragraph" in compile_prompt("", t)


def test_parse_splits_on_headers_and_trims():
    text = "## Subjective\n  complaint here  \n\n## Objective\nvitals\n"
    sections = parse_prompt_sections(text)
    assert [s.title for s in sections] == ["Subjective", "Objective"]
    assert sections[0].instructions == "complaint here"
    assert sections[1].instructions == "vitals"
    assert all(s.detail_level == DetailLevel.NORMAL for s in sections)
    assert len({s.id for s in sections}) == 2


def test_parse_ignores_preamble_and_non_header_hashes():
    text = "intro text\n### not a header\n##nospace\n## Real  \nbody ## inline\n"
    sections = parse_prompt_sections(text)
    assert [s.title for s in sections] == ["Real"]
    assert sections[0].instructions == "body ## inline"


def test_parse_without_headers_yields_nothing():
    assert parse_prompt_sections("just some text\n- a\n- b") == []
    assert parse_prompt_sections("") == []


def test_parse_bullet_heuristic_boundary():
    four = "## A\n- one\n- two\n- three\n- four\n"
    three = "## B\n- one\n- two\n- three\nprose\n"
    assert parse_prompt_sections(four)[0].style == SectionStyle.BULLET_LIST
    assert parse_prompt_sections(three)[0].style == SectionStyle.PARAGRAPH


def test_parse_nested_bullets_do_not_count():
    text = "## A\n- one\n    - nested\n    - nested\n  - nested\n- two\n"
    assert parse_prompt_sections(text)[0].style == SectionStyle.PARAGRAPH


def test_parse_handles_crlf():
    text = "## First\r\nline one\r\n## Second\r\nline two"
    sections = parse_prompt_sections(text)
    assert [s.title for s in sections] == ["First", "Second"]
    assert sections[0].instructions == "line one"
    assert sections[1].instructions == "line two"


def test_parsed_sections_compile_back_in_order():
    text = "## Subjective\nS body\n\n## Plan\nP body\n"
    t = _template(parse_prompt_sections(text))
    out = compile_prompt("tx", t)
    assert out.index("## Subjective\nStyle: Paragraph\nS body") < out.index("## Plan\nStyle: Paragraph\nP body")
