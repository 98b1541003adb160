from __future__ import annotations

from stores.models import DetailLevel, SectionStyle, Template, TemplateSection

# compile_prompt / parse_prompt_sections

SECTIONS_INTRO = (
    "Below is a raw medical visit transcript. "
    "Generate a structured clinical note with the following sections:"
)
TRANSCRIPT_LABEL = "---\nTRANSCRIPT:"

# legacy prompts with more bullet lines than this are seeded as bullet lists
BULLET_HEAVY_THRESHOLD = 3


def _compile_section(section: TemplateSection) -> str:
    lines = [f"## {section.title}"]
    if section.style != SectionStyle.AUTO:
        lines.append(f"Style: {section.style.value}")
    if section.detail_level != DetailLevel.NORMAL:
        lines.append(f"Detail Level: {section.detail_level.value}")
    instructions = (section.instructions or "").strip()
    if instructions:
        lines.append(instructions)
    return "\n".join(lines)


def compile_prompt(transcript: str, template: Template) -> str:
    """
    Compile a template's general instructions and per-section instructions
    with a raw transcript into a single prompt for the LLM.
    No length limit is applied here.
    """
    parts: list[str] = []

    general = (template.general_instructions or "").strip()
    if general:
        parts.append(general)

    parts.append(SECTIONS_INTRO)
    parts.append("\n\n".join(_compile_section(s) for s in template.sections))
    parts.append(TRANSCRIPT_LABEL)
    parts.append((transcript or "").strip())

    return "\n\n".join(parts)


def _header_title(line: str) -> str | None:
    """Title of a `## Title` line, or None if the line is not a header."""
    body = line.rstrip("\r\n")
    if not body.startswith("## ") or len(body) <= 3:
        return None
    return body[3:].strip()


def _infer_style(instructions: str) -> SectionStyle:
    bullets = sum(1 for ln in instructions.splitlines() if ln.startswith("- "))
    if bullets > BULLET_HEAVY_THRESHOLD:
        return SectionStyle.BULLET_LIST
    return SectionStyle.PARAGRAPH


def parse_prompt_sections(text: str) -> list[TemplateSection]:
    """
    Split a flat markdown prompt into sections at `## Title` lines.

    Everything between the end of a header line and the start of the next
    header (or end of text) is that section's instructions, trimmed.
    Style is Bullet List when more than three lines start with "- ",
    Paragraph otherwise; detail level is always Normal.
    Text without headers yields no sections.
    """
    text = text or ""

    # pass 1: header positions -> (title, header_start, body_start)
    headers: list[tuple[str, int, int]] = []
    pos = 0
    for line in text.splitlines(keepends=True):
        title = _header_title(line)
        if title is not None:
            headers.append((title, pos, pos + len(line)))
        pos += len(line)

    # pass 2: slice bodies as half-open intervals between headers
    sections: list[TemplateSection] = []
    for i, (title, _start, body_start) in enumerate(headers):
        end = headers[i + 1][1] if i + 1 < len(headers) else len(text)
        instructions = text[body_start:end].strip()
        sections.append(TemplateSection(
            title=title,
            style=_infer_style(instructions),
            detail_level=DetailLevel.NORMAL,
            instructions=instructions,
        ))
    return sections
