"""
Best-effort parser for the provider's free-text content ideas.

Sections are separated by a literal ``---``. Inside a section, lines starting
with ``Title:``, ``Format:`` or ``Angle:`` (any case) fill the matching field.
Sections missing any field are skipped.
"""
import re
from typing import List

from pydantic import BaseModel

SECTION_SEPARATOR = "---"
MAX_IDEAS = 5

# Leading markdown decoration ("**", "- ", "1.", "#") is ignored before the label
_FIELD_LINE = re.compile(
    r"^[\s*_#>\-\d.)]*(title|format|angle)\s*[*_]*\s*:\s*(.*)$",
    re.IGNORECASE,
)


class Idea(BaseModel):
    title: str
    format: str
    angle: str


def _clean_value(value: str) -> str:
    return value.strip().strip("*_").strip()


def parse_section(section: str) -> dict:
    fields = {"title": "", "format": "", "angle": ""}
    for line in section.splitlines():
        match = _FIELD_LINE.match(line)
        if match:
            fields[match.group(1).lower()] = _clean_value(match.group(2))
    return fields


def parse_content_ideas(text: str, limit: int = MAX_IDEAS) -> List[Idea]:
    """
    Parse raw provider text into at most ``limit`` ideas, in section order.
    """
    ideas: List[Idea] = []
    if not text:
        return ideas

    for section in text.split(SECTION_SEPARATOR):
        if not section.strip():
            continue

        fields = parse_section(section)
        if fields["title"] and fields["format"] and fields["angle"]:
            ideas.append(Idea(**fields))
            if len(ideas) >= limit:
                break

    return ideas
