from __future__ import annotations

from dataclasses import dataclass

import regex

# [key:value]; the key runs to the first ":", the value to the first "]"
_SEGMENT_RE = regex.compile(r"\[([^:]*):([^\]]*)\]")


@dataclass(frozen=True, slots=True)
class Segment:
    key: str
    value: str
    start: int
    end: int


def scan_tags(line: str) -> tuple[tuple[Segment, ...], str] | None:
    """
    Match back-to-back `[key:value]` groups from the start of `line`.

    Returns the segments (raw, untrimmed) and the text after the last one,
    or None if the line does not start with a group.
    """
    segments: list[Segment] = []
    pos = 0
    while True:
        m = _SEGMENT_RE.match(line, pos)
        if not m:
            break
        segments.append(Segment(key=m.group(1), value=m.group(2), start=m.start(), end=m.end()))
        pos = m.end()

    if not segments:
        return None
    return tuple(segments), line[pos:]
