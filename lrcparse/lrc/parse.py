from __future__ import annotations

from decimal import Decimal, localcontext
import logging
from typing import Iterable

import regex

from .errors import InvalidOffset, InvalidTimestamp, LrcParseError, NoTagInNonEmptyLine
from .model import Item, Lyric, Metadata, MetadataKind
from .scan import Segment, scan_tags

logger = logging.getLogger(__name__)

_INT_RE = regex.compile(r"([+-]?)0*([0-9]+)")
_SECONDS_RE = regex.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")  # 12, 12.34, .5
# Unicode White_Space only; str.strip also drops \x1c-\x1f
_TRIM_RE = regex.compile(r"\A\p{White_Space}+|\p{White_Space}+\Z")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_METADATA_KEYS: dict[str, MetadataKind] = {
    "ar": MetadataKind.ARTIST,
    "al": MetadataKind.ALBUM,
    "ti": MetadataKind.TITLE,
    "au": MetadataKind.LYRICIST,
    "length": MetadataKind.LENGTH,
    "by": MetadataKind.AUTHOR,
    "re": MetadataKind.APPLICATION,
    "ve": MetadataKind.APP_VERSION,
    "#": MetadataKind.COMMENT,
}


def _trim(s: str) -> str:
    return _TRIM_RE.sub("", s)


def _parse_i64(s: str) -> int | None:
    m = _INT_RE.fullmatch(s)
    # i64 has at most 19 digits; also keeps int() under its digit limit
    if not m or len(m.group(2)) > 19:
        return None
    v = int(m.group(1) + m.group(2))
    if not (_I64_MIN <= v <= _I64_MAX):
        return None
    return v


def _decode_timestamp(seg: Segment, line_num: int) -> int:
    minutes = _parse_i64(seg.key)
    seconds = seg.value.replace(":", ".")
    if minutes is None or not _SECONDS_RE.fullmatch(seconds):
        raise InvalidTimestamp(line_num)

    sec = Decimal(seconds)
    if sec.adjusted() > 18:
        raise InvalidTimestamp(line_num)
    with localcontext() as ctx:
        # enough digits for the scaled value to stay exact
        ctx.prec = max(ctx.prec, len(sec.as_tuple().digits) + 3)
        ms = int(sec.scaleb(3))  # truncates toward zero

    t_ms = minutes * 60_000 + ms
    if not (_I64_MIN <= t_ms <= _I64_MAX):
        raise InvalidTimestamp(line_num)
    return t_ms


def parse_line(line: str, line_num: int) -> Item | None:
    """
    Parse one terminator-free LRC line.

    Returns None for blank lines and for tags with an unrecognized key.
    Raises an LrcParseError subclass carrying `line_num` otherwise.

    Only the first tag decides what the line is. If it looks like a timestamp
    (`[mm:ss.xx]`), every tag on the line is decoded as one, so
    `[00:12.00][00:45.00]text` yields a single Lyric with two timestamps.
    """
    if not _trim(line):
        return None

    scanned = scan_tags(line)
    if scanned is None:
        raise NoTagInNonEmptyLine(line_num)
    segments, text = scanned

    first = segments[0]
    # `[:]` is a comment line, body is whatever follows
    if first.key == "" and first.value == "":
        return Metadata.comment(_trim(text))

    key = _trim(first.key)
    kind = _METADATA_KEYS.get(key)
    if kind is not None:
        return Metadata(kind=kind, value=_trim(first.value))

    if key == "offset":
        offset = _parse_i64(_trim(first.value))
        if offset is None:
            raise InvalidOffset(line_num)
        return Metadata.offset(offset)

    if _parse_i64(key) is not None:
        return Lyric(text=text, timestamps=tuple(_decode_timestamp(s, line_num) for s in segments))

    logger.debug("Ignoring unrecognized tag %r in line %d", key, line_num)
    return None


def parse_document(lines: Iterable[str]) -> list[Item]:
    """
    Parse already split lines, numbered from 0.

    Stops at the first error; no partial result is returned.
    """
    items: list[Item] = []
    for line_num, line in enumerate(lines):
        try:
            item = parse_line(line, line_num)
        except LrcParseError as e:
            logger.debug("Stopped parsing: %s", e)
            raise
        if item is not None:
            items.append(item)
    return items
