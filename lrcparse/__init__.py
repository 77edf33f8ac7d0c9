"""Parse LRC lyric lines into metadata and timed lyric items."""

from .lrc import (
    InvalidOffset,
    InvalidTimestamp,
    Item,
    LrcParseError,
    Lyric,
    Metadata,
    MetadataKind,
    NoTagInNonEmptyLine,
    parse_document,
    parse_line,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidOffset",
    "InvalidTimestamp",
    "Item",
    "LrcParseError",
    "Lyric",
    "Metadata",
    "MetadataKind",
    "NoTagInNonEmptyLine",
    "parse_document",
    "parse_line",
]
