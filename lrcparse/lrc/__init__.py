from .errors import InvalidOffset, InvalidTimestamp, LrcParseError, NoTagInNonEmptyLine
from .model import Item, Lyric, Metadata, MetadataKind
from .parse import parse_document, parse_line

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
