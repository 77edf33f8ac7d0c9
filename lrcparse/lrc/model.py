from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class MetadataKind(Enum):
    ARTIST = "artist"
    ALBUM = "album"
    TITLE = "title"
    LYRICIST = "lyricist"  # who wrote the song text
    AUTHOR = "author"  # who made the LRC file
    LENGTH = "length"
    OFFSET = "offset"  # milliseconds, not applied to lyric timestamps
    APPLICATION = "application"
    APP_VERSION = "app_version"
    COMMENT = "comment"


@dataclass(frozen=True, slots=True)
class Metadata:
    kind: MetadataKind
    value: str | int

    def __post_init__(self) -> None:
        expected = int if self.kind is MetadataKind.OFFSET else str
        if type(self.value) is not expected:
            raise TypeError(f"{self.kind.name} metadata holds {expected.__name__}, got {type(self.value).__name__}")

    @classmethod
    def offset(cls, ms: int) -> "Metadata":
        return cls(kind=MetadataKind.OFFSET, value=ms)

    @classmethod
    def comment(cls, value: str) -> "Metadata":
        return cls(kind=MetadataKind.COMMENT, value=value)


@dataclass(frozen=True, slots=True)
class Lyric:
    """
    Lyric text with every timestamp it is shown at.

    Timestamps are milliseconds without the file offset applied.
    """

    text: str
    timestamps: tuple[int, ...]


Item = Union[Metadata, Lyric]
