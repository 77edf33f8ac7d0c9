from __future__ import annotations


class LrcParseError(ValueError):
    message = "Invalid LRC in line {0}"

    def __init__(self, line_num: int):
        super().__init__(self.message.format(line_num))
        self.line_num = line_num

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.line_num == other.line_num  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.line_num))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.line_num})"


class NoTagInNonEmptyLine(LrcParseError):
    message = "No tag was found in non-empty line {0}"


class InvalidTimestamp(LrcParseError):
    message = "Invalid timestamp format in line {0}"


class InvalidOffset(LrcParseError):
    message = "Invalid offset format in line {0}"
