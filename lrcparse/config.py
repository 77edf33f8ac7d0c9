from __future__ import annotations

from dataclasses import dataclass
import os

FORMATS = ("text", "json")


@dataclass(frozen=True)
class AppConfig:
    # Input
    encoding: str

    # Output
    output_format: str
    use_color: bool


def load_config() -> AppConfig:
    output_format = os.getenv("LRCPARSE_FORMAT", "text").strip().lower()
    if output_format not in FORMATS:
        output_format = "text"

    return AppConfig(
        encoding=os.getenv("LRCPARSE_ENCODING") or "utf-8",
        output_format=output_format,
        use_color=os.getenv("LRCPARSE_COLOR", "1") not in ("0", "false", "False"),
    )
