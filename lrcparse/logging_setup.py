from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    level_name = os.getenv("LRCPARSE_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
