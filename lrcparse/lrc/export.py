from __future__ import annotations

import json
from typing import Any, Iterable

from .model import Item, Lyric


def item_to_dict(item: Item) -> dict[str, Any]:
    if isinstance(item, Lyric):
        return {"type": "lyric", "text": item.text, "timestamps": list(item.timestamps)}
    return {"type": "metadata", "kind": item.kind.value, "value": item.value}


def export_json(items: Iterable[Item]) -> str:
    return json.dumps(
        {"items": [item_to_dict(i) for i in items]},
        ensure_ascii=False,
        indent=2,
    )


def _fmt_time(ms: int) -> str:
    sign = "-" if ms < 0 else ""
    m, rem = divmod(abs(ms), 60_000)
    s, ms2 = divmod(rem, 1_000)
    return f"{sign}{m:02d}:{s:02d}.{ms2:03d}"


def format_item(item: Item) -> str:
    """One human readable line per item, for CLI output."""
    if isinstance(item, Lyric):
        times = " ".join(_fmt_time(t) for t in item.timestamps)
        return f"{times}  {item.text}"
    return f"{item.kind.value}: {item.value}"
