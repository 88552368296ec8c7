from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterator

from .decoder import LINE_BREAK

logger = logging.getLogger(__name__)

_BEGIN = re.compile(r"^BEGIN:VCARD\s*$", re.IGNORECASE)
_END = re.compile(r"^END:VCARD\s*$", re.IGNORECASE)


# ── Card files ─────────────────────────────────────────────────────────────────

def split_cards(text: str) -> Iterator[str]:
    """Yield each BEGIN:VCARD … END:VCARD block of a multi-card file.

    Lines outside a block are ignored; an unterminated last block is still
    yielded so the decoder can recover what it can.
    """
    current: list[str] | None = None
    for line in LINE_BREAK.split(text):
        if _BEGIN.match(line):
            if current:
                logger.debug("card without END:VCARD, %d line(s)", len(current))
                yield "\n".join(current)
            current = [line]
        elif current is not None:
            current.append(line)
            if _END.match(line):
                yield "\n".join(current)
                current = None
    if current:
        logger.debug("card without END:VCARD, %d line(s)", len(current))
        yield "\n".join(current)


def read_card_files(paths: list[Path]) -> list[tuple[str, str]]:
    """Return (card_text, source_label) pairs for every card in ``paths``."""
    results: list[tuple[str, str]] = []
    for p in paths:
        label = p.stem
        raw = p.read_text(encoding="utf-8", errors="replace")
        cards = list(split_cards(raw))
        logger.debug("%s: %d card(s)", label, len(cards))
        results.extend((card, label) for card in cards)
    return results


# ── Attribute maps (JSON) ──────────────────────────────────────────────────────

def read_attribute_maps(path: Path) -> list[dict[str, Any]]:
    """Load one attribute map or a list of them from a JSON file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(item, dict) for item in data):
        return data
    raise ValueError(f"{path}: expected a JSON object or a list of objects")


def dump_attribute_maps(maps: list[dict[str, Any]]) -> str:
    payload: Any = maps[0] if len(maps) == 1 else maps
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_attribute_maps(maps: list[dict[str, Any]], path: Path) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_attribute_maps(maps) + "\n", encoding="utf-8")
    return len(maps)
