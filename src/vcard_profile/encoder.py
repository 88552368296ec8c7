"""Attribute map → card text."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from .codec import to_card_value
from .mapping import MappingTable
from .model import EXTATTR, CardDialect, ExtensionRecord

EXTENSION_LINE = (
    "{card_key}:{id};VALUE=X_EXTENSION_KEY:{key};VALUE=X_EXTENSION_VALUE:{value}"
    ";VALUE=X_EXTENSION_DATA_TYPE:{data_type}"
)


def extension_line(card_key: str, record: ExtensionRecord | Mapping[str, Any]) -> str:
    if not isinstance(record, ExtensionRecord):
        record = ExtensionRecord.from_mapping(record)
    return EXTENSION_LINE.format(
        card_key=card_key,
        id=record.id,
        key=record.key or "",
        value=to_card_value(record.value or ""),
        data_type=record.data_type or "",
    )


def _text(value: Any) -> str:
    # JSON spelling for booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _complex_value(value: Any, sub_fields: tuple[str, ...]) -> str:
    if not isinstance(value, Mapping):
        return _text(value)
    return ";".join("" if value.get(name) is None else _text(value[name]) for name in sub_fields)


def encode(
    attributes: Mapping[str, Any],
    table: MappingTable,
    dialect: CardDialect | None = None,
    valid_attributes: Iterable[str] | None = None,
) -> str:
    """Serialise ``attributes`` in map order.

    Attributes outside ``valid_attributes`` (default: everything the reverse
    mapping knows; a single name may be passed as a plain string) or without
    a card key are left out.
    """
    dialect = dialect or CardDialect()
    if valid_attributes is None:
        allowed = set(table.to_card)
    elif isinstance(valid_attributes, str):
        allowed = {valid_attributes}
    else:
        allowed = set(valid_attributes)
    lines = ["BEGIN:VCARD", f"VERSION:{dialect.version}"]

    for name, value in attributes.items():
        card_key = table.to_card.get(name)
        if name not in allowed or card_key is None or value is None:
            continue
        if name == EXTATTR and isinstance(value, list):
            lines.extend(extension_line(card_key, record) for record in value)
            continue
        if name in table.complex_groups:
            value = _complex_value(value, table.complex_groups[name])
        lines.append(f"{card_key}:{to_card_value(_text(value))}")

    lines.append("END:VCARD")
    return dialect.line_separator.join(lines)
