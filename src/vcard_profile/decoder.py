"""Card text → attribute map."""
from __future__ import annotations

import logging
import re
from typing import Any

from .codec import percent_encode
from .errors import ExtensionRecordError, MalformedComplexAttributeError
from .mapping import MappingTable
from .model import EXTATTR, CardDialect, DecodeResult, Diagnostic, ExtensionRecord

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")

EXTENSION_SUBVALUES: dict[str, str] = {
    "VALUE=X_EXTENSION_KEY": "key",
    "VALUE=X_EXTENSION_VALUE": "value",
    "VALUE=X_EXTENSION_DATA_TYPE": "data_type",
}


# ── Line reassembly ────────────────────────────────────────────────────────────

def reassemble_lines(card_text: str, table: MappingTable, separator: str = " ") -> list[str]:
    """Group physical lines into logical entries.

    A line starting with a mapped card key opens a new entry. A line starting
    with an ignored key is dropped, but it does not close the previous entry:
    any other line still belongs to the last accepted entry, even when an
    ignored line sits between them, and is appended with ``separator``.
    Continuations before the first accepted entry are dropped.
    """
    entries: list[str] = []
    for line in LINE_BREAK.split(card_text.strip()):
        card_key = table.longest_prefix(line)
        if card_key is not None:
            if table.target_for(card_key) is not None:
                entries.append(line)
            continue
        if entries:
            entries[-1] = f"{entries[-1]}{separator}{line}"
        elif line:
            logger.debug("dropping continuation with no entry to attach to: %r", line)
    return entries


# ── Extension attributes ───────────────────────────────────────────────────────

def parse_extension_record(raw_value: str, encode: bool = False) -> ExtensionRecord:
    """Parse the value of an extension property line.

    The first ``;`` token is the record id; each further token is a
    ``MARKER:subvalue`` pair. Unknown markers are ignored.

    Raises ExtensionRecordError when the id is empty or a token has no ``:``.
    """
    record_id, *tokens = raw_value.split(";")
    if not record_id:
        raise ExtensionRecordError(raw_value, "missing extension id")
    record = ExtensionRecord(id=record_id)
    for token in tokens:
        marker, sep, subvalue = token.partition(":")
        if not sep:
            raise ExtensionRecordError(raw_value, f"sub-value {token!r} has no marker")
        attr = EXTENSION_SUBVALUES.get(marker)
        if attr is None:
            continue
        setattr(record, attr, subvalue)
    if encode and record.value is not None:
        record.value = percent_encode(record.value)
    return record


# ── Decoding ───────────────────────────────────────────────────────────────────

def _maybe_encode(value: str, encode: bool) -> str:
    return percent_encode(value) if encode else value


def _decode_complex(
    attribute: str, raw_value: str, sub_fields: tuple[str, ...], encode: bool,
) -> dict[str, str]:
    values = raw_value.split(";")
    if len(values) < len(sub_fields):
        raise MalformedComplexAttributeError(attribute, raw_value, len(sub_fields), len(values))
    return {name: _maybe_encode(v, encode) for name, v in zip(sub_fields, values)}


def decode(
    card_text: str,
    table: MappingTable,
    dialect: CardDialect | None = None,
    encode: bool = False,
) -> DecodeResult:
    """Decode one card into an attribute map plus skipped-entry diagnostics.

    Raises MalformedComplexAttributeError if a complex field is short of
    values; every other problem is local to its entry.
    """
    dialect = dialect or CardDialect()
    attributes: dict[str, Any] = {}
    diagnostics: list[Diagnostic] = []

    for entry in reassemble_lines(card_text, table, dialect.continuation_separator):
        entry = entry.strip()
        card_key, sep, raw_value = entry.partition(":")
        if len(entry) < 2 or not sep:
            logger.debug("skipping entry without a value: %r", entry)
            continue
        attribute = table.target_for(card_key)
        if attribute is None:
            continue

        if attribute == EXTATTR:
            records = attributes.setdefault(EXTATTR, [])
            try:
                record = parse_extension_record(raw_value, encode)
            except ExtensionRecordError as exc:
                logger.warning("skipped malformed extension entry: %s", entry)
                diagnostics.append(Diagnostic(message=str(exc), raw=entry))
                continue
            records.append(record.as_dict())
        elif attribute in table.complex_groups:
            attributes[attribute] = _decode_complex(
                attribute, raw_value, table.complex_groups[attribute], encode,
            )
        else:
            attributes[attribute] = _maybe_encode(raw_value, encode)

    attributes.setdefault(EXTATTR, [])
    return DecodeResult(attributes=attributes, diagnostics=diagnostics)
