"""Configured entry point: one VCardParser per field mapping."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from .decoder import decode
from .encoder import encode
from .mapping import MappingConfig, MappingTable, build_mapping_table
from .model import CardDialect, DecodeResult


class VCardParser:
    """Convert between card text and attribute maps under one mapping.

    The mapping table is built once here and only read afterwards, so a
    single instance can serve any number of conversions.
    """

    def __init__(
        self,
        options: MappingConfig | Mapping[str, Any] | None = None,
        dialect: CardDialect | None = None,
    ):
        self.mappings: MappingTable = build_mapping_table(options)
        self.dialect = dialect or CardDialect()

    def to_object(self, card_text: str, encode: bool = False) -> dict[str, Any]:
        """Parse card text into an attribute map.

        With ``encode`` every value is percent-encoded on the way out.
        """
        return self.decode_with_diagnostics(card_text, encode).attributes

    def decode_with_diagnostics(self, card_text: str, encode: bool = False) -> DecodeResult:
        return decode(card_text, self.mappings, self.dialect, encode=encode)

    def to_vcard(
        self,
        attributes: Mapping[str, Any],
        valid_attributes: Iterable[str] | None = None,
    ) -> str:
        """Serialise an attribute map into card text."""
        return encode(attributes, self.mappings, self.dialect, valid_attributes)


def factory(options: MappingConfig | Mapping[str, Any] | None = None) -> VCardParser:
    return VCardParser(options)


_default = VCardParser()


def to_object(card_text: str, encode: bool = False) -> dict[str, Any]:
    return _default.to_object(card_text, encode)


def to_vcard(attributes: Mapping[str, Any], valid_attributes: Iterable[str] | None = None) -> str:
    return _default.to_vcard(attributes, valid_attributes)
