from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

EXTATTR = "extattr"


@dataclass(frozen=True)
class CardDialect:
    version: str = "2.1"
    line_separator: str = "\n"         # between lines written by the encoder
    continuation_separator: str = " "  # inserted when re-joining wrapped lines


@dataclass
class ExtensionRecord:
    id: str
    key: str | None = None
    value: str | None = None
    data_type: str | None = None

    def as_dict(self) -> dict[str, str]:
        out = {"id": self.id}
        if self.key is not None:
            out["key"] = self.key
        if self.value is not None:
            out["value"] = self.value
        if self.data_type is not None:
            out["dataType"] = self.data_type
        return out

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ExtensionRecord:
        def _opt(name: str) -> str | None:
            v = data.get(name)
            return None if v is None else str(v)

        return cls(
            id=str(data.get("id", "")),
            key=_opt("key"),
            value=_opt("value"),
            data_type=_opt("dataType"),
        )


@dataclass
class Diagnostic:
    message: str
    raw: str


@dataclass
class DecodeResult:
    attributes: dict[str, Any] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)
