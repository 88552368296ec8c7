"""Mapping configuration files (TOML).

Example::

    preset = "connections"

    [cardToAttributeMapping]
    "TEL;WORK" = "officePhone"
    "X_SHIFT" = "shift"
    "UID" = false

    [complexAttributeGroups]
    names = ["surname", "givenName"]

    [dialect]
    version = "2.1"
    line_separator = "\\n"
    continuation_separator = " "
"""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .errors import ConfigurationFileError
from .mapping import MappingConfig
from .model import CardDialect
from .parser import VCardParser
from .presets import PRESETS

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    mapping: MappingConfig = field(default_factory=MappingConfig)
    dialect: CardDialect = field(default_factory=CardDialect)

    def build_parser(self) -> VCardParser:
        return VCardParser(self.mapping, dialect=self.dialect)


def _check_mapping(data: dict[str, Any], source: Path) -> None:
    for table in ("cardToAttributeMapping", "vCardToJSONAttributeMapping"):
        for key, target in (data.get(table) or {}).items():
            if not (isinstance(target, str) or target is False):
                raise ConfigurationFileError(
                    f"{source}: [{table}] {key!r} must map to a string or false, got {target!r}"
                )
    for table in ("complexAttributeGroups", "complexJSONAttributes"):
        for key, sub_fields in (data.get(table) or {}).items():
            if not isinstance(sub_fields, list) or not all(isinstance(s, str) for s in sub_fields):
                raise ConfigurationFileError(
                    f"{source}: [{table}] {key!r} must be a list of strings"
                )


def _dialect_from(data: dict[str, Any], source: Path) -> CardDialect:
    raw = data.get("dialect") or {}
    known = {f.name for f in fields(CardDialect)}
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationFileError(f"{source}: unknown [dialect] key(s): {', '.join(sorted(unknown))}")
    return CardDialect(**{k: str(v) for k, v in raw.items()})


def settings_from_dict(data: dict[str, Any], source: Path = Path("<config>")) -> Settings:
    _check_mapping(data, source)
    mapping = MappingConfig.from_mapping(data)

    preset_name = data.get("preset")
    if preset_name is not None:
        try:
            preset = PRESETS[preset_name]
        except KeyError:
            raise ConfigurationFileError(
                f"{source}: unknown preset {preset_name!r} (known: {', '.join(sorted(PRESETS))})"
            ) from None
        mapping = mapping.merged_over(preset)

    return Settings(mapping=mapping, dialect=_dialect_from(data, source))


def load_settings(path: Path | None) -> Settings:
    """Read parser settings from ``path``; no path means built-in defaults."""
    if path is None:
        return Settings()
    try:
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationFileError(f"cannot read {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationFileError(f"{path}: {exc}") from exc
    logger.debug("loaded mapping configuration from %s", path)
    return settings_from_dict(data, Path(path))
