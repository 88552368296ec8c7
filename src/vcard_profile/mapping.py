"""Field-mapping tables shared by the decoder and the encoder.

A card field key (``"TEL;WORK"``) maps to an attribute name
(``"telephoneNumber"``) or to ``False`` when the field is ignored. The
reverse table is derived once and never changes afterwards.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

logger = logging.getLogger(__name__)

Target = Union[str, bool]

DEFAULT_CARD_TO_ATTRIBUTE: dict[str, Target] = {
    "BEGIN": False,
    "END": False,
    "VERSION": False,
}
DEFAULT_COMPLEX_ATTRIBUTE_GROUPS: dict[str, tuple[str, ...]] = {}

# camelCase configuration keys, plus the names older configs still use
_CARD_TO_ATTRIBUTE_KEYS = ("cardToAttributeMapping", "vCardToJSONAttributeMapping")
_COMPLEX_GROUP_KEYS = ("complexAttributeGroups", "complexJSONAttributes")


@dataclass
class MappingConfig:
    card_to_attribute: dict[str, Target] = field(default_factory=dict)
    complex_attribute_groups: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> MappingConfig:
        data = data or {}
        card_to_attribute: dict[str, Target] = {}
        for name in _CARD_TO_ATTRIBUTE_KEYS:
            card_to_attribute.update(data.get(name) or {})
        groups: dict[str, list[str]] = {}
        for name in _COMPLEX_GROUP_KEYS:
            groups.update({k: list(v) for k, v in (data.get(name) or {}).items()})
        return cls(card_to_attribute=card_to_attribute, complex_attribute_groups=groups)

    def merged_over(self, base: MappingConfig) -> MappingConfig:
        """Return a config with this one's entries laid over ``base``."""
        return MappingConfig(
            card_to_attribute={**base.card_to_attribute, **self.card_to_attribute},
            complex_attribute_groups={
                **base.complex_attribute_groups,
                **self.complex_attribute_groups,
            },
        )


@dataclass(frozen=True)
class MappingTable:
    to_attribute: Mapping[str, Target]
    to_card: Mapping[str, str]
    complex_groups: Mapping[str, tuple[str, ...]]

    def target_for(self, card_key: str) -> str | None:
        """Attribute name for an exact card key, or None if ignored/unknown."""
        target = self.to_attribute.get(card_key)
        return target if _is_mapped(target) else None

    def longest_prefix(self, line: str) -> str | None:
        """The longest registered card key ``line`` starts with."""
        best: str | None = None
        for card_key in self.to_attribute:
            if line.startswith(card_key) and (best is None or len(card_key) > len(best)):
                best = card_key
        return best


def _is_mapped(target: Any) -> bool:
    return isinstance(target, str) and len(target) > 0


def build_mapping_table(configuration: MappingConfig | Mapping[str, Any] | None = None) -> MappingTable:
    """Merge ``configuration`` over the built-in defaults.

    The merge is shallow and key-by-key. When several card keys point at the
    same attribute name, the one registered last wins the reverse mapping.
    """
    if not isinstance(configuration, MappingConfig):
        configuration = MappingConfig.from_mapping(configuration)

    to_attribute: dict[str, Target] = {
        **DEFAULT_CARD_TO_ATTRIBUTE,
        **configuration.card_to_attribute,
    }
    complex_groups: dict[str, tuple[str, ...]] = {
        **DEFAULT_COMPLEX_ATTRIBUTE_GROUPS,
        **{k: tuple(v) for k, v in configuration.complex_attribute_groups.items()},
    }

    to_card: dict[str, str] = {}
    for card_key, target in to_attribute.items():
        if not _is_mapped(target):
            continue
        if target in to_card:
            logger.debug(
                "attribute %r mapped from both %r and %r; keeping %r",
                target, to_card[target], card_key, card_key,
            )
        to_card[target] = card_key

    return MappingTable(
        to_attribute=MappingProxyType(to_attribute),
        to_card=MappingProxyType(to_card),
        complex_groups=MappingProxyType(complex_groups),
    )
