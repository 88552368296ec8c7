from __future__ import annotations

from typing import Any, Callable

import pytest

from vcard_profile.parser import VCardParser

EXT_KEY = "X_EXTENSION_PROPERTY;VALUE=X_EXTENSION_PROPERTY_ID"


@pytest.fixture
def options() -> dict[str, Any]:
    return {
        "cardToAttributeMapping": {
            "fooVCard": "fooJson",
            "fooVCard;barVCard": "fooBarJson",
            EXT_KEY: "extattr",
            "complexVCard": "complexAttr",
            "X_SHIFT": False,
        },
        "complexAttributeGroups": {
            "complexAttr": ["Hello", "test"],
        },
    }


@pytest.fixture
def parser(options: dict[str, Any]) -> VCardParser:
    return VCardParser(options)


@pytest.fixture
def ext_line() -> Callable[..., str]:
    def build(record_id: str, value: object, key: str = "", data_type: str = "") -> str:
        return (
            f"{EXT_KEY}:{record_id};VALUE=X_EXTENSION_KEY:{key};"
            f"VALUE=X_EXTENSION_VALUE:{value};VALUE=X_EXTENSION_DATA_TYPE:{data_type}"
        )
    return build


@pytest.fixture
def card() -> Callable[..., str]:
    def build(*lines: str) -> str:
        return "\n".join(["BEGIN:VCARD", "VERSION:1.0", *lines, "END:VCARD"])
    return build
