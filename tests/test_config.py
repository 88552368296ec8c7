from __future__ import annotations

from pathlib import Path

import pytest

from vcard_profile.config import Settings, load_settings, settings_from_dict
from vcard_profile.errors import ConfigurationFileError
from vcard_profile.model import CardDialect

CONFIG_TOML = """
preset = "connections"

[cardToAttributeMapping]
"TEL;WORK" = "officePhone"
"X_SHIFT" = "shift"
"UID" = false

[complexAttributeGroups]
names = ["surname", "givenName", "middleName"]

[dialect]
line_separator = "\\r\\n"
"""


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "mapping.toml"
    p.write_text(text, encoding="utf-8")
    return p


def test_no_path_gives_defaults():
    settings = load_settings(None)
    assert settings == Settings()
    assert settings.dialect == CardDialect()


def test_load_toml_with_preset(tmp_path: Path):
    settings = load_settings(_write(tmp_path, CONFIG_TOML))
    parser = settings.build_parser()
    assert parser.mappings.to_attribute["TEL;WORK"] == "officePhone"
    assert parser.mappings.to_attribute["X_SHIFT"] == "shift"
    assert parser.mappings.to_attribute["FN"] == "displayName"
    assert parser.mappings.complex_groups["names"] == ("surname", "givenName", "middleName")
    assert parser.dialect.line_separator == "\r\n"
    assert parser.to_vcard({"officePhone": "1"}) == "BEGIN:VCARD\r\nVERSION:2.1\r\nTEL;WORK:1\r\nEND:VCARD"


def test_true_target_rejected(tmp_path: Path):
    with pytest.raises(ConfigurationFileError, match="string or false"):
        load_settings(_write(tmp_path, '[cardToAttributeMapping]\nFN = true\n'))


def test_bad_complex_group_rejected():
    with pytest.raises(ConfigurationFileError, match="list of strings"):
        settings_from_dict({"complexAttributeGroups": {"names": "surname"}})


def test_unknown_preset_rejected():
    with pytest.raises(ConfigurationFileError, match="unknown preset"):
        settings_from_dict({"preset": "nope"})


def test_unknown_dialect_key_rejected():
    with pytest.raises(ConfigurationFileError, match="charset"):
        settings_from_dict({"dialect": {"charset": "utf-8"}})


def test_invalid_toml(tmp_path: Path):
    with pytest.raises(ConfigurationFileError):
        load_settings(_write(tmp_path, "this is = = not toml"))


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationFileError, match="cannot read"):
        load_settings(tmp_path / "missing.toml")
