from __future__ import annotations

import pytest

from vcard_profile.mapping import MappingConfig, build_mapping_table
from vcard_profile.presets import CONNECTIONS_PROFILE


def test_defaults_ignore_delimiters_only():
    table = build_mapping_table()
    assert dict(table.to_attribute) == {"BEGIN": False, "END": False, "VERSION": False}
    assert dict(table.to_card) == {}
    assert dict(table.complex_groups) == {}


def test_user_entries_override_defaults_key_by_key():
    table = build_mapping_table({"cardToAttributeMapping": {"VERSION": "version", "FN": "displayName"}})
    assert table.to_attribute["BEGIN"] is False
    assert table.to_attribute["VERSION"] == "version"
    assert dict(table.to_card) == {"version": "VERSION", "displayName": "FN"}


def test_reverse_mapping_skips_ignored_and_empty_targets():
    table = build_mapping_table({"cardToAttributeMapping": {"UID": False, "X_EMPTY": "", "FN": "name"}})
    assert dict(table.to_card) == {"name": "FN"}
    assert table.target_for("X_EMPTY") is None
    assert table.target_for("UID") is None
    assert table.target_for("NOPE") is None


def test_reverse_collision_last_registered_wins():
    table = build_mapping_table(CONNECTIONS_PROFILE)
    assert table.to_attribute["TEL;PAGER"] == "ipTelephoneNumber"
    assert table.to_card["ipTelephoneNumber"] == "TEL;X_IP"


def test_legacy_option_names_accepted():
    table = build_mapping_table({
        "vCardToJSONAttributeMapping": {"N": "names"},
        "complexJSONAttributes": {"names": ["surname", "givenName"]},
    })
    assert table.to_card["names"] == "N"
    assert table.complex_groups["names"] == ("surname", "givenName")


def test_tables_are_read_only():
    table = build_mapping_table({"cardToAttributeMapping": {"FN": "name"}})
    with pytest.raises(TypeError):
        table.to_attribute["ORG"] = "org"  # type: ignore[index]
    with pytest.raises(TypeError):
        table.to_card["org"] = "ORG"  # type: ignore[index]


def test_config_is_not_mutated_by_build():
    config = MappingConfig(card_to_attribute={"FN": "name"})
    build_mapping_table(config)
    assert config.card_to_attribute == {"FN": "name"}


def test_merged_over_keeps_base_and_overrides():
    user = MappingConfig(card_to_attribute={"TEL;WORK": "officePhone"})
    merged = user.merged_over(CONNECTIONS_PROFILE)
    assert merged.card_to_attribute["TEL;WORK"] == "officePhone"
    assert merged.card_to_attribute["FN"] == "displayName"
    assert CONNECTIONS_PROFILE.card_to_attribute["TEL;WORK"] == "telephoneNumber"


def test_longest_prefix():
    table = build_mapping_table({"cardToAttributeMapping": {"N": "names", "NICKNAME": "nick"}})
    assert table.longest_prefix("NICKNAME:Bob") == "NICKNAME"
    assert table.longest_prefix("N:Doe;Jane") == "N"
    assert table.longest_prefix("ORG:Acme") is None
