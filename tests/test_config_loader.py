import json

import pytest

from rotaplan.adapters.config_loader import (
    ConfigError,
    build_config,
    load_config,
    merge_config,
    validate_rotation,
)
from rotaplan.config import CONFIG


def test_merge_config_is_deep_and_does_not_touch_base():
    merged = merge_config(CONFIG, {"rotation": {"legacy_carry_over": True}})
    assert merged["rotation"]["legacy_carry_over"] is True
    assert merged["rotation"]["rest_days"] == 2
    assert CONFIG["rotation"]["legacy_carry_over"] is False


def test_load_yaml_and_json(tmp_path):
    yaml_path = tmp_path / "cfg.yaml"
    yaml_path.write_text("rotation:\n  rest_days: 3\n", encoding="utf-8")
    json_path = tmp_path / "cfg.json"
    json_path.write_text(json.dumps({"output": {"color": False}}), encoding="utf-8")
    assert load_config(yaml_path) == {"rotation": {"rest_days": 3}}
    assert load_config(json_path) == {"output": {"color": False}}


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")
    other = tmp_path / "cfg.ini"
    other.write_text("[x]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(other)
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(listing)


@pytest.mark.parametrize(
    "section",
    [{"rest_days": 0}, {"rest_days": "2"}, {"rest_days": True}, {"weekend_days": [8]}, {"weekend_days": 6}],
)
def test_validate_rotation_rejects(section):
    with pytest.raises(ConfigError):
        validate_rotation(section)


def test_build_config_layers(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"rotation": {"rest_days": 3}}), encoding="utf-8")
    config = build_config(path, {"output": {"color": False}})
    assert config["rotation"]["rest_days"] == 3
    assert config["output"]["color"] is False
    assert config["output"]["separator_width"] == 50
