import json

import pytest

from progress_monitor.config import CONFIG_PATH_ENV, ConfigurationError, TrackerConfig


def test_from_mapping_none_gives_empty_config():
    config = TrackerConfig.from_mapping(None)

    assert config.plan == {}
    assert config.metrics == {}


def test_from_mapping_accepts_missing_and_null_sections():
    config = TrackerConfig.from_mapping({"plan": {"a": 3, "b": 1.5}, "metrics": None})

    assert config.plan == {"a": 3, "b": 1.5}
    assert config.metrics == {}


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"plan": {"a": -1}}, "non-negative"),
        ({"plan": {"a": "ten"}}, "must be a number"),
        ({"plan": {"a": True}}, "must be a number"),
        ({"metrics": {"a": 0}}, "positive"),
        ({"metrics": {"a": -2.5}}, "positive"),
        ({"metrics": {"a": None}}, "must be a number"),
        ({"plan": [1, 2]}, "invalid format"),
    ],
)
def test_from_mapping_rejects_invalid_values(payload, message):
    with pytest.raises(ConfigurationError, match=message):
        TrackerConfig.from_mapping(payload)


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(ConfigurationError):
        TrackerConfig.from_mapping(["plan"])


def test_from_json_file(tmp_path):
    path = tmp_path / "tracker.json"
    path.write_text(json.dumps({"plan": {"oranges": 10, "nuts": 32}, "metrics": {"oranges": 10}}))

    config = TrackerConfig.from_json_file(path)

    assert config.plan == {"oranges": 10, "nuts": 32}
    assert config.metrics == {"oranges": 10}


def test_from_json_file_missing(tmp_path):
    with pytest.raises(ConfigurationError, match="does not exist"):
        TrackerConfig.from_json_file(tmp_path / "absent.json")


def test_from_json_file_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        TrackerConfig.from_json_file(path)


def test_from_json_file_requires_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")

    with pytest.raises(ConfigurationError, match="object at the top level"):
        TrackerConfig.from_json_file(path)


def test_from_env_uses_configured_path(monkeypatch, tmp_path):
    path = tmp_path / "tracker.json"
    path.write_text(json.dumps({"plan": {"a": 2}}))
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    assert TrackerConfig.from_env().plan == {"a": 2}


def test_from_env_without_variable_is_empty(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)

    assert TrackerConfig.from_env() == TrackerConfig()
