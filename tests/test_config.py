"""
Tests for configuration loading and saving.
"""

import json

from utils.config import Config


def test_defaults():
    config = Config()
    assert config.service_url == "http://localhost:8000"
    assert config.default_intensity == "FULL"
    assert config.request_timeout == 30.0


def test_missing_file_creates_default(tmp_path):
    path = tmp_path / "chemion_config.json"
    config = Config.load(str(path))
    assert config == Config()
    assert path.exists()
    data = json.loads(path.read_text())
    assert data["config"]["service_url"] == "http://localhost:8000"
    assert "_service_url_comment" in data


def test_save_and_load(tmp_path):
    path = str(tmp_path / "nested" / "config.json")
    Config(service_url="http://raspberrypi.local:8000", log_level="DEBUG").save(path)
    config = Config.load(path)
    assert config.service_url == "http://raspberrypi.local:8000"
    assert config.log_level == "DEBUG"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert Config.load(str(path)) == Config()


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"config": {"service_url": "http://x", "heartbeat_interval": 8}}))
    assert Config.load(str(path)).service_url == "http://x"
