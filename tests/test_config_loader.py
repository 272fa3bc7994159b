"""Tests for loading raw card configuration payloads."""

import json

import pytest

from card_config.utils import config_loader
from card_config.utils.config_loader import (
    CardConfigLoadError,
    load_card_payload,
    parse_card_payload,
    resolve_config_path,
)


def test_load_yaml_payload(tmp_path):
    path = tmp_path / "card.yml"
    path.write_text("card:\n  hideCvc: true\n  supported: [visa, mc]\n", encoding="utf-8")
    assert load_card_payload(path) == {"card": {"hideCvc": True, "supported": ["visa", "mc"]}}


def test_load_json_payload(tmp_path):
    path = tmp_path / "card.json"
    path.write_text(json.dumps({"kcpVisibility": "show"}), encoding="utf-8")
    assert load_card_payload(str(path)) == {"kcpVisibility": "show"}


@pytest.mark.parametrize("name", ["empty.yml", "empty.json"])
def test_empty_file_yields_empty_payload(tmp_path, name):
    path = tmp_path / name
    path.write_text("", encoding="utf-8")
    assert load_card_payload(path) == {}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_card_payload(tmp_path / "missing.yml")


@pytest.mark.parametrize(
    "name,content",
    [
        ("bad.yml", "card: [unclosed\n"),
        ("bad.json", "{not json"),
        ("list.yml", "- visa\n- mc\n"),
        ("scalar.json", "42"),
    ],
)
def test_undecodable_or_non_mapping_file(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CardConfigLoadError) as exc_info:
        load_card_payload(path)
    assert exc_info.value.path == path


def test_parse_card_payload():
    assert parse_card_payload('{"card": {"hideCvc": false}}') == {"card": {"hideCvc": False}}
    assert parse_card_payload(b'{"supported": ["visa"]}') == {"supported": ["visa"]}


def test_parse_card_payload_keeps_non_mapping_payload():
    with pytest.raises(CardConfigLoadError) as exc_info:
        parse_card_payload("[1, 2]")
    assert exc_info.value.payload == [1, 2]
    assert isinstance(exc_info.value, ValueError)


def test_resolve_config_path_prefers_explicit(tmp_path, monkeypatch):
    monkeypatch.setenv("CARD_CONFIG_PATH", str(tmp_path / "env.yml"))
    assert resolve_config_path(tmp_path / "explicit.yml") == tmp_path / "explicit.yml"


def test_resolve_config_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("CARD_CONFIG_PATH", str(tmp_path / "env.yml"))
    assert resolve_config_path() == tmp_path / "env.yml"


def test_resolve_config_path_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CARD_CONFIG_PATH", raising=False)
    assert resolve_config_path() == config_loader.DEFAULT_CONFIG_PATH


def test_bundled_sample_payload_loads():
    payload = load_card_payload(config_loader.DEFAULT_CONFIG_PATH)
    assert payload["card"]["supported"] == ["visa", "mc", "amex"]
