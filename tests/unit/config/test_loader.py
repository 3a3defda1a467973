"""Tests for config loading (JSON/YAML, defaults, environment overrides)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from framedeck.core.config import loader
from framedeck.core.config.loader import (
    STORAGE_ROOT_ENV,
    detect_format,
    load_app_config,
    load_config,
)
from framedeck.core.config.models import AppConfig, PresentationConfig


class TestDetectFormat:
    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_known_formats(self, name: str, fmt: str):
        assert detect_format(name) == fmt

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported"):
            detect_format("a.toml")


class TestLoadConfig:
    """Tests for raw config loading."""

    def test_json(self, tmp_path: Path):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"presentation": {"zoom_factor": 0.8}}), encoding="utf-8")

        assert load_config(path) == {"presentation": {"zoom_factor": 0.8}}

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "c.yaml"
        path.write_text("storage:\n  backend: memory\n", encoding="utf-8")

        assert load_config(path) == {"storage": {"backend": "memory"}}

    def test_empty_yaml_is_empty_mapping(self, tmp_path: Path):
        path = tmp_path / "c.yml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "c.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "c.yaml"
        path.write_text("a: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_root_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "c.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for validated app config."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_app_config(tmp_path / "framedeck.json")

        assert config == AppConfig()
        assert config.presentation.zoom_factor == pytest.approx(0.9)
        assert config.storage.backend == "fs"
        assert config.logging.level == "INFO"

    def test_reads_values(self, tmp_path: Path):
        path = tmp_path / "framedeck.yaml"
        path.write_text(
            "presentation:\n  zoom_factor: 0.7\n  autostart: true\nlogging:\n  level: DEBUG\n",
            encoding="utf-8",
        )

        config = load_app_config(path)

        assert config.presentation.zoom_factor == pytest.approx(0.7)
        assert config.presentation.autostart is True
        assert config.logging.level == "DEBUG"

    def test_ignores_unknown_top_level_keys(self, tmp_path: Path):
        path = tmp_path / "framedeck.json"
        path.write_text(json.dumps({"future_section": {}}), encoding="utf-8")

        assert load_app_config(path) == AppConfig()

    @pytest.mark.parametrize(
        "payload",
        [
            {"presentation": {"zoom_factor": 1.5}},
            {"presentation": {"autostart_attempts": 0}},
            {"presentation": {"unknown": True}},
            {"logging": {"level": "LOUD"}},
        ],
    )
    def test_invalid_values_fail_fast(self, tmp_path: Path, payload: dict):
        path = tmp_path / "framedeck.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_env_overrides_storage_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(STORAGE_ROOT_ENV, str(tmp_path / "orders"))

        config = load_app_config(tmp_path / "framedeck.json")

        assert config.storage.root == str(tmp_path / "orders")

    def test_default_path_is_cached(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)

        first = load_app_config()
        Path("framedeck.json").write_text(
            json.dumps({"storage": {"backend": "null"}}), encoding="utf-8"
        )

        assert load_app_config() is first

        loader.clear_app_config_cache()
        assert load_app_config().storage.backend == "null"

    def test_load_or_default(self, tmp_path: Path):
        path = tmp_path / "framedeck.json"
        path.write_text(json.dumps({"storage": {"backend": "memory"}}), encoding="utf-8")

        assert AppConfig.load_or_default(path).storage.backend == "memory"


class TestPresentationConfig:
    def test_navigation_options(self):
        options = PresentationConfig(zoom_factor=0.5, fit_to_viewport=False).navigation_options()

        assert options.zoom_factor == pytest.approx(0.5)
        assert options.fit_to_viewport is False
        assert options.animate is True
