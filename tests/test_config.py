"""Tests for studysync.config — AppConfig and environment loading."""

from pathlib import Path

import pytest

from studysync.config import AppConfig
from studysync.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()
        assert cfg.host == "127.0.0.1"
        assert cfg.port == 3000
        assert cfg.debug is False
        assert cfg.app_name == "StudySync"
        assert cfg.static_mounts == ("css", "js", "images", "data")
        assert cfg.autoescape is True

    def test_frozen(self) -> None:
        cfg = AppConfig()
        with pytest.raises(AttributeError):
            cfg.port = 8080  # type: ignore[misc]

    def test_views_relative_to_root(self, tmp_path: Path) -> None:
        cfg = AppConfig(root_dir=tmp_path)
        assert cfg.resolved_root == tmp_path.resolve()
        assert cfg.resolved_views == (tmp_path / "views").resolve()

    def test_absolute_views(self, tmp_path: Path) -> None:
        views = tmp_path / "templates"
        cfg = AppConfig(root_dir=tmp_path / "site", views_dir=views)
        assert cfg.resolved_views == views


class TestFromEnv:
    def test_default_port(self) -> None:
        assert AppConfig.from_env({}).port == 3000

    def test_port_from_env(self) -> None:
        assert AppConfig.from_env({"PORT": "8080"}).port == 8080

    def test_empty_port_uses_default(self) -> None:
        assert AppConfig.from_env({"PORT": ""}).port == 3000

    def test_invalid_port(self) -> None:
        with pytest.raises(ConfigurationError, match="integer"):
            AppConfig.from_env({"PORT": "http"})

    def test_port_out_of_range(self) -> None:
        with pytest.raises(ConfigurationError, match="out of range"):
            AppConfig.from_env({"PORT": "70000"})

    def test_overrides_win(self) -> None:
        cfg = AppConfig.from_env({"PORT": "8080"}, port=9000, debug=True)
        assert cfg.port == 9000
        assert cfg.debug is True

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "4321")
        assert AppConfig.from_env().port == 4321


class TestProjectMetadata:
    def test_python_floor_matches_server_and_templates(self) -> None:
        import tomllib

        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        data = tomllib.loads(pyproject.read_text())
        assert data["project"]["requires-python"] == ">=3.14"
        assert data["tool"]["ruff"]["target-version"] == "py314"
