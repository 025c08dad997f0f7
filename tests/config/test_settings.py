"""Tests for DemoSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from soliddemo.config.settings import DemoSettings


@pytest.mark.usefixtures("_isolated_cwd")
class TestDemoSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = DemoSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.book.title == "Clean Code"
        assert settings.discount.kind == "regular"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DemoSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


@pytest.mark.usefixtures("_isolated_cwd")
class TestTomlSource:
    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "demo.toml"
        custom.parent.mkdir()
        custom.write_text('[book]\ntitle = "SICP"\n')
        settings = DemoSettings.from_cli(config_path=str(custom))
        assert settings.book.title == "SICP"
        assert settings.book.author == "Robert C. Martin"
        assert settings.config_path == custom

    def test_missing_explicit_path_ignored(self, tmp_path: Path) -> None:
        settings = DemoSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None
        assert settings.book.title == "Clean Code"

    def test_walk_up_discovery(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SOLIDDEMO_CONFIG")
        (tmp_path / "soliddemo.toml").write_text("[shapes]\nsquare_width = 2.0\n")
        nested = tmp_path / "sub"
        nested.mkdir()
        settings = DemoSettings.from_cli(start=nested)
        assert settings.shapes.square_width == 2.0

    def test_invalid_toml(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.toml"
        bad.write_text("[book\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DemoSettings.from_cli(config_path=str(bad))


@pytest.mark.usefixtures("_isolated_cwd")
class TestPriority:
    def test_env_over_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        toml = tmp_path / "demo.toml"
        toml.write_text("[discount]\nprice = 20.0\n")
        monkeypatch.setenv("SOLIDDEMO_DISCOUNT__PRICE", "55.5")
        settings = DemoSettings.from_cli(config_path=str(toml))
        assert settings.discount.price == 55.5

    def test_cli_flag_over_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLIDDEMO_QUIET", "false")
        settings = DemoSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True
