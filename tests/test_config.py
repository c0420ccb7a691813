"""Tests for configuration resolution."""

import logging
from pathlib import Path

import pytest

from digit_field.config import (
    _load_config_dict,
    load_field_settings,
    parse_args,
    resolve_configuration,
)
from digit_field.models import FieldConfiguration


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch) -> Path:
    """Point the config module at a temporary config.toml."""
    path = tmp_path / "config.toml"
    # _CONFIG_PATH is computed at import time, so we must patch it directly
    monkeypatch.setattr("digit_field.config._CONFIG_PATH", path)
    return path


class TestParseArgs:
    """Tests for CLI argument parsing."""

    def test_no_args(self):
        args = parse_args([])
        assert args.digits is None
        assert args.min is None
        assert args.max is None
        assert args.allow_deletion_after_full is None
        assert args.log_file is None

    def test_digits_short_flag(self):
        assert parse_args(["-d", "3"]).digits == 3

    def test_bounds(self):
        args = parse_args(["--min", "0", "--max", "255"])
        assert args.min == 0
        assert args.max == 255

    def test_allow_deletion_after_full(self):
        assert parse_args(["--allow-deletion-after-full"]).allow_deletion_after_full is True

    def test_no_allow_deletion_after_full(self):
        assert parse_args(["--no-allow-deletion-after-full"]).allow_deletion_after_full is False

    def test_log_file(self):
        assert parse_args(["--log-file", "/tmp/field.log"]).log_file == "/tmp/field.log"

    def test_non_integer_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--max", "ten"])


class TestLoadConfigDict:
    """Tests for reading config.toml."""

    def test_missing_file(self, config_file: Path):
        assert _load_config_dict() == {}

    def test_malformed_file(self, config_file: Path, caplog):
        config_file.write_text("[field\n")
        with caplog.at_level(logging.WARNING, logger="digit_field.config"):
            assert _load_config_dict() == {}
        assert "ignoring unreadable config" in caplog.text


class TestLoadFieldSettings:
    """Tests for the [field] section of config.toml."""

    def test_reads_all_keys(self, config_file: Path):
        config_file.write_text(
            "[field]\n"
            "digit_count = 3\n"
            "min_value = 0\n"
            "max_value = 255\n"
            "allow_deletion_after_full = true\n"
        )
        assert load_field_settings() == {
            "digit_count": 3,
            "min_value": 0,
            "max_value": 255,
            "allow_deletion_after_full": True,
        }

    def test_no_section(self, config_file: Path):
        config_file.write_text('theme = "nord"\n')
        assert load_field_settings() == {}

    def test_section_not_a_table(self, config_file: Path):
        config_file.write_text('field = "wide"\n')
        assert load_field_settings() == {}

    def test_unknown_key_skipped(self, config_file: Path):
        config_file.write_text("[field]\ndigit_count = 3\ncolor = 1\n")
        assert load_field_settings() == {"digit_count": 3}

    def test_mistyped_value_skipped(self, config_file: Path):
        config_file.write_text('[field]\nmax_value = "99"\nmin_value = 0\n')
        assert load_field_settings() == {"min_value": 0}

    def test_bool_is_not_an_integer(self, config_file: Path):
        config_file.write_text("[field]\ndigit_count = true\n")
        assert load_field_settings() == {}


class TestResolveConfiguration:
    """Tests for merging CLI flags, config.toml and defaults."""

    def test_defaults(self, config_file: Path):
        assert resolve_configuration(parse_args([])) == FieldConfiguration()

    def test_config_file(self, config_file: Path):
        config_file.write_text("[field]\ndigit_count = 3\nmax_value = 255\n")
        config = resolve_configuration(parse_args([]))
        assert config.digit_count == 3
        assert config.max_value == 255
        assert config.min_value == 1

    def test_cli_takes_priority(self, config_file: Path):
        config_file.write_text("[field]\nmax_value = 255\nallow_deletion_after_full = true\n")
        config = resolve_configuration(
            parse_args(["--max", "31", "--no-allow-deletion-after-full"])
        )
        assert config.max_value == 31
        assert config.allow_deletion_after_full is False

    def test_invalid_bounds_exit(self, config_file: Path, capsys):
        with pytest.raises(SystemExit):
            resolve_configuration(parse_args(["--min", "50", "--max", "10"]))
        assert "Error:" in capsys.readouterr().err

    def test_invalid_digit_count_exit(self, config_file: Path):
        with pytest.raises(SystemExit):
            resolve_configuration(parse_args(["--digits", "0"]))
