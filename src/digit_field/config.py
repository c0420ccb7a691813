"""Configuration resolution for the digit-field demo.

Priority order (highest to lowest):
1. CLI flags (--digits, --min, --max, --allow-deletion-after-full)
2. ~/.config/digit-field/config.toml -> [field] table
3. FieldConfiguration defaults
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from digit_field.errors import ConfigurationError
from digit_field.models import FieldConfiguration

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "digit-field" / "config.toml"

# Keys of the [field] table and the type each must have.
_FIELD_KEYS: dict[str, type] = {
    "digit_count": int,
    "min_value": int,
    "max_value": int,
    "allow_deletion_after_full": bool,
}


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", _CONFIG_PATH, exc)
        return {}


def load_field_settings() -> dict[str, int | bool]:
    """Load field settings from the ``[field]`` section of config.toml.

    Example config.toml::

        [field]
        digit_count = 3
        min_value = 0
        max_value = 255
        allow_deletion_after_full = true

    Returns:
        A dict of the recognised keys with values of the right type.
        Unknown keys and mistyped values are skipped.
    """
    section = _load_config_dict().get("field", {})
    if not isinstance(section, dict):
        logger.warning("ignoring [field] in %s: not a table", _CONFIG_PATH)
        return {}

    settings: dict[str, int | bool] = {}
    for key, value in section.items():
        expected = _FIELD_KEYS.get(key)
        if expected is None:
            logger.warning("ignoring unknown field setting %r", key)
            continue
        # bool is a subclass of int, so check it explicitly
        if type(value) is not expected:
            logger.warning(
                "ignoring field setting %r: expected %s, got %r",
                key,
                expected.__name__,
                value,
            )
            continue
        settings[key] = value
    return settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'digits', 'min', 'max',
        'allow_deletion_after_full' and 'log_file' attributes.  Flags that
        were not given are None.
    """
    parser = argparse.ArgumentParser(
        prog="digit-field",
        description="Type a bounded number digit by digit in a fixed-width field.",
    )
    parser.add_argument(
        "-d",
        "--digits",
        type=int,
        help="Number of digit slots.",
        default=None,
    )
    parser.add_argument(
        "--min",
        type=int,
        help="Smallest value the field settles on.",
        default=None,
    )
    parser.add_argument(
        "--max",
        type=int,
        help="Largest value a keystroke may produce.",
        default=None,
    )
    parser.add_argument(
        "--allow-deletion-after-full",
        action=argparse.BooleanOptionalAction,
        help="Keep editing a full field until a keystroke overflows it.",
        default=None,
    )
    parser.add_argument(
        "--log-file",
        help="Write debug logs to this file.",
        default=None,
    )
    return parser.parse_args(argv)


def resolve_configuration(args: argparse.Namespace) -> FieldConfiguration:
    """Build the field configuration using the priority chain.

    Args:
        args: Parsed CLI arguments from :func:`parse_args`.

    Returns:
        The validated configuration.

    Raises:
        SystemExit: If the resolved bounds or digit count are invalid.
    """
    settings = load_field_settings()
    overrides = {
        "digit_count": args.digits,
        "min_value": args.min,
        "max_value": args.max,
        "allow_deletion_after_full": args.allow_deletion_after_full,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return FieldConfiguration(**settings)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
