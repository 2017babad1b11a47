"""Configuration loading and management."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

from .logger import get_logger

logger = get_logger(__name__)

MIN_DESCRIPTION_INDENT = 1
MAX_DESCRIPTION_INDENT = 12


@dataclass(frozen=True)
class DlConfig:
    """Configuration for parsing colon definition lists.

    Attributes:
        description_indent: Columns a description marker sits to the right of
            its term marker. Also used as the width of a tab character.
        require_description: When True, a term without descriptions is only
            accepted before a blank line, the end of input, or another term.
        break_on_blank_line: When True, a blank line after a completed item
            ends the current list.

    Examples:
        DlConfig(description_indent=2, break_on_blank_line=False)
    """

    description_indent: int = 4
    require_description: bool = True
    break_on_blank_line: bool = True


class ConfigError(ValueError):
    """Exception raised when a configuration table cannot be used.

    Attributes:
        args: Arguments provided to the underlying `ValueError`.

    Examples:
        raise ConfigError("Invalid `[tool.dl-markdown]` settings in pyproject.toml")
    """


def clamp_indent(value: object) -> int:
    """Clamp a description indent to the supported range.

    Values are floored to an integer and limited to ``[1, 12]``. Anything that
    is not a finite number falls back to the minimum.

    Args:
        value: Raw indent value, typically from a config file or CLI option.

    Returns:
        int: Effective description indent.

    Examples:
        clamp_indent(2.9)  # 2
        clamp_indent(999)  # 12
        clamp_indent(float("nan"))  # 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return MIN_DESCRIPTION_INDENT
    # Integers may be too large for a float
    if isinstance(value, int):
        return max(MIN_DESCRIPTION_INDENT, min(MAX_DESCRIPTION_INDENT, value))
    if not math.isfinite(value):
        return MIN_DESCRIPTION_INDENT
    return max(MIN_DESCRIPTION_INDENT, min(MAX_DESCRIPTION_INDENT, math.floor(value)))


def load_config(search_path: Path) -> DlConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.dl-markdown]`` table from `pyproject.toml` and the
    ``[dl-markdown]`` or ``[tool.dl-markdown]`` table from `.dl-markdown.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        DlConfig: Loaded configuration with values normalized.

    Raises:
        ConfigError: If a table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "dl-markdown")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".dl-markdown.toml",
            table_paths=[("dl-markdown",), ("tool", "dl-markdown")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return DlConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> DlConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as error:
        logger.debug("Skipping unreadable config file %s: %s", config_file, error)
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        logger.debug("Loaded [%s] from %s", ".".join(table_path), config_file)
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> DlConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return DlConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return DlConfig()

    # TOML users tend to write kebab-case keys
    settings = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return DlConfig(**settings)
    except TypeError as error:
        known = ", ".join(field.name for field in fields(DlConfig))
        raise ConfigError(
            f"Invalid `[{table_display}]` settings in {config_file} (known keys: {known})"
        ) from error


def normalize_config(config: DlConfig) -> DlConfig:
    """Clamp and coerce configuration values.

    Configuration never fails: the indent is clamped with `clamp_indent` and
    the flags are coerced to booleans.

    Args:
        config: Configuration to normalize.

    Returns:
        DlConfig: Normalized configuration. The same instance is returned when
        nothing changes.

    Examples:
        normalize_config(DlConfig(description_indent=0)).description_indent  # 1
    """
    normalized = replace(
        config,
        description_indent=clamp_indent(config.description_indent),
        require_description=bool(config.require_description),
        break_on_blank_line=bool(config.break_on_blank_line),
    )
    return config if normalized == config else normalized


def apply_overrides(config: DlConfig, **overrides: object) -> DlConfig:
    """Apply override values to a `DlConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        DlConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `DlConfig`.

    Examples:
        updated = apply_overrides(config, description_indent=2)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> DlConfig:
    """Load, override, and normalize configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        DlConfig: Normalized configuration ready for parsing.

    Raises:
        ConfigError: If configuration loading fails.

    Examples:
        config = build_config(Path.cwd(), description_indent=2)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    return normalize_config(config)
