"""Options and helpers shared by commands that describe a build."""

import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import click

from cvs_tag.config import CONFIG_FILE_NAME, ConfigError, LoadedConfig, load_config
from cvs_tag.output import user_output


def parse_env_overrides(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated KEY=VALUE options."""
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--env")
        overrides[key] = value
    return overrides


def build_environment(pairs: tuple[str, ...]) -> dict[str, str]:
    """Process environment with --env overrides applied."""
    return {**os.environ, **parse_env_overrides(pairs)}


def parse_timestamp(value: str | None) -> datetime:
    """Parse --timestamp (ISO 8601, naive values are UTC); default to now."""
    if value is None:
        return datetime.now(UTC)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise click.BadParameter(
            f"invalid ISO timestamp {value!r}", param_hint="--timestamp"
        ) from e
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def load_config_or_exit(workspace: Path, config_path: Path | None) -> LoadedConfig:
    path = config_path if config_path is not None else workspace / CONFIG_FILE_NAME
    try:
        return load_config(path)
    except ConfigError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e


def build_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options describing the build being tagged."""
    decorators = [
        click.option(
            "--workspace",
            type=click.Path(exists=True, file_okay=False, path_type=Path),
            default=".",
            show_default=True,
            help="Build workspace",
        ),
        click.option(
            "--config",
            "config_path",
            type=click.Path(dir_okay=False, path_type=Path),
            default=None,
            help=f"Configuration file (default: WORKSPACE/{CONFIG_FILE_NAME})",
        ),
        click.option("--tag-name", default=None, help="Tag template for this build"),
        click.option(
            "--move-tag/--no-move-tag",
            default=None,
            help="Move an existing tag (default from configuration)",
        ),
        click.option("--timestamp", default=None, help="Build timestamp (ISO 8601)"),
        click.option(
            "--env", "env_pairs", multiple=True, help="Set a build variable (KEY=VALUE)"
        ),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn
