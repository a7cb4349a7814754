"""Configuration helpers for forge-init.

Builds the default ``foundry.toml`` written into new projects and resolves
runtime settings from the environment.

Example:
    >>> print(render_project_config(ProjectConfig()).splitlines()[0])
    [profile.default]
"""

import json
import os
from collections.abc import Mapping

from pydantic import ValidationError

from .models import ProjectConfig

CONFIG_REFERENCE_URL = (
    "https://github.com/foundry-rs/foundry/blob/master/crates/config/README.md#all-options"
)
ENV_PREFIX = "FOUNDRY_"
_ENV_FIELDS = ("src", "out", "libs")


def git_executable(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the git executable override from ``FORGE_INIT_GIT``, if set."""
    env = os.environ if environ is None else environ
    value = env.get("FORGE_INIT_GIT", "").strip()
    return value or None


def load_project_config(environ: Mapping[str, str] | None = None) -> ProjectConfig:
    """Return the default project profile with ``FOUNDRY_*`` overrides applied.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Validated ``ProjectConfig``.

    Raises:
        ValueError: When an override does not validate.

    Example:
        >>> load_project_config({"FOUNDRY_OUT": "build"}).out
        'build'
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}
    for name in _ENV_FIELDS:
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            overrides[name] = raw.strip()
    try:
        return ProjectConfig.model_validate(overrides)
    except ValidationError as exc:
        raise ValueError(f"invalid project config override:\n{exc}") from exc


def vyper_project_config() -> ProjectConfig:
    """Return the fixed profile for Vyper projects (external calls enabled)."""
    return ProjectConfig(ffi=True)


def _toml_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, list):
        return "[" + ", ".join(_toml_value(item) for item in value) + "]"
    raise TypeError(f"unsupported config value: {value!r}")


def render_project_config(config: ProjectConfig) -> str:
    """Render a profile as the text of ``foundry.toml``.

    Example:
        >>> render_project_config(ProjectConfig(ffi=True)).splitlines()[4]
        'ffi = true'
    """
    lines = ["[profile.default]"]
    for key, value in config.model_dump(exclude_none=True).items():
        lines.append(f"{key} = {_toml_value(value)}")
    lines.append("")
    lines.append(f"# See more config options {CONFIG_REFERENCE_URL}")
    return "\n".join(lines) + "\n"
