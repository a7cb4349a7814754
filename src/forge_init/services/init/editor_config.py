from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from ... import log, paths
from ...remappings import find_remappings, render_remappings
from ..base import BaseService
from ..errors import UnexpectedStateError

# vscode-solidity settings: https://github.com/juanfranblanco/vscode-solidity
SETTINGS_DEFAULTS = (
    ("solidity.packageDefaultDependenciesContractsDirectory", paths.SRC_DIRNAME),
    ("solidity.packageDefaultDependenciesDirectory", paths.LIB_DIRNAME),
)


@dataclass(frozen=True)
class EditorConfigOutcome:
    remappings_written: bool
    settings_path: Path
    inserted_keys: tuple[str, ...]


def load_settings(vscode_dir: Path) -> dict[str, object]:
    """Load ``settings.json`` from ``vscode_dir``, creating the directory if needed.

    Raises:
        UnexpectedStateError: When the existing file is not a JSON object.
    """
    settings_path = vscode_dir / paths.VSCODE_SETTINGS_FILENAME
    if not vscode_dir.is_dir():
        paths.ensure_dir(vscode_dir)
        return {}
    if not settings_path.exists():
        return {}
    try:
        with settings_path.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise UnexpectedStateError(
            f"invalid editor settings at {settings_path}:\n{exc}",
            recovery_hint="Fix or remove the file and run again.",
        ) from exc
    if not isinstance(payload, dict):
        raise UnexpectedStateError(
            f"invalid editor settings at {settings_path}: expected a JSON object"
        )
    return payload


def merge_settings(settings: dict[str, object]) -> tuple[str, ...]:
    """Insert the default keys that are missing; return the keys inserted."""
    inserted: list[str] = []
    for key, value in SETTINGS_DEFAULTS:
        if key not in settings:
            settings[key] = value
            inserted.append(key)
    return tuple(inserted)


def write_settings(path: Path, settings: dict[str, object]) -> None:
    with path.open("w", encoding="utf-8") as fh:
        json.dump(settings, fh, indent=2, ensure_ascii=False)
        fh.write("\n")


class EditorConfigService(BaseService[Path, EditorConfigOutcome]):
    """Generate ``remappings.txt`` and VS Code Solidity settings for a root."""

    def _run(self, request: Path) -> EditorConfigOutcome:
        root = request
        remappings_written = False
        remappings_path = root / paths.REMAPPINGS_FILENAME
        if not remappings_path.exists():
            remappings = find_remappings(root)
            if remappings:
                remappings_written = paths.write_if_absent(
                    remappings_path, render_remappings(remappings)
                )

        vscode_dir = root / paths.VSCODE_DIRNAME
        settings = load_settings(vscode_dir)
        inserted = merge_settings(settings)
        settings_path = vscode_dir / paths.VSCODE_SETTINGS_FILENAME
        write_settings(settings_path, settings)
        log.debug(f"Wrote {settings_path}")
        return EditorConfigOutcome(remappings_written, settings_path, inserted)
