from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ... import config, log, paths
from ...models import ProjectConfig, Variant
from ..base import BaseService
from ..errors import ValidationFailedError

SCAFFOLD_DIRS = (paths.SRC_DIRNAME, paths.TEST_DIRNAME, paths.SCRIPT_DIRNAME)

# logical template name -> destination relative to the project root
SCAFFOLD_FILES: Mapping[Variant, Mapping[str, Path]] = {
    Variant.SOLIDITY: {
        "contract": Path(paths.SRC_DIRNAME) / "Counter.sol",
        "test": Path(paths.TEST_DIRNAME) / "Counter.t.sol",
        "script": Path(paths.SCRIPT_DIRNAME) / "Counter.s.sol",
        "readme": Path("README.md"),
    },
    Variant.VYPER: {
        "contract": Path(paths.SRC_DIRNAME) / "Counter.vy",
        "interface": Path(paths.SRC_DIRNAME) / paths.INTERFACE_DIRNAME / "ICounter.sol",
        "deployer": Path(paths.SRC_DIRNAME) / paths.UTILS_DIRNAME / "VyperDeployer.sol",
        "test": Path(paths.TEST_DIRNAME) / "Counter.t.sol",
        "script": Path(paths.SCRIPT_DIRNAME) / "Counter.s.sol",
        "readme": Path("README.md"),
    },
}

VARIANT_DIRS: Mapping[Variant, tuple[Path, ...]] = {
    Variant.SOLIDITY: (),
    Variant.VYPER: (
        Path(paths.SRC_DIRNAME) / paths.INTERFACE_DIRNAME,
        Path(paths.SRC_DIRNAME) / paths.UTILS_DIRNAME,
    ),
}


class ScaffoldProjectRequest(BaseModel):
    root: Path
    variant: Variant = Variant.SOLIDITY
    force: bool = False
    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class ScaffoldProjectOutcome:
    written: tuple[Path, ...]
    config_path: Path
    config_written: bool


def check_target(root: Path, *, force: bool) -> None:
    """Refuse to scaffold into a non-empty directory unless ``force`` is set.

    Raises:
        ValidationFailedError: When ``root`` has entries and ``force`` is off.
    """
    if paths.dir_is_empty(root):
        return
    if not force:
        raise ValidationFailedError(
            "Cannot run `init` on a non-empty directory.",
            recovery_hint="Run with the `--force` flag to initialize regardless.",
        )
    log.warning("Target directory is not empty, but `--force` was specified")


def default_project_config(variant: Variant) -> ProjectConfig:
    if variant is Variant.VYPER:
        return config.vyper_project_config()
    try:
        return config.load_project_config()
    except ValueError as exc:
        raise ValidationFailedError(str(exc)) from exc


class ScaffoldProjectService(BaseService[ScaffoldProjectRequest, ScaffoldProjectOutcome]):
    """Write the default project skeleton.

    Template files are overwritten on every run. The project configuration
    file is only created when missing.
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates = templates

    def _run(self, request: ScaffoldProjectRequest) -> ScaffoldProjectOutcome:
        root = request.root
        for dirname in SCAFFOLD_DIRS:
            paths.ensure_dir(root / dirname)
        for extra in VARIANT_DIRS[request.variant]:
            paths.ensure_dir(root / extra)

        written: list[Path] = []
        for name, relative in SCAFFOLD_FILES[request.variant].items():
            destination = root / relative
            destination.write_text(self._templates[name], encoding="utf-8")
            log.debug(f"Wrote {relative.as_posix()}")
            written.append(destination)

        config_path = root / paths.PROJECT_CONFIG_FILENAME
        config_written = False
        if not config_path.exists():
            content = config.render_project_config(default_project_config(request.variant))
            config_written = paths.write_if_absent(config_path, content)
        return ScaffoldProjectOutcome(tuple(written), config_path, config_written)
