from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ... import config, log, paths, templates
from ...git import Git
from ...install import FORGE_STD_URL, DependencyInstaller, GitDependencyInstaller
from ...models import InitRequest, Variant
from ..base import BaseService
from .editor_config import EditorConfigService
from .fetch_template import FetchTemplateService
from .init_repo import InitializeRepoRequest, InitializeRepoService, check_clean
from .scaffold import ScaffoldProjectRequest, ScaffoldProjectService, check_target

InitMode = Literal["template", "default"]
MakeGit = Callable[[Path, bool], Git]
MakeInstaller = Callable[[Git, InitRequest], DependencyInstaller]
LoadTemplates = Callable[[Variant], Mapping[str, str]]


def _make_git(root: Path, shallow: bool) -> Git:
    return Git(root, shallow=shallow, git_path=config.git_executable())


def _make_installer(git: Git, request: InitRequest) -> DependencyInstaller:
    return GitDependencyInstaller(git, no_git=request.no_git, commit=request.commit)


@dataclass(frozen=True)
class InitializeProjectDependencies:
    make_git: MakeGit = _make_git
    make_installer: MakeInstaller = _make_installer
    load_templates: LoadTemplates = templates.load_template_set


@dataclass(frozen=True)
class InitializeProjectOutcome:
    root: Path
    mode: InitMode
    steps: tuple[str, ...]
    template_url: str | None = None


class InitializeProjectService(BaseService[InitRequest, InitializeProjectOutcome]):
    """Run ``init`` end to end in either template or default mode.

    Default mode runs, in order: the non-empty directory guard, the
    clean-tree check, scaffolding, repository setup, the standard library
    install, and editor configuration. Any failure stops the run and leaves
    completed steps on disk.
    """

    def __init__(self, dependencies: InitializeProjectDependencies | None = None) -> None:
        self._deps = dependencies or InitializeProjectDependencies()

    @classmethod
    def run_default(cls, request: InitRequest) -> InitializeProjectOutcome:
        """Run the init flow with the default git, installer and templates."""
        return cls()(request)

    def _run(self, request: InitRequest) -> InitializeProjectOutcome:
        root = request.root
        if not root.exists():
            paths.ensure_dir(root)
        root = root.resolve()
        git = self._deps.make_git(root, request.shallow)

        if request.template is not None:
            fetched = FetchTemplateService(git)(request.template)
            outcome = InitializeProjectOutcome(
                root, "template", ("fetch_template",), template_url=fetched.url
            )
        else:
            steps = self._run_default_mode(request, root, git)
            outcome = InitializeProjectOutcome(root, "default", steps)

        log.success("    Initialized forge project")
        return outcome

    def _run_default_mode(self, request: InitRequest, root: Path, git: Git) -> tuple[str, ...]:
        template_set = self._deps.load_templates(request.variant)

        check_target(root, force=request.force)
        if not request.no_git:
            check_clean(git, commit=request.commit, force=request.force)

        log.info(f"Initializing {root}...")
        steps: list[str] = []
        ScaffoldProjectService(template_set)(
            ScaffoldProjectRequest(root=root, variant=request.variant, force=request.force)
        )
        steps.append("scaffold")

        if not request.no_git:
            InitializeRepoService(git, template_set)(InitializeRepoRequest(commit=request.commit))
            steps.append("init_repo")

        if not request.offline:
            installer = self._deps.make_installer(git, request)
            if (root / paths.FORGE_STD_PATH).exists():
                forge_std = paths.FORGE_STD_PATH.as_posix()
                log.warning(f'"{forge_std}" already exists, skipping install...')
                installer.install([])
            else:
                installer.install([FORGE_STD_URL])
            steps.append("install")

        if request.vscode:
            EditorConfigService()(root)
            steps.append("editor_config")
        return tuple(steps)
