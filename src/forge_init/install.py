"""Dependency installation adapter.

The init workflow only needs ``install(dependencies)``; this module provides
the protocol and a git-backed implementation that vendors each dependency
under ``lib/<name>``.
"""

import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from . import log
from .git import Git, repository_name
from .paths import LIB_DIRNAME

FORGE_STD_URL = "https://github.com/foundry-rs/forge-std"


class DependencyInstaller(Protocol):
    """Installs library dependencies into a project."""

    def install(self, dependencies: Sequence[str]) -> None: ...


class GitDependencyInstaller:
    """Install dependencies as git submodules (or plain clones without git).

    An empty ``dependencies`` list reconciles already-declared submodules
    instead of adding anything.

    Args:
        git: Git service bound to the project root.
        no_git: Clone dependencies without registering submodules.
        commit: Commit each newly added submodule.
    """

    def __init__(self, git: Git, *, no_git: bool = False, commit: bool = False) -> None:
        self._git = git
        self._no_git = no_git
        self._commit = commit

    def install(self, dependencies: Sequence[str]) -> None:
        if not dependencies:
            self._reconcile()
            return
        for url in dependencies:
            name = repository_name(url)
            target = Path(LIB_DIRNAME) / name
            log.info(f"Installing {name} in {self._git.root / target}")
            if self._no_git:
                self._clone(url, target)
            else:
                self._add_submodule(url, name, target)

    def _reconcile(self) -> None:
        if self._no_git or not self._git.is_in_repo():
            return
        self._git.submodule_update()

    def _clone(self, url: str, target: Path) -> None:
        self._git.clone(url, target)
        git_dir = self._git.root / target / ".git"
        if git_dir.is_dir():
            shutil.rmtree(git_dir)

    def _add_submodule(self, url: str, name: str, target: Path) -> None:
        self._git.submodule_add(url, target)
        self._git.submodule_update((target,))
        if self._commit:
            self._git.add(".gitmodules", str(target))
            self._git.commit(f"forge install: {name}")
