from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from ... import log, paths
from ...git import Git
from ..base import BaseService
from ..errors import PolicyBlockedError

INIT_COMMIT_MESSAGE = "chore: forge init"


class InitializeRepoRequest(BaseModel):
    commit: bool = False
    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class InitializeRepoOutcome:
    created_repo: bool
    created_files: tuple[str, ...]
    committed: bool


def check_clean(git: Git, *, commit: bool, force: bool) -> None:
    """Require a clean working tree before a run that will commit.

    Only applies when committing without ``force`` inside an existing
    repository.

    Raises:
        PolicyBlockedError: When the tree has uncommitted changes.
    """
    if not commit or force or not git.is_in_repo():
        return
    if not git.is_clean():
        raise PolicyBlockedError(
            f"The git repository at {git.root} has uncommitted changes.",
            recovery_hint="Commit or stash your changes, or run with `--force`.",
        )


class InitializeRepoService(BaseService[InitializeRepoRequest, InitializeRepoOutcome]):
    """Make sure the project root is a git repository with default files.

    ``.gitignore`` and the CI workflow are only written when missing, so a
    re-run only ever adds the optional commit.
    """

    def __init__(self, git: Git, templates: Mapping[str, str]) -> None:
        self._git = git
        self._templates = templates

    def _run(self, request: InitializeRepoRequest) -> InitializeRepoOutcome:
        git = self._git
        created_repo = False
        if not git.is_in_repo():
            git.init()
            created_repo = True

        created: list[str] = []
        defaults = (
            (paths.GITIGNORE_FILENAME, "gitignore"),
            (paths.WORKFLOW_PATH.as_posix(), "workflow"),
        )
        for relative, template in defaults:
            if paths.write_if_absent(git.root / relative, self._templates[template]):
                log.debug(f"Created {relative}")
                created.append(relative)

        committed = False
        if request.commit:
            git.add("--all")
            committed = git.commit(INIT_COMMIT_MESSAGE)
        return InitializeRepoOutcome(created_repo, tuple(created), committed)
