from pathlib import Path

import pytest

from forge_init.models import Variant
from forge_init.services import PolicyBlockedError
from forge_init.services.init import InitializeRepoRequest, InitializeRepoService
from forge_init.services.init.init_repo import INIT_COMMIT_MESSAGE, check_clean
from forge_init.templates import load_template_set
from tests.forge_init.helpers import FakeGit


def _service(git: FakeGit) -> InitializeRepoService:
    return InitializeRepoService(git, load_template_set(Variant.SOLIDITY))


def test_creates_repository_and_default_files(tmp_path: Path) -> None:
    git = FakeGit(tmp_path)

    outcome = _service(git)(InitializeRepoRequest())

    assert outcome.created_repo is True
    assert outcome.created_files == (".gitignore", ".github/workflows/test.yml")
    assert outcome.committed is False
    assert git.names == ["init"]
    assert "cache/" in (tmp_path / ".gitignore").read_text(encoding="utf-8")


def test_existing_files_and_repository_are_left_alone(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("custom\n", encoding="utf-8")
    git = FakeGit(tmp_path, in_repo=True)

    outcome = _service(git)(InitializeRepoRequest(commit=True))

    assert outcome.created_repo is False
    assert outcome.created_files == (".github/workflows/test.yml",)
    assert outcome.committed is True
    assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == "custom\n"
    assert git.calls == [("add", "--all"), ("commit", INIT_COMMIT_MESSAGE)]


@pytest.mark.parametrize(
    ("commit", "force", "in_repo"),
    [(False, False, True), (True, True, True), (True, False, False)],
)
def test_check_clean_only_applies_to_commits_in_existing_repos(
    tmp_path: Path, commit: bool, force: bool, in_repo: bool
) -> None:
    check_clean(FakeGit(tmp_path, in_repo=in_repo, clean=False), commit=commit, force=force)


def test_check_clean_blocks_dirty_tree(tmp_path: Path) -> None:
    git = FakeGit(tmp_path, in_repo=True, clean=False)

    with pytest.raises(PolicyBlockedError, match="uncommitted changes"):
        check_clean(git, commit=True, force=False)


def test_nothing_to_commit_is_reported(tmp_path: Path) -> None:
    git = FakeGit(tmp_path, in_repo=True, creates_commit=False)

    outcome = _service(git)(InitializeRepoRequest(commit=True))

    assert outcome.committed is False
    assert git.names == ["add", "commit"]
