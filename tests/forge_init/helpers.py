from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from forge_init import exec as exec_util

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class RecordingRunner:
    """Command runner that records argv and replays queued results."""

    def __init__(self, *results: exec_util.CommandResult | None) -> None:
        self.requests: list[exec_util.CommandRequest] = []
        self._results = list(results)

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        if self._results:
            return self._results.pop(0)
        return exec_util.CommandResult(argv=request.argv, returncode=0, stdout="", stderr="")

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]


def ok(stdout: str = "") -> exec_util.CommandResult:
    return exec_util.CommandResult(argv=(), returncode=0, stdout=stdout, stderr="")


def failed(returncode: int = 1, stderr: str = "") -> exec_util.CommandResult:
    return exec_util.CommandResult(argv=(), returncode=returncode, stdout="", stderr=stderr)


@dataclass
class FakeGit:
    """In-memory stand-in for ``forge_init.git.Git`` recording every call."""

    root: Path
    shallow: bool = False
    in_repo: bool = False
    clean: bool = True
    commits: bool = False
    nested: bool = False
    creates_commit: bool = True
    fetched_hash: str = "abc1234"
    new_commit: str = "fff0000"
    calls: list[tuple[object, ...]] = field(default_factory=list)

    def init(self) -> None:
        self.calls.append(("init",))
        self.in_repo = True

    def is_in_repo(self) -> bool:
        return self.in_repo

    def is_repo_root(self) -> bool:
        return self.in_repo and not self.nested

    def has_commits(self) -> bool:
        return self.commits

    def is_clean(self) -> bool:
        return self.clean

    def fetch(self, url: str, branch: str | None = None) -> None:
        self.calls.append(("fetch", url, branch))

    def commit_hash(self, rev: str) -> str:
        self.calls.append(("commit_hash", rev))
        return self.fetched_hash

    def commit_tree(self, tree: str, message: str) -> str:
        self.calls.append(("commit_tree", tree, message))
        return self.new_commit

    def reset_hard(self, rev: str) -> None:
        self.calls.append(("reset_hard", rev))

    def submodule_init(self) -> None:
        self.calls.append(("submodule_init",))

    def submodule_update(self, paths: tuple[Path, ...] = (), *, no_fetch: bool = False) -> None:
        self.calls.append(("submodule_update", paths, no_fetch))

    def submodule_add(self, url: str, path: Path) -> None:
        self.calls.append(("submodule_add", url, path))

    def clone(self, url: str, dest: Path) -> None:
        self.calls.append(("clone", url, dest))
        (self.root / dest / ".git").mkdir(parents=True)

    def add(self, *pathspecs: str) -> None:
        self.calls.append(("add", *pathspecs))

    def commit(self, message: str) -> bool:
        self.calls.append(("commit", message))
        return self.creates_commit

    @property
    def names(self) -> list[object]:
        return [call[0] for call in self.calls]


class RecordingInstaller:
    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def install(self, dependencies: list[str]) -> None:
        self.calls.append(list(dependencies))


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-C", str(repo), *args], check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


def make_template_repo(path: Path) -> str:
    """Create a two-commit repository to use as a template; return its HEAD."""
    path.mkdir(parents=True)
    git(path, "init", "--quiet")
    (path / "README.md").write_text("template\n", encoding="utf-8")
    git(path, "add", "README.md")
    git(path, "commit", "--quiet", "-m", "first")
    (path / "src").mkdir()
    (path / "src" / "Token.sol").write_text("contract Token {}\n", encoding="utf-8")
    git(path, "add", "--all")
    git(path, "commit", "--quiet", "-m", "second")
    return git(path, "rev-parse", "HEAD")
