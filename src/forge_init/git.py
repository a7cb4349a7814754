"""Git command wrapper used by the init workflow.

``Git`` is a frozen value bound to one root directory. It carries its own
configuration (``shallow``, the git executable, the command runner) and is
passed explicitly into every step that needs version control.

Example:
    >>> git = Git(Path("/tmp/project"), shallow=True)
    >>> git.command(["status"])[:3]
    ['git', '-C', '/tmp/project']
"""

from dataclasses import dataclass, field
from pathlib import Path

from . import exec as exec_util
from . import log

NOTHING_TO_COMMIT = "nothing to commit, working tree clean"


def strip_git_suffix(path: str) -> str:
    """Remove a trailing ``.git`` suffix from a path string.

    Args:
        path: Git URL or path.

    Returns:
        Path without a trailing ``.git``.

    Example:
        >>> strip_git_suffix("example/repo.git")
        'example/repo'
    """
    normalized = path.strip().rstrip("/")
    if normalized.lower().endswith(".git"):
        return normalized[: -len(".git")]
    return normalized


def repository_name(url: str) -> str:
    """Return the last path segment of a repository URL.

    Example:
        >>> repository_name("https://github.com/foundry-rs/forge-std.git")
        'forge-std'
    """
    return strip_git_suffix(url).rsplit("/", 1)[-1].rsplit(":", 1)[-1]


def git_command(args: list[str], *, git_path: str | None = None) -> list[str]:
    """Build a git command using an optional executable path."""
    resolved = git_path.strip() if isinstance(git_path, str) else ""
    if not resolved:
        resolved = "git"
    return [resolved, *args]


@dataclass(frozen=True)
class Git:
    """Stateless git service bound to a repository root.

    Attributes:
        root: Directory every command runs against (``git -C <root>``).
        shallow: Whether fetches, clones and submodule updates use ``--depth 1``.
        git_path: Optional git executable override.
        runner: Optional command runner, mainly for tests.
    """

    root: Path
    shallow: bool = False
    git_path: str | None = None
    runner: exec_util.CommandRunner | None = field(default=None, compare=False)

    def command(self, args: list[str]) -> list[str]:
        return git_command(["-C", str(self.root), *args], git_path=self.git_path)

    def _request(self, args: list[str]) -> exec_util.CommandRequest:
        return exec_util.CommandRequest(argv=tuple(self.command(args)))

    def _run(self, args: list[str]) -> None:
        exec_util.run_typed(
            exec_util.CommandSpec(request=self._request(args), parser=exec_util.parse_none),
            runner=self.runner,
        )

    def _capture(self, args: list[str], *, context: str) -> str:
        return exec_util.run_typed(
            exec_util.CommandSpec(
                request=self._request(args),
                parser=exec_util.parse_stripped_stdout,
                context=context,
            ),
            runner=self.runner,
        )

    def _inspect(self, args: list[str]) -> exec_util.CommandResult:
        request = self._request(args)
        result = exec_util.run_with_runner(request, runner=self.runner)
        if result is None:
            raise exec_util.CommandExecutionError.missing(request)
        return result

    def _depth_args(self) -> list[str]:
        return ["--depth", "1"] if self.shallow else []

    def init(self) -> None:
        """Run ``git init`` at the root (safe on an existing repository)."""
        self._run(["init"])

    def is_in_repo(self) -> bool:
        """Return whether the root is inside a git work tree."""
        result = self._inspect(["rev-parse", "--is-inside-work-tree"])
        return result.returncode == 0 and result.stdout.strip() == "true"

    def is_repo_root(self) -> bool:
        """Return whether the root is the top level of its own work tree.

        A directory nested inside another repository is in a work tree but
        is not its root.
        """
        result = self._inspect(["rev-parse", "--show-toplevel"])
        if result.returncode != 0 or not result.stdout.strip():
            return False
        return Path(result.stdout.strip()).resolve() == self.root.resolve()

    def has_commits(self) -> bool:
        """Return whether ``HEAD`` resolves to a commit."""
        result = self._inspect(["rev-parse", "--verify", "--quiet", "HEAD"])
        return result.returncode == 0

    def is_clean(self) -> bool:
        """Return whether the working tree has no pending changes.

        Raises:
            CommandExecutionError: When ``git status`` fails.
        """
        request = self._request(["status", "--porcelain"])
        output = exec_util.run_typed(
            exec_util.CommandSpec(request=request, parser=lambda result: result.stdout),
            runner=self.runner,
        )
        return output.strip() == ""

    def fetch(self, url: str, branch: str | None = None) -> None:
        """Shallow-fetch ``url`` (optionally a single ``branch``) into ``FETCH_HEAD``."""
        args = ["fetch", "--depth", "1", url]
        if branch:
            args.append(branch)
        self._run(args)

    def commit_hash(self, rev: str) -> str:
        """Resolve ``rev`` to an abbreviated commit hash."""
        return self._capture(["rev-parse", "--short", rev], context=f"rev-parse {rev}")

    def commit_tree(self, tree: str, message: str) -> str:
        """Create a parentless commit for ``tree`` and return its hash."""
        return self._capture(["commit-tree", tree, "-m", message], context="commit-tree")

    def reset_hard(self, rev: str) -> None:
        self._run(["reset", "--hard", rev])

    def submodule_init(self) -> None:
        self._run(["submodule", "init"])

    def submodule_update(self, paths: tuple[Path, ...] = (), *, no_fetch: bool = False) -> None:
        """Recursively initialize and check out submodules, honouring ``shallow``.

        With ``no_fetch`` the recorded commits are checked out from objects
        already present instead of fetching from the remotes.
        """
        args = ["submodule", "update", "--init", "--recursive"]
        if no_fetch:
            args.append("--no-fetch")
        args.extend(self._depth_args())
        if paths:
            args.append("--")
            args.extend(str(path) for path in paths)
        self._run(args)

    def submodule_add(self, url: str, path: Path) -> None:
        self._run(["submodule", "add", "--force", *self._depth_args(), url, str(path)])

    def clone(self, url: str, dest: Path) -> None:
        """Clone ``url`` into ``dest`` (relative to the root) with submodules."""
        self._run(["clone", "--recurse-submodules", *self._depth_args(), url, str(dest)])

    def add(self, *pathspecs: str) -> None:
        self._run(["add", *(pathspecs or ("--all",))])

    def commit(self, message: str) -> bool:
        """Commit staged changes.

        Returns:
            ``False`` when git reported nothing to commit, ``True`` otherwise.
        """
        try:
            self._run(["commit", "-m", message])
        except exec_util.CommandExecutionError as exc:
            output = f"{exc.result.stdout}\n{exc.result.stderr}" if exc.result else ""
            if NOTHING_TO_COMMIT not in output:
                raise
            log.debug(f"Nothing to commit in {self.root}")
            return False
        return True
