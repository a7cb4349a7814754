from __future__ import annotations

from dataclasses import dataclass

from ... import log
from ...git import Git
from ...models import TemplateDescriptor
from ..base import BaseService
from .resolve_template import resolve_template_url

FETCH_HEAD = "FETCH_HEAD"


def template_commit_message(url: str, commit_hash: str) -> str:
    """Return the message of the collapsed template commit.

    Example:
        >>> template_commit_message("https://github.com/foo/bar", "abc1234")
        'chore: init from https://github.com/foo/bar at abc1234'
    """
    return f"chore: init from {url} at {commit_hash}"


@dataclass(frozen=True)
class FetchTemplateOutcome:
    url: str
    template_commit: str
    commit: str


class FetchTemplateService(BaseService[TemplateDescriptor, FetchTemplateOutcome]):
    """Materialize a template repository at the git root as one commit.

    The template is always fetched shallow. Its tree is committed without a
    parent and ``HEAD`` is hard-reset onto that commit, so the resulting
    history is exactly one commit recording where the content came from.
    Submodules are only initialized when ``git.shallow`` is set, and otherwise
    checked out from the fetched objects without contacting their remotes.
    """

    def __init__(self, git: Git) -> None:
        self._git = git

    def _run(self, request: TemplateDescriptor) -> FetchTemplateOutcome:
        git = self._git
        url = resolve_template_url(request.reference)
        log.info(f"Initializing {git.root} from {url}...")

        if git.is_repo_root() and git.has_commits():
            log.warning(f"existing git history in {git.root} will be replaced by the template")
        git.init()

        git.fetch(url, request.branch)
        template_commit = git.commit_hash(FETCH_HEAD)
        commit = git.commit_tree(
            f"{FETCH_HEAD}^{{tree}}", template_commit_message(url, template_commit)
        )
        git.reset_hard(commit)

        if git.shallow:
            git.submodule_init()
        else:
            git.submodule_update(no_fetch=True)
        log.debug(f"Collapsed {url}@{template_commit} into {commit}")
        return FetchTemplateOutcome(url=url, template_commit=template_commit, commit=commit)
