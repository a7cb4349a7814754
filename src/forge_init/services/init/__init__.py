"""Project initialization services."""

from .editor_config import EditorConfigOutcome, EditorConfigService
from .fetch_template import FetchTemplateOutcome, FetchTemplateService
from .init_repo import InitializeRepoOutcome, InitializeRepoRequest, InitializeRepoService
from .initialize_project import (
    InitializeProjectDependencies,
    InitializeProjectOutcome,
    InitializeProjectService,
)
from .resolve_template import resolve_template_url
from .scaffold import ScaffoldProjectOutcome, ScaffoldProjectRequest, ScaffoldProjectService

__all__ = [
    "EditorConfigOutcome",
    "EditorConfigService",
    "FetchTemplateOutcome",
    "FetchTemplateService",
    "InitializeProjectDependencies",
    "InitializeProjectOutcome",
    "InitializeProjectService",
    "InitializeRepoOutcome",
    "InitializeRepoRequest",
    "InitializeRepoService",
    "ScaffoldProjectOutcome",
    "ScaffoldProjectRequest",
    "ScaffoldProjectService",
    "resolve_template_url",
]
