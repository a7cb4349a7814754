"""Pydantic models and value types for project initialization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TEMPLATE_CONFLICTING_FLAGS = ("offline", "force", "vscode", "vyper")


class Variant(str, Enum):
    """Scaffold file set selector."""

    SOLIDITY = "solidity"
    VYPER = "vyper"


class TemplateDescriptor(BaseModel):
    """A user-supplied template reference.

    Attributes:
        reference: Raw template string (URL, ``github.com/...`` or ``org/repo``).
        branch: Optional branch to fetch instead of the default branch.

    Example:
        >>> TemplateDescriptor(reference=" foo/bar ").reference
        'foo/bar'
    """

    model_config = ConfigDict(frozen=True)

    reference: str
    branch: str | None = None

    @field_validator("reference", mode="before")
    @classmethod
    def normalize_reference(cls, value: object) -> object:
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                raise ValueError("template reference must not be empty")
            return stripped
        return value

    @field_validator("branch", mode="before")
    @classmethod
    def normalize_branch(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class InitRequest(BaseModel):
    """Inputs for one ``init`` run.

    Template mode is selected by ``template``; it cannot be combined with the
    default-mode flags ``offline``, ``force``, ``vscode`` or ``vyper``. A
    branch only exists as part of a ``TemplateDescriptor``.

    Example:
        >>> InitRequest(root=Path("."), vyper=True).variant
        <Variant.VYPER: 'vyper'>
    """

    model_config = ConfigDict(frozen=True)

    root: Path = Path(".")
    template: TemplateDescriptor | None = None
    offline: bool = False
    force: bool = False
    vscode: bool = False
    vyper: bool = False
    shallow: bool = False
    no_git: bool = False
    commit: bool = False

    @model_validator(mode="after")
    def check_template_mode(self) -> InitRequest:
        if self.template is None:
            return self
        conflicts = [name for name in TEMPLATE_CONFLICTING_FLAGS if getattr(self, name)]
        if conflicts:
            flags = ", ".join(f"--{name}" for name in conflicts)
            raise ValueError(f"template cannot be combined with {flags}")
        return self

    @property
    def variant(self) -> Variant:
        return Variant.VYPER if self.vyper else Variant.SOLIDITY


class ProjectConfig(BaseModel):
    """The ``[profile.default]`` table of the project configuration file.

    Example:
        >>> ProjectConfig().libs
        ['lib']
    """

    model_config = ConfigDict(extra="forbid")

    src: str = "src"
    out: str = "out"
    libs: list[str] = Field(default_factory=lambda: ["lib"])
    ffi: bool | None = None

    @field_validator("libs", mode="before")
    @classmethod
    def split_libs(cls, value: object) -> object:
        if isinstance(value, str):
            parts = value.replace(":", ",").split(",")
            return [part.strip() for part in parts if part.strip()]
        return value


@dataclass(frozen=True, order=True)
class Remapping:
    """A compiler import alias such as ``forge-std/=lib/forge-std/src/``.

    Example:
        >>> str(Remapping("ds-test/", "lib/ds-test/src/"))
        'ds-test/=lib/ds-test/src/'
    """

    alias: str
    path: str

    def __str__(self) -> str:
        return f"{self.alias}={self.path}"
