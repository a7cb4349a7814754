"""Bundled scaffold templates.

Template files ship inside the package under ``forge_init/templates`` and are
addressed by ``(Variant, logical name)`` so callers never deal with how the
content is packaged.

Example:
    >>> "contract" in template_names(Variant.SOLIDITY)
    True
"""

from collections.abc import Mapping
from importlib import resources
from types import MappingProxyType

from .models import Variant

TEMPLATE_FILES: Mapping[Variant, Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        Variant.SOLIDITY: MappingProxyType(
            {
                "contract": ("solidity", "Counter.sol"),
                "test": ("solidity", "Counter.t.sol"),
                "script": ("solidity", "Counter.s.sol"),
                "readme": ("solidity", "README.md"),
                "gitignore": ("solidity", "gitignore"),
                "workflow": ("solidity", "workflow.yml"),
            }
        ),
        Variant.VYPER: MappingProxyType(
            {
                "contract": ("vyper", "Counter.vy"),
                "interface": ("vyper", "ICounter.sol"),
                "deployer": ("vyper", "VyperDeployer.sol"),
                "test": ("vyper", "Counter.t.sol"),
                "script": ("vyper", "Counter.s.sol"),
                "readme": ("vyper", "README.md"),
                "gitignore": ("solidity", "gitignore"),
                "workflow": ("vyper", "workflow.yml"),
            }
        ),
    }
)


class TemplateReadError(RuntimeError):
    """Raised when a bundled template cannot be resolved or read."""

    def __init__(self, *, variant: Variant, name: str, detail: str) -> None:
        self.variant = variant
        self.name = name
        super().__init__(f"template_read_failed[{variant.value}:{name}]: {detail}")


def template_names(variant: Variant) -> tuple[str, ...]:
    """Return the logical template names available for ``variant``."""
    return tuple(TEMPLATE_FILES[variant])


def _read_template(*parts: str) -> str:
    return (
        resources.files("forge_init")
        .joinpath("templates")
        .joinpath(*parts)
        .read_text(encoding="utf-8")
    )


def read_template(variant: Variant, name: str) -> str:
    """Read one bundled template.

    Args:
        variant: Scaffold variant.
        name: Logical template name (``contract``, ``test``, ...).

    Returns:
        Template text.

    Raises:
        TemplateReadError: When the name is unknown or the file is unreadable.

    Example:
        >>> read_template(Variant.VYPER, "contract").startswith("# pragma version")
        True
    """
    parts = TEMPLATE_FILES[variant].get(name)
    if parts is None:
        raise TemplateReadError(variant=variant, name=name, detail="unknown template")
    try:
        return _read_template(*parts)
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateReadError(variant=variant, name=name, detail=str(exc)) from exc


def load_template_set(variant: Variant) -> Mapping[str, str]:
    """Read every template for ``variant`` up front.

    Returns:
        Read-only mapping of logical name to template text.
    """
    loaded = {name: read_template(variant, name) for name in template_names(variant)}
    return MappingProxyType(loaded)
