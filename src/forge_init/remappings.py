"""Library remapping discovery.

Every dependency directory under ``lib/`` contributes one alias pointing at
its sources, then its own ``lib/`` is searched in turn. Aliases discovered
closer to the project root win over nested ones.
"""

from pathlib import Path

from .models import Remapping
from .paths import LIB_DIRNAME

SOURCE_DIRNAMES = ("src", "contracts")


def _source_dir(dependency: Path) -> Path:
    for name in SOURCE_DIRNAMES:
        candidate = dependency / name
        if candidate.is_dir():
            return candidate
    return dependency


def _relative(path: Path, root: Path) -> str:
    return path.relative_to(root).as_posix().rstrip("/") + "/"


def _dependency_dirs(lib_dir: Path) -> list[Path]:
    if not lib_dir.is_dir():
        return []
    return sorted(
        entry for entry in lib_dir.iterdir() if entry.is_dir() and not entry.name.startswith(".")
    )


def find_remappings(root: Path) -> list[Remapping]:
    """Discover remappings for all libraries under ``root/lib``.

    Args:
        root: Project root.

    Returns:
        Remappings with paths relative to ``root``, one per alias.

    Example:
        >>> find_remappings(Path("/tmp/forge-init-no-such-project"))
        []
    """
    found: dict[str, Remapping] = {}
    pending = [root / LIB_DIRNAME]
    seen: set[Path] = set()
    while pending:
        lib_dir = pending.pop(0)
        resolved = lib_dir.resolve()
        if resolved in seen:
            continue
        seen.add(resolved)
        for dependency in _dependency_dirs(lib_dir):
            alias = f"{dependency.name}/"
            if alias not in found:
                found[alias] = Remapping(alias, _relative(_source_dir(dependency), root))
            pending.append(dependency / LIB_DIRNAME)
    return list(found.values())


def render_remappings(remappings: list[Remapping]) -> str:
    """Render remappings as sorted, de-duplicated lines.

    Example:
        >>> render_remappings([Remapping("b/", "x/"), Remapping("a/", "y/"), Remapping("b/", "x/")])
        'a/=y/\\nb/=x/'
    """
    return "\n".join(sorted({str(remapping) for remapping in remappings}))
