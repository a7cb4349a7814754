"""Path constants and filesystem primitives for project scaffolding."""

from pathlib import Path

SRC_DIRNAME = "src"
TEST_DIRNAME = "test"
SCRIPT_DIRNAME = "script"
LIB_DIRNAME = "lib"
INTERFACE_DIRNAME = "interface"
UTILS_DIRNAME = "utils"
PROJECT_CONFIG_FILENAME = "foundry.toml"
GITIGNORE_FILENAME = ".gitignore"
WORKFLOW_PATH = Path(".github") / "workflows" / "test.yml"
REMAPPINGS_FILENAME = "remappings.txt"
VSCODE_DIRNAME = ".vscode"
VSCODE_SETTINGS_FILENAME = "settings.json"
FORGE_STD_PATH = Path(LIB_DIRNAME) / "forge-std"


def ensure_dir(path: Path) -> None:
    """Create a directory if it does not exist.

    Args:
        path: Directory path to ensure exists.

    Returns:
        None.

    Example:
        >>> ensure_dir(Path("/tmp/forge-init-dir"))
    """
    path.mkdir(parents=True, exist_ok=True)


def dir_is_empty(path: Path) -> bool:
    """Return whether ``path`` has no entries (missing counts as empty).

    Example:
        >>> dir_is_empty(Path("/tmp/forge-init-missing-dir"))
        True
    """
    if not path.is_dir():
        return True
    return next(path.iterdir(), None) is None


def write_if_absent(path: Path, content: str) -> bool:
    """Write ``content`` to ``path`` only when nothing exists there yet.

    Parent directories are created as needed. An existing file is left
    byte-for-byte untouched.

    Args:
        path: File to create.
        content: Text to write.

    Returns:
        ``True`` when the file was written, ``False`` when it already existed.
    """
    if path.exists():
        return False
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    return True
