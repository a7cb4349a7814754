import json
from pathlib import Path

import pytest

from forge_init.services import UnexpectedStateError
from forge_init.services.init import EditorConfigService

CONTRACTS_KEY = "solidity.packageDefaultDependenciesContractsDirectory"
DEPENDENCIES_KEY = "solidity.packageDefaultDependenciesDirectory"


def _settings(root: Path) -> dict[str, object]:
    return json.loads((root / ".vscode" / "settings.json").read_text(encoding="utf-8"))


def test_writes_settings_and_remappings(tmp_path: Path) -> None:
    (tmp_path / "lib" / "forge-std" / "src").mkdir(parents=True)
    (tmp_path / "lib" / "solmate").mkdir(parents=True)

    outcome = EditorConfigService()(tmp_path)

    assert outcome.remappings_written is True
    assert (tmp_path / "remappings.txt").read_text(encoding="utf-8") == (
        "forge-std/=lib/forge-std/src/\nsolmate/=lib/solmate/"
    )
    assert _settings(tmp_path) == {CONTRACTS_KEY: "src", DEPENDENCIES_KEY: "lib"}
    assert (tmp_path / ".vscode" / "settings.json").read_text(encoding="utf-8").endswith("}\n")


def test_existing_remappings_file_is_kept(tmp_path: Path) -> None:
    (tmp_path / "lib" / "forge-std" / "src").mkdir(parents=True)
    (tmp_path / "remappings.txt").write_text("custom/=custom/\n", encoding="utf-8")

    outcome = EditorConfigService()(tmp_path)

    assert outcome.remappings_written is False
    assert (tmp_path / "remappings.txt").read_text(encoding="utf-8") == "custom/=custom/\n"


def test_no_libraries_means_no_remappings_file(tmp_path: Path) -> None:
    EditorConfigService()(tmp_path)

    assert not (tmp_path / "remappings.txt").exists()


def test_merge_preserves_existing_keys(tmp_path: Path) -> None:
    vscode = tmp_path / ".vscode"
    vscode.mkdir()
    (vscode / "settings.json").write_text(
        json.dumps({"editor.tabSize": 4, DEPENDENCIES_KEY: "deps"}), encoding="utf-8"
    )

    outcome = EditorConfigService()(tmp_path)

    assert outcome.inserted_keys == (CONTRACTS_KEY,)
    assert _settings(tmp_path) == {
        "editor.tabSize": 4,
        DEPENDENCIES_KEY: "deps",
        CONTRACTS_KEY: "src",
    }


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_malformed_settings_are_left_untouched(tmp_path: Path, content: str) -> None:
    settings_path = tmp_path / ".vscode" / "settings.json"
    settings_path.parent.mkdir()
    settings_path.write_text(content, encoding="utf-8")

    with pytest.raises(UnexpectedStateError, match="invalid editor settings"):
        EditorConfigService()(tmp_path)

    assert settings_path.read_text(encoding="utf-8") == content


def test_non_ascii_settings_stay_readable(tmp_path: Path) -> None:
    settings_path = tmp_path / ".vscode" / "settings.json"
    settings_path.parent.mkdir()
    settings_path.write_text('{"cSpell.words": ["Zürich", "東京"]}', encoding="utf-8")

    EditorConfigService()(tmp_path)

    content = settings_path.read_text(encoding="utf-8")
    assert '"Zürich"' in content
    assert '"東京"' in content
    assert "\\u" not in content
