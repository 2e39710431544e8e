"""出力フォーマッタのテスト。"""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from kiroku.cli._formatter import OutputFormat, build_tables, format_json, print_config
from kiroku.models.config import (
    DEFAULT_IGNORE_COMMITTERS,
    DEFAULT_LABELS,
    Configuration,
    WorkspacePackage,
)


def _make_config() -> Configuration:
    return Configuration(
        repo="acme/widget",
        root_path=Path("/repo"),
        labels=dict(DEFAULT_LABELS),
        ignore_committers=DEFAULT_IGNORE_COMMITTERS,
        packages=(WorkspacePackage(name="pkg-a", path="/repo/packages/pkg-a"),),
    )


class TestFormatJson:
    """JSON 出力。"""

    def test_camel_case_keys(self) -> None:
        data = json.loads(format_json(_make_config()))
        assert set(data) == {
            "repo",
            "rootPath",
            "labels",
            "ignoreCommitters",
            "cacheDir",
            "nextVersion",
            "nextVersionFromMetadata",
            "wildcardLabel",
            "packages",
        }
        assert data["cacheDir"] is None


class TestBuildTables:
    """テーブル出力。"""

    def test_bracketed_committers_rendered_literally(self) -> None:
        console = Console(record=True, width=200)
        console.print(build_tables(_make_config()))
        text = console.export_text()
        assert "dependabot[bot]" in text
        assert ":boom: Breaking Change" in text
        assert "pkg-a" in text

    def test_print_config_table(self) -> None:
        console = Console(record=True, width=200)
        print_config(_make_config(), OutputFormat.TABLE, console)
        assert "acme/widget" in console.export_text()
