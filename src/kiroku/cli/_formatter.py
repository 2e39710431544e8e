"""Configuration の出力フォーマッタ。"""

from __future__ import annotations

from enum import StrEnum

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from kiroku.models.config import Configuration

_NONE_MARKER = "-"


class OutputFormat(StrEnum):
    """show サブコマンドの出力形式。"""

    JSON = "json"
    TABLE = "table"


def format_json(config: Configuration) -> str:
    """Configuration を camelCase キーの JSON 文字列に変換する。"""
    return config.model_dump_json(by_alias=True, indent=2)


def _cell(value: str | None) -> Text:
    """セル値を Text に変換する。"dependabot[bot]" 等をマークアップとして解釈させない。"""
    return Text(value or _NONE_MARKER)


def build_tables(config: Configuration) -> Group:
    """Configuration を rich のテーブル群に変換する。"""
    summary = Table(title="Configuration", show_header=False)
    summary.add_column("key", style="bold")
    summary.add_column("value")
    summary.add_row("repo", _cell(config.repo))
    summary.add_row("rootPath", _cell(str(config.root_path)))
    summary.add_row("nextVersion", _cell(config.next_version))
    summary.add_row("cacheDir", _cell(config.cache_dir))
    summary.add_row("wildcardLabel", _cell(config.wildcard_label))
    summary.add_row("ignoreCommitters", _cell(", ".join(config.ignore_committers)))

    labels = Table(title="Labels")
    labels.add_column("label", style="bold")
    labels.add_column("section")
    for label, section in config.labels.items():
        labels.add_row(_cell(label), _cell(section))

    packages = Table(title="Packages")
    packages.add_column("name", style="bold")
    packages.add_column("path")
    for package in config.packages:
        packages.add_row(_cell(package.name), _cell(package.path))

    return Group(summary, labels, packages)


def print_config(
    config: Configuration,
    output_format: OutputFormat,
    console: Console | None = None,
) -> None:
    """Configuration を指定形式で stdout に出力する。"""
    if output_format is OutputFormat.JSON:
        print(format_json(config))
        return
    (console or Console()).print(build_tables(config))
