"""パッケージマネージャーごとのワークスペース一覧取得。

各戦略は外部コマンドを実行し、出力を WorkspacePackage のタプルに正規化する。
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from kiroku.models.config import WorkspacePackage
from kiroku.models.errors import WorkspaceDiscoveryError
from kiroku.tools._process import CommandRunner
from kiroku.workspace._detector import PackageManager

DiscoveryStrategy = Callable[[Path, CommandRunner], tuple[WorkspacePackage, ...]]
"""root とコマンド実行関数を受け取りワークスペース一覧を返す戦略関数の型。"""

NPM_COMMAND: Final[tuple[str, list[str]]] = ("npm", ["query", ".workspace"])
PNPM_COMMAND: Final[tuple[str, list[str]]] = (
    "pnpm",
    ["m", "ls", "--json", "--depth=-1"],
)
YARN_COMMAND: Final[tuple[str, list[str]]] = (
    "yarn",
    ["--silent", "workspaces", "info", "--json"],
)


def _run_json(
    manager: PackageManager,
    command: tuple[str, list[str]],
    root: Path,
    runner: CommandRunner,
) -> object:
    """コマンドを実行し stdout を JSON としてパースする。

    Raises:
        CommandError: コマンドの実行に失敗した場合。
        WorkspaceDiscoveryError: 出力が JSON として解釈できない場合。
    """
    name, args = command
    output = runner(name, list(args), root)
    try:
        return json.loads(output)
    except json.JSONDecodeError as e:
        msg = f"{manager} workspace listing returned invalid JSON: {e}"
        raise WorkspaceDiscoveryError(msg) from e


def _require_str(value: object, field: str, manager: PackageManager) -> str:
    """value が空でない文字列であることを検証する。"""
    if not isinstance(value, str) or not value:
        msg = f"{manager} workspace entry has no valid '{field}': {value!r}"
        raise WorkspaceDiscoveryError(msg)
    return value


def _require_list(data: object, manager: PackageManager) -> list[object]:
    """JSON 出力が配列であることを検証する。"""
    if not isinstance(data, list):
        msg = (
            f"{manager} workspace listing must be a JSON array, "
            f"got {type(data).__name__}"
        )
        raise WorkspaceDiscoveryError(msg)
    return data


def discover_npm(root: Path, runner: CommandRunner) -> tuple[WorkspacePackage, ...]:
    """`npm query .workspace` の出力をそのまま name/path に写す。

    npm の出力は常に name と path を含むため、欠落はエラーとする。
    """
    data = _run_json(PackageManager.NPM, NPM_COMMAND, root, runner)
    entries = _require_list(data, PackageManager.NPM)
    packages: list[WorkspacePackage] = []
    for entry in entries:
        if not isinstance(entry, dict):
            msg = f"npm workspace entry must be an object, got {type(entry).__name__}"
            raise WorkspaceDiscoveryError(msg)
        packages.append(
            WorkspacePackage(
                name=_require_str(entry.get("name"), "name", PackageManager.NPM),
                path=_require_str(entry.get("path"), "path", PackageManager.NPM),
            )
        )
    return tuple(packages)


def discover_pnpm(root: Path, runner: CommandRunner) -> tuple[WorkspacePackage, ...]:
    """`pnpm m ls --json --depth=-1` の出力から name と path を持つエントリのみを採用する。

    名前を持たないワークスペースルート等は一覧から除外される。
    """
    data = _run_json(PackageManager.PNPM, PNPM_COMMAND, root, runner)
    entries = _require_list(data, PackageManager.PNPM)
    packages: list[WorkspacePackage] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        path = entry.get("path")
        if isinstance(name, str) and name and isinstance(path, str) and path:
            packages.append(WorkspacePackage(name=name, path=path))
    return tuple(packages)


def discover_yarn(root: Path, runner: CommandRunner) -> tuple[WorkspacePackage, ...]:
    """`yarn workspaces info --json` の name→{location} 対応を絶対パスに解決する。"""
    data = _run_json(PackageManager.YARN, YARN_COMMAND, root, runner)
    if not isinstance(data, dict):
        msg = f"yarn workspace info must be a JSON object, got {type(data).__name__}"
        raise WorkspaceDiscoveryError(msg)
    packages: list[WorkspacePackage] = []
    for name, info in data.items():
        location = info.get("location") if isinstance(info, dict) else None
        location = _require_str(location, "location", PackageManager.YARN)
        packages.append(
            WorkspacePackage(
                name=name,
                path=os.path.abspath(root / location),
            )
        )
    return tuple(packages)


STRATEGIES: Final[Mapping[PackageManager, DiscoveryStrategy]] = MappingProxyType(
    {
        PackageManager.NPM: discover_npm,
        PackageManager.PNPM: discover_pnpm,
        PackageManager.YARN: discover_yarn,
    }
)
"""パッケージマネージャーと戦略関数の対応表。"""
