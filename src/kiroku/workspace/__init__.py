"""モノレポのワークスペースパッケージ探索。"""

from __future__ import annotations

import logging
from pathlib import Path

from kiroku.models.config import WorkspacePackage
from kiroku.tools._process import CommandRunner, run_command
from kiroku.workspace._detector import LOCKFILES, PackageManager, detect_package_manager
from kiroku.workspace._strategies import STRATEGIES

logger = logging.getLogger(__name__)


def discover_packages(
    root: Path,
    runner: CommandRunner = run_command,
) -> tuple[WorkspacePackage, ...]:
    """root のワークスペースパッケージ一覧を取得する。

    ロックファイルで判定したパッケージマネージャーの戦略を一つだけ実行する。
    ロックファイルが無ければ空のタプルを返す。パッケージマネージャーを
    検出した後の失敗は空の一覧に置き換えず、そのまま送出する。

    Args:
        root: プロジェクトルート。
        runner: コマンド実行関数。

    Returns:
        ワークスペースパッケージのタプル。

    Raises:
        CommandError: パッケージマネージャーの実行に失敗した場合。
        WorkspaceDiscoveryError: 出力を解釈できない場合。
    """
    manager = detect_package_manager(root)
    if manager is None:
        logger.debug("No lockfile found in %s, skipping workspace discovery", root)
        return ()
    logger.debug("Detected %s workspace in %s", manager, root)
    packages = STRATEGIES[manager](root, runner)
    logger.debug("Discovered %d workspace package(s)", len(packages))
    return packages


__all__ = [
    "LOCKFILES",
    "PackageManager",
    "detect_package_manager",
    "discover_packages",
]
