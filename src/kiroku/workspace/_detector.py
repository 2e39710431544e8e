"""ロックファイルによるパッケージマネージャー判定。"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Final


class PackageManager(StrEnum):
    """ワークスペース一覧の取得に対応するパッケージマネージャー。"""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"


LOCKFILES: Final[tuple[tuple[str, PackageManager], ...]] = (
    ("package-lock.json", PackageManager.NPM),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
)
"""判定順のロックファイル名とパッケージマネージャーの組。先に一致したものを採用する。"""


def detect_package_manager(root: Path) -> PackageManager | None:
    """root 直下のロックファイルからパッケージマネージャーを判定する。

    ロックファイルの内容は読まない。存在のみを判定に使用する。

    Args:
        root: プロジェクトルート。

    Returns:
        最初に見つかったロックファイルに対応するパッケージマネージャー。
        いずれも存在しなければ None。
    """
    for filename, manager in LOCKFILES:
        if (root / filename).exists():
            return manager
    return None
