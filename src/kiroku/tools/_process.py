"""外部コマンドの同期実行。

解決処理は CommandRunner プロトコル経由でのみコマンドを実行するため、
テストでは任意の callable に差し替えられる。
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from kiroku.models.errors import CommandError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """コマンドを実行し stdout を返す callable のプロトコル。"""

    def __call__(self, command: str, args: list[str], cwd: Path) -> str: ...


def run_command(command: str, args: list[str], cwd: Path) -> str:
    """コマンドを cwd で同期実行し、stdout を返す。

    タイムアウトは設けない。解決処理は一度きりの前処理として実行される。

    Args:
        command: 実行ファイル名（例: "npm"）。
        args: 引数のリスト。
        cwd: 作業ディレクトリ。

    Returns:
        コマンドの stdout 出力。

    Raises:
        CommandError: コマンドが PATH 上に見つからない場合、
            または非ゼロで終了した場合。
    """
    logger.debug("Running %s %s in %s", command, " ".join(args), cwd)
    try:
        result = subprocess.run(
            [command, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError:
        raise CommandError(
            f"{command} command not found. "
            f"Ensure {command} is installed and available in PATH.",
            command=command,
        ) from None
    except subprocess.CalledProcessError as e:
        raise CommandError(
            f"{command} command failed: {e.stderr}",
            command=command,
            stderr=e.stderr or "",
        ) from e

    return result.stdout
