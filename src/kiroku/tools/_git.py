"""git 作業ツリーのルート探索。"""

from __future__ import annotations

from pathlib import Path

from kiroku.tools._process import CommandRunner, run_command


def get_root_path(
    cwd: Path | None = None,
    runner: CommandRunner = run_command,
) -> Path:
    """cwd を含む git 作業ツリーのルートを絶対パスで返す。

    Args:
        cwd: 探索開始ディレクトリ。None の場合はカレントディレクトリ。
        runner: コマンド実行関数。

    Returns:
        git 作業ツリーのルートディレクトリ。

    Raises:
        CommandError: git リポジトリ外の場合、または git が見つからない場合。
    """
    effective_cwd = cwd if cwd is not None else Path.cwd()
    output = runner("git", ["rev-parse", "--show-toplevel"], effective_cwd)
    return Path(output.strip()).resolve()
