"""changelog 生成ツール向けの設定リゾルバー。"""

from kiroku.cli import main

__all__ = ["main"]
