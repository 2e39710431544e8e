"""ExitCode — 終了コードの定義。"""

from enum import IntEnum


class ExitCode(IntEnum):
    """プロセス終了コード。

    1-2 は将来の changelog 生成側のために予約し、設定解決では使用しない。
    """

    SUCCESS = 0
    EXECUTION_ERROR = 3
    INPUT_ERROR = 4
