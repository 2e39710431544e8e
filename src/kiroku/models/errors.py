"""kiroku の例外階層。"""

from __future__ import annotations


class KirokuError(Exception):
    """kiroku が送出する例外の基底クラス。"""


class ConfigurationError(KirokuError):
    """設定を解決できない場合のエラー。

    repo を推論できない場合や、メタデータからの nextVersion 推論が
    要求されたのに version が見つからない場合に送出する。
    メッセージには欠落しているフィールド名を含む。
    """


class WorkspaceDiscoveryError(KirokuError):
    """パッケージマネージャーの出力をワークスペース一覧に変換できない場合のエラー。"""


class CommandError(KirokuError, RuntimeError):
    """外部コマンドの起動失敗または非ゼロ終了。

    Attributes:
        command: 実行したコマンド名。
        stderr: コマンドの標準エラー出力（取得できた場合）。
    """

    def __init__(self, message: str, *, command: str, stderr: str = "") -> None:
        super().__init__(message)
        self.command = command
        self.stderr = stderr
