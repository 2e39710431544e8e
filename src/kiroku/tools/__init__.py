"""外部コラボレーター（コマンド実行・git・ホスティング URL）のアダプター。"""

from kiroku.tools._git import get_root_path
from kiroku.tools._hosted import HostedGitInfo, HostingProvider, parse_hosted_url
from kiroku.tools._process import CommandRunner, run_command

__all__ = [
    "CommandRunner",
    "HostedGitInfo",
    "HostingProvider",
    "get_root_path",
    "parse_hosted_url",
    "run_command",
]
