"""設定解決モジュール。"""

from kiroku.config._inference import find_next_version, find_repo, find_repo_from_pkg
from kiroku.config._resolver import load_config, resolve_config

__all__ = [
    "find_next_version",
    "find_repo",
    "find_repo_from_pkg",
    "load_config",
    "resolve_config",
]
