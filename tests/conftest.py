"""テスト共通フィクスチャ・ヘルパー。"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest


class FakeRunner:
    """CommandRunner の代替。コマンド名ごとに固定の stdout を返し、呼び出しを記録する。"""

    def __init__(
        self,
        outputs: dict[str, str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.outputs = outputs or {}
        self.error = error
        self.calls: list[tuple[str, list[str], Path]] = []

    def __call__(self, command: str, args: list[str], cwd: Path) -> str:
        self.calls.append((command, list(args), cwd))
        if self.error is not None:
            raise self.error
        return self.outputs[command]


@pytest.fixture
def fake_runner() -> type[FakeRunner]:
    """FakeRunner クラスを返す。"""
    return FakeRunner


@pytest.fixture
def write_json() -> Callable[[Path, object], Path]:
    """JSON ファイルを書き込みパスを返す関数。"""

    def _write(path: Path, data: object) -> Path:
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
