"""設定モデル。

JSON 上のキーは camelCase（package.json / lerna.json の changelog フィールドの慣習）、
Python 側の属性は snake_case で扱う。どちらの名前でも構築できる。
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Final

from pydantic import (
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    model_validator,
)
from pydantic.alias_generators import to_camel

from kiroku.models._base import KirokuBaseModel

REPO_PATTERN: Final[str] = r"^[^/]+/[^/]+$"
"""ホスティング先リポジトリ識別子（owner/project）の形式。"""

DEFAULT_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "breaking": ":boom: Breaking Change",
        "enhancement": ":rocket: Enhancement",
        "bug": ":bug: Bug Fix",
        "documentation": ":memo: Documentation",
        "internal": ":house: Internal",
    }
)
"""labels 未指定時に使用するラベル→セクション見出しの対応表。"""

WILDCARD_LABEL_TITLE: Final[str] = ":present: Additional updates"
"""wildcardLabel のエントリが labels に無い場合に補う見出し。"""

DEFAULT_IGNORE_COMMITTERS: Final[tuple[str, ...]] = (
    "dependabot-bot",
    "dependabot[bot]",
    "dependabot-preview[bot]",
    "greenkeeperio-bot",
    "greenkeeper[bot]",
    "renovate-bot",
    "renovate[bot]",
)
"""ignoreCommitters 未指定時に除外するボットアカウント。"""

_NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class WorkspacePackage(KirokuBaseModel):
    """モノレポのワークスペースに属するパッケージ。"""

    name: _NonEmptyStr
    path: _NonEmptyStr


class PartialConfiguration(KirokuBaseModel):
    """設定ソースから読み込んだ部分設定。全フィールドが省略可能。

    changelog オブジェクトは下流ツールと共有されるため、未知のキーは無視する。
    rootPath と packages は解決時に必ず算出されるので読み込まない。
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    repo: str | None = None
    next_version: str | None = None
    next_version_from_metadata: StrictBool | None = None
    labels: dict[str, str] | None = None
    ignore_committers: tuple[str, ...] | None = None
    cache_dir: str | None = None
    wildcard_label: str | None = None


class Configuration(KirokuBaseModel):
    """解決済みの changelog 設定。解決呼び出しごとに一度だけ構築される不変モデル。"""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    repo: str = Field(pattern=REPO_PATTERN)
    root_path: Path
    labels: dict[str, str]
    ignore_committers: tuple[str, ...]
    cache_dir: str | None = None
    next_version: str | None = None
    next_version_from_metadata: StrictBool = False
    wildcard_label: str | None = None
    packages: tuple[WorkspacePackage, ...] = ()

    @model_validator(mode="after")
    def check_wildcard_label(self) -> Configuration:
        """wildcard_label が設定されていれば labels にエントリが存在すること。

        空文字列は未設定として扱う。
        """
        if self.wildcard_label and self.wildcard_label not in self.labels:
            msg = (
                f"wildcard label '{self.wildcard_label}' has no entry in labels"
            )
            raise ValueError(msg)
        return self
