"""プロジェクトメタデータ（package.json / lerna.json）のローダー。

ファイルが存在しない場合のみ「無し」として扱う。存在するファイルの
読み取りエラーや JSON 構文エラーは握りつぶさずに送出する。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Final

from kiroku.models.config import PartialConfiguration

logger = logging.getLogger(__name__)

PACKAGE_JSON: Final[str] = "package.json"
LERNA_JSON: Final[str] = "lerna.json"
_CHANGELOG_KEY: Final[str] = "changelog"

CONFIG_SOURCES: Final[tuple[str, ...]] = (PACKAGE_JSON, LERNA_JSON)
"""changelog セクションを探すファイル。先頭ほど優先度が高い。"""


def load_json_file(path: Path) -> dict[str, object]:
    """JSON ファイルを読み込み辞書として返す。

    Args:
        path: JSON ファイルのパス。

    Returns:
        パースされた辞書。

    Raises:
        FileNotFoundError: ファイルが存在しない場合。
        PermissionError: 読み取り権限がない場合。
        json.JSONDecodeError: JSON 構文エラーの場合。
        ValueError: トップレベルが JSON オブジェクトでない場合。
    """
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def load_json_if_exists(path: Path) -> dict[str, object] | None:
    """ファイルが存在すれば load_json_file() の結果を、無ければ None を返す。"""
    try:
        return load_json_file(path)
    except FileNotFoundError:
        return None


def load_changelog_section(path: Path) -> object | None:
    """メタデータファイルの changelog フィールドを返す。

    ファイルが無い場合、changelog キーが無い場合、値が null の場合は None。
    値の型検証は呼び出し側（PartialConfiguration）が行う。

    Args:
        path: package.json または lerna.json のパス。

    Returns:
        changelog フィールドの値。見つからなければ None。

    Raises:
        PermissionError: 読み取り権限がない場合。
        json.JSONDecodeError: JSON 構文エラーの場合。
        ValueError: トップレベルが JSON オブジェクトでない場合。
    """
    data = load_json_if_exists(path)
    if data is None:
        return None
    return data.get(_CHANGELOG_KEY)


def _is_absent(section: object) -> bool:
    """null と、オブジェクト以外の偽値（false, 0, ""）を未指定として扱う。

    空の {} は未指定ではない。
    """
    return section is None or (not isinstance(section, dict) and not section)


def load_partial_config(root: Path) -> PartialConfiguration:
    """CONFIG_SOURCES を優先順に調べ、最初に見つかった changelog セクションを返す。

    マージは行わない。空の {} であっても changelog キーが存在すれば採用する。
    null や false などの偽値は未指定とみなし、次のソースに進む。
    どのソースにも無ければ空の PartialConfiguration を返す。

    Args:
        root: プロジェクトルート。

    Returns:
        読み込んだ部分設定。

    Raises:
        pydantic.ValidationError: changelog セクションの値が不正な場合。
        json.JSONDecodeError: メタデータの JSON 構文が不正な場合。
        PermissionError: メタデータの読み取り権限がない場合。
    """
    for filename in CONFIG_SOURCES:
        section = load_changelog_section(root / filename)
        if not _is_absent(section):
            logger.debug("Loaded changelog configuration from %s", filename)
            return PartialConfiguration.model_validate(section)
    return PartialConfiguration()
