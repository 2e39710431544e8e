"""設定値の推論。

repo と nextVersion が設定ソースに無い場合に、プロジェクトメタデータから導出する。
推論できない場合は None を返し、エラーにするかどうかは呼び出し側が決める。
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from kiroku.config._loader import LERNA_JSON, PACKAGE_JSON, load_json_if_exists
from kiroku.tools._hosted import HostingProvider, parse_hosted_url


def find_repo(root: Path) -> str | None:
    """package.json の repository フィールドから owner/project を推論する。

    Args:
        root: プロジェクトルート。

    Returns:
        "owner/project" 形式の識別子。package.json または repository が
        無い場合、GitHub 以外のホストの場合は None。
    """
    pkg = load_json_if_exists(root / PACKAGE_JSON)
    if pkg is None or not pkg.get("repository"):
        return None
    return find_repo_from_pkg(pkg)


def find_repo_from_pkg(pkg: Mapping[str, object]) -> str | None:
    """パース済みの package.json から GitHub の owner/project を取り出す。

    repository は URL 文字列と {"url": ...} オブジェクトの両方を受け付ける。

    Args:
        pkg: package.json の内容。

    Returns:
        "owner/project" 形式の識別子。解釈できない場合は None。
    """
    repository = pkg.get("repository")
    url = repository.get("url") if isinstance(repository, Mapping) else repository
    if not isinstance(url, str):
        return None
    info = parse_hosted_url(url)
    if info is None or info.type is not HostingProvider.GITHUB:
        return None
    return f"{info.user}/{info.project}"


def find_next_version(root: Path) -> str | None:
    """package.json、次に lerna.json の version から "v<version>" を組み立てる。

    Args:
        root: プロジェクトルート。

    Returns:
        "v" を前置したバージョン。どちらにも version が無ければ None。
    """
    for filename in (PACKAGE_JSON, LERNA_JSON):
        data = load_json_if_exists(root / filename)
        version = data.get("version") if data is not None else None
        if version:
            return f"v{version}"
    return None
