"""ホスティング先 git URL のパース。

リポジトリ URL またはショートハンドから、ホスティングサービス・オーナー・
プロジェクト名を取り出す。解釈できない入力には None を返す。
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Final
from urllib.parse import urlsplit

from pydantic import Field

from kiroku.models._base import KirokuBaseModel


class HostingProvider(StrEnum):
    """対応するホスティングサービス。"""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"


class HostedGitInfo(KirokuBaseModel):
    """パース結果。"""

    type: HostingProvider
    user: str = Field(min_length=1)
    project: str = Field(min_length=1)


_HOSTS: Final[dict[str, HostingProvider]] = {
    "github.com": HostingProvider.GITHUB,
    "www.github.com": HostingProvider.GITHUB,
    "gitlab.com": HostingProvider.GITLAB,
    "www.gitlab.com": HostingProvider.GITLAB,
    "bitbucket.org": HostingProvider.BITBUCKET,
    "www.bitbucket.org": HostingProvider.BITBUCKET,
}

_URL_SCHEMES: Final[frozenset[str]] = frozenset(
    {"https", "http", "git", "ssh", "git+https", "git+http", "git+ssh"}
)

_SEGMENT = r"[^/:@\s#]+"

# "github:owner/project" 形式
_SHORTHAND_RE: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<provider>github|gitlab|bitbucket):"
    rf"(?P<user>{_SEGMENT})/(?P<project>{_SEGMENT})$"
)

# "owner/project" 形式（GitHub とみなす）
_BARE_RE: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<user>[A-Za-z0-9][^/:@\s#]*)/(?P<project>{_SEGMENT})$"
)

# "git@github.com:owner/project.git" 形式
_SCP_RE: Final[re.Pattern[str]] = re.compile(
    rf"^(?:git\+)?(?:{_SEGMENT}@)?(?P<host>[^/:@\s]+):"
    rf"(?P<user>{_SEGMENT})/(?P<project>{_SEGMENT})/?$"
)


def parse_hosted_url(url: str) -> HostedGitInfo | None:
    """リポジトリ URL またはショートハンドをパースする。

    対応する形式:
        - https://github.com/owner/project(.git)、git+https://、git://、
          ssh://git@github.com/owner/project、git+ssh://
        - git@github.com:owner/project.git
        - git+ssh://git@github.com:owner/project.git（scheme 付き scp 形式）
        - github:owner/project、gitlab:owner/project、bitbucket:owner/project
        - owner/project（GitHub とみなす）

    "#" 以降（ブランチ・コミット指定）は無視する。

    Args:
        url: リポジトリ URL またはショートハンド。

    Returns:
        パース結果。解釈できない場合は None。
    """
    candidate = url.strip().split("#", 1)[0]
    if not candidate:
        return None

    match = _SHORTHAND_RE.match(candidate)
    if match is not None:
        return _build(
            HostingProvider(match["provider"]), match["user"], match["project"]
        )

    match = _BARE_RE.match(candidate)
    if match is not None:
        return _build(HostingProvider.GITHUB, match["user"], match["project"])

    if "://" in candidate:
        return _parse_url(candidate)

    match = _SCP_RE.match(candidate)
    if match is not None:
        return _from_scp(match)

    return None


def _from_scp(match: re.Match[str]) -> HostedGitInfo | None:
    """_SCP_RE の一致結果から HostedGitInfo を構築する。"""
    provider = _HOSTS.get(match["host"].lower())
    if provider is None:
        return None
    return _build(provider, match["user"], match["project"])


def _parse_url(url: str) -> HostedGitInfo | None:
    """scheme 付き URL をパースする。

    "git+ssh://git@github.com:owner/project.git" のように scheme の後ろが
    scp 形式（host:owner/project）の場合も受け付ける。数字のみの owner は
    ポート番号とみなし、通常の URL として扱う。
    """
    scheme, _, remainder = url.partition("://")
    if scheme.lower() not in _URL_SCHEMES:
        return None
    match = _SCP_RE.match(remainder)
    if match is not None and not match["user"].isdigit():
        return _from_scp(match)

    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError:
        return None
    if parts.scheme.lower() not in _URL_SCHEMES or hostname is None:
        return None
    provider = _HOSTS.get(hostname.lower())
    if provider is None:
        return None
    segments = [s for s in parts.path.split("/") if s]
    if len(segments) < 2:
        return None
    return _build(provider, segments[0], segments[1])


def _build(provider: HostingProvider, user: str, project: str) -> HostedGitInfo | None:
    """末尾の .git を除去して HostedGitInfo を構築する。"""
    project = project.removesuffix(".git")
    if not project:
        return None
    return HostedGitInfo(type=provider, user=user, project=project)
