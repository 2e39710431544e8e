"""ホスティング先 git URL パーサーのテスト。"""

from __future__ import annotations

import pytest

from kiroku.tools._hosted import HostingProvider, parse_hosted_url


class TestParseGitHubUrls:
    """GitHub の各種 URL 形式。"""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/acme/widget",
            "https://github.com/acme/widget.git",
            "git+https://github.com/acme/widget.git",
            "http://www.github.com/acme/widget",
            "git://github.com/acme/widget.git",
            "ssh://git@github.com/acme/widget.git",
            "git+ssh://git@github.com/acme/widget.git",
            "git@github.com:acme/widget.git",
            "git@github.com:acme/widget",
            "git+ssh://git@github.com:acme/widget.git",
            "ssh://git@github.com:acme/widget.git",
            "git+ssh://git@github.com:acme/widget",
            "ssh://git@github.com:22/acme/widget.git",
            "github:acme/widget",
            "acme/widget",
            "https://github.com/acme/widget#main",
            "  https://github.com/acme/widget  ",
        ],
    )
    def test_parses_owner_and_project(self, url: str) -> None:
        info = parse_hosted_url(url)
        assert info is not None
        assert info.type is HostingProvider.GITHUB
        assert info.user == "acme"
        assert info.project == "widget"

    def test_extra_path_segments_ignored(self) -> None:
        info = parse_hosted_url("https://github.com/acme/widget/tree/main")
        assert info is not None
        assert (info.user, info.project) == ("acme", "widget")


class TestParseOtherProviders:
    """GitHub 以外のホスティングサービス。"""

    @pytest.mark.parametrize(
        ("url", "provider"),
        [
            ("https://gitlab.com/acme/widget.git", HostingProvider.GITLAB),
            ("gitlab:acme/widget", HostingProvider.GITLAB),
            ("git@bitbucket.org:acme/widget.git", HostingProvider.BITBUCKET),
            ("git+ssh://git@gitlab.com:acme/widget.git", HostingProvider.GITLAB),
            ("bitbucket:acme/widget", HostingProvider.BITBUCKET),
        ],
    )
    def test_provider_detected(self, url: str, provider: HostingProvider) -> None:
        info = parse_hosted_url(url)
        assert info is not None
        assert info.type is provider


class TestParseUnrecognized:
    """解釈できない入力 → None。"""

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "   ",
            "https://example.com/acme/widget.git",
            "git@example.com:acme/widget.git",
            "git+ssh://git@example.com:acme/widget.git",
            "ftp://git@github.com:acme/widget.git",
            "https://github.com/acme",
            "ftp://github.com/acme/widget",
            "./packages/widget",
            "not a url",
            "https://github.com/acme/.git",
        ],
    )
    def test_returns_none(self, url: str) -> None:
        assert parse_hosted_url(url) is None
