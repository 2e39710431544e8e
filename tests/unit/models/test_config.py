"""設定モデルのテスト。"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from kiroku.models.config import (
    DEFAULT_IGNORE_COMMITTERS,
    DEFAULT_LABELS,
    Configuration,
    PartialConfiguration,
    WorkspacePackage,
)


def _make_config(**overrides: object) -> Configuration:
    values: dict[str, object] = {
        "repo": "acme/widget",
        "root_path": Path("/repo"),
        "labels": dict(DEFAULT_LABELS),
        "ignore_committers": DEFAULT_IGNORE_COMMITTERS,
    }
    values.update(overrides)
    return Configuration(**values)  # type: ignore[arg-type]


class TestDefaults:
    """デフォルト値の内容。"""

    def test_default_labels(self) -> None:
        assert dict(DEFAULT_LABELS) == {
            "breaking": ":boom: Breaking Change",
            "enhancement": ":rocket: Enhancement",
            "bug": ":bug: Bug Fix",
            "documentation": ":memo: Documentation",
            "internal": ":house: Internal",
        }

    def test_default_ignore_committers_order(self) -> None:
        assert DEFAULT_IGNORE_COMMITTERS == (
            "dependabot-bot",
            "dependabot[bot]",
            "dependabot-preview[bot]",
            "greenkeeperio-bot",
            "greenkeeper[bot]",
            "renovate-bot",
            "renovate[bot]",
        )

    def test_default_labels_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_LABELS["misc"] = "Other"  # type: ignore[index]


class TestConfigurationRepo:
    """repo の形式検証。"""

    def test_owner_project_accepted(self) -> None:
        assert _make_config().repo == "acme/widget"

    @pytest.mark.parametrize("repo", ["", "acme", "acme/widget/extra", "/widget"])
    def test_invalid_repo_rejected(self, repo: str) -> None:
        with pytest.raises(ValidationError):
            _make_config(repo=repo)


class TestConfigurationWildcardLabel:
    """wildcard_label のエントリ保証。"""

    def test_wildcard_present_in_labels(self) -> None:
        config = _make_config(wildcard_label="misc", labels={"misc": "Other"})
        assert config.labels["misc"] == "Other"

    def test_empty_wildcard_not_required_in_labels(self) -> None:
        config = _make_config(wildcard_label="")
        assert "" not in config.labels

    def test_wildcard_missing_from_labels_rejected(self) -> None:
        with pytest.raises(ValidationError, match="wildcard label 'misc'"):
            _make_config(wildcard_label="misc")


class TestConfigurationImmutability:
    """frozen モデル。"""

    def test_assignment_rejected(self) -> None:
        config = _make_config()
        with pytest.raises(ValidationError):
            config.repo = "other/repo"  # type: ignore[misc]

    def test_extra_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_config(unknown="x")

    def test_packages_default_empty(self) -> None:
        assert _make_config().packages == ()


class TestConfigurationSerialization:
    """camelCase での JSON 出力。"""

    def test_dump_by_alias(self) -> None:
        config = _make_config(
            packages=(WorkspacePackage(name="pkg-a", path="/repo/packages/pkg-a"),),
        )
        data = config.model_dump(by_alias=True, mode="json")
        assert data["rootPath"] == "/repo"
        assert data["ignoreCommitters"] == list(DEFAULT_IGNORE_COMMITTERS)
        assert data["nextVersionFromMetadata"] is False
        assert data["packages"] == [{"name": "pkg-a", "path": "/repo/packages/pkg-a"}]


class TestPartialConfiguration:
    """changelog セクションのパース。"""

    def test_empty(self) -> None:
        partial = PartialConfiguration()
        assert partial.repo is None
        assert partial.labels is None

    def test_camel_case_keys(self) -> None:
        partial = PartialConfiguration.model_validate(
            {
                "repo": "acme/widget",
                "nextVersion": "v1.0.0",
                "nextVersionFromMetadata": True,
                "ignoreCommitters": ["bot"],
                "cacheDir": ".changelog",
                "wildcardLabel": "misc",
            }
        )
        assert partial.repo == "acme/widget"
        assert partial.next_version == "v1.0.0"
        assert partial.next_version_from_metadata is True
        assert partial.ignore_committers == ("bot",)
        assert partial.cache_dir == ".changelog"
        assert partial.wildcard_label == "misc"

    def test_snake_case_keys(self) -> None:
        partial = PartialConfiguration.model_validate({"cache_dir": ".cache"})
        assert partial.cache_dir == ".cache"

    def test_unknown_keys_ignored(self) -> None:
        partial = PartialConfiguration.model_validate({"repo": "a/b", "rootPath": "/x"})
        assert partial.repo == "a/b"

    def test_labels_must_be_mapping(self) -> None:
        with pytest.raises(ValidationError):
            PartialConfiguration.model_validate({"labels": ["bug"]})

    def test_non_object_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PartialConfiguration.model_validate("acme/widget")

    def test_next_version_from_metadata_is_strict(self) -> None:
        with pytest.raises(ValidationError):
            PartialConfiguration.model_validate({"nextVersionFromMetadata": "yes"})


class TestWorkspacePackage:
    """WorkspacePackage の検証。"""

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkspacePackage(name="", path="/x")
