"""設定リゾルバー。

1. changelog セクションの読み込み（package.json > lerna.json）
2. 呼び出し側オーバーライドの適用
3. ワークスペースパッケージの探索
4. repo / nextVersion の推論
5. labels / wildcardLabel / ignoreCommitters のデフォルト適用
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from kiroku.config._inference import find_next_version, find_repo
from kiroku.config._loader import load_partial_config
from kiroku.models.config import (
    DEFAULT_IGNORE_COMMITTERS,
    DEFAULT_LABELS,
    REPO_PATTERN,
    WILDCARD_LABEL_TITLE,
    Configuration,
    PartialConfiguration,
)
from kiroku.models.errors import ConfigurationError
from kiroku.tools._git import get_root_path
from kiroku.tools._process import CommandRunner, run_command
from kiroku.workspace import discover_packages

logger = logging.getLogger(__name__)


def filter_overrides(overrides: dict[str, object]) -> dict[str, object]:
    """オーバーライド辞書から未指定（None または空文字列）の値を除外する。

    Args:
        overrides: 呼び出し側から渡された辞書。

    Returns:
        指定された値のみを含む辞書。
    """
    return {k: v for k, v in overrides.items() if v is not None and v != ""}


def apply_defaults(
    partial: PartialConfiguration,
) -> tuple[dict[str, str], tuple[str, ...]]:
    """labels と ignore_committers にデフォルト値を適用する。

    labels は設定ソースの値をそのまま使うか、デフォルト一式を使うかのどちらかで、
    個別キー単位のマージは行わない。例外は wildcard_label のエントリのみで、
    labels に無ければ WILDCARD_LABEL_TITLE で補う。

    Args:
        partial: 推論まで適用済みの部分設定。

    Returns:
        (labels, ignore_committers) の組。
    """
    labels = (
        dict(partial.labels) if partial.labels is not None else dict(DEFAULT_LABELS)
    )
    if partial.wildcard_label and not labels.get(partial.wildcard_label):
        labels[partial.wildcard_label] = WILDCARD_LABEL_TITLE

    ignore_committers = (
        partial.ignore_committers
        if partial.ignore_committers is not None
        else DEFAULT_IGNORE_COMMITTERS
    )
    return labels, ignore_committers


def resolve_config(
    root_path: Path,
    *,
    repo: str | None = None,
    next_version_from_metadata: bool | None = None,
    runner: CommandRunner = run_command,
) -> Configuration:
    """root_path のメタデータから Configuration を解決する。

    呼び出し側の repo はソースの値より常に優先される。
    next_version_from_metadata は引数と changelog セクションのどちらかが
    真であれば有効になり、その場合 nextVersion の推論失敗はエラーとなる。

    Args:
        root_path: プロジェクトルート。
        repo: リポジトリ識別子のオーバーライド。
        next_version_from_metadata: メタデータから nextVersion を推論するか。
        runner: パッケージマネージャー実行に使うコマンド実行関数。

    Returns:
        解決済みの Configuration インスタンス。

    Raises:
        ConfigurationError: repo を決定できない場合、repo が owner/project
            形式でない場合、または推論を要求された nextVersion がメタデータに
            無い場合。
        pydantic.ValidationError: changelog セクションの値が不正な場合。
        json.JSONDecodeError: メタデータの JSON 構文が不正な場合。
        PermissionError: メタデータの読み取り権限がない場合。
        CommandError: パッケージマネージャーの実行に失敗した場合。
        WorkspaceDiscoveryError: パッケージマネージャーの出力を解釈できない場合。
    """
    root = Path(os.path.abspath(root_path))

    partial = load_partial_config(root)
    overrides = filter_overrides({"repo": repo})
    if overrides:
        partial = partial.model_copy(update=overrides)

    packages = discover_packages(root, runner)

    resolved_repo = partial.repo or find_repo(root)
    if not resolved_repo:
        raise ConfigurationError(
            'Could not infer "repo" from the "package.json" file.'
        )
    if re.fullmatch(REPO_PATTERN, resolved_repo) is None:
        raise ConfigurationError(
            f'Invalid "repo" value {resolved_repo!r}: expected "owner/project".'
        )

    infer_version = bool(
        next_version_from_metadata or partial.next_version_from_metadata
    )
    next_version = partial.next_version
    if infer_version:
        next_version = find_next_version(root)
        if not next_version:
            raise ConfigurationError(
                'Could not infer "nextVersion" from the "package.json" file.'
            )
        logger.debug("Inferred next version %s from metadata", next_version)

    labels, ignore_committers = apply_defaults(partial)

    return Configuration(
        repo=resolved_repo,
        root_path=root,
        labels=labels,
        ignore_committers=ignore_committers,
        cache_dir=partial.cache_dir,
        next_version=next_version,
        next_version_from_metadata=infer_version,
        wildcard_label=partial.wildcard_label,
        packages=packages,
    )


def load_config(
    *,
    cwd: Path | None = None,
    repo: str | None = None,
    next_version_from_metadata: bool | None = None,
    runner: CommandRunner = run_command,
) -> Configuration:
    """cwd を含む git 作業ツリーのルートを基点に resolve_config() を実行する。

    Raises:
        CommandError: git リポジトリ外の場合。
        その他 resolve_config() と同じ。
    """
    root = get_root_path(cwd, runner)
    return resolve_config(
        root,
        repo=repo,
        next_version_from_metadata=next_version_from_metadata,
        runner=runner,
    )
