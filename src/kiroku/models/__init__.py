"""kiroku ドメインモデルパッケージ。"""

from kiroku.models._base import KirokuBaseModel
from kiroku.models.config import (
    DEFAULT_IGNORE_COMMITTERS,
    DEFAULT_LABELS,
    REPO_PATTERN,
    WILDCARD_LABEL_TITLE,
    Configuration,
    PartialConfiguration,
    WorkspacePackage,
)
from kiroku.models.errors import (
    CommandError,
    ConfigurationError,
    KirokuError,
    WorkspaceDiscoveryError,
)
from kiroku.models.exit_code import ExitCode

__all__ = [
    "CommandError",
    "Configuration",
    "ConfigurationError",
    "DEFAULT_IGNORE_COMMITTERS",
    "DEFAULT_LABELS",
    "ExitCode",
    "KirokuBaseModel",
    "KirokuError",
    "PartialConfiguration",
    "REPO_PATTERN",
    "WILDCARD_LABEL_TITLE",
    "WorkspaceDiscoveryError",
    "WorkspacePackage",
]
