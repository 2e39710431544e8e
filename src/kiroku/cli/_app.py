"""CliApp — Typer アプリケーション定義。

show サブコマンドで解決済みの設定を出力する。
エラーは stderr に出力し、ExitCode で終了する。
"""

from __future__ import annotations

import importlib.metadata
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from kiroku.cli._formatter import OutputFormat, print_config
from kiroku.config import load_config, resolve_config
from kiroku.models.config import Configuration
from kiroku.models.errors import (
    CommandError,
    ConfigurationError,
    WorkspaceDiscoveryError,
)
from kiroku.models.exit_code import ExitCode

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    name="kiroku",
    help="Resolve changelog configuration for a repository checkout.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("kiroku"))
        raise typer.Exit()


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。"""
    app()


@app.callback()
def root_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Resolve changelog configuration for a repository checkout."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=_LOG_FORMAT)


@app.command()
def show(
    repo: Annotated[
        str | None,
        typer.Option(help="Repository identifier (owner/project). Overrides metadata."),
    ] = None,
    next_version_from_metadata: Annotated[
        bool,
        typer.Option(
            "--next-version-from-metadata",
            help="Infer the next version from package.json or lerna.json.",
        ),
    ] = False,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            help="Project root. Defaults to the enclosing git working tree.",
            file_okay=False,
            exists=True,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format: json or table."),
    ] = OutputFormat.JSON,
) -> None:
    """Print the resolved changelog configuration."""
    config = _resolve_or_exit(
        root=root,
        repo=repo,
        next_version_from_metadata=next_version_from_metadata or None,
    )
    print_config(config, output_format)


def _resolve_or_exit(
    *,
    root: Path | None,
    repo: str | None,
    next_version_from_metadata: bool | None,
) -> Configuration:
    """設定を解決し、失敗時はエラーメッセージを出力して終了する。"""
    try:
        if root is None:
            return load_config(
                repo=repo, next_version_from_metadata=next_version_from_metadata
            )
        return resolve_config(
            root, repo=repo, next_version_from_metadata=next_version_from_metadata
        )
    except ConfigurationError as e:
        print(
            f"Error: {e}\n"
            'Set "repository" in package.json or pass --repo owner/project.',
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except ValidationError as e:
        print(
            f"Error: Invalid changelog configuration: {e}\n"
            'Check the "changelog" field of package.json or lerna.json.',
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except ValueError as e:
        # json.JSONDecodeError を含む
        print(
            f"Error: Invalid project metadata: {e}\n"
            "Check package.json and lerna.json for JSON syntax errors.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except PermissionError as e:
        print(
            f"Error: Cannot read project metadata: {e}\n"
            "Check file permissions for package.json and lerna.json.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except (CommandError, WorkspaceDiscoveryError) as e:
        print(
            f"Error: {e}\n"
            "Check that the package manager matching the lockfile is installed "
            "and that the command runs inside a git repository.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.EXECUTION_ERROR) from None
