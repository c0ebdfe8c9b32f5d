"""Command line entry point: ``etcd-pod-viewer NAMESPACE RESOURCE_NAME``."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from etcdview.app import EtcdViewerApp
from etcdview.errors import UsageError
from etcdview.models.state.app_settings import AppSettings, ConfigLoadError
from etcdview.models.state.config_manager import ConfigManager
from etcdview.utils.logging import configure_logging

logger = logging.getLogger(__name__)

USAGE_EXIT_CODE = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

app = typer.Typer(add_completion=False)


def validate_arguments(namespace: str, resource_name: str) -> tuple[str, str]:
    """Reject blank positional arguments."""
    namespace = namespace.strip()
    resource_name = resource_name.strip()
    if not namespace or not resource_name:
        raise UsageError("Usage: etcd-pod-viewer <namespace> <etcd-name>")
    return namespace, resource_name


def build_settings(
    settings: AppSettings,
    *,
    context: str | None = None,
    verify_owner: bool | None = None,
    tail: int | None = None,
) -> AppSettings:
    """Apply command line overrides on top of loaded settings."""
    overrides: dict[str, object] = {}
    if context is not None:
        overrides["context"] = context
    if verify_owner is not None:
        overrides["verify_owner"] = verify_owner
    if tail is not None:
        overrides["log_tail_lines"] = tail
    if not overrides:
        return settings
    return AppSettings.model_validate({**settings.model_dump(), **overrides})


@app.command(help="Inspect the pods backing an etcd resource.")
def inspect(
    namespace: str = typer.Argument(..., help="Namespace of the etcd resource."),
    resource_name: str = typer.Argument(..., help="Name of the etcd resource."),
    context: Optional[str] = typer.Option(
        None, "--context", help="kubectl context to use."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to a JSON settings file."
    ),
    verify_owner: Optional[bool] = typer.Option(
        None,
        "--verify-owner/--no-verify-owner",
        help="Check that the etcd resource exists before listing its pods.",
    ),
    tail: Optional[int] = typer.Option(
        None, "--tail", min=1, help="Number of log lines to fetch."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write debug logs to this file."
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Log level: DEBUG, INFO, WARNING or ERROR."
    ),
):
    try:
        namespace, resource_name = validate_arguments(namespace, resource_name)
    except UsageError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=USAGE_EXIT_CODE) from exc

    if log_level.upper() not in LOG_LEVELS:
        typer.echo(f"Invalid log level: {log_level}", err=True)
        raise typer.Exit(code=USAGE_EXIT_CODE)
    configure_logging(log_level, log_file)

    try:
        settings = build_settings(
            ConfigManager.load(config),
            context=context,
            verify_owner=verify_owner,
            tail=tail,
        )
    except (ConfigLoadError, ValidationError) as exc:
        typer.echo(f"Failed to load settings: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    logger.info("Starting viewer for %s/%s", namespace, resource_name)
    EtcdViewerApp(namespace, resource_name, settings=settings).run()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
