"""Command line entry point for kubeversions."""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from kubeversions import __build_date__, __commit__, __version__
from kubeversions.constants.defaults import (
    NAMESPACE_DEFAULT,
    PROM_API_DEFAULT,
    TIMEOUT_SECONDS_DEFAULT,
)
from kubeversions.constants.values import APP_NAME
from kubeversions.controllers import InventoryController, InventoryError
from kubeversions.models.state.app_settings import ConfigError, InventorySettings
from kubeversions.utils import InventoryReport, configure_logging

logger = logging.getLogger(__name__)

HELP_TEXT = """
Shows a table of pods with their image versions and a table of deployment-like
objects with chart versions.

NOTE: By default, both "--pods" and "--deploys" are implied. But if any one of
them is specified, the other is not shown unless specifically specified.
"""

EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name=APP_NAME,
    help=HELP_TEXT,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_string() -> str:
    return f"{APP_NAME} {__version__}, commit {__commit__}, built {__build_date__}"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(version_string())
        raise typer.Exit()


@app.command()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version",
        callback=_version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug level logging"),
    prom_api: str = typer.Option(
        PROM_API_DEFAULT, "--prom-api", "-p", help="URL to API server"
    ),
    namespace: str = typer.Option(
        NAMESPACE_DEFAULT, "--namespace", "-n", help="Namespace for the app"
    ),
    clusters: list[str] | None = typer.Option(
        None,
        "--clusters",
        "-c",
        help="(Optional) Regex of clusters to select. Can be repeated.",
    ),
    timeout: int = typer.Option(
        TIMEOUT_SECONDS_DEFAULT, "--timeout", "-t", help="Timeout in seconds for the query"
    ),
    pods: bool = typer.Option(False, "--pods", help="Show pods"),
    deploys: bool = typer.Option(
        False, "--deploys", help="Show deployments,daemonsets and statefulsets"
    ),
    config_maps: bool = typer.Option(
        False, "--config-maps", help="Show chart versions for configmaps as well"
    ),
) -> None:
    """Show pod image versions and workload chart versions per cluster."""
    configure_logging(debug)

    try:
        settings = InventorySettings.from_options(
            prom_api=prom_api,
            namespace=namespace,
            clusters=clusters or (),
            timeout_seconds=timeout,
            show_pods=pods,
            show_deploys=deploys,
            include_config_maps=config_maps,
            debug=debug,
        )
        controller = InventoryController(settings)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc
    except InventoryError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    try:
        with controller:
            if settings.debug and not controller.check_connection():
                logger.debug("Prometheus readiness probe did not succeed")
            data = controller.fetch_all()
    except InventoryError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    InventoryReport(data, console=Console()).render(
        show_pods=settings.wants_pods,
        show_deploys=settings.wants_deploys,
    )
