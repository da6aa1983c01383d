"""Command-line interface for the proportional autoscaler."""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..options import (
    AutoScalerConfig,
    TYPE_NAME,
    ConfigMapData,
    ParseError,
    ValidationError,
    load_config,
)
from ..utils import configure_logging


PROGRAM_NAME = "cluster-proportional-autoscaler"

app = typer.Typer(name=PROGRAM_NAME, help="Scale a workload in proportion to the cluster size", add_completion=False)
console = Console()


class LogLevel(str, Enum):
    """Loguru level names accepted by --log-level."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def parse_default_params_option(value: str) -> ConfigMapData:
    """Parse --default-params, reporting bad JSON as a usage error."""
    try:
        return ConfigMapData.from_raw(value)
    except ParseError as e:
        raise typer.BadParameter(str(e))


@app.command()
def run(
    target: Optional[str] = typer.Option(
        None, "--target",
        help="Target to scale. In format: deployment/*, replicaset/*, statefulset/* "
             "or resource.group (not case sensitive).",
    ),
    configmap: Optional[str] = typer.Option(
        None, "--configmap", help="ConfigMap containing our scaling parameters."
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace",
        help="Namespace for all operations, fallback to the namespace of this autoscaler "
             "(through MY_POD_NAMESPACE env) if not specified.",
    ),
    poll_period_seconds: Optional[int] = typer.Option(
        None, "--poll-period-seconds",
        help="The time, in seconds, to check cluster status and perform autoscale. Defaults to 10.",
    ),
    print_ver: bool = typer.Option(False, "--version", help="Print the version and exit."),
    default_params: Optional[ConfigMapData] = typer.Option(
        None, "--default-params", parser=parse_default_params_option, metavar=TYPE_NAME,
        help="Default parameters (JSON format) for auto-scaling. Will create/re-create a "
             "ConfigMap with these default params if the ConfigMap is not present.",
    ),
    node_labels: Optional[str] = typer.Option(
        None, "--nodelabels",
        help="NodeLabels for filtering search of nodes and their cpus by LabelSelectors. "
             "Comma separated list of keyN=valueN, e.g. --nodelabels=label1=value1,label2=value2.",
    ),
    max_sync_failures: Optional[int] = typer.Option(
        None, "--max-sync-failures",
        help="Number of consecutive polling failures before exiting. "
             "Default value of 0 will allow for unlimited retries.",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file with flag values. Command-line flags take precedence."
    ),
    log_level: LogLevel = typer.Option(LogLevel.INFO, "--log-level", case_sensitive=False, help="Log level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Validate startup parameters and hand them to the control loop."""
    configure_logging(log_level.value, log_file)

    if print_ver:
        console.print(f"{PROGRAM_NAME} version {__version__}")
        raise typer.Exit()

    flags = {
        "target": target,
        "configmap": configmap,
        "namespace": namespace,
        "poll_period_seconds": poll_period_seconds,
        "default_params": default_params,
        "node_labels": node_labels,
        "max_sync_failures": max_sync_failures,
    }
    try:
        autoscaler_config = build_config(config, flags)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load configuration: {e}")
        raise typer.Exit(code=1)

    try:
        autoscaler_config.validate_flags()
    except ValidationError as e:
        logger.error(f"{e}")
        raise typer.Exit(code=1)

    display_config_summary(autoscaler_config)
    logger.info(
        f"Configuration valid, polling {autoscaler_config.target} "
        f"every {autoscaler_config.poll_period_seconds}s"
    )


def build_config(
    config_path: Optional[Path],
    flags: Dict[str, Any],
    environ: Optional[Mapping[str, str]] = None,
) -> AutoScalerConfig:
    """Resolve defaults, then the config file, then command-line flags."""
    autoscaler_config = AutoScalerConfig.from_environ(environ)
    if config_path is not None:
        autoscaler_config.apply_overrides(load_config(config_path))
    autoscaler_config.apply_overrides(flags)
    return autoscaler_config


def display_config_summary(autoscaler_config: AutoScalerConfig) -> None:
    """Display the resolved configuration."""

    table = Table(title="Autoscaler Configuration")
    table.add_column("Flag", style="cyan")
    table.add_column("Value", style="green")

    for flag, value in autoscaler_config.to_flags().items():
        if flag == "version":
            continue
        table.add_row(f"--{flag}", escape(str(value)))

    console.print(table)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
