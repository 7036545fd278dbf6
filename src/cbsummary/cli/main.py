# src/cbsummary/cli/main.py
"""
This module is the main entry point for the cbsummary CLI.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..models.cli import ReportModeOptions, TLSOptions
from ..utils.http_client import build_verify
from .summary import run_summary
from .utils import default_output_path

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

HELP_EPILOG = """
The config file contains JSON specifying an array of information on each cluster,
giving the Couchbase login/password and one or more addresses for cluster nodes.
An example config file giving information about 2 clusters is:

\b
{ "clusters": [
  {"login": "Administrator", "pass": "password1", "nodes": ["http://192.168.1.1:8091"]},
  {"login": "Administrator", "pass": "password2", "nodes": ["http://192.166.1.1:8091", "http://192.16.1.2:8091"]}
]}

The default report lists RAM and core usage of every node of each cluster, since
that information is useful in determining compliance with Couchbase licenses.
With --csv the report is tab-separated instead of JSON. With --full a much more
detailed JSON report is generated.

The report is written to 'cbsummary.out.<timestamp>' unless --output is given.
"""

app = typer.Typer(
    name="cbsummary",
    help="Connect to a set of Couchbase clusters and generate a summary report.",
    epilog=HELP_EPILOG,
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of cbsummary.
    """
    if value:
        from .. import __version__

        typer.echo(f"cbsummary version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of cbsummary.
    """
    from .. import __version__

    typer.echo(f"cbsummary version: {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", help="Config file listing clusters and credentials to summarize."),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            help="Name for output file (default cbsummary.out.<timestamp>).",
            dir_okay=False,
        ),
    ] = None,
    full: Annotated[
        bool,
        typer.Option("--full", help="Produce an extensive report, instead of just core and RAM usage."),
    ] = False,
    csv: Annotated[
        bool,
        typer.Option("--csv", help="Produce a report in tab-separated format. Not compatible with --full."),
    ] = False,
    no_ssl_verify: Annotated[
        bool,
        typer.Option("--no-ssl-verify", help="Skip verification of the cluster certificates."),
    ] = False,
    cacert: Annotated[
        Optional[Path],
        typer.Option("--cacert", help="CA certificate bundle used to verify the cluster certificates."),
    ] = None,
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    Connect to a set of Couchbase clusters and generate a summary report.
    """
    if ctx.invoked_subcommand is not None:
        return

    # Mode and TLS flags are checked before anything is read or contacted.
    report_mode = ReportModeOptions(full=full, csv=csv)
    tls = TLSOptions(no_ssl_verify=no_ssl_verify, cacert=cacert)

    if config_file is None:
        typer.echo(ctx.get_help())
        typer.echo("\nYou must specify a configuration file with --config.", err=True)
        raise typer.Exit(code=2)

    output_path = str(output) if output else default_output_path()
    try:
        config.validate_instance()
        verify = build_verify(tls.verify, str(tls.cacert) if tls.cacert else (config.CA_CERT or None))
    except (ValueError, OSError) as e:
        # ssl.SSLError is an OSError: raised for a CA bundle holding no certificate.
        logger.error("Invalid configuration: %s", e)
        raise typer.Exit(code=2)
    if not tls.verify:
        logger.warning("Certificate verification is disabled; connections are open to man-in-the-middle attacks.")

    logger.info("Generating %s report into %s", "full" if report_mode.full else "brief", output_path)
    run_summary(str(config_file), report_mode.mode, output_path, verify)


if __name__ == "__main__":
    app()
