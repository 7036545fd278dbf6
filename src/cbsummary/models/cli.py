# src/cbsummary/models/cli.py
"""
Data models for cbsummary CLI command options using Typer.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.exceptions import ReportModeError
from ..models.report import ReportMode


class ReportModeOptions:
    """Dependency-injectable model for the report shape flags."""

    def __init__(
        self,
        full: Annotated[
            bool,
            typer.Option("--full", help="Produce an extensive report, instead of just core and RAM usage."),
        ] = False,
        csv: Annotated[
            bool,
            typer.Option("--csv", help="Produce a report in tab-separated format. Not compatible with --full."),
        ] = False,
    ):
        self.full = full
        self.csv = csv
        self.mode = self._validate()

    def _validate(self) -> ReportMode:
        """Ensures --full and --csv are not combined."""
        try:
            return ReportMode(full=self.full, tabular=self.csv)
        except ReportModeError as e:
            raise typer.BadParameter(str(e)) from e


class TLSOptions:
    """Dependency-injectable model for certificate verification options."""

    def __init__(
        self,
        no_ssl_verify: Annotated[
            bool,
            typer.Option("--no-ssl-verify", help="Skip verification of the cluster certificates."),
        ] = False,
        cacert: Annotated[
            Optional[Path],
            typer.Option("--cacert", help="CA certificate bundle used to verify the cluster certificates."),
        ] = None,
    ):
        self.no_ssl_verify = no_ssl_verify
        self.cacert = cacert
        self._validate()

    def _validate(self):
        if self.no_ssl_verify and self.cacert:
            raise typer.BadParameter("--cacert cannot be combined with --no-ssl-verify.")
        if self.cacert and not self.cacert.is_file():
            raise typer.BadParameter(f"CA certificate file '{self.cacert}' does not exist.")

    @property
    def verify(self) -> bool:
        return not self.no_ssl_verify
