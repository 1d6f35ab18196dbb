"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Sets up logging and telemetry, resolves the input
source, and routes results to stdout/stderr with exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from bitsctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from bitsctl.config.settings import BitsSettings
    from bitsctl.services.packet import PacketService
    from bitsctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BitsSettings) -> None:
        self.settings = settings

        from bitsctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        from bitsctl.services.telemetry import disable_telemetry, enable_telemetry

        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def packets(self) -> PacketService:
        from bitsctl.services.packet import PacketService

        return PacketService(self.settings.decoder)

    def load_input(self, op: str, source: str | None, hex_text: str | None) -> str:
        """Return the transmission text from ``--hex``, *source*, or the default file.

        An unavailable source is reported like any failed operation
        (stderr, exit code 1).
        """
        if hex_text is not None and source is not None:
            raise click.UsageError("Give either SOURCE or --hex, not both.")
        if hex_text is not None:
            return hex_text.strip()

        from bitsctl.infrastructure.source import InputUnavailable, read_source
        from bitsctl.services.result import ServiceResult

        try:
            return read_source(source, default_path=self.settings.default_input)
        except InputUnavailable as exc:
            self.abort(ServiceResult.failure(op, exc))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self._output_settings()
        if not result.ok:
            self.abort(result)
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def abort(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
