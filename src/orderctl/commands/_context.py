"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the order service lazily and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderctl.config.logging import configure_logging
from orderctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from orderctl.config.settings import OrderSettings
    from orderctl.services.orders import OrderService
    from orderctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is created on first use so ``--help`` and ``--examples``
    never wire collaborators.
    """

    def __init__(self, settings: OrderSettings) -> None:
        self.settings = settings
        self._service: OrderService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> OrderService:
        """The order service (created lazily on first access)."""
        if self._service is None:
            from orderctl.services.factory import create_processor
            from orderctl.services.orders import OrderService

            self._service = OrderService(create_processor(self.settings))
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr unless the
          output is JSON, where they are part of the payload.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
