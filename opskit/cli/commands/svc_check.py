"""
Native Click implementation of the svc-check command.

Usage: opskit svc-check SERVICE
"""

from __future__ import annotations

import click

from ...core.exceptions import ServiceInactiveError
from ...core.models.process import ServiceState
from ...services.service_check import ServiceCheckService
from ..context import OpsContext
from ..decorators import pass_ops_context


@click.command("svc-check")
@click.argument("service")
@pass_ops_context
def svc_check(ctx: OpsContext, service: str) -> None:
    """Report whether SERVICE is active.

    Exits 0 when active, 1 when inactive, 4 when the service is unknown
    and 3 when no service manager is available.
    """
    checker = ServiceCheckService(ctx.service_managers, ctx.logger)
    state = checker.check(service)
    click.echo(f"{service}: {state.value}")
    if state is not ServiceState.ACTIVE:
        raise ServiceInactiveError(service, state.value)
