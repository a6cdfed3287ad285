"""
Native Click implementation of the calc command.

Usage: opskit calc EXPRESSION | opskit calc OP A B [C]
"""

from __future__ import annotations

import click

from ...core.interfaces.evaluator import IExpressionEvaluator
from ...services.calc import USAGE, CalcService
from ..context import OpsContext
from ..decorators import pass_ops_context


@click.command("calc", context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_ops_context
def calc(ctx: OpsContext, args: tuple[str, ...]) -> None:
    """Integer and floating-point arithmetic.

    \b
    Examples:

        opskit calc add 5 3          # 8

        opskit calc div 6 3          # 2.000000

        opskit calc "2.5 * (3 + 1)"  # 10.0
    """
    service = CalcService(
        ctx.resolve(IExpressionEvaluator),  # type: ignore[type-abstract]
        ctx.checker,
        ctx.logger,
        scale=ctx.settings.defaults.calc_scale,
    )
    result = service.run(list(args))
    if result is None:
        click.echo(USAGE)
        return
    click.echo(result)
