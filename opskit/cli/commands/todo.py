"""
Native Click implementation of the todo command group.

Usage: opskit todo [add TEXT... | list | done INDEX | clear]
"""

from __future__ import annotations

import click

from ...core.exceptions import UnknownCommandError
from ...core.interfaces.confirmer import IConfirmer
from ...core.models.command import TodoAction
from ...presenters.formatting import format_todo_list
from ...services.todo import TodoService, TodoStore
from ..context import OpsContext
from ..decorators import pass_ops_context
from ..group import OpsGroup


def _service(ctx: OpsContext) -> TodoService:
    return TodoService(
        TodoStore(ctx.settings.todo_file),
        ctx.resolve(IConfirmer),  # type: ignore[type-abstract]
        ctx.logger,
    )


class TodoGroup(OpsGroup):
    """Todo sub-commands. An unknown action shows the list, then fails."""

    def reject_command(self, ctx: click.Context, name: str) -> None:
        click.echo(format_todo_list(_service(ctx.obj).list()))
        raise UnknownCommandError(name, group=self.name)


@click.group("todo", cls=TodoGroup, invoke_without_command=True)
@click.pass_context
def todo(ctx: click.Context) -> None:
    """Personal todo list.

    With no action, lists the todos.

    \b
    Examples:

        opskit todo add renew the TLS certificate

        opskit todo done 2

        opskit todo clear
    """
    if ctx.invoked_subcommand is None:
        click.echo(format_todo_list(_service(ctx.obj).list()))


@todo.command(TodoAction.ADD.value, context_settings={"ignore_unknown_options": True})
@click.argument("text", nargs=-1, type=click.UNPROCESSED)
@pass_ops_context
def add(ctx: OpsContext, text: tuple[str, ...]) -> None:
    """Append TEXT as a new todo."""
    index, entry = _service(ctx).add(" ".join(text))
    click.echo(f"Added #{index}: {entry}")


@todo.command(TodoAction.LIST.value)
@pass_ops_context
def list_todos(ctx: OpsContext) -> None:
    """List todos, numbered from 1."""
    click.echo(format_todo_list(_service(ctx).list()))


@todo.command(TodoAction.DONE.value, context_settings={"ignore_unknown_options": True})
@click.argument("index", type=click.UNPROCESSED)
@pass_ops_context
def done(ctx: OpsContext, index: str) -> None:
    """Remove todo number INDEX."""
    removed = _service(ctx).done(index)
    click.echo(f"Done: {removed}")


@todo.command(TodoAction.CLEAR.value)
@pass_ops_context
def clear(ctx: OpsContext) -> None:
    """Remove every todo (asks first)."""
    if _service(ctx).clear():
        click.echo("Cleared all todos.")
    else:
        click.echo("Cancelled.")
