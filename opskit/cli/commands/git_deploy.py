"""
Native Click implementation of the git-deploy command.

Usage: opskit git-deploy REPO [--branch BRANCH] [--restart SERVICE]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.interfaces.process import IProcessRunner
from ...core.interfaces.vcs import IVCSClient
from ...services.deploy import DeployService
from ..context import OpsContext
from ..decorators import pass_ops_context


@click.command("git-deploy")
@click.argument("repo", type=click.Path(path_type=Path))
@click.option("--branch", "-b", help="Branch to deploy (default main).")
@click.option("--restart", "-r", "service", metavar="SERVICE", help="Service to restart afterwards.")
@pass_ops_context
def git_deploy(ctx: OpsContext, repo: Path, branch: str | None, service: str | None) -> None:
    """Fast-forward REPO to BRANCH and run its deploy hook.

    Refuses to touch a working tree with uncommitted changes. If REPO
    contains an executable deploy.sh it runs from REPO after the pull.

    \b
    Examples:

        opskit git-deploy /srv/app

        opskit git-deploy /srv/app --branch release --restart app
    """
    defaults = ctx.settings.defaults
    if branch is None:
        branch = defaults.deploy_branch

    deployer = DeployService(
        ctx.resolve(IVCSClient),  # type: ignore[type-abstract]
        ctx.service_managers,
        ctx.resolve(IProcessRunner),  # type: ignore[type-abstract]
        ctx.checker,
        ctx.logger,
        hook_name=defaults.deploy_hook,
    )
    report = deployer.deploy(repo, branch, restart=service)

    if report.hook_output:
        click.echo(report.hook_output.rstrip("\n"))
    for warning in report.warnings:
        click.echo(f"Warning: {warning}", err=True)
    if report.restart_verified:
        click.echo(f"Restarted {report.restarted}")
    click.echo(f"Deployed {report.branch} at {report.short_commit or 'unknown commit'}")
