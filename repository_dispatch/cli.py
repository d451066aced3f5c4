"""Click entry point for the repository-dispatch step."""

from __future__ import annotations

import asyncio

import click

from repository_dispatch.actions.commands import configure_logging
from repository_dispatch.config import ActionConfig
from repository_dispatch.dispatch.forwarder import DispatchForwarder


@click.command()
@click.option("--token", default=None, help="GitHub token (overrides INPUT_TOKEN).")
@click.option("--repository", default=None, help="Target repository as owner/repo.")
@click.option("--event-type", default=None, help="repository_dispatch event type.")
@click.option("--client-payload", default=None, help="JSON payload for the event.")
@click.pass_context
def cli(
    ctx: click.Context,
    token: str | None,
    repository: str | None,
    event_type: str | None,
    client_payload: str | None,
) -> None:
    """Create a repository_dispatch event from GitHub Actions step inputs."""
    configure_logging()
    config = ActionConfig.from_env().with_inputs({
        "token": token,
        "repository": repository,
        "event-type": event_type,
        "client-payload": client_payload,
    })
    forwarder = DispatchForwarder(config)
    asyncio.run(forwarder.run())
    ctx.exit(forwarder.status.exit_code)


def main() -> None:
    cli()
