"""GitHub Actions workflow commands used by the action."""

from __future__ import annotations

import uuid
from pathlib import Path

import click

from openai_costs.config import RunnerSettings
from openai_costs.log import escape_data, register_secret


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def issue_command(command: str, message: str = "", **properties: str) -> None:
    """Print ``::command prop=value::message`` to stdout."""
    props = ",".join(f"{key}={escape_property(value)}" for key, value in properties.items())
    head = f"{command} {props}" if props else command
    click.echo(f"::{head}::{escape_data(message)}")


def add_mask(value: str) -> None:
    """Hide ``value`` from the runner log and from our own log events."""
    if not value:
        return
    register_secret(value)
    issue_command("add-mask", value)


def set_output(name: str, value: str, *, runner: RunnerSettings | None = None) -> None:
    """Publish a step output.

    Appends a heredoc block to ``$GITHUB_OUTPUT`` when the runner provides
    one, otherwise falls back to the legacy ``set-output`` command.
    """
    runner = runner or RunnerSettings()
    if not runner.output:
        issue_command("set-output", value, name=name)
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError("Unexpected input: output contains the heredoc delimiter")
    with Path(runner.output).open("a", encoding="utf-8") as fh:
        fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str) -> None:
    """Report a failure annotation; the caller owns the exit status."""
    issue_command("error", message)
