"""Command-line entry point invoked by the action."""

from __future__ import annotations

import sys

import click

from openai_costs import actions
from openai_costs.config import LogFormat, RunnerSettings, Settings
from openai_costs.fetcher import CostFetcher
from openai_costs.log import configure_logging
from openai_costs.models import FilterMode


@click.command()
@click.option("--api-key", default=None, help="OpenAI admin key (default: $INPUT_OPENAI_ADMIN_KEY).")
@click.option("--date-from", default=None, help="First day, YYYY-MM-DD.")
@click.option("--date-to", default=None, help="Last day, YYYY-MM-DD.")
@click.option("--date", "single_date", default=None, help="Single day, YYYY-MM-DD.")
@click.option(
    "--filter-mode",
    type=click.Choice([m.value for m in FilterMode]),
    default=None,
    help="Send Unix-time buckets or plain calendar dates.",
)
@click.option("--output-name", default=None, help="Name of the step output.")
@click.option("--base-url", default=None, help="Base URL of the OpenAI API.")
@click.option(
    "--log-format",
    type=click.Choice([f.value for f in LogFormat]),
    default=None,
    help="Log renderer.",
)
@click.option("--log-level", default=None, help="Minimum log level.")
@click.version_option(package_name="openai-costs-action")
def main(
    api_key: str | None,
    date_from: str | None,
    date_to: str | None,
    single_date: str | None,
    filter_mode: str | None,
    output_name: str | None,
    base_url: str | None,
    log_format: str | None,
    log_level: str | None,
) -> None:
    """Fetch OpenAI organization costs and publish them as a step output.

    Every option falls back to the matching INPUT_* environment variable.
    """
    overrides = {
        "openai_admin_key": api_key,
        "date_from": date_from,
        "date_to": date_to,
        "date": single_date,
        "filter_mode": filter_mode,
        "output_name": output_name,
        "api_base_url": base_url,
        "log_format": log_format,
        "log_level": log_level,
    }
    try:
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
        runner = RunnerSettings()
        log_format = settings.log_format or (LogFormat.ACTIONS if runner.actions else LogFormat.CONSOLE)
        configure_logging(settings.log_level, log_format)
        CostFetcher(settings, runner=runner).run()
    except Exception as exc:  # noqa: BLE001
        actions.set_failed(f"Action failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
