"""Action configuration via environment variables.

The runner exports each ``with:`` input as ``INPUT_<NAME>`` and leaves unset
inputs as empty strings, which are treated as missing.
"""

from enum import StrEnum

from pydantic_settings import BaseSettings

from openai_costs.models import FilterMode


class LogFormat(StrEnum):
    ACTIONS = "actions"  # workflow commands (::warning:: etc.)
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Action inputs loaded from ``INPUT_*`` environment variables."""

    # Credentials
    openai_admin_key: str = ""

    # Date range
    date_from: str = ""
    date_to: str = ""
    date: str = ""
    filter_mode: FilterMode = FilterMode.BUCKETED

    # Output
    output_name: str = "costs"

    # API
    api_base_url: str = "https://api.openai.com/v1"
    api_timeout: float = 30.0

    # Logging
    log_level: str = "info"
    log_format: LogFormat | None = None  # default: actions on a runner, console elsewhere

    model_config = {
        "env_prefix": "INPUT_",
        "env_file": ".env",
        "env_ignore_empty": True,
        "extra": "ignore",
    }


class RunnerSettings(BaseSettings):
    """Runner-provided ``GITHUB_*`` environment."""

    output: str = ""  # path of the $GITHUB_OUTPUT file
    actions: bool = False

    model_config = {
        "env_prefix": "GITHUB_",
        "extra": "ignore",
    }
