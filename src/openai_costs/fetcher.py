"""End-to-end cost fetch: resolve inputs, request, normalize, publish."""

from __future__ import annotations

import structlog
from pydantic import BaseModel

from openai_costs import actions
from openai_costs.client import CostsClient
from openai_costs.config import RunnerSettings, Settings
from openai_costs.dates import resolve_date_range
from openai_costs.exceptions import ConfigurationError
from openai_costs.models import CostOutput, DateRange, FilterMode
from openai_costs.query import build_query_params

logger = structlog.get_logger()

CREDENTIAL_INPUT = "openai_admin_key"


class ActionInputs(BaseModel):
    api_key: str
    date_range: DateRange
    filter_mode: FilterMode = FilterMode.BUCKETED

    model_config = {"frozen": True}


class CostFetcher:
    """Runs one fetch from inputs to the published output.

    Date problems degrade the filter with a warning. A missing credential and
    any HTTP or payload failure raise and end the run.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        runner: RunnerSettings | None = None,
        client: CostsClient | None = None,
    ) -> None:
        self.settings = settings
        self.runner = runner
        self._client = client

    def resolve_inputs(self) -> ActionInputs:
        api_key = self.settings.openai_admin_key.strip()
        if not api_key:
            raise ConfigurationError(f"Input required and not supplied: {CREDENTIAL_INPUT}")
        # Mask before anything else can log.
        actions.add_mask(api_key)

        date_range = resolve_date_range(
            self.settings.date_from,
            self.settings.date_to,
            self.settings.date,
        )
        logger.debug(
            "inputs_resolved",
            date_from=date_range.date_from,
            date_to=date_range.date_to,
            filter_mode=str(self.settings.filter_mode),
        )
        return ActionInputs(
            api_key=api_key,
            date_range=date_range,
            filter_mode=self.settings.filter_mode,
        )

    def fetch(self, inputs: ActionInputs) -> CostOutput:
        params = build_query_params(inputs.date_range, inputs.filter_mode)
        if self._client is not None:
            response = self._client.get_costs(params)
        else:
            with CostsClient(
                api_key=inputs.api_key,
                base_url=self.settings.api_base_url,
                timeout=self.settings.api_timeout,
            ) as client:
                response = client.get_costs(params)
        return CostOutput.from_response(response)

    def run(self) -> CostOutput:
        inputs = self.resolve_inputs()
        output = self.fetch(inputs)
        actions.set_output(self.settings.output_name, output.to_json(), runner=self.runner)
        logger.info("Successfully retrieved OpenAI organization costs", project_id=output.project_id)
        return output
