from openai_costs.config.settings import LogFormat, RunnerSettings, Settings

__all__ = ["LogFormat", "RunnerSettings", "Settings"]
