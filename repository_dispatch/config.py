"""Runtime configuration read from the GitHub Actions environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_API_URL = "https://api.github.com"
SUBSCRIPTION_URL_TEMPLATE = (
    "https://agent.api.stepsecurity.io/v1/github/{repository}/actions/subscription"
)
SUBSCRIPTION_TIMEOUT_S = 3.0


def input_env_name(name: str) -> str:
    """Map an input name to the variable the runner exports it under.

    The runner upper-cases the name and replaces spaces with underscores;
    hyphens are kept, so ``event-type`` becomes ``INPUT_EVENT-TYPE``.
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


@dataclass(frozen=True)
class ActionConfig:
    """Ambient execution context for a single invocation."""

    current_repository: str = ""
    api_url: str = DEFAULT_API_URL
    subscription_url_template: str = SUBSCRIPTION_URL_TEMPLATE
    subscription_timeout_s: float = SUBSCRIPTION_TIMEOUT_S
    inputs: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ActionConfig:
        """Create ActionConfig from runner environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            current_repository=env.get("GITHUB_REPOSITORY", ""),
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            inputs={k: v for k, v in env.items() if k.startswith("INPUT_")},
        )

    @property
    def subscription_url(self) -> str:
        return self.subscription_url_template.format(repository=self.current_repository)

    def get_input(self, name: str) -> str:
        """Return the named input stripped of whitespace, or "" when unset."""
        return self.inputs.get(input_env_name(name), "").strip()

    def with_inputs(self, overrides: Mapping[str, str | None]) -> ActionConfig:
        """Return a copy with the given inputs replaced; None values are ignored."""
        merged = dict(self.inputs)
        for name, value in overrides.items():
            if value is not None:
                merged[input_env_name(name)] = value
        return ActionConfig(
            current_repository=self.current_repository,
            api_url=self.api_url,
            subscription_url_template=self.subscription_url_template,
            subscription_timeout_s=self.subscription_timeout_s,
            inputs=merged,
        )
