"""
Workbench configuration.

Holds the seed state the workbench starts from (metadata, endpoint list and
the pending draft) plus the log level. Values can come from defaults, a JSON
state file, or ``ADDONSMITH_*`` environment variables.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from addonsmith.domain.models import AddonMetadata, EndpointDraft, EndpointSpec, default_endpoints
from addonsmith.errors import ConfigError
from addonsmith.orchestrator.reducer import WorkbenchState


# env var -> AddonMetadata field
ENV_METADATA_FIELDS: dict[str, str] = {
    "ADDONSMITH_PLUGIN_NAME": "plugin_name",
    "ADDONSMITH_FRIENDLY_NAME": "friendly_name",
    "ADDONSMITH_LOADING_PHASE": "loading_phase",
    "ADDONSMITH_TARGETS": "supported_targets",
}


class WorkbenchConfig(BaseModel):
    metadata: AddonMetadata = Field(default_factory=AddonMetadata)
    endpoints: list[EndpointSpec] = Field(default_factory=lambda: list(default_endpoints()))
    draft: EndpointDraft = Field(default_factory=EndpointDraft)
    log_level: str = Field(default="WARNING")

    def initial_state(self) -> WorkbenchState:
        return WorkbenchState(
            metadata=self.metadata,
            endpoints=tuple(self.endpoints),
            draft=self.draft,
        )

    @classmethod
    def from_state(cls, state: WorkbenchState, log_level: str = "WARNING") -> "WorkbenchConfig":
        return cls(
            metadata=state.metadata,
            endpoints=list(state.endpoints),
            draft=state.draft,
            log_level=log_level,
        )

    @classmethod
    def from_env(cls) -> "WorkbenchConfig":
        """
        Build a config from environment variables.

        Recognised variables (all optional):
            ADDONSMITH_PLUGIN_NAME, ADDONSMITH_FRIENDLY_NAME,
            ADDONSMITH_LOADING_PHASE, ADDONSMITH_TARGETS, ADDONSMITH_LOG_LEVEL.
        """
        overrides: dict[str, Any] = {}
        for var, name in ENV_METADATA_FIELDS.items():
            if os.environ.get(var):
                overrides[name] = os.environ[var]

        try:
            metadata = AddonMetadata(**overrides)
        except ValidationError as e:
            raise ConfigError(f"Invalid ADDONSMITH_* environment: {e}") from e

        return cls(
            metadata=metadata,
            log_level=os.environ.get("ADDONSMITH_LOG_LEVEL", "WARNING"),
        )

    @classmethod
    def load(cls, path: Path) -> "WorkbenchConfig":
        """Read a JSON state file. Missing sections fall back to defaults."""
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read state file {path}: {e}") from e

        try:
            return cls.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigError(f"Invalid state file {path}: {e}") from e

    def save(self, path: Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target
