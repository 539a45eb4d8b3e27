from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from addonsmith.codegen.artifacts import GeneratedArtifact, render_artifacts, render_instructions
from addonsmith.codegen.derived import DerivedIdentifiers, derive_identifiers
from addonsmith.domain.models import EndpointDraft
from addonsmith.endpoints.normalize import normalize_endpoints
from addonsmith.endpoints.specs import NormalizedEndpoint
from addonsmith.logging import get_logger
from addonsmith.orchestrator.reducer import (
    Action,
    AddEndpoint,
    RemoveEndpoint,
    ToggleFeature,
    UpdateMetadata,
    WorkbenchState,
    reduce,
)

logger = get_logger("workbench")


@dataclass(frozen=True)
class WorkbenchSnapshot:
    state: WorkbenchState
    identifiers: DerivedIdentifiers
    endpoints: Tuple[NormalizedEndpoint, ...]
    artifacts: Tuple[GeneratedArtifact, ...]
    instructions: Tuple[str, ...]

    def artifact(self, path: str) -> Optional[GeneratedArtifact]:
        for a in self.artifacts:
            if a.path == path:
                return a
        return None

    @property
    def paths(self) -> List[str]:
        return [a.path for a in self.artifacts]


def derive(state: WorkbenchState) -> WorkbenchSnapshot:
    """Recompute everything derived from `state`. Nothing is reused between calls."""
    ids = derive_identifiers(state.metadata)
    endpoints = normalize_endpoints(state.endpoints, state.metadata.friendly_name)
    artifacts = render_artifacts(state.metadata, ids, endpoints)
    return WorkbenchSnapshot(
        state=state,
        identifiers=ids,
        endpoints=tuple(endpoints),
        artifacts=tuple(artifacts),
        instructions=tuple(render_instructions(state.metadata, ids)),
    )


class Workbench:
    """
    Owns the current WorkbenchState.

    Every dispatch reduces the state and rebuilds the whole snapshot before
    returning, so `snapshot` always matches `state`.
    """

    def __init__(self, state: WorkbenchState | None = None) -> None:
        self._state = state or WorkbenchState()
        self._snapshot = derive(self._state)

    @property
    def state(self) -> WorkbenchState:
        return self._state

    @property
    def snapshot(self) -> WorkbenchSnapshot:
        return self._snapshot

    def dispatch(self, action: Action) -> WorkbenchSnapshot:
        logger.debug("dispatch %r", action)
        self._state = reduce(self._state, action)
        self._snapshot = derive(self._state)
        logger.debug(
            "regenerated %d artifacts for module %r (%d endpoints)",
            len(self._snapshot.artifacts),
            self._snapshot.identifiers.module_name,
            len(self._snapshot.endpoints),
        )
        return self._snapshot

    def update_field(self, name: str, value: Any) -> WorkbenchSnapshot:
        return self.dispatch(UpdateMetadata(field=name, value=value))

    def toggle(self, flag: str) -> WorkbenchSnapshot:
        return self.dispatch(ToggleFeature(flag=flag))

    def add_endpoint(
        self,
        name: str,
        return_type: str = "void",
        description: str = "",
        parameters: str = "",
    ) -> WorkbenchSnapshot:
        draft = EndpointDraft(
            name=name,
            return_type=return_type,
            description=description,
            parameters=parameters,
        )
        return self.dispatch(AddEndpoint(draft=draft))

    def remove_endpoint(self, index: int) -> WorkbenchSnapshot:
        return self.dispatch(RemoveEndpoint(index=index))

    def artifact(self, path: str) -> Optional[GeneratedArtifact]:
        return self._snapshot.artifact(path)
