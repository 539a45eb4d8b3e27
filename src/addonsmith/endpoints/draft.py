from __future__ import annotations

from typing import List, Optional

from addonsmith.domain.models import EndpointDraft, EndpointParam, EndpointSpec
from addonsmith.naming.identifiers import sanitize_identifier


DEFAULT_DESCRIPTION = "Generated function."
FALLBACK_PARAM_NAME = "Param"


def parse_parameter_draft(draft: str) -> List[EndpointParam]:
    """
    "ContextActor:AActor*, Countdown:float" -> [ContextActor: AActor*, Countdown: float]

    Entries missing a name or a type are dropped without complaint.
    """
    params: list[EndpointParam] = []
    for entry in (draft or "").split(","):
        entry = entry.strip()
        if not entry:
            continue
        pieces = [piece.strip() for piece in entry.split(":")]
        raw_name = pieces[0]
        raw_type = pieces[1] if len(pieces) > 1 else ""
        if not raw_name or not raw_type:
            continue
        params.append(
            EndpointParam(name=sanitize_identifier(raw_name) or FALLBACK_PARAM_NAME, type=raw_type)
        )
    return params


def endpoint_from_draft(draft: EndpointDraft) -> Optional[EndpointSpec]:
    name = draft.name.strip()
    if not name:
        return None

    return EndpointSpec(
        name=name,
        return_type=draft.return_type.strip() or "void",
        description=draft.description.strip() or DEFAULT_DESCRIPTION,
        parameters=tuple(parse_parameter_draft(draft.parameters)),
    )
