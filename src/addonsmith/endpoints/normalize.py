from __future__ import annotations

from typing import Iterable, List

from addonsmith.domain.models import EndpointSpec
from addonsmith.endpoints.specs import (
    CONTEXT_PARAM_NAME,
    CONTEXT_PARAM_TYPE,
    NormalizedEndpoint,
    NormalizedParam,
)
from addonsmith.naming.identifiers import sanitize_identifier, to_identifier_case, unique_name


DEFAULT_PARAM_TYPE = "float"
DEFAULT_RETURN_TYPE = "void"
FALLBACK_FUNCTION_NAME = "GeneratedFunction"


def _category_segment(friendly_name: str) -> str:
    return f'Category="{friendly_name}|Blueprint"'


def _context_segment() -> str:
    return f'WorldContext="{CONTEXT_PARAM_NAME}"'


def display_name_for(raw_name: str) -> str:
    return to_identifier_case(sanitize_identifier(raw_name) or FALLBACK_FUNCTION_NAME)


def normalize_endpoint(spec: EndpointSpec, index: int, friendly_name: str) -> NormalizedEndpoint:
    taken: set[str] = set()
    params: list[NormalizedParam] = []

    for raw in spec.parameters:
        param_type = raw.type.strip() or DEFAULT_PARAM_TYPE
        # positional fallback keeps placeholders distinct across endpoints
        base = sanitize_identifier(raw.name) or f"Param{index}"
        params.append(NormalizedParam(name=unique_name(base, taken), type=param_type))

    has_context = any(p.name == CONTEXT_PARAM_NAME for p in params)
    if not has_context:
        params.insert(0, NormalizedParam(name=CONTEXT_PARAM_NAME, type=CONTEXT_PARAM_TYPE))
        taken.add(CONTEXT_PARAM_NAME)
        has_context = True

    segments = [_category_segment(friendly_name)]
    if has_context:
        segments.append(_context_segment())

    return NormalizedEndpoint(
        key=f"{spec.name}-{index}",
        display_name=display_name_for(spec.name),
        description=spec.description,
        return_type=spec.return_type.strip() or DEFAULT_RETURN_TYPE,
        parameters=tuple(params),
        metadata_segments=tuple(segments),
    )


def normalize_endpoints(specs: Iterable[EndpointSpec], friendly_name: str) -> List[NormalizedEndpoint]:
    """
    EndpointSpec list -> NormalizedEndpoint list.

    Guarantees:
    - input order preserved (it is also the declaration order in generated code)
    - parameter names are valid identifiers, unique per endpoint
    - every endpoint carries exactly one WorldContextObject parameter
    """
    return [normalize_endpoint(spec, i, friendly_name) for i, spec in enumerate(specs)]
