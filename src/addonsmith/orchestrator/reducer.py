from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Tuple, Union

from pydantic import BaseModel, ValidationError

from addonsmith.domain.models import (
    FEATURE_FLAGS,
    AddonMetadata,
    FeatureFlag,
    EndpointDraft,
    EndpointSpec,
    default_endpoints,
)
from addonsmith.endpoints.draft import endpoint_from_draft
from addonsmith.errors import InvalidFieldValueError, UnknownFieldError


# What the draft form resets to after a successful submit.
RESET_DRAFT = EndpointDraft(name="", return_type="void", description="", parameters="ContextActor:AActor*")


@dataclass(frozen=True)
class WorkbenchState:
    metadata: AddonMetadata = field(default_factory=AddonMetadata)
    endpoints: Tuple[EndpointSpec, ...] = field(default_factory=default_endpoints)
    draft: EndpointDraft = field(default_factory=EndpointDraft)


@dataclass(frozen=True)
class UpdateMetadata:
    field: str
    value: Any


@dataclass(frozen=True)
class ToggleFeature:
    flag: FeatureFlag


@dataclass(frozen=True)
class UpdateDraft:
    field: str
    value: str


@dataclass(frozen=True)
class SubmitDraft:
    pass


@dataclass(frozen=True)
class AddEndpoint:
    draft: EndpointDraft


@dataclass(frozen=True)
class RemoveEndpoint:
    index: int


Action = Union[UpdateMetadata, ToggleFeature, UpdateDraft, SubmitDraft, AddEndpoint, RemoveEndpoint]


def _with_field(model: BaseModel, name: str, value: Any) -> Any:
    cls = type(model)
    if name not in cls.model_fields:
        raise UnknownFieldError(cls.__name__, name)
    data = model.model_dump()
    data[name] = value
    try:
        return cls.model_validate(data)
    except ValidationError as e:
        reason = e.errors()[0].get("msg", "validation failed")
        raise InvalidFieldValueError(name, value, reason) from e


def _append(state: WorkbenchState, draft: EndpointDraft) -> Tuple[WorkbenchState, bool]:
    spec = endpoint_from_draft(draft)
    if spec is None:
        return state, False
    return replace(state, endpoints=state.endpoints + (spec,)), True


def reduce(state: WorkbenchState, action: Action) -> WorkbenchState:
    """
    Pure transition: (state, action) -> state'.

    Never mutates `state`. Unknown field names and values pydantic rejects
    raise; everything else (blank draft names, out-of-range removals) is a
    no-op.
    """
    if isinstance(action, UpdateMetadata):
        return replace(state, metadata=_with_field(state.metadata, action.field, action.value))

    if isinstance(action, ToggleFeature):
        if action.flag not in FEATURE_FLAGS:
            raise UnknownFieldError("AddonMetadata", action.flag)
        current = getattr(state.metadata, action.flag)
        return replace(state, metadata=_with_field(state.metadata, action.flag, not current))

    if isinstance(action, UpdateDraft):
        return replace(state, draft=_with_field(state.draft, action.field, action.value))

    if isinstance(action, SubmitDraft):
        new_state, added = _append(state, state.draft)
        if not added:
            return state
        return replace(new_state, draft=RESET_DRAFT)

    if isinstance(action, AddEndpoint):
        return _append(state, action.draft)[0]

    if isinstance(action, RemoveEndpoint):
        if not 0 <= action.index < len(state.endpoints):
            return state
        endpoints = tuple(e for i, e in enumerate(state.endpoints) if i != action.index)
        return replace(state, endpoints=endpoints)

    raise TypeError(f"Unsupported action: {action!r}")
