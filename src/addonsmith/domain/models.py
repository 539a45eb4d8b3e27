from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LoadingPhase = Literal["Default", "PostDefault", "PostEngineInit", "PostSplash"]

FeatureFlag = Literal[
    "enable_blueprint_library",
    "enable_editor_module",
    "enable_async_actions",
    "enable_editor_menu",
]

# Display order matches the feature panel.
FEATURE_FLAGS: tuple[str, ...] = (
    "enable_blueprint_library",
    "enable_editor_module",
    "enable_async_actions",
    "enable_editor_menu",
)

FEATURE_LABELS: dict[str, str] = {
    "enable_blueprint_library": "Blueprint library",
    "enable_editor_module": "Editor module",
    "enable_async_actions": "Async Blueprint action",
    "enable_editor_menu": "Editor menu binding",
}

FEATURE_NOTES: dict[str, str] = {
    "enable_blueprint_library": (
        "Generates Blueprint function library scaffolding with metadata and logging guards."
    ),
    "enable_editor_module": (
        "Adds a dedicated Editor-only module for utility menus, asset factories, and automation hooks."
    ),
    "enable_async_actions": (
        "Provides an asynchronous Blueprint action pattern backed by latent node macros."
    ),
    "enable_editor_menu": (
        "Registers a streamlined editor menu entry and command binding for quick access to plugin tools."
    ),
}


class AddonMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    plugin_name: str = "NebulaToolkit"
    friendly_name: str = "Nebula Toolkit"
    version: str = "1.0.0"
    description: str = (
        "Mission scripting utilities, smart triggers, and authoring helpers "
        "for cinematic gameplay sequences."
    )
    category: str = "Gameplay"
    loading_phase: LoadingPhase = "PostEngineInit"
    supported_targets: str = "Win64, Mac, Linux"  # comma separated

    enable_editor_module: bool = True
    enable_blueprint_library: bool = True
    enable_async_actions: bool = True
    enable_editor_menu: bool = True


class EndpointParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str


class EndpointSpec(BaseModel):
    """A Blueprint-callable function as the user typed it (not yet sanitized)."""

    model_config = ConfigDict(frozen=True)

    name: str
    return_type: str = "void"
    description: str = ""
    parameters: tuple[EndpointParam, ...] = Field(default_factory=tuple)


class EndpointDraft(BaseModel):
    """Pending "add function" form; `parameters` is the flat `Name:Type, ...` string."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    return_type: str = "void"
    description: str = ""
    parameters: str = "ContextActor:AActor*, Countdown:float"


def default_endpoints() -> tuple[EndpointSpec, ...]:
    return (
        EndpointSpec(
            name="PulseMissionEvent",
            return_type="void",
            description=(
                "Broadcasts a mission pulse to subscribed listeners with a contextual "
                "payload for analytics or sequencing."
            ),
            parameters=(
                EndpointParam(name="WorldContextObject", type="UObject*"),
                EndpointParam(name="EventTag", type="FName"),
                EndpointParam(name="Payload", type="FGameplayTagContainer"),
            ),
        ),
        EndpointSpec(
            name="GetSequenceProgress",
            return_type="float",
            description=(
                "Returns a normalized 0-1 progress value for the active master sequence, "
                "clamped for safe UI usage."
            ),
            parameters=(
                EndpointParam(name="WorldContextObject", type="UObject*"),
                EndpointParam(name="SequenceLabel", type="FName"),
            ),
        ),
    )
