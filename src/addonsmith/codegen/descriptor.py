from __future__ import annotations

import json
from typing import Any, Dict, List

from addonsmith.codegen.derived import DerivedIdentifiers
from addonsmith.domain.models import AddonMetadata


FILE_VERSION = 3
DESCRIPTOR_VERSION = 1
CREATED_BY = "Unreal Addon Architect"
CREATED_BY_URL = "https://agentic-8d19d81d.vercel.app"
ENGINE_VERSION = "5.3.0"

ASYNC_PLUGIN_DEPENDENCY = "GameplayTasks"
EDITOR_LOADING_PHASE = "Default"


def split_targets(supported_targets: str) -> List[str]:
    # "Win64, Mac" -> ["Win64", "Mac"]; empty entries are kept as-is
    return [entry.strip() for entry in supported_targets.split(",")]


def descriptor_payload(metadata: AddonMetadata, ids: DerivedIdentifiers) -> Dict[str, Any]:
    """
    Build the .uplugin record. Key order is the serialized order.

    The editor module always loads in the Default phase, whatever phase the
    runtime module uses.
    """
    modules: list[dict[str, Any]] = [
        {
            "Name": ids.module_name,
            "Type": "Runtime",
            "LoadingPhase": metadata.loading_phase,
        }
    ]
    if metadata.enable_editor_module:
        modules.append(
            {
                "Name": ids.editor_module_name,
                "Type": "Editor",
                "LoadingPhase": EDITOR_LOADING_PHASE,
            }
        )

    plugins: list[dict[str, Any]] = []
    if metadata.enable_async_actions:
        plugins.append({"Name": ASYNC_PLUGIN_DEPENDENCY, "Enabled": True})

    return {
        "FileVersion": FILE_VERSION,
        "Version": DESCRIPTOR_VERSION,
        "VersionName": metadata.version,
        "FriendlyName": metadata.friendly_name,
        "Description": metadata.description,
        "Category": metadata.category,
        "CreatedBy": CREATED_BY,
        "CreatedByURL": CREATED_BY_URL,
        "EngineVersion": ENGINE_VERSION,
        "Modules": modules,
        "Plugins": plugins,
        "SupportedTargetPlatforms": split_targets(metadata.supported_targets),
    }


def render_descriptor(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    return json.dumps(descriptor_payload(metadata, ids), indent=2, ensure_ascii=False)
