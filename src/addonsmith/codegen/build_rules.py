from __future__ import annotations

from typing import Iterable, Tuple

from addonsmith.codegen.derived import DerivedIdentifiers
from addonsmith.domain.models import AddonMetadata


BASE_PUBLIC_DEPENDENCIES = ("Core", "CoreUObject", "Engine")
BASE_PRIVATE_DEPENDENCIES = ("Slate", "SlateCore")
EDITOR_BUILD_DEPENDENCIES = ("AssetTools", "EditorFramework")


def dependency_sets(metadata: AddonMetadata) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return (public, private) module dependencies, each sorted."""
    public = set(BASE_PUBLIC_DEPENDENCIES)
    private = set(BASE_PRIVATE_DEPENDENCIES)

    if metadata.enable_blueprint_library:
        public.add("Kismet")
        private.add("UMG")

    if metadata.enable_async_actions:
        public.add("GameplayTasks")

    if metadata.enable_editor_module:
        private.add("UnrealEd")
        private.add("LevelSequence")

    return tuple(sorted(public)), tuple(sorted(private))


def _format_dependencies(deps: Iterable[str]) -> str:
    return ",\n".join(f'            "{dep}"' for dep in deps)


def render_build_rules(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    public, private = dependency_sets(metadata)
    name = ids.module_name
    editor_deps = ",\n".join(f'                "{dep}"' for dep in EDITOR_BUILD_DEPENDENCIES)

    return f"""using UnrealBuildTool;

public class {name} : ModuleRules
{{
    public {name}(ReadOnlyTargetRules Target) : base(Target)
    {{
        PCHUsage = PCHUsageMode.UseExplicitOrSharedPCHs;

        PublicDependencyModuleNames.AddRange(new string[]
        {{
{_format_dependencies(public)}
        }});

        PrivateDependencyModuleNames.AddRange(new string[]
        {{
{_format_dependencies(private)}
        }});

        if (Target.bBuildEditor)
        {{
            PrivateDependencyModuleNames.AddRange(new string[]
            {{
{editor_deps}
            }});
        }}
    }}
}}"""
