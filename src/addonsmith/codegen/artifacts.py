from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from addonsmith.codegen.async_action import render_async_header, render_async_source
from addonsmith.codegen.build_rules import render_build_rules
from addonsmith.codegen.derived import DerivedIdentifiers
from addonsmith.codegen.descriptor import render_descriptor
from addonsmith.codegen.editor import render_editor_header, render_editor_source
from addonsmith.codegen.function_library import render_library_header, render_library_source
from addonsmith.codegen.module import render_module_header, render_module_source
from addonsmith.domain.models import AddonMetadata
from addonsmith.endpoints.specs import NormalizedEndpoint


@dataclass(frozen=True)
class GeneratedArtifact:
    title: str
    path: str       # relative to the plugin root
    language: str   # json | cpp | csharp
    body: str

    @property
    def display_text(self) -> str:
        return self.body.strip()

    @property
    def copy_text(self) -> str:
        return self.body.rstrip()


def _pair(
    header: GeneratedArtifact,
    source: GeneratedArtifact,
    enabled: bool,
) -> Tuple[GeneratedArtifact, ...]:
    # a pair is only shown when its flag is on and the header has content
    if enabled and header.body:
        return (header, source)
    return ()


def render_artifacts(
    metadata: AddonMetadata,
    ids: DerivedIdentifiers,
    endpoints: Sequence[NormalizedEndpoint],
) -> List[GeneratedArtifact]:
    """
    Regenerate every artifact from scratch, in panel order.

    Always present: descriptor, runtime header/source, Build.cs.
    Optional pairs: Blueprint library, async action, editor module.
    """
    m = ids.module_name
    editor = ids.editor_module_name

    out: list[GeneratedArtifact] = [
        GeneratedArtifact(
            title=".uplugin descriptor",
            path=f"{metadata.plugin_name}.uplugin",
            language="json",
            body=render_descriptor(metadata, ids),
        ),
        GeneratedArtifact(
            title="Runtime module header",
            path=f"Source/{m}/{m}.h",
            language="cpp",
            body=render_module_header(metadata, ids),
        ),
        GeneratedArtifact(
            title="Runtime module source",
            path=f"Source/{m}/{m}.cpp",
            language="cpp",
            body=render_module_source(metadata, ids),
        ),
        GeneratedArtifact(
            title="Build.cs",
            path=f"Source/{m}/{m}.Build.cs",
            language="csharp",
            body=render_build_rules(metadata, ids),
        ),
    ]

    out.extend(
        _pair(
            GeneratedArtifact(
                title="Blueprint library header",
                path=f"Source/{m}/Public/{m}BlueprintLibrary.h",
                language="cpp",
                body=render_library_header(metadata, ids, endpoints),
            ),
            GeneratedArtifact(
                title="Blueprint library source",
                path=f"Source/{m}/Private/{m}BlueprintLibrary.cpp",
                language="cpp",
                body=render_library_source(metadata, ids, endpoints),
            ),
            metadata.enable_blueprint_library,
        )
    )

    out.extend(
        _pair(
            GeneratedArtifact(
                title="Async action header",
                path=f"Source/{m}/Public/{m}AsyncAction.h",
                language="cpp",
                body=render_async_header(metadata, ids),
            ),
            GeneratedArtifact(
                title="Async action source",
                path=f"Source/{m}/Private/{m}AsyncAction.cpp",
                language="cpp",
                body=render_async_source(metadata, ids),
            ),
            metadata.enable_async_actions,
        )
    )

    out.extend(
        _pair(
            GeneratedArtifact(
                title="Editor module header",
                path=f"Source/{editor}/{editor}.h",
                language="cpp",
                body=render_editor_header(metadata, ids),
            ),
            GeneratedArtifact(
                title="Editor module source",
                path=f"Source/{editor}/{editor}.cpp",
                language="cpp",
                body=render_editor_source(metadata, ids),
            ),
            metadata.enable_editor_module,
        )
    )

    return out


def render_instructions(metadata: AddonMetadata, ids: DerivedIdentifiers) -> List[str]:
    """Drop-in steps shown next to the artifacts."""
    source_dirs = f"Source/{ids.module_name}"
    if metadata.enable_editor_module:
        source_dirs += f" (and {ids.editor_module_name})"
    return [
        f"Create /Plugins/{metadata.plugin_name} inside your Unreal project.",
        f"Paste the generated files into {source_dirs}.",
        "Regenerate project files, then compile from Visual Studio or Rider.",
        "Enable the plugin in Project Settings > Plugins.",
    ]
