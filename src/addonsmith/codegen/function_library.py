from __future__ import annotations

from typing import Sequence

from addonsmith.codegen.derived import DerivedIdentifiers
from addonsmith.domain.models import AddonMetadata
from addonsmith.endpoints.specs import CONTEXT_PARAM_NAME, NormalizedEndpoint
from addonsmith.naming.identifiers import default_return_expression


def _declaration(fn: NormalizedEndpoint) -> str:
    return "\n".join(
        [
            "  /**",
            f"   * {fn.description}",
            "   */",
            f"  UFUNCTION(BlueprintCallable, meta=({', '.join(fn.metadata_segments)}))",
            f"  static {fn.return_type} {fn.display_name}({fn.signature});",
        ]
    )


def render_library_header(
    metadata: AddonMetadata,
    ids: DerivedIdentifiers,
    endpoints: Sequence[NormalizedEndpoint],
) -> str:
    if not metadata.enable_blueprint_library:
        return ""

    declarations = "\n\n".join(_declaration(fn) for fn in endpoints)
    return "\n".join(
        [
            "#pragma once",
            "",
            '#include "Kismet/BlueprintFunctionLibrary.h"',
            f'#include "{ids.module_name}.h"',
            f'#include "{ids.module_name}BlueprintLibrary.generated.h"',
            "",
            "UCLASS()",
            f"class {ids.api_macro} {ids.library_class} : public UBlueprintFunctionLibrary",
            "{",
            "  GENERATED_BODY()",
            "",
            "public:",
            declarations,
            "};",
        ]
    )


def guard_return(fn: NormalizedEndpoint, indent: str) -> str:
    if fn.is_void:
        return f"{indent}return;"
    return f"{indent}{default_return_expression(fn.return_type)}"


def _definition(fn: NormalizedEndpoint, ids: DerivedIdentifiers) -> str:
    return "\n".join(
        [
            f"{fn.return_type} {ids.library_class}::{fn.display_name}({fn.signature})",
            "{",
            f"  if (!{CONTEXT_PARAM_NAME})",
            "  {",
            f'    UE_LOG({ids.log_category}, Warning, TEXT("{fn.display_name} called without a valid world context."));',
            guard_return(fn, "    "),
            "  }",
            "",
            f"  // TODO: Implement {fn.display_name}. {fn.description}",
            guard_return(fn, "  "),
            "}",
        ]
    )


def render_library_source(
    metadata: AddonMetadata,
    ids: DerivedIdentifiers,
    endpoints: Sequence[NormalizedEndpoint],
) -> str:
    if not metadata.enable_blueprint_library:
        return ""

    bodies = "\n\n".join(_definition(fn, ids) for fn in endpoints)
    return "\n".join(
        [
            f'#include "{ids.module_name}BlueprintLibrary.h"',
            '#include "Engine/World.h"',
            '#include "Engine/Engine.h"',
            '#include "Kismet/GameplayStatics.h"',
            "",
            bodies,
        ]
    )
