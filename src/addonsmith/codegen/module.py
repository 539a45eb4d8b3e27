from __future__ import annotations

from addonsmith.codegen.derived import DerivedIdentifiers
from addonsmith.domain.models import AddonMetadata


def render_module_header(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    lines = [
        "#pragma once",
        "",
        '#include "Modules/ModuleInterface.h"',
        '#include "Modules/ModuleManager.h"',
        "",
        f"DECLARE_LOG_CATEGORY_EXTERN({ids.log_category}, Log, All);",
        "",
        f"class {ids.module_class} : public IModuleInterface",
        "{",
        "public:",
        "  virtual void StartupModule() override;",
        "  virtual void ShutdownModule() override;",
    ]
    if metadata.enable_editor_module:
        lines += [
            "#if WITH_EDITOR",
            "  void RegisterEditorUtilities();",
            "#endif",
        ]
    lines.append("};")
    return "\n".join(lines)


def render_module_source(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    cls = ids.module_class
    log = ids.log_category
    name = ids.module_name

    lines = [
        f'#include "{name}.h"',
        '#include "Logging/LogMacros.h"',
        "",
        f"DEFINE_LOG_CATEGORY({log});",
        f"IMPLEMENT_MODULE({cls}, {name});",
        "",
        f"void {cls}::StartupModule()",
        "{",
        f'  UE_LOG({log}, Display, TEXT("{name} module started."));',
    ]
    # the hook is only declared with the editor module, so only call it then
    if metadata.enable_editor_module:
        lines += [
            "#if WITH_EDITOR",
            "  if (GIsEditor)",
            "  {",
            "    RegisterEditorUtilities();",
            "  }",
            "#endif",
        ]
    lines += [
        "}",
        "",
        f"void {cls}::ShutdownModule()",
        "{",
        f'  UE_LOG({log}, Display, TEXT("{name} module shut down."));',
        "}",
    ]
    if metadata.enable_editor_module:
        lines += [
            "",
            "#if WITH_EDITOR",
            f"void {cls}::RegisterEditorUtilities()",
            "{",
            "  // TODO: Register asset factories, detail customizations, level snapshots, or automation tests.",
            "}",
            "#endif",
        ]
    return "\n".join(lines)
