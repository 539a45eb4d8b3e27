from __future__ import annotations

from addonsmith.codegen.derived import DerivedIdentifiers
from addonsmith.domain.models import AddonMetadata


def render_editor_header(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    if not metadata.enable_editor_module:
        return ""

    lines = [
        "#pragma once",
        "",
        '#include "Modules/ModuleManager.h"',
        "",
        f"class {ids.editor_module_class} : public IModuleInterface",
        "{",
        "public:",
        "  virtual void StartupModule() override;",
        "  virtual void ShutdownModule() override;",
        "",
        "private:",
    ]
    if metadata.enable_editor_menu:
        lines.append("  void RegisterMenus();")
    lines += [
        "  void RegisterLevelViewportExtensions();",
        "};",
    ]
    return "\n".join(lines)


def _menu_definition(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    name = ids.module_name
    friendly = metadata.friendly_name
    return f"""void {ids.editor_module_class}::RegisterMenus()
{{
  if (UToolMenus::IsInitialized() && UToolMenus::Get()->IsMenuRegistered("LevelEditor.MainMenu"))
  {{
    auto* Menu = UToolMenus::Get()->ExtendMenu("LevelEditor.MainMenu.Tools");
    FToolMenuSection& Section = Menu->AddSection("section_{name}", TEXT("{friendly}"));
    Section.AddMenuEntry(
      "Open{name}Panel",
      FText::FromString("Open {friendly} Panel"),
      FText::FromString("Launches the toolkit command panel."),
      FSlateIcon(),
      FUIAction(FExecuteAction::CreateLambda([]()
      {{
        UE_LOG({ids.log_category}, Display, TEXT("Launching {friendly} tools panel..."));
      }}))
    );
  }}
}}"""


def render_editor_source(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    if not metadata.enable_editor_module:
        return ""

    cls = ids.editor_module_class
    with_menu = metadata.enable_editor_menu

    includes = [
        f'#include "{ids.editor_module_name}.h"',
        f'#include "{ids.module_name}.h"',
        '#include "LevelEditor.h"',
    ]
    if with_menu:
        includes.append('#include "ToolMenus.h"')

    startup = []
    if with_menu:
        startup.append("  RegisterMenus();")
    startup.append("  RegisterLevelViewportExtensions();")

    shutdown = ""
    if with_menu:
        shutdown = "\n".join(
            [
                "  if (UToolMenus::IsInitialized())",
                "  {",
                "    UToolMenus::UnregisterOwner(this);",
                "  }",
            ]
        )

    menu = f"\n{_menu_definition(metadata, ids)}" if with_menu else ""

    lines = [
        "\n".join(includes),
        "",
        f"void {cls}::StartupModule()",
        "{",
        "\n".join(startup),
        "}",
        "",
        f"void {cls}::ShutdownModule()",
        "{",
        shutdown,
        "}",
        "",
        f"void {cls}::RegisterLevelViewportExtensions()",
        "{",
        '  FLevelEditorModule& LevelEditorModule = FModuleManager::LoadModuleChecked<FLevelEditorModule>("LevelEditor");',
        "  LevelEditorModule.OnMapChanged().AddLambda([](UWorld* World, EMapChangeType ChangeType)",
        "  {",
        f'    UE_LOG({ids.log_category}, Verbose, TEXT("{metadata.friendly_name} detected map change: %s"), '
        "*StaticEnum<EMapChangeType>()->GetNameStringByValue(static_cast<int64>(ChangeType)));",
        "  });",
        "}",
        menu,
        "",
        f"IMPLEMENT_MODULE({cls}, {ids.editor_module_name});",
    ]
    return "\n".join(lines)
