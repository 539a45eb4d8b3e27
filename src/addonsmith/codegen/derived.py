from __future__ import annotations

from dataclasses import dataclass

from addonsmith.domain.models import AddonMetadata
from addonsmith.naming.identifiers import log_category_for, to_export_macro, to_identifier_case


FALLBACK_MODULE_NAME = "AddonModule"


@dataclass(frozen=True)
class DerivedIdentifiers:
    module_name: str
    api_macro: str
    log_category: str
    module_class: str
    editor_module_class: str
    library_class: str
    async_action_class: str
    async_delegate: str

    @property
    def editor_module_name(self) -> str:
        return f"{self.module_name}Editor"


def identifiers_for_module(module_name: str) -> DerivedIdentifiers:
    module_class = f"F{module_name}Module"
    return DerivedIdentifiers(
        module_name=module_name,
        api_macro=to_export_macro(module_name),
        log_category=log_category_for(module_name),
        module_class=module_class,
        editor_module_class=f"{module_class}Editor",
        library_class=f"U{module_name}BlueprintLibrary",
        async_action_class=f"U{module_name}AsyncAction",
        async_delegate=f"F{module_name}AsyncPayload",
    )


def derive_identifiers(metadata: AddonMetadata) -> DerivedIdentifiers:
    # A code name with no alphanumerics degrades to "" rather than raising.
    return identifiers_for_module(to_identifier_case(metadata.plugin_name or FALLBACK_MODULE_NAME))
