from __future__ import annotations

from dataclasses import dataclass


CONTEXT_PARAM_NAME = "WorldContextObject"
CONTEXT_PARAM_TYPE = "UObject*"


@dataclass(frozen=True)
class NormalizedParam:
    name: str   # valid identifier, unique within its endpoint
    type: str   # never blank

    def declaration(self) -> str:
        return f"{self.type} {self.name}"


@dataclass(frozen=True)
class NormalizedEndpoint:
    """
    An endpoint ready to be emitted into generated code.

    Always derived from an EndpointSpec; never stored on its own.
    """

    key: str                                # "<raw name>-<index>", stable per position
    display_name: str                       # PascalCase function identifier
    description: str
    return_type: str                        # "void" when the user left it blank
    parameters: tuple[NormalizedParam, ...]
    metadata_segments: tuple[str, ...]      # UFUNCTION meta=(...) entries

    @property
    def signature(self) -> str:
        return ", ".join(p.declaration() for p in self.parameters)

    @property
    def is_void(self) -> bool:
        return self.return_type.lower() == "void"

    def has_param(self, name: str) -> bool:
        return any(p.name == name for p in self.parameters)
