from __future__ import annotations

import re
from typing import MutableSet


_NON_ALNUM_RUN = re.compile(r"[^a-zA-Z0-9]+")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_MULTI_UNDERSCORE = re.compile(r"_+")
_EDGE_UNDERSCORE = re.compile(r"^_|_$")

_NON_IDENT = re.compile(r"[^A-Za-z0-9_]")
_BAD_LEADING = re.compile(r"^[^A-Za-z_]*")
_LEADING_DIGIT = re.compile(r"^([0-9])")

API_SUFFIX = "_API"


def to_identifier_case(text: str) -> str:
    """
    "nebula toolkit!" -> "NebulaToolkit".

    Only the first letter of each segment is touched; the rest keeps its case.
    Returns "" when there is nothing alphanumeric, callers pick a fallback.
    """
    segments = [s for s in _NON_ALNUM_RUN.split(text or "") if s]
    return "".join(s[0].upper() + s[1:] for s in segments)


def to_export_macro(text: str) -> str:
    # NebulaToolkit -> NEBULA_TOOLKIT_API
    macro = _NON_ALNUM.sub("_", text or "")
    macro = _CAMEL_BOUNDARY.sub(r"\1_\2", macro)
    macro = _MULTI_UNDERSCORE.sub("_", macro)
    macro = _EDGE_UNDERSCORE.sub("", macro)
    return macro.upper() + API_SUFFIX


def sanitize_identifier(text: str) -> str:
    """
    Reduce free text to a bare C-family identifier.

    Output is either "" or matches [A-Za-z_][A-Za-z0-9_]*.
    """
    ident = _NON_IDENT.sub("", text or "")
    ident = _BAD_LEADING.sub("", ident)
    return _LEADING_DIGIT.sub(r"_\1", ident)


def log_category_for(module_name: str) -> str:
    return f"Log{module_name}"


def default_return_expression(return_type: str) -> str:
    """
    Map a return type to the statement that returns its "empty" value.

    void yields "" (nothing to return). Unknown types fall back to a
    brace-initialised value.
    """
    token = (return_type or "").strip().lower()
    if token == "void":
        return ""
    if token == "bool":
        return "return false;"
    if "float" in token or "double" in token:
        return "return 0.f;"
    if token.startswith("int") or token.endswith("32") or token.endswith("64"):
        return "return 0;"
    if token == "fstring":
        return 'return TEXT("");'
    return "return {};"


def unique_name(name: str, taken: MutableSet[str]) -> str:
    # Target, Target -> Target, Target1
    candidate = name
    index = 1
    while candidate in taken:
        candidate = f"{name}{index}"
        index += 1
    taken.add(candidate)
    return candidate
