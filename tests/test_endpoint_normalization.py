from addonsmith.domain.models import EndpointParam, EndpointSpec, default_endpoints
from addonsmith.endpoints.normalize import normalize_endpoints
from addonsmith.endpoints.specs import CONTEXT_PARAM_NAME, CONTEXT_PARAM_TYPE
from addonsmith.naming.identifiers import default_return_expression


def spec(name, return_type="void", params=(), description=""):
    return EndpointSpec(
        name=name,
        return_type=return_type,
        description=description,
        parameters=tuple(EndpointParam(name=n, type=t) for n, t in params),
    )


def test_float_endpoint_without_params_gets_only_context_param():
    [fn] = normalize_endpoints([spec("GetProgress", "float")], "Nebula Toolkit")

    assert len(fn.parameters) == 1
    assert fn.parameters[0].name == CONTEXT_PARAM_NAME
    assert fn.parameters[0].type == CONTEXT_PARAM_TYPE
    assert fn.return_type == "float"
    assert default_return_expression(fn.return_type) == "return 0.f;"


def test_duplicate_sanitized_names_get_numeric_suffix_in_order():
    [fn] = normalize_endpoints(
        [spec("Aim", params=[("Target", "AActor*"), ("Target!", "FVector")])],
        "Nebula Toolkit",
    )
    names = [p.name for p in fn.parameters]
    # context param is prepended; user params keep their order
    assert names == [CONTEXT_PARAM_NAME, "Target", "Target1"]
    assert [p.type for p in fn.parameters[1:]] == ["AActor*", "FVector"]


def test_existing_context_param_is_not_duplicated():
    [fn] = normalize_endpoints(
        [spec("Pulse", params=[("Tag", "FName"), ("WorldContextObject", "UObject*")])],
        "X",
    )
    names = [p.name for p in fn.parameters]
    assert names == ["Tag", "WorldContextObject"]
    assert names.count(CONTEXT_PARAM_NAME) == 1


def test_blank_names_fall_back_to_positional_placeholder():
    out = normalize_endpoints(
        [
            spec("First"),
            spec("Second", params=[("!!", "int32"), ("", "int32")]),
        ],
        "X",
    )
    names = [p.name for p in out[1].parameters]
    assert names == [CONTEXT_PARAM_NAME, "Param1", "Param11"]


def test_blank_types_default_to_float_and_blank_return_to_void():
    [fn] = normalize_endpoints([spec("Tick", "  ", params=[("Delta", "  ")])], "X")
    assert fn.return_type == "void"
    assert fn.is_void
    assert fn.parameters[1].type == "float"


def test_metadata_segments_track_friendly_name():
    [fn] = normalize_endpoints([spec("Pulse")], "Nebula Toolkit")
    assert fn.metadata_segments == (
        'Category="Nebula Toolkit|Blueprint"',
        'WorldContext="WorldContextObject"',
    )

    [renamed] = normalize_endpoints([spec("Pulse")], "Star Forge")
    assert renamed.metadata_segments[0] == 'Category="Star Forge|Blueprint"'


def test_context_tag_present_whenever_context_param_present():
    specs = [
        spec("A"),
        spec("B", params=[("WorldContextObject", "UObject*")]),
        spec("C", params=[("x", "int32"), ("x", "int32")]),
    ]
    for fn in normalize_endpoints(specs, "X"):
        assert fn.has_param(CONTEXT_PARAM_NAME)
        assert 'WorldContext="WorldContextObject"' in fn.metadata_segments


def test_parameter_names_unique_and_non_empty_for_many_shapes():
    specs = [
        spec("a", params=[("x", "int"), ("x", "int"), ("x1", "int"), ("x", "int")]),
        spec("b", params=[("WorldContextObject", "UObject*"), ("WorldContextObject", "UObject*")]),
        spec("c", params=[("", ""), ("", ""), ("1", "bool")]),
        spec("d"),
    ]
    for fn in normalize_endpoints(specs, "X"):
        names = [p.name for p in fn.parameters]
        assert len(names) >= 1
        assert len(names) == len(set(names))


def test_display_name_and_key():
    out = normalize_endpoints([spec("spawn mission marker"), spec("!!!")], "X")
    assert out[0].display_name == "Spawnmissionmarker"
    assert out[0].key == "spawn mission marker-0"
    assert out[1].display_name == "GeneratedFunction"


def test_order_preserved():
    out = normalize_endpoints(default_endpoints(), "Nebula Toolkit")
    assert [fn.display_name for fn in out] == ["PulseMissionEvent", "GetSequenceProgress"]
    assert out[1].signature == "UObject* WorldContextObject, FName SequenceLabel"
