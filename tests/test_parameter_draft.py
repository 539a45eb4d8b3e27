from addonsmith.domain.models import EndpointDraft
from addonsmith.endpoints.draft import endpoint_from_draft, parse_parameter_draft


def test_parse_parameter_draft_basic():
    params = parse_parameter_draft("ContextActor:AActor*, Countdown:float")
    assert [(p.name, p.type) for p in params] == [("ContextActor", "AActor*"), ("Countdown", "float")]


def test_parse_parameter_draft_drops_malformed_entries():
    params = parse_parameter_draft("Good:int32, MissingType, :NoName, Empty:, ,  Other : FName ")
    assert [(p.name, p.type) for p in params] == [("Good", "int32"), ("Other", "FName")]


def test_parse_parameter_draft_sanitizes_names():
    params = parse_parameter_draft("target actor:AActor*, 42:int32, Extra:FVector:ignored")
    assert [(p.name, p.type) for p in params] == [
        ("targetactor", "AActor*"),
        ("Param", "int32"),
        ("Extra", "FVector"),
    ]


def test_parse_parameter_draft_empty():
    assert parse_parameter_draft("") == []
    assert parse_parameter_draft(" , , ") == []


def test_endpoint_from_draft_defaults():
    ep = endpoint_from_draft(EndpointDraft(name="  SpawnMarker ", return_type=" ", description="", parameters=""))
    assert ep is not None
    assert ep.name == "SpawnMarker"
    assert ep.return_type == "void"
    assert ep.description == "Generated function."
    assert ep.parameters == ()


def test_endpoint_from_draft_blank_name_is_rejected():
    assert endpoint_from_draft(EndpointDraft(name="   ")) is None
