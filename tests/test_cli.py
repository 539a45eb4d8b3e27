import json
from pathlib import Path

from typer.testing import CliRunner

from addonsmith.cli import app, parse_endpoint_option
from addonsmith.orchestrator.reducer import UpdateMetadata
from addonsmith.orchestrator.workbench import Workbench


runner = CliRunner()


def test_parse_endpoint_option():
    draft = parse_endpoint_option("Aim|bool|Aims at things|Target:AActor*")
    assert draft.name == "Aim"
    assert draft.return_type == "bool"
    assert draft.description == "Aims at things"
    assert draft.parameters == "Target:AActor*"

    short = parse_endpoint_option("Ping")
    assert short.return_type == "void"
    assert short.parameters == ""


def test_list_shows_default_artifacts():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "NebulaToolkit.uplugin" in result.output
    assert "csharp" in result.output


def test_show_prints_artifact_verbatim():
    result = runner.invoke(app, ["--disable", "async_actions", "show", "NebulaToolkit.uplugin"])
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert doc["Plugins"] == []


def test_show_unknown_path_fails():
    result = runner.invoke(app, ["show", "Nope.h"])
    assert result.exit_code != 0


def test_set_and_endpoint_options_flow_into_artifacts():
    result = runner.invoke(
        app,
        [
            "--set",
            "plugin_name=Nebula Toolkit!",
            "--remove-endpoint",
            "0",
            "--endpoint",
            "GetCharge|float|Charge level.|",
            "show",
            "Source/NebulaToolkit/Private/NebulaToolkitBlueprintLibrary.cpp",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "float UNebulaToolkitBlueprintLibrary::GetCharge(UObject* WorldContextObject)" in result.output
    assert "PulseMissionEvent" not in result.output
    assert "    return 0.f;" in result.output


def test_invalid_set_is_reported():
    result = runner.invoke(app, ["--set", "loading_phase=Later", "list"])
    assert result.exit_code != 0


def test_render_runs():
    result = runner.invoke(app, ["render"])
    assert result.exit_code == 0, result.output
    assert "Drop-in instructions" in result.output


def test_state_round_trip(tmp_path: Path):
    out = tmp_path / "state.json"
    result = runner.invoke(app, ["--set", "version=2.1.0", "state", "--out", str(out)])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["--state", str(out), "show", "NebulaToolkit.uplugin"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["VersionName"] == "2.1.0"


def test_features_and_endpoints_tables():
    result = runner.invoke(app, ["features"])
    assert result.exit_code == 0, result.output
    assert "enable_editor_menu" in result.output

    result = runner.invoke(app, ["endpoints"])
    assert result.exit_code == 0, result.output
    assert "PulseMissionEvent" in result.output


def test_show_keeps_colon_codes_in_user_text():
    args = ["--set", "description=Launch :rocket: missions"]
    result = runner.invoke(app, args + ["show", "NebulaToolkit.uplugin"])
    assert result.exit_code == 0, result.output

    bench = Workbench()
    bench.dispatch(UpdateMetadata(field="description", value="Launch :rocket: missions"))
    expected = bench.artifact("NebulaToolkit.uplugin").copy_text

    assert result.output == expected + "\n"
    assert '"Description": "Launch :rocket: missions"' in result.output


def test_state_keeps_colon_codes_in_user_text():
    result = runner.invoke(app, ["--set", "category=:sparkles: Tools", "state"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["metadata"]["category"] == ":sparkles: Tools"
