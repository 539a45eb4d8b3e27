from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from addonsmith.config import WorkbenchConfig
from addonsmith.domain.models import FEATURE_FLAGS, FEATURE_LABELS, FEATURE_NOTES, EndpointDraft
from addonsmith.errors import AddonsmithError
from addonsmith.logging import setup_logging
from addonsmith.orchestrator.reducer import AddEndpoint, RemoveEndpoint, UpdateMetadata
from addonsmith.orchestrator.workbench import Workbench


app = typer.Typer(no_args_is_help=True, add_completion=False)

console = Console()

_LEXERS = {"json": "json", "cpp": "cpp", "csharp": "csharp"}


def parse_endpoint_option(raw: str) -> EndpointDraft:
    # "Name|ReturnType|Description|A:Type, B:Type"; trailing parts optional
    parts = [p.strip() for p in raw.split("|", 3)]
    parts += [""] * (4 - len(parts))
    name, return_type, description, params = parts
    return EndpointDraft(
        name=name,
        return_type=return_type or "void",
        description=description,
        parameters=params,
    )


def _parse_assignment(raw: str) -> tuple[str, str]:
    if "=" not in raw:
        raise typer.BadParameter(f"Expected field=value, got: {raw}")
    key, _, value = raw.partition("=")
    return key.strip(), value


def _flag_name(raw: str) -> str:
    # accept "async_actions" as well as "enable_async_actions"
    name = raw.strip().replace("-", "_")
    if not name.startswith("enable_"):
        name = f"enable_{name}"
    return name


@app.callback()
def configure(
    ctx: typer.Context,
    state: Optional[str] = typer.Option(None, help="JSON state file (metadata, endpoints, draft)"),
    set_: Optional[List[str]] = typer.Option(None, "--set", help="Metadata override field=value (repeatable)"),
    enable: Optional[List[str]] = typer.Option(None, help="Turn a feature flag on (repeatable)"),
    disable: Optional[List[str]] = typer.Option(None, help="Turn a feature flag off (repeatable)"),
    endpoint: Optional[List[str]] = typer.Option(
        None, help='Append a function: "Name|ReturnType|Description|A:Type, B:Type"'
    ),
    remove_endpoint: Optional[List[int]] = typer.Option(None, help="Remove an endpoint by index (repeatable)"),
    log_level: Optional[str] = typer.Option(None, help="DEBUG|INFO|WARNING|ERROR"),
) -> None:
    try:
        config = WorkbenchConfig.load(Path(state).expanduser()) if state else WorkbenchConfig.from_env()
    except AddonsmithError as e:
        raise typer.BadParameter(str(e))

    setup_logging(log_level or config.log_level)

    bench = Workbench(config.initial_state())
    try:
        for raw in set_ or []:
            key, value = _parse_assignment(raw)
            bench.dispatch(UpdateMetadata(field=key, value=value))
        for raw in enable or []:
            bench.dispatch(UpdateMetadata(field=_flag_name(raw), value=True))
        for raw in disable or []:
            bench.dispatch(UpdateMetadata(field=_flag_name(raw), value=False))
        # removals apply to the loaded list, before new endpoints are appended
        for index in sorted(remove_endpoint or [], reverse=True):
            bench.dispatch(RemoveEndpoint(index=index))
        for raw in endpoint or []:
            bench.dispatch(AddEndpoint(draft=parse_endpoint_option(raw)))
    except AddonsmithError as e:
        raise typer.BadParameter(str(e))

    ctx.obj = bench


@app.command()
def render(ctx: typer.Context) -> None:
    """Print every generated artifact followed by the drop-in steps."""
    bench: Workbench = ctx.obj
    snap = bench.snapshot

    console.print(
        f"[bold green]addonsmith[/bold green] {snap.identifiers.module_name} "
        f"({len(snap.artifacts)} artifacts, {len(snap.endpoints)} endpoints)"
    )
    for a in snap.artifacts:
        syntax = Syntax(a.display_text, _LEXERS.get(a.language, "text"), theme="ansi_dark")
        console.print(Panel(syntax, title=a.title, subtitle=a.path, title_align="left"))

    console.print("")
    console.print("[bold]Drop-in instructions[/bold]")
    for i, step in enumerate(snap.instructions, start=1):
        console.print(f"  {i}. {step}", markup=False)


@app.command("list")
def list_artifacts(ctx: typer.Context) -> None:
    bench: Workbench = ctx.obj
    snap = bench.snapshot

    table = Table(show_header=True, header_style="bold")
    table.add_column("TITLE")
    table.add_column("PATH")
    table.add_column("LANG", no_wrap=True)
    table.add_column("LINES", justify="right", no_wrap=True)

    for a in snap.artifacts:
        table.add_row(a.title, a.path, a.language, str(len(a.display_text.splitlines())))

    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Artifact path, as printed by `addonsmith list`"),
) -> None:
    """Print one artifact verbatim (trailing whitespace trimmed), ready to paste."""
    bench: Workbench = ctx.obj
    artifact = bench.artifact(path)
    if artifact is None:
        known = ", ".join(bench.snapshot.paths)
        raise typer.BadParameter(f"No artifact at {path}. Known: {known}")
    console.print(artifact.copy_text, markup=False, emoji=False, highlight=False, soft_wrap=True)


@app.command()
def features(ctx: typer.Context) -> None:
    bench: Workbench = ctx.obj
    metadata = bench.state.metadata

    table = Table(show_header=True, header_style="bold")
    table.add_column("FLAG", no_wrap=True)
    table.add_column("ON", no_wrap=True)
    table.add_column("FEATURE")
    table.add_column("NOTES")

    for flag in FEATURE_FLAGS:
        on = "yes" if getattr(metadata, flag) else "no"
        table.add_row(flag, on, FEATURE_LABELS[flag], FEATURE_NOTES[flag])

    console.print(table)


@app.command()
def endpoints(ctx: typer.Context) -> None:
    """List the Blueprint endpoints after normalization."""
    bench: Workbench = ctx.obj
    snap = bench.snapshot

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("FUNCTION", no_wrap=True)
    table.add_column("RETURNS", no_wrap=True)
    table.add_column("PARAMS")

    for i, fn in enumerate(snap.endpoints):
        table.add_row(str(i), fn.display_name, fn.return_type, fn.signature or "None")

    console.print(table)


@app.command()
def state(
    ctx: typer.Context,
    out: Optional[str] = typer.Option(None, help="Write the state JSON here instead of stdout"),
) -> None:
    """Dump the effective workbench state (after overrides) as JSON."""
    bench: Workbench = ctx.obj
    config = WorkbenchConfig.from_state(bench.state)

    if out:
        target = config.save(Path(out).expanduser())
        console.print(f"[bold green]Wrote[/bold green] state to: {target}")
        return

    payload = json.loads(config.model_dump_json())
    console.print(json.dumps(payload, indent=2), markup=False, emoji=False, highlight=False, soft_wrap=True)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
