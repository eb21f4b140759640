# reconui_cli/main.py

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml

from reconui import (
    PARAM_COMP_ID,
    PARAM_COMP_VALUE,
    PARAM_EVENT_TYPE,
    Config,
    EventType,
    InteractionError,
    ReconciliationResult,
    configure_logging,
)
from reconui.config import DEFAULT_CONFIG_FILE

from .showcase import Showcase, build_showcase

# Create the main Typer application object
app = typer.Typer(
    name="reconui",
    help="Command line tools for the reconui toolkit.",
    add_completion=False
)


def _load_config(config_path: str) -> Config:
    config = Config(config_path)
    configure_logging(config)
    return config


def _to_form(entry: Dict[str, Any], showcase: Showcase) -> Dict[str, List[str]]:
    """
    Turns one event file entry into raw request parameters.

    `cid` may be a component id or a showcase component name, `etype` an
    event type code or name.
    """
    cid = entry.get(PARAM_COMP_ID)
    if isinstance(cid, str) and not cid.isdigit():
        component = showcase.component(cid)
        if component is None:
            raise InteractionError(f"unknown component name: {cid!r}")
        cid = component.id

    etype = entry.get(PARAM_EVENT_TYPE, EventType.CLICK.value)
    if isinstance(etype, str) and not etype.isdigit():
        try:
            etype = EventType[etype.upper()].value
        except KeyError:
            raise InteractionError(f"unknown event type: {etype!r}") from None

    form = {PARAM_COMP_ID: [str(cid)], PARAM_EVENT_TYPE: [str(etype)]}
    if PARAM_COMP_VALUE in entry:
        value = entry[PARAM_COMP_VALUE]
        # YAML turns true/false into booleans, the client would send strings
        if isinstance(value, bool):
            value = "true" if value else "false"
        form[PARAM_COMP_VALUE] = ["" if value is None else str(value)]
    return form


def _print_result(step: int, entry: Dict[str, Any], result: ReconciliationResult):
    print(f"[{step}] {entry.get(PARAM_COMP_ID)} {entry.get(PARAM_EVENT_TYPE, 'CLICK')}"
          f" -> {len(result.patches)} patch(es)")
    for patch in result.patches:
        print(f"    {patch.action} #{patch.html_id}: {patch.data['html']}")


def _print_summary(showcase: Showcase):
    c = showcase.components
    color = showcase.groups["color"].selected
    print("--- Final state ---")
    print(f"  selected tab: {c['tabs'].selected}")
    print(f"  subscribe:    {c['subscribe'].state}")
    print(f"  color:        {color.text if color is not None else None}")
    print(f"  dark mode:    {c['dark_mode'].state}")
    print(f"  name:         {c['name'].text!r}")
    print(f"  status:       {c['status'].text!r}")


# --- CLI Commands ---

@app.command()
def render(
    config_path: str = typer.Option(DEFAULT_CONFIG_FILE, "--config", "-c", help="Path to the YAML config file."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the markup to this file instead of stdout."),
):
    """
    Renders the showcase component tree to HTML.
    """
    showcase = build_showcase(_load_config(config_path))
    markup = showcase.session.render()
    if output is None:
        print(markup)
        return
    try:
        output.write_text(markup, encoding="utf-8")
    except OSError as e:
        print(f"❌ Error: Could not write '{output}': {e}")
        raise typer.Exit(code=1)
    print(f"✅ Wrote {len(markup)} characters to {output}")


@app.command()
def dispatch(
    events_file: Path = typer.Argument(..., help="YAML or JSON list of interactions: {cid, etype, cval}."),
    config_path: str = typer.Option(DEFAULT_CONFIG_FILE, "--config", "-c", help="Path to the YAML config file."),
):
    """
    Replays interactions against the showcase tree and prints the resulting patches.
    """
    try:
        with events_file.open("r", encoding="utf-8") as fh:
            entries = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        print(f"❌ Error: Could not read events file '{events_file}': {e}")
        raise typer.Exit(code=1)

    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        print(f"❌ Error: '{events_file}' must contain a list of interactions.")
        raise typer.Exit(code=1)

    showcase = build_showcase(_load_config(config_path))
    for step, entry in enumerate(entries, 1):
        try:
            result = showcase.session.dispatch_form(_to_form(entry, showcase))
        except InteractionError as e:
            print(f"❌ Error: Interaction {step} is invalid: {e}")
            raise typer.Exit(code=1)
        _print_result(step, entry, result)

    _print_summary(showcase)


if __name__ == "__main__":
    app()
