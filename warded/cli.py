"""CLI for evaluating warded forms against a values file."""

import importlib
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from warded import __version__
from warded.base import FilledForm, Form, fill
from warded.result import Ok
from warded.simple.view import error_to_string, field_label

app = typer.Typer(
    name="warded",
    help="Evaluate composable forms against a snapshot of values.",
    no_args_is_help=True,
)
console = Console()

DEMO_FORM = "warded.demo:login_form"
DEMO_VALUES_MODEL = "warded.demo:LoginValues"


class LogLevel(str, Enum):
    """Logging levels accepted by --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"warded version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """warded: composable form validation."""
    pass


def load_object(target: str) -> Any:
    """Import ``module:attribute`` and return the attribute.

    Raises:
        ValueError: If ``target`` is malformed or cannot be resolved.
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got '{target}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module '{module_name}': {e}") from e

    try:
        return getattr(module, attribute)
    except AttributeError as e:
        raise ValueError(f"Module '{module_name}' has no attribute '{attribute}'") from e


def _field_value(state: Any) -> Any:
    descriptor = getattr(state, "state", state)
    return getattr(descriptor, "value", None)


def summarize(filled: FilledForm) -> dict[str, Any]:
    """JSON-compatible summary of a filled form."""
    fields = [
        {
            "label": field_label(filled_field.state),
            "value": _field_value(filled_field.state),
            "error": filled_field.error.model_dump() if filled_field.error else None,
            "is_disabled": filled_field.is_disabled,
        }
        for filled_field in filled.fields
    ]

    if isinstance(filled.result, Ok):
        output = filled.result.value
        result: dict[str, Any] = {
            "ok": True,
            "output": output.model_dump(mode="json") if isinstance(output, BaseModel) else output,
        }
    else:
        result = {
            "ok": False,
            "errors": [error.model_dump() for error in filled.result.errors],
        }

    return {"fields": fields, "result": result, "is_empty": filled.is_empty}


@app.command("fill")
def fill_command(
    values_path: Annotated[
        Path,
        typer.Argument(help="JSON file holding the form values"),
    ],
    form_target: Annotated[
        str,
        typer.Option(
            "--form",
            "-f",
            envvar="WARDED_FORM",
            help="Form to evaluate, as module:attribute",
        ),
    ] = DEMO_FORM,
    values_model: Annotated[
        str | None,
        typer.Option(
            "--values-model",
            "-m",
            envvar="WARDED_VALUES_MODEL",
            help=(
                "Pydantic model the values are validated into, as module:attribute. "
                "Defaults to the demo values model for the demo form only."
            ),
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print a JSON summary instead of a table"),
    ] = False,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            envvar="WARDED_LOG_LEVEL",
            case_sensitive=False,
            help="Logging level",
        ),
    ] = LogLevel.WARNING,
) -> None:
    """Fill a form with the values in VALUES_PATH and report the result.

    Exits with status 1 when the form does not validate.
    """
    logging.basicConfig(level=log_level.value, format="%(levelname)s %(name)s: %(message)s")

    if not values_path.exists():
        console.print(f"[red]Error:[/red] Values file not found: {values_path}")
        raise typer.Exit(1)

    if values_model is None and form_target == DEMO_FORM:
        values_model = DEMO_VALUES_MODEL

    try:
        form = load_object(form_target)
        if not isinstance(form, Form):
            raise ValueError(f"'{form_target}' is not a Form")

        with open(values_path) as f:
            values: Any = json.load(f)

        if values_model:
            model = load_object(values_model)
            if not (isinstance(model, type) and issubclass(model, BaseModel)):
                raise ValueError(f"'{values_model}' is not a pydantic model")
            values = model.model_validate(values)
    except (OSError, ValueError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    filled = fill(form, values)

    if as_json:
        typer.echo(json.dumps(summarize(filled), indent=2, default=str))
    else:
        table = Table(title=form_target)
        table.add_column("#", justify="right")
        table.add_column("Field")
        table.add_column("Value")
        table.add_column("Error", style="red")

        for index, filled_field in enumerate(filled.fields, 1):
            table.add_row(
                str(index),
                field_label(filled_field.state) or "-",
                repr(_field_value(filled_field.state)),
                error_to_string(filled_field.error) if filled_field.error else "",
            )
        console.print(table)

        if isinstance(filled.result, Ok):
            console.print(f"[green]Valid:[/green] {escape(repr(filled.result.value))}")
        else:
            console.print(f"[red]Invalid:[/red] {len(filled.result.errors)} error(s)")
            for error in filled.result.errors:
                console.print(f"  - {escape(error_to_string(error))}")

    if not isinstance(filled.result, Ok):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
