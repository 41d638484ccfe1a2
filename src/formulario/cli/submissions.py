"""
Comandos para envíos guardados: list, show, delete.
"""

from typing import Annotated

import typer
from rich import box
from rich.table import Table

from formulario.cli.common import get_config
from formulario.cli.theme import (
    get_console,
    get_palette,
    print_header,
    print_success,
    print_error,
)
from formulario.submissions import SubmissionManager


submissions_app = typer.Typer(help="Gestión de formularios enviados")


def get_submission_manager() -> SubmissionManager:
    return SubmissionManager(get_config().submissions_dir)


@submissions_app.command("list")
def submissions_list():
    """Lista los formularios enviados."""
    items = get_submission_manager().list_submissions()
    if not items:
        typer.echo("\nNo hay envíos guardados.\n")
        return

    p = get_palette()
    table = Table(title="ENVÍOS", border_style=p.border, box=box.ROUNDED)
    table.add_column("ID", style=p.muted)
    table.add_column("Formulario")
    table.add_column("Usuario")
    table.add_column("Respuestas", justify="right")
    table.add_column("Fecha", style=p.muted)
    for item in items:
        table.add_row(
            item["id"],
            item["form_title"],
            item["identity"] or "-",
            str(item["n_answers"]),
            item["timestamp"][:16].replace("T", " "),
        )
    get_console().print(table)


@submissions_app.command("show")
def submissions_show(
    submission_id: Annotated[str, typer.Argument(help="ID del envío")],
):
    """Muestra las respuestas de un envío."""
    try:
        submission = get_submission_manager().load(submission_id)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_header(submission.form_title, f"Envío {submission.id} - {submission.timestamp[:16]}")
    for field_id, value in submission.answers.items():
        shown = ", ".join(value) if isinstance(value, list) else value
        typer.echo(f"  {field_id}: {shown}")


@submissions_app.command("delete")
def submissions_delete(
    submission_id: Annotated[str, typer.Argument(help="ID del envío")],
):
    """Elimina un envío."""
    if get_submission_manager().delete(submission_id):
        print_success(f"Envío {submission_id} eliminado")
    else:
        print_error(f"Envío no encontrado: {submission_id}")
        raise typer.Exit(1)
