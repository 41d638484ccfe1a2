"""
Comandos para inspeccionar archivos de definición: preview, check.
"""

from pathlib import Path
from typing import Annotated

import typer

from formulario.cli.theme import (
    get_console,
    print_header,
    print_success,
    print_error,
    create_fields_table,
)
from formulario.errors import LoadFailure
from formulario.loaders import read_form_file


def preview(
    path: Annotated[Path, typer.Argument(help="Archivo JSON de definición")],
):
    """Muestra las secciones y campos de una definición."""
    try:
        form = read_form_file(path)
    except LoadFailure as e:
        print_error(str(e))
        raise typer.Exit(1)

    console = get_console()
    print_header(form.form_title, f"Form ID: {form.form_id}")
    for idx, section in enumerate(form.sections, start=1):
        console.print(create_fields_table(section, title=f"{idx}. {section.title}"))


def check(
    path: Annotated[Path, typer.Argument(help="Archivo JSON de definición")],
):
    """Verifica que una definición sea válida."""
    try:
        form = read_form_file(path)
    except LoadFailure as e:
        print_error(str(e))
        raise typer.Exit(1)

    n_fields = sum(1 for _ in form.iter_fields())
    print_success(
        f"Definición válida: {form.form_id} "
        f"({form.section_count} secciones, {n_fields} campos)"
    )
