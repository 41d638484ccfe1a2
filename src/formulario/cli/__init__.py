"""
CLI de formulario.

Comandos:
- login / logout: Identidad del usuario
- fill: Completar el formulario asignado
- preview / check: Inspeccionar archivos de definición
- submissions: Envíos guardados
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from formulario.cli.common import configure_logging, init_config
from formulario.cli.preview import preview, check
from formulario.cli.session import login, logout, fill
from formulario.cli.submissions import submissions_app

# Crear aplicación principal
app = typer.Typer(
    name="formulario",
    help="Formularios dinámicos multi-sección con validación local.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Logging detallado")] = False,
    config_path: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Archivo de configuración JSON")
    ] = None,
):
    """Formularios dinámicos: completa secciones validadas paso a paso."""
    configure_logging(verbose)
    init_config(config_path)


app.command()(login)
app.command()(logout)
app.command()(fill)
app.command()(preview)
app.command()(check)
app.add_typer(submissions_app, name="submissions")


__all__ = ["app"]
