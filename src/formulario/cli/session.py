"""
Comandos de sesión de usuario: login, logout, fill.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer

from formulario.cli.common import get_config, build_loader
from formulario.cli.theme import (
    print_header,
    print_success,
    print_error,
    print_info,
)
from formulario.cli.wizard import FormWizard
from formulario.core.navigator import FormNavigator
from formulario.identity import IdentityError, IdentityStore, UserIdentity
from formulario.loaders import HttpFormLoader, RegistrationError
from formulario.submissions import SubmissionManager


def get_identity_store() -> IdentityStore:
    return IdentityStore(get_config().identity_path)


def login(
    roll_number: Annotated[str, typer.Argument(help="Número de matrícula")],
    name: Annotated[str, typer.Argument(help="Nombre completo")],
    remote: Annotated[bool, typer.Option("--remote", help="Registrar también en el servicio")] = False,
):
    """
    Inicia sesión guardando la identidad del usuario.

    Ejemplo:
        formulario login RA2211028030020 "Ana Pérez" --remote
    """
    identity = UserIdentity(roll_number=roll_number.strip(), name=name.strip())

    if remote:
        config = get_config()
        if not config.api_base_url:
            print_error("--remote requiere api_base_url en la configuración")
            raise typer.Exit(1)
        try:
            HttpFormLoader(config.api_base_url, config.request_timeout_s).register_user(identity)
        except RegistrationError as e:
            print_error(str(e))
            raise typer.Exit(1)

    get_identity_store().save(identity)
    print_success(f"Sesión iniciada: {identity.name} ({identity.roll_number})")


def logout():
    """Cierra la sesión y elimina la identidad guardada."""
    if get_identity_store().clear():
        print_success("Sesión cerrada")
    else:
        print_info("No había sesión iniciada")


def fill(
    forms_dir: Annotated[
        Optional[Path], typer.Option("--forms-dir", "-d", help="Directorio con definiciones JSON")
    ] = None,
    api_url: Annotated[
        Optional[str], typer.Option("--api", help="URL base del servicio de formularios")
    ] = None,
):
    """Completa el formulario asignado al usuario, sección por sección."""
    config = get_config()
    try:
        identity = get_identity_store().load()
    except IdentityError as e:
        print_error(str(e))
        raise typer.Exit(1)
    if identity is None:
        print_error("No hay sesión iniciada. Usa 'formulario login' primero.")
        raise typer.Exit(1)

    loader = build_loader(config, forms_dir, api_url)
    navigator = FormNavigator()

    if not asyncio.run(navigator.initialize(loader, identity.roll_number)):
        print_error(f"No se pudo cargar el formulario: {navigator.load_error}")
        typer.echo("  Intenta nuevamente.")
        raise typer.Exit(1)

    form = navigator.form
    print_header(form.form_title, f"Form ID: {form.form_id}")

    if not FormWizard(navigator).run():
        navigator.reset()
        raise typer.Exit(1)

    submission = navigator.submission()
    SubmissionManager(config.submissions_dir).save(submission)
    navigator.reset()

    print_success("Formulario enviado correctamente")
    print_info(f"Envío guardado con ID {submission.id}")
