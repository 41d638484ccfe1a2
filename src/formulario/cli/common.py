"""
Utilidades compartidas por los comandos CLI: configuración, logging y loaders.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from formulario.cli.theme import get_console, print_error, set_theme
from formulario.config import AppConfig, load_config
from formulario.loaders import FormLoader, HttpFormLoader, JsonFileLoader

# Configuración activa de la CLI
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Obtiene o carga la configuración."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """Reemplaza la configuración activa (None fuerza recarga)."""
    global _config
    _config = config
    if config is not None:
        set_theme(config.theme)


def init_config(config_path: Optional[Path]) -> AppConfig:
    """Carga la configuración desde un archivo; termina con código 1 si es inválida."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)
    set_config(config)
    return config


def configure_logging(verbose: bool = False) -> None:
    """Envía el logging de la librería a la consola Rich."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=get_console(), show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_loader(
    config: AppConfig,
    forms_dir: Optional[Path] = None,
    api_url: Optional[str] = None,
) -> FormLoader:
    """
    Elige la fuente de la definición.

    Prioridad: --forms-dir, --api, forms_dir de config, api_base_url de config.
    """
    if forms_dir is not None:
        return JsonFileLoader(forms_dir)
    if api_url:
        return HttpFormLoader(api_url, timeout_s=config.request_timeout_s)
    if config.forms_dir is not None:
        return JsonFileLoader(config.forms_dir)
    if config.api_base_url:
        return HttpFormLoader(config.api_base_url, timeout_s=config.request_timeout_s)

    print_error("No hay fuente de formularios configurada.")
    typer.echo("  Usa --forms-dir DIR o --api URL, o define forms_dir/api_base_url en config.json")
    raise typer.Exit(1)
