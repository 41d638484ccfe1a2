"""
Fuentes de definiciones de formulario.

- base: Interfaz FormLoader y StaticLoader
- wire: Conversión del JSON del servicio a modelos
- file: Archivos JSON locales
- http: Servicio HTTP remoto
"""

from formulario.loaders.base import FormLoader, StaticLoader
from formulario.loaders.wire import WIRE_KINDS, parse_form_definition
from formulario.loaders.file import JsonFileLoader, read_form_file
from formulario.loaders.http import HttpFormLoader, RegistrationError

__all__ = [
    "FormLoader",
    "StaticLoader",
    "WIRE_KINDS",
    "parse_form_definition",
    "JsonFileLoader",
    "read_form_file",
    "HttpFormLoader",
    "RegistrationError",
]
