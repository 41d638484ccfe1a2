"""
Loader de definiciones desde el servicio HTTP de formularios.

Endpoints:
    GET  {base_url}/get-form?rollNumber=<identity>
    POST {base_url}/create-user   {"rollNumber": ..., "name": ...}
"""

import asyncio
import logging
from typing import Optional

import requests

from formulario.errors import FormularioError, LoadFailure
from formulario.identity import UserIdentity
from formulario.loaders.base import FormLoader
from formulario.loaders.wire import parse_form_definition
from formulario.models.form import FormDefinition


logger = logging.getLogger(__name__)


class RegistrationError(FormularioError):
    """El servicio rechazó el registro del usuario."""


class HttpFormLoader(FormLoader):
    """Cliente del servicio de formularios."""

    def __init__(self, base_url: str, timeout_s: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s

    def _get_form(self, identity: Optional[str]) -> FormDefinition:
        url = f"{self.base_url}/get-form"
        logger.debug("GET %s (rollNumber=%s)", url, identity)
        try:
            r = requests.get(url, params={"rollNumber": identity}, timeout=self.timeout_s)
            r.raise_for_status()
        except requests.RequestException as e:
            raise LoadFailure(f"error de red: {e}", identity) from e
        try:
            payload = r.json()
        except ValueError as e:
            raise LoadFailure("la respuesta no es JSON", identity) from e
        return parse_form_definition(payload, identity)

    async def fetch(self, identity: Optional[str] = None) -> FormDefinition:
        return await asyncio.to_thread(self._get_form, identity)

    def register_user(self, identity: UserIdentity) -> dict:
        """
        Registra al usuario en el servicio.

        Raises:
            RegistrationError: Si la petición falla
        """
        url = f"{self.base_url}/create-user"
        try:
            r = requests.post(
                url,
                json={"rollNumber": identity.roll_number, "name": identity.name},
                timeout=self.timeout_s,
            )
            r.raise_for_status()
        except requests.RequestException as e:
            raise RegistrationError(f"No se pudo registrar el usuario: {e}") from e
        try:
            return r.json()
        except ValueError:
            return {}
