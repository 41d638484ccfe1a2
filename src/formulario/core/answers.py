"""
Almacén de respuestas: fieldId -> string o lista de strings.

El almacén es inmutable; cada escritura retorna un almacén nuevo, lo que
permite guardar cada estado de la sesión como un valor independiente.
"""

from collections.abc import Mapping
from typing import Iterator, Optional, Union

from formulario.models.field import FieldRule


AnswerValue = Union[str, list[str]]


def is_empty_answer(value: Optional[AnswerValue]) -> bool:
    """Ausente, string vacío o colección vacía."""
    if value is None:
        return True
    return len(value) == 0


def check_answer_shape(field: FieldRule, value: AnswerValue) -> None:
    """
    Verifica que la forma del valor coincida con el tipo del campo.

    Raises:
        TypeError: Lista para un campo escalar o string para uno múltiple
    """
    if field.kind.holds_collection:
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise TypeError(
                f"El campo '{field.field_id}' espera una lista de strings, "
                f"se recibió {type(value).__name__}"
            )
        if not all(isinstance(v, str) for v in value):
            raise TypeError(f"El campo '{field.field_id}' solo acepta strings")
    elif not isinstance(value, str):
        raise TypeError(
            f"El campo '{field.field_id}' espera un string, "
            f"se recibió {type(value).__name__}"
        )


class AnswerStore(Mapping):
    """Mapeo inmutable de respuestas del usuario."""

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, AnswerValue]] = None):
        self._data: dict[str, AnswerValue] = {}
        for key, value in (data or {}).items():
            self._data[key] = _freeze(value)

    def __getitem__(self, field_id: str) -> AnswerValue:
        value = self._data[field_id]
        # Copia para que el llamador no pueda mutar el almacén
        return list(value) if isinstance(value, tuple) else value

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if isinstance(other, AnswerStore):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self.snapshot() == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"AnswerStore({self.snapshot()!r})"

    def with_answer(self, field_id: str, value: AnswerValue) -> "AnswerStore":
        """Retorna un almacén nuevo con la respuesta agregada o reemplazada."""
        new = AnswerStore()
        new._data = dict(self._data)
        new._data[field_id] = _freeze(value)
        return new

    def snapshot(self) -> dict[str, AnswerValue]:
        """Copia mutable e independiente de las respuestas."""
        return {k: self[k] for k in self._data}


def _freeze(value: AnswerValue):
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value
