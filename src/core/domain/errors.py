"""Errores del dominio."""

from __future__ import annotations

from typing import Literal

ApiErrorKind = Literal["transport", "decode"]


class ApiError(Exception):
    """Fallo genérico del cliente de API (transporte o decodificación).

    Aguas abajo no se distinguen ambas clases de fallo; `kind` solo se usa para
    etiquetar el `FetchError` y para logging.
    """

    def __init__(self, message: str, *, kind: ApiErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class MappingAssertionError(AssertionError):
    """Aserción de desarrollo: la respuesta no se pudo mapear al dominio."""
