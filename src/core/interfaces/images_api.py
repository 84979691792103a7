"""Contrato del cliente de API de imágenes.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El repositorio depende de esta abstracción; en tests se sustituye por un
  doble sin tocar HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.responses import ImageListResponse


@runtime_checkable
class ImagesApi(Protocol):
    """Contrato mínimo para obtener la lista de imágenes.

    Reglas de diseño:
    - `fetch_images` es asíncrono porque hace I/O (HTTP).
    - Ante fallo de transporte o de decodificación lanza `ApiError`.
    """

    async def fetch_images(self) -> ImageListResponse:
        """Descarga y decodifica el documento remoto."""

        ...
