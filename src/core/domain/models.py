"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables: un `ImageItem` nunca existe con campos vacíos.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

FetchErrorCode = Literal["transport", "decode", "mapping"]


class ImageItem(BaseModel):
    """Imagen con nombre, validada."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Nombre visible de la imagen (se usa como encabezado de fila).",
    )
    image_url: str = Field(
        ...,
        min_length=1,
        description="Referencia URL del recurso de imagen, copiada literal del wire.",
    )


class ImageList(BaseModel):
    """Lista de imágenes en el orden de la fuente."""

    model_config = ConfigDict(frozen=True)

    images: list[ImageItem] = Field(
        default_factory=list,
        description="Items validados, mismo orden que la respuesta.",
    )


class FetchError(BaseModel):
    """Error estructurado dentro de un `FetchResult`."""

    model_config = ConfigDict(frozen=True)

    code: FetchErrorCode
    message: str


class FetchResult(BaseModel):
    """Resultado etiquetado de una invocación de fetch.

    Por qué un modelo y no una excepción:
    - El repositorio nunca lanza; todo fallo viaja por este canal.
    - Se produce una vez por invocación y no se persiste.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: ImageList | None = None
    error: FetchError | None = None

    @classmethod
    def success(cls, value: ImageList) -> FetchResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, code: FetchErrorCode, message: str) -> FetchResult:
        return cls(ok=False, error=FetchError(code=code, message=message))
