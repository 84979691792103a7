"""Modelos de respuesta (forma literal del JSON remoto).

Por qué separados del dominio:
- El wire format es laxo: todos los campos son opcionales para tolerar payloads
  parciales. El dominio, en cambio, es estricto.
- Viven solo mientras se decodifica una respuesta; se descartan tras el mapeo.

Ejemplo de payload:

{"images": [{"name": "Cat", "imageurl": "https://x/cat.png"}]}
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ImageItemResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = Field(
        default=None,
        description="Nombre visible de la imagen.",
    )
    # La clave en el wire va en minúsculas. Texto tal cual: la URL se valida
    # por item al mapear, no aquí (un item raro no tumba el documento).
    image_url: str | None = Field(
        default=None,
        alias="imageurl",
        description="Referencia URL del recurso de imagen, sin normalizar.",
    )


class ImageListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    images: list[ImageItemResponse] | None = Field(
        default=None,
        description="Items tal como llegan, en orden.",
    )
