"""Mapeo respuesta -> dominio.

Reglas:
- Un `ImageItem` solo se construye si el item trae `name` e `imageurl`, y
  `imageurl` es una referencia URL (absoluta o relativa, sin espacios). El
  texto se copia literal, sin normalizar.
- Si falta el array `images`, la lista completa falla.
- Qué pasa con un item incompleto depende de `MappingPolicy`.
- En modo debug cualquier fallo levanta `MappingAssertionError`; fuera de debug
  se devuelve `None` y quien llama decide.
"""

from __future__ import annotations

import logging
from enum import Enum
from urllib.parse import urlsplit

from core.domain.errors import MappingAssertionError
from core.domain.models import ImageItem, ImageList
from core.domain.responses import ImageItemResponse, ImageListResponse

logger = logging.getLogger(__name__)

_FAILURE_MESSAGE = "Object decoding failure"


class MappingPolicy(str, Enum):
    """Política ante items incompletos."""

    DROP_INVALID = "drop-invalid"
    ALL_OR_NOTHING = "all-or-nothing"


def _fail(debug: bool, detail: str) -> None:
    if debug:
        raise MappingAssertionError(f"{_FAILURE_MESSAGE}: {detail}")
    logger.debug("mapping failed: %s", detail)


def is_url_reference(value: str) -> bool:
    """URL absoluta o relativa utilizable tal cual: no vacía, sin espacios."""

    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        urlsplit(value)
    except ValueError:
        return False
    return True


def image_item_from_response(response: ImageItemResponse, *, debug: bool = False) -> ImageItem | None:
    if response.name is None or response.image_url is None:
        missing = "name" if response.name is None else "imageurl"
        _fail(debug, f"item without {missing}")
        return None
    if not is_url_reference(response.image_url):
        _fail(debug, f"invalid imageurl {response.image_url!r}")
        return None
    return ImageItem(name=response.name, image_url=response.image_url)


def image_list_from_response(
    response: ImageListResponse,
    *,
    policy: MappingPolicy = MappingPolicy.DROP_INVALID,
    debug: bool = False,
) -> ImageList | None:
    """Convierte la respuesta en `ImageList` o devuelve `None`.

    - DROP_INVALID: descarta los items incompletos y conserva el resto en orden.
    - ALL_OR_NOTHING: un solo item incompleto invalida la lista entera.
    """

    if response.images is None:
        _fail(debug, "missing images array")
        return None

    items: list[ImageItem] = []
    for raw in response.images:
        item = image_item_from_response(raw, debug=debug)
        if item is None:
            if policy is MappingPolicy.ALL_OR_NOTHING:
                return None
            continue
        items.append(item)
    return ImageList(images=items)


def image_list_to_response(images: ImageList) -> ImageListResponse:
    """Inversa del mapeo: devuelve la forma del wire (clave `imageurl`)."""

    return ImageListResponse(
        images=[ImageItemResponse(name=item.name, image_url=item.image_url) for item in images.images]
    )
