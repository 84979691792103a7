"""Cliente HTTP del documento de imágenes.

Flujo:
- Un único GET contra `AppSettings.images_url`.
- El status HTTP no se trata aparte: el body se decodifica siempre y una página
  de error que no sea JSON válido falla en la decodificación.
- Transporte y decodificación se reportan como un único `ApiError`.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import ApiError
from core.domain.responses import ImageListResponse
from core.interfaces.images_api import ImagesApi

logger = logging.getLogger(__name__)


class ImagesApiClient(ImagesApi):
    """Implementación httpx de `ImagesApi`.

    Si se inyecta un `httpx.AsyncClient`, el llamador es dueño de su ciclo de
    vida; si no, se abre y cierra uno por petición.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    @property
    def url(self) -> str:
        return self._settings.images_url

    async def _get(self) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.url)
        async with build_async_client(self._settings) as client:
            return await client.get(self.url)

    async def fetch_images(self) -> ImageListResponse:
        try:
            response = await self._get()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning("images fetch failed: %s", message)
            raise ApiError(message, kind="transport") from exc

        logger.debug("images fetched: status=%s bytes=%s", response.status_code, len(response.content))

        try:
            return ImageListResponse.model_validate_json(response.content)
        except ValidationError as exc:
            message = f"invalid images document (HTTP {response.status_code}): {exc.error_count()} error(s)"
            logger.warning("images decode failed: %s", message)
            raise ApiError(message, kind="decode") from exc
