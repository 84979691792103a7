"""Repositorio de imágenes.

Convierte la salida del cliente de API en dominio y colapsa cualquier fallo en
un `FetchResult`. Nunca lanza por transporte, decodificación o mapeo; la única
excepción es la aserción de desarrollo (`AppSettings.debug`).
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.errors import ApiError
from core.domain.mapping import MappingPolicy, image_list_from_response
from core.domain.models import FetchResult
from core.interfaces.images_api import ImagesApi

logger = logging.getLogger(__name__)


class ImageRepository:
    def __init__(
        self,
        api: ImagesApi,
        *,
        policy: MappingPolicy = MappingPolicy.DROP_INVALID,
        debug: bool = False,
    ) -> None:
        self._api = api
        self._policy = policy
        self._debug = debug

    @classmethod
    def from_settings(cls, api: ImagesApi, settings: AppSettings) -> ImageRepository:
        return cls(api, policy=settings.mapping_policy, debug=settings.debug)

    async def fetch_images(self) -> FetchResult:
        """Una invocación, un resultado."""

        try:
            response = await self._api.fetch_images()
        except ApiError as exc:
            return FetchResult.failure(exc.kind, exc.message)

        images = image_list_from_response(response, policy=self._policy, debug=self._debug)
        if images is None:
            logger.warning("images response could not be mapped (policy=%s)", self._policy.value)
            return FetchResult.failure("mapping", "Object decoding failure")

        logger.debug("images mapped: count=%s", len(images.images))
        return FetchResult.success(images)
