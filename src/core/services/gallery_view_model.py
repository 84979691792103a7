"""View model de la galería.

Responsabilidad:
- Lanzar el fetch sin bloquear a la vista (`trigger_fetch`).
- Publicar la última `ImageList` válida y, aparte, el último error.

Concurrencia:
- No se deduplican ni cancelan disparos solapados; el último fetch en terminar
  escribe el estado final.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.models import FetchError, FetchResult, ImageList
from core.services.image_repository import ImageRepository
from core.state import Observable

logger = logging.getLogger(__name__)


class GalleryViewModel:
    def __init__(self, repository: ImageRepository) -> None:
        self._repository = repository
        self.images: Observable[ImageList | None] = Observable(None)
        self.error: Observable[FetchError | None] = Observable(None)
        self._pending: set[asyncio.Task[None]] = set()
        self._failures: list[BaseException] = []

    @property
    def in_flight(self) -> int:
        return len(self._pending)

    def trigger_fetch(self) -> None:
        """Programa un fetch en el loop actual y retorna de inmediato."""

        task = asyncio.get_running_loop().create_task(self._fetch())
        self._pending.add(task)
        task.add_done_callback(self._settle)

    def _settle(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        # Solo llega aquí lo que el repositorio deja escapar (la aserción de debug).
        if not task.cancelled() and task.exception() is not None:
            self._failures.append(task.exception())

    async def _fetch(self) -> None:
        result = await self._repository.fetch_images()
        self.apply(result)

    def apply(self, result: FetchResult) -> None:
        if result.ok and result.value is not None:
            self.images.set(result.value)
            if self.error.value is not None:
                self.error.set(None)
            return

        # El estado previo se conserva: un fallo no borra contenido ya mostrado.
        logger.info("fetch failed: %s", result.error.message if result.error else "unknown")
        self.error.set(result.error)

    async def wait_idle(self) -> None:
        """Espera todos los fetch en vuelo (incluidos los lanzados mientras tanto).

        Si alguno terminó con una excepción, se relanza aquí aunque el task ya
        no esté en vuelo.
        """

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
        if self._failures:
            failure = self._failures[0]
            self._failures.clear()
            raise failure
