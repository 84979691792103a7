"""Carga asíncrona de una imagen para una fila de la galería.

Reglas:
- `load(None, ...)` no hace nada: la vista muestra el placeholder directamente.
- Cualquier fallo (transporte o decodificación) publica el placeholder; el
  error nunca sale de aquí.
- No hay guardas contra `load` repetidos ni cancelación de peticiones previas.
"""

from __future__ import annotations

import asyncio
import logging
from io import BytesIO

import httpx
from PIL import Image, ImageDraw

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.state import Observable

logger = logging.getLogger(__name__)

def decode_image(data: bytes) -> Image.Image:
    """Decodifica bytes con Pillow (formato libre, solo se exige decodificable)."""

    with Image.open(BytesIO(data)) as img:
        img.load()
        return img.copy()


def build_placeholder_image(size: int = 64) -> Image.Image:
    """Silueta de persona sobre fondo gris, equivalente al icono del sistema."""

    img = Image.new("RGB", (size, size), (60, 60, 60))
    draw = ImageDraw.Draw(img)
    fg = (170, 170, 170)
    head = size * 0.2
    cx = size / 2
    draw.ellipse((cx - head, size * 0.12, cx + head, size * 0.12 + head * 2), fill=fg)
    draw.rounded_rectangle(
        (size * 0.18, size * 0.58, size * 0.82, size * 0.95),
        radius=max(1, int(size * 0.15)),
        fill=fg,
    )
    return img


class ImageLoader:
    """Un loader por fila; es dueño de su imagen decodificada."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self.image: Observable[Image.Image | None] = Observable(None)
        self._pending: set[asyncio.Task[None]] = set()

    def load(self, url: str | None, placeholder: Image.Image) -> None:
        if url is None:
            return
        task = asyncio.get_running_loop().create_task(self._load(url, placeholder))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _get(self, url: str) -> bytes:
        if self._client is not None:
            response = await self._client.get(url)
        else:
            async with build_async_client(self._settings) as client:
                response = await client.get(url)
        return response.content

    async def _load(self, url: str, placeholder: Image.Image) -> None:
        try:
            data = await self._get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("image fetch failed url=%s: %s", url, exc)
            self.image.set(placeholder)
            return

        # Pillow plugins raise more than OSError on corrupt input
        # (SyntaxError, EOFError, struct.error...); every one means "not an image".
        try:
            decoded = decode_image(data)
        except Exception as exc:
            logger.debug("image decode failed url=%s: %r", url, exc)
            self.image.set(placeholder)
            return

        self.image.set(decoded)

    async def wait(self) -> None:
        while self._pending:
            await asyncio.gather(*list(self._pending))
