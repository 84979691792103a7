"""Gallery view: renders the view model state with Rich.

The view owns one `ImageLoader` per row and every subscription it opens;
`close()` releases them. Fetching is triggered once, on first `appear()`.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable

from PIL import Image
from rich.console import Group, RenderableType

from adapters.image_loader import ImageLoader, build_placeholder_image
from cli.ui_components import build_empty_message, build_row_panel, render_image
from core.domain.models import FetchError, ImageList
from core.services.gallery_view_model import GalleryViewModel
from core.state import Subscription


def fade_opacity(elapsed: float, duration: float) -> float:
    """Ease-out curve from 0.0 to 1.0 over `duration` seconds."""

    if duration <= 0:
        return 1.0
    t = min(1.0, max(0.0, elapsed / duration))
    return 1.0 - (1.0 - t) ** 3


class GalleryView:
    def __init__(
        self,
        view_model: GalleryViewModel,
        *,
        loader_factory: Callable[[], ImageLoader],
        placeholder: Image.Image | None = None,
        fade_in_seconds: float = 2.0,
        thumbnail_width: int = 32,
        clock: Callable[[], float] = time.monotonic,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._view_model = view_model
        self._loader_factory = loader_factory
        self._placeholder = placeholder if placeholder is not None else build_placeholder_image()
        self._fade_in_seconds = fade_in_seconds
        self._thumbnail_width = thumbnail_width
        self._clock = clock
        self._on_change = on_change

        self._appeared = False
        self._subscriptions: list[Subscription] = []
        self._loaders: dict[str, ImageLoader] = {}
        self._shown_at: dict[str, float] = {}

    @property
    def titles(self) -> list[str]:
        images = self._view_model.images.value
        if images is None:
            return []
        return [item.name for item in images.images]

    def loader_for(self, name: str) -> ImageLoader | None:
        return self._loaders.get(name)

    def appear(self) -> None:
        """First appearance subscribes and triggers the single fetch."""

        if self._appeared:
            return
        self._appeared = True
        self._subscriptions.append(self._view_model.images.subscribe(self._on_images, emit_current=True))
        self._subscriptions.append(self._view_model.error.subscribe(self._on_error))
        self._view_model.trigger_fetch()

    def close(self) -> None:
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions.clear()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def _on_error(self, _error: FetchError | None) -> None:
        self._changed()

    def _on_images(self, images: ImageList | None) -> None:
        if images is None:
            return
        for item in images.images:
            if item.name in self._loaders:
                continue
            loader = self._loader_factory()
            self._loaders[item.name] = loader
            # The placeholder is visible right away, so the fade starts with the row.
            self._shown_at[item.name] = self._clock()
            self._subscriptions.append(loader.image.subscribe(lambda _img: self._changed()))
            loader.load(item.image_url, self._placeholder)
        self._changed()

    def opacity(self, name: str) -> float:
        shown_at = self._shown_at.get(name)
        if shown_at is None:
            return 0.0
        return fade_opacity(self._clock() - shown_at, self._fade_in_seconds)

    @property
    def is_animating(self) -> bool:
        return any(self.opacity(name) < 1.0 for name in self._shown_at)

    async def wait_images(self) -> None:
        await asyncio.gather(*(loader.wait() for loader in self._loaders.values()))

    def _row(self, name: str) -> RenderableType:
        loader = self._loaders.get(name)
        image = loader.image.value if loader is not None else None
        return build_row_panel(
            name,
            render_image(
                image if image is not None else self._placeholder,
                width=self._thumbnail_width,
                opacity=self.opacity(name),
            ),
        )

    def render(self) -> RenderableType:
        images = self._view_model.images.value
        if images is None:
            return build_empty_message(self._view_model.error.value)
        return Group(*(self._row(item.name) for item in images.images))
