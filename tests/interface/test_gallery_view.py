"""Tests for GalleryView rendering, single fetch on appear, and fade-in."""

from __future__ import annotations

import asyncio

import pytest
from PIL import Image
from rich.console import Console

from adapters.image_loader import ImageLoader
from cli.gallery_view import GalleryView, fade_opacity
from cli.main import build_gallery_view_model
from cli.ui_components import EMPTY_MESSAGE, render_image
from core.config import AppSettings
from support import CAT_DOCUMENT, IMAGES_URL, json_handler, mock_client, refused_handler


def _text(renderable) -> str:
    console = Console(record=True, width=100, color_system=None)
    console.print(renderable)
    return console.export_text()


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _run_view(settings: AppSettings, handler, *, appear_times: int = 1, clock=None):
    async def scenario():
        async with mock_client(handler) as client:
            vm = build_gallery_view_model(settings, client=client)
            view = GalleryView(
                vm,
                loader_factory=lambda: ImageLoader(settings, client=client),
                fade_in_seconds=2.0,
                thumbnail_width=8,
                clock=clock or FakeClock(),
            )
            for _ in range(appear_times):
                view.appear()
            await vm.wait_idle()
            await view.wait_images()
            return vm, view

    return asyncio.run(scenario())


class TestGalleryView:
    def test_cat_scenario_renders_one_row(self, settings: AppSettings) -> None:
        vm, view = _run_view(settings, json_handler(CAT_DOCUMENT))
        assert view.titles == ["Cat"]
        loader = view.loader_for("Cat")
        assert loader is not None
        assert loader.image.value.size == (4, 6)
        text = _text(view.render())
        assert "Cat" in text
        assert EMPTY_MESSAGE not in text
        assert "╭" in text  # rounded panel corner

    @pytest.mark.parametrize("payload", [{}, {"images": None}])
    def test_unmappable_document_shows_message(self, settings: AppSettings, payload: dict) -> None:
        vm, view = _run_view(settings, json_handler(payload))
        assert vm.images.value is None
        assert view.titles == []
        text = _text(view.render())
        assert EMPTY_MESSAGE in text
        assert "mapping" in text

    def test_connection_refused_shows_message(self, settings: AppSettings) -> None:
        vm, view = _run_view(settings, refused_handler)
        assert vm.images.value is None
        assert vm.error.value.code == "transport"
        text = _text(view.render())
        assert EMPTY_MESSAGE in text
        assert "Connection refused" in text

    def test_before_fetch_only_message(self, settings: AppSettings) -> None:
        vm = build_gallery_view_model(settings)
        view = GalleryView(vm, loader_factory=lambda: ImageLoader(settings))
        assert _text(view.render()).strip() == EMPTY_MESSAGE

    def test_appear_triggers_a_single_fetch(self, settings: AppSettings) -> None:
        calls: list[str] = []
        _run_view(settings, json_handler(CAT_DOCUMENT, calls=calls), appear_times=3)
        assert calls.count(IMAGES_URL) == 1

    def test_one_loader_per_row(self, settings: AppSettings) -> None:
        document = {
            "images": [
                {"name": "Cat", "imageurl": "https://x/cat.png"},
                {"name": "Dog", "imageurl": "https://x/dog.png"},
            ]
        }
        calls: list[str] = []
        _, view = _run_view(settings, json_handler(document, calls=calls))
        assert view.titles == ["Cat", "Dog"]
        assert view.loader_for("Cat") is not view.loader_for("Dog")
        assert sorted(calls) == sorted([IMAGES_URL, "https://x/cat.png", "https://x/dog.png"])

    def test_close_releases_subscriptions(self, settings: AppSettings) -> None:
        vm, view = _run_view(settings, json_handler(CAT_DOCUMENT))
        assert vm.images.listener_count == 1
        view.close()
        assert vm.images.listener_count == 0
        assert vm.error.listener_count == 0
        assert view.loader_for("Cat").image.listener_count == 0

    def test_on_change_called_on_updates(self, settings: AppSettings) -> None:
        changes: list[int] = []

        async def scenario() -> None:
            async with mock_client(json_handler(CAT_DOCUMENT)) as client:
                vm = build_gallery_view_model(settings, client=client)
                view = GalleryView(
                    vm,
                    loader_factory=lambda: ImageLoader(settings, client=client),
                    on_change=lambda: changes.append(1),
                )
                view.appear()
                await vm.wait_idle()
                await view.wait_images()

        asyncio.run(scenario())
        # list published + image published
        assert len(changes) >= 2


class TestFadeIn:
    def test_curve_bounds(self) -> None:
        assert fade_opacity(0.0, 2.0) == 0.0
        assert fade_opacity(2.0, 2.0) == 1.0
        assert fade_opacity(10.0, 2.0) == 1.0
        assert fade_opacity(-1.0, 2.0) == 0.0

    def test_curve_is_monotonic(self) -> None:
        values = [fade_opacity(t / 10, 2.0) for t in range(0, 21)]
        assert values == sorted(values)

    def test_zero_duration_is_opaque(self) -> None:
        assert fade_opacity(0.0, 0.0) == 1.0

    def test_row_opacity_follows_clock(self, settings: AppSettings) -> None:
        clock = FakeClock()
        _, view = _run_view(settings, json_handler(CAT_DOCUMENT), clock=clock)
        assert view.opacity("Cat") == 0.0
        assert view.is_animating
        clock.now += 1.0
        assert 0.0 < view.opacity("Cat") < 1.0
        clock.now += 1.0
        assert view.opacity("Cat") == 1.0
        assert not view.is_animating

    def test_unknown_row_is_transparent(self, settings: AppSettings) -> None:
        _, view = _run_view(settings, json_handler(CAT_DOCUMENT))
        assert view.opacity("Nope") == 0.0


class TestRenderImage:
    def test_size_in_cells(self) -> None:
        text = render_image(Image.new("RGB", (10, 20), (255, 0, 0)), width=5)
        lines = text.plain.split("\n")
        assert len(lines) == 5
        assert all(len(line) == 5 for line in lines)

    def test_transparent_render_is_black(self) -> None:
        text = render_image(Image.new("RGB", (2, 2), (255, 255, 255)), width=2, opacity=0.0)
        style = text.spans[0].style
        assert style.color.get_truecolor().red == 0
        assert style.bgcolor.get_truecolor().red == 0
