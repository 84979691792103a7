"""Typer CLI for trilby-gallery.

`show` fetches the images document and renders the gallery; `doctor` runs
environment diagnostics. The composition root (`build_gallery_view_model`)
lives here: the API client and repository are built once and passed down.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.live import Live

from adapters.http_client import build_async_client
from adapters.image_loader import ImageLoader
from adapters.images_api import ImagesApiClient
from adapters.json_exporter import export_image_list_json
from cli import doctor
from cli.gallery_view import GalleryView
from cli.ui_components import print_banner
from core.config import AppSettings
from core.domain.mapping import MappingPolicy
from core.logging import configure_logging
from core.services.gallery_view_model import GalleryViewModel
from core.services.image_repository import ImageRepository

app = typer.Typer(no_args_is_help=True, help="Remote image gallery in the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

_FRAMES_PER_SECOND = 12


def build_gallery_view_model(
    settings: AppSettings,
    *,
    client: httpx.AsyncClient | None = None,
) -> GalleryViewModel:
    """API client -> repository -> view model, wired explicitly."""

    api = ImagesApiClient(settings, client=client)
    repository = ImageRepository.from_settings(api, settings)
    return GalleryViewModel(repository)


async def _fetch_json(settings: AppSettings, *, export: Path | None = None) -> tuple[int, dict]:
    async with build_async_client(settings) as client:
        view_model = build_gallery_view_model(settings, client=client)
        view_model.trigger_fetch()
        await view_model.wait_idle()

    images = view_model.images.value
    if images is not None:
        if export is not None:
            export_image_list_json(images=images, output_path=export)
        return 0, images.model_dump(mode="json")
    error = view_model.error.value
    return 1, {"error": error.model_dump(mode="json") if error else None}


async def _show_gallery(
    settings: AppSettings,
    *,
    live: bool,
    console: Console,
    export: Path | None = None,
) -> None:
    async with build_async_client(settings) as client:
        view_model = build_gallery_view_model(settings, client=client)
        view = GalleryView(
            view_model,
            loader_factory=lambda: ImageLoader(settings, client=client),
            fade_in_seconds=settings.fade_in_seconds if live else 0.0,
            thumbnail_width=settings.thumbnail_width,
        )
        view.appear()
        try:
            if live:
                with Live(
                    view.render(),
                    console=console,
                    refresh_per_second=_FRAMES_PER_SECOND,
                    vertical_overflow="visible",
                ) as screen:
                    while view_model.in_flight or view.is_animating:
                        screen.update(view.render())
                        await asyncio.sleep(1 / _FRAMES_PER_SECOND)
                    await view_model.wait_idle()
                    await view.wait_images()
                    screen.update(view.render())
            else:
                await view_model.wait_idle()
                await view.wait_images()
                console.print(view.render())
        finally:
            view.close()

    images = view_model.images.value
    if export is not None and images is not None:
        export_image_list_json(images=images, output_path=export)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
    log_json: bool = typer.Option(False, "--log-json", help="Structured JSON log output to stderr."),
) -> None:
    configure_logging(verbose=verbose, log_json=log_json)


@app.command()
def show(
    url: Optional[str] = typer.Option(None, "--url", help="Override the images document URL."),
    as_json: bool = typer.Option(False, "--json", help="Print the mapped list as JSON instead of rendering."),
    no_live: bool = typer.Option(False, "--no-live", help="Render once after every image finished loading."),
    policy: Optional[MappingPolicy] = typer.Option(None, "--policy", help="Policy for incomplete items."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
    export: Optional[Path] = typer.Option(None, "--export", help="Also write the mapped list to a JSON file."),
) -> None:
    """Fetch the images document and render the gallery."""

    overrides: dict[str, object] = {}
    if url:
        overrides["images_url"] = url
    if policy is not None:
        overrides["mapping_policy"] = policy
    settings = AppSettings(**overrides)

    if as_json:
        code, payload = asyncio.run(_fetch_json(settings, export=export))
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        raise typer.Exit(code=code)

    if banner:
        print_banner(_console)
    asyncio.run(_show_gallery(settings, live=not no_live, console=_console, export=export))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
