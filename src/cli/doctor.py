"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from io import BytesIO

import typer
from PIL import features
from rich.console import Console
from rich.table import Table

from adapters.image_loader import build_placeholder_image, decode_image
from adapters.images_api import ImagesApiClient
from core.config import AppSettings
from core.domain.errors import ApiError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_images_document(settings: AppSettings) -> tuple[bool, str]:
    try:
        response = await ImagesApiClient(settings).fetch_images()
    except ApiError as exc:
        return False, f"{exc.kind}: {exc.message}"
    count = len(response.images) if response.images is not None else 0
    return True, f"{count} item(s)"


def _check_pillow() -> tuple[bool, str]:
    """Round-trip the placeholder through PNG to detect a broken Pillow install."""

    buffer = BytesIO()
    try:
        build_placeholder_image().save(buffer, format="PNG")
        decode_image(buffer.getvalue())
    except Exception as exc:
        return False, str(exc)
    codecs = [name for name in ("jpg", "webp") if features.check(name)]
    return True, "PNG OK" + (f", {', '.join(codecs)}" if codecs else "")


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Trilby Gallery Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Images URL", "OK", settings.images_url)
    table.add_row("Mapping policy", "OK", settings.mapping_policy.value)
    table.add_row("Debug assertions", "ON" if settings.debug else "OFF", "TRILBY_DEBUG")

    ok_doc, detail_doc = asyncio.run(_check_images_document(settings))
    table.add_row("Images document", "OK" if ok_doc else "FAIL", detail_doc)

    ok_pil, detail_pil = _check_pillow()
    table.add_row("Pillow decode", "OK" if ok_pil else "FAIL", detail_pil)

    _console.print(table)

    if not ok_doc:
        _console.print(
            "\n[yellow]Note:[/yellow] The gallery will keep showing the empty message until the document loads."
        )
