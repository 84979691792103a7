"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La vista de galería solo compone estas piezas.
"""

from __future__ import annotations

from PIL import Image
from rich import box
from rich.align import Align
from rich.color import Color
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from core.domain.models import FetchError

EMPTY_MESSAGE = "Unfortunately the content is not able yet"

_UPPER_HALF = "▀"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Trilby Gallery", style="bold cyan")
    subtitle = Text("Imágenes remotas • Carga asíncrona", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_empty_message(error: FetchError | None = None) -> RenderableType:
    """Mensaje estático cuando no hay contenido.

    Si hay un error, se añade una línea tenue con el detalle (sin diálogos).
    """

    message = Text(EMPTY_MESSAGE)
    if error is None:
        return message
    detail = Text(f"{error.code}: {error.message}", style="dim red")
    return Group(message, detail)


def _scale(rgb: tuple[int, int, int], opacity: float) -> tuple[int, int, int]:
    return (int(rgb[0] * opacity), int(rgb[1] * opacity), int(rgb[2] * opacity))


def render_image(image: Image.Image, *, width: int, opacity: float = 1.0) -> Text:
    """Dibuja una imagen con medios bloques: cada celda son dos píxeles verticales.

    La opacidad se aplica mezclando hacia negro (fondo del terminal).
    """

    opacity = min(1.0, max(0.0, opacity))
    src = image.convert("RGBA")
    background = Image.new("RGBA", src.size, (0, 0, 0, 255))
    rgb = Image.alpha_composite(background, src).convert("RGB")

    w = max(1, width)
    h = max(2, round(rgb.height * w / max(1, rgb.width)))
    if h % 2:
        h += 1
    thumb = rgb.resize((w, h))
    pixels = thumb.load()

    text = Text(no_wrap=True)
    for y in range(0, h, 2):
        for x in range(w):
            top = _scale(pixels[x, y], opacity)
            bottom = _scale(pixels[x, y + 1], opacity)
            text.append(
                _UPPER_HALF,
                style=Style(color=Color.from_rgb(*top), bgcolor=Color.from_rgb(*bottom)),
            )
        if y + 2 < h:
            text.append("\n")
    return text


def build_row_panel(name: str, image: RenderableType) -> Panel:
    """Fila de la galería: nombre como encabezado e imagen debajo, esquinas redondeadas."""

    heading = Text(name, style="bold")
    return Panel(
        Group(heading, image),
        box=box.ROUNDED,
        padding=(1, 2),
        expand=False,
    )
