"""Exportación de la galería como documento de imágenes.

El archivo tiene la misma forma que el documento remoto
(`{"images": [{"name": ..., "imageurl": ...}]}`), así que puede servirse de
nuevo con `--url` o decodificarse con `ImageListResponse`.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.mapping import image_list_to_response
from core.domain.models import ImageList


def export_image_list_json(*, images: ImageList, output_path: Path) -> Path:
    """Escribe solo los items ya mapeados; los descartados no vuelven al archivo."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    document = image_list_to_response(images)
    output_path.write_text(
        document.model_dump_json(by_alias=True, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
