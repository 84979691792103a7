"""Entrada de desarrollo desde `src/`.

`python -m main show --no-live` lanza la galería sin instalar el paquete.
"""

from __future__ import annotations

import sys

# Windows consoles default to cp1252, which cannot encode the half-block cells.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run  # noqa: E402


if __name__ == "__main__":
    run()
