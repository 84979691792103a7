"""Test helpers shared across test modules (HTTP doubles, image bytes)."""

from __future__ import annotations

import random
import struct
import zlib
from collections.abc import Callable
from io import BytesIO
from typing import Any

import httpx
from PIL import Image

IMAGES_URL = "https://cdn.test/images.json"

Handler = Callable[[httpx.Request], httpx.Response]


def png_bytes(size: tuple[int, int] = (4, 6), color: tuple[int, int, int] = (200, 10, 10)) -> bytes:
    """Encode a solid-color PNG."""
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def mock_client(handler: Handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def json_handler(payload: Any, *, status_code: int = 200, calls: list[str] | None = None) -> Handler:
    """Serve ``payload`` for the images document and a PNG for anything else."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(str(request.url))
        if str(request.url) == IMAGES_URL:
            return httpx.Response(status_code, json=payload)
        return httpx.Response(200, content=png_bytes(), headers={"Content-Type": "image/png"})

    return handler


def refused_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


CAT_DOCUMENT = {"images": [{"name": "Cat", "imageurl": "https://x/cat.png"}]}


def _chunk(cid: bytes, body: bytes) -> bytes:
    return struct.pack(">I", len(body)) + cid + body + struct.pack(">I", zlib.crc32(cid + body))


def broken_png_bytes() -> bytes:
    """PNG whose pixel data continues in a chunk with a garbage type.

    The header opens fine; Pillow fails only while loading pixels, with
    ``SyntaxError("broken PNG file ...")``.
    """
    noise = Image.frombytes("RGB", (16, 16), random.Random(0).randbytes(16 * 16 * 3))
    buffer = BytesIO()
    noise.save(buffer, format="PNG")
    data = buffer.getvalue()

    start = data.index(b"IDAT") - 4
    (length,) = struct.unpack(">I", data[start : start + 4])
    payload = data[start + 8 : start + 8 + length]
    half = len(payload) // 2
    end = start + 12 + length
    return data[:start] + _chunk(b"IDAT", payload[:half]) + _chunk(b"\x86Q\rC", payload[half:]) + data[end:]
