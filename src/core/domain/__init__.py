"""Dominio de la galería.

- `responses`: forma laxa del documento de imágenes tal como llega.
- `models`: `ImageItem`/`ImageList` validados y el resultado de un fetch.
- `mapping`: paso de una forma a la otra según `MappingPolicy`.
"""
