"""Contratos del Core.

`ImagesApi` es lo único que el repositorio necesita de la red; los tests lo
sustituyen por dobles en memoria.
"""
