"""Servicios del Core (repositorio y view model).

Por qué:
- Orquestan el flujo fetch -> decode -> map -> publish sin conocer la CLI.
"""
