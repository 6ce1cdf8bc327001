"""Modelos y errores del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2) y la taxonomía de
errores; el dominio no conoce HTTP, CLI ni la sesión de base de datos.
"""
