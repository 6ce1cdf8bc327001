"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan el shell anfitrión y los adaptadores:
listeners de sentencias, registro de listeners y sesión de base de datos.
"""
