"""Adaptadores de I/O (HTTP).

Aquí vive todo lo que toca la red: cliente httpx, autenticación, dispatcher
y los grupos de endpoints.
"""
