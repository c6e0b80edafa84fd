"""
Top‑level package for the Unicorn API.

The package provides no public exports; all functionality lives in
submodules under ``app``.  Import the ASGI application from
``unicorn_api.app.main`` or construct a fresh one with
``unicorn_api.app.main.create_app``.
"""

__all__ = []
