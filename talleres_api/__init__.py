"""
Top-level package for the workshop API.

This file makes ``talleres_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``talleres_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
