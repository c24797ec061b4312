"""
Top‑level package for the Prop Firm Directory API.

This file makes ``prop_directory_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``prop_directory_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
