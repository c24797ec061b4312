"""
HTTP API package.

``router.py`` aggregates the domain routers defined in ``endpoints``
and is mounted under ``/api`` by :func:`prop_directory_api.app.main.create_app`.
"""
