"""
Main entrypoint for the Prop Firm Directory API.

This module assembles the FastAPI application: it sets up logging,
builds the in‑memory store, registers the error handlers and mounts
the API router under ``/api``.  The app is instantiated at module
import time as ``app``, so it can be served directly, e.g.::

    uvicorn prop_directory_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.seed import build_store


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI instance owning a freshly built store.
    """
    app_settings = app_settings or settings
    # Initialise logging before the store is seeded so seeding is logged.
    setup_logging(app_settings.log_level, app_settings.log_file or None, debug=app_settings.debug)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.store = build_store(app_settings)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
