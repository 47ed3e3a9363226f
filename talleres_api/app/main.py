"""
Main entrypoint for the workshop API.

This module assembles the FastAPI application, sets up logging, owns
the in-memory store and includes the API router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Importing the app here makes it easy
to run with uvicorn or another ASGI server, e.g.::

    uvicorn talleres_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI, Request

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import Store


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module-level settings
        read from the environment.
    store : Optional[Store]
        Store shared by every handler of this app.  When omitted a new
        one is created, seeded with the demo data unless
        ``settings.seed_data`` is false.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the rest of the
    # setup can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if store is None:
        store = Store.seeded() if settings.seed_data else Store()
    app.state.store = store

    @app.middleware("http")
    async def strip_trailing_slash(request: Request, call_next):
        # "/api/talleres/" is served as "/api/talleres" rather than redirected.
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
