"""
Top-level API router.

Aggregates the resource routers under their prefixes and serves the
welcome message at the root.  The application mounts this router at
``/api``; anything it does not match is answered by the catch-all
404 handler in ``core.errors``.
"""

from fastapi import APIRouter

from talleres_api.app.schemas.common import Message

from .endpoints import participantes, talleres

router = APIRouter()

WELCOME = "Bienvenido a la API de Gestión de Talleres UDI"


# Declared here rather than in an endpoint module: FastAPI refuses an
# empty path on a router included without a prefix.
@router.get("", response_model=Message, tags=["root"])
async def welcome() -> Message:
    """Return the fixed welcome message."""
    return Message(message=WELCOME)


router.include_router(talleres.router, prefix="/talleres", tags=["talleres"])
router.include_router(participantes.router, prefix="/participantes", tags=["participantes"])
