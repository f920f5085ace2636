from fastapi import APIRouter
from . import root_routes, opengraph_routes

router = APIRouter()

router.include_router(root_routes.router, tags=["root"])
router.include_router(opengraph_routes.router, prefix="/opengraph", tags=["opengraph"])

__all__ = ["router"]
