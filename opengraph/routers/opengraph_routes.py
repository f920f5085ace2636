from fastapi import APIRouter, Depends, Query

from opengraph.config.logging_config import get_logger
from opengraph.core.config import settings
from opengraph.services.container import get_opengraph_service
from opengraph.services.opengraph_service import OpenGraphService

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def get_opengraph(
    url: str = Query(...),
    strict: bool = Query(settings.opengraph_strict),
    service: OpenGraphService = Depends(get_opengraph_service),
):
    logger.info(f"Received request for OpenGraph: {url}")
    result = await service.get_opengraph(url, strict=strict)
    logger.info(f"Successfully returned OpenGraph for: {url}")
    return result
