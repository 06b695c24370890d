"""HTTP routes served by the gateway itself (the proxy relay lives in app.proxy)."""

from typing import AsyncIterator

from fastapi import APIRouter, Depends

from .clients import ApiGateway, build_api_gateway
from .config import settings
from .dashboard import DashboardAggregator
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/api")

router = APIRouter(prefix="/api")


async def get_gateway() -> AsyncIterator[ApiGateway]:
    """Per-request client bundle; its connection pool is closed after the response."""
    async with build_api_gateway(settings) as gateway:
        yield gateway


@router.get("/dashboard")
async def dashboard_snapshot(gateway: ApiGateway = Depends(get_gateway)):
    """Aggregate one summary call per domain; failed domains come back as null."""
    aggregator = DashboardAggregator(gateway, city=settings.default_city)
    snapshot = await aggregator.get_dashboard_snapshot()
    return snapshot.model_dump(mode="json", by_alias=True)
