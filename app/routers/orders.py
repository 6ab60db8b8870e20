import logging

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings, get_settings
from ..errors import OrderSourceError
from ..schemas.order import OrderCountOut
from ..services.daily_offset import DailyOffset
from ..services.shopify import ShopifyOrderSource, get_daily_offset, get_order_source

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])


@router.get("/order-count", response_model=OrderCountOut)
def order_count(
    source: ShopifyOrderSource = Depends(get_order_source),
    offset: DailyOffset = Depends(get_daily_offset),
    settings: Settings = Depends(get_settings),
):
    """Paid orders in the recent window, plus the cosmetic daily offset when enabled."""
    try:
        count = source.count_recent_paid_orders()
    except OrderSourceError as exc:
        logger.exception("Error fetching order count")
        raise HTTPException(status_code=500, detail="Failed to fetch order count") from exc

    if settings.ORDER_COUNT_DAILY_OFFSET:
        count += offset.value()
    return {"count": count}
