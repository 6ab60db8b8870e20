import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import requests

from ..config import get_settings
from ..errors import OrderSourceError
from .daily_offset import DailyOffset

logger = logging.getLogger(__name__)


class ShopifyOrderSource:
    """Counts recent paid orders through the Shopify Admin REST API."""

    COUNT_URL = "https://{store}.myshopify.com/admin/api/{version}/orders/count.json"

    def __init__(
        self,
        store: Optional[str],
        access_token: Optional[str],
        api_version: str = "2024-01",
        window_hours: int = 48,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.store = store
        self.access_token = access_token
        self.api_version = api_version
        self.window = timedelta(hours=window_hours)
        self.timeout = timeout
        self.session = session or requests.Session()

    def count_recent_paid_orders(self, now: Optional[datetime] = None) -> int:
        if not self.store or not self.access_token:
            raise OrderSourceError("Shopify store or access token is not configured")

        now = now or datetime.now(timezone.utc)
        params = {
            "financial_status": "paid",
            "status": "any",
            "created_at_min": (now - self.window).isoformat(),
        }
        url = self.COUNT_URL.format(store=self.store, version=self.api_version)

        try:
            response = self.session.get(
                url,
                params=params,
                headers={"X-Shopify-Access-Token": self.access_token},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise OrderSourceError(f"Shopify request failed: {exc}") from exc
        except ValueError as exc:
            raise OrderSourceError("Shopify returned a non-JSON body") from exc

        count = payload.get("count") if isinstance(payload, dict) else None
        if not isinstance(count, int):
            raise OrderSourceError(f"Unexpected Shopify payload: {payload!r}")
        logger.debug("Shopify reports %d paid orders since %s", count, params["created_at_min"])
        return count


@lru_cache
def get_order_source() -> ShopifyOrderSource:
    settings = get_settings()
    return ShopifyOrderSource(
        settings.SHOPIFY_STORE,
        settings.SHOPIFY_API_KEY,
        api_version=settings.SHOPIFY_API_VERSION,
        window_hours=settings.ORDER_WINDOW_HOURS,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


@lru_cache
def get_daily_offset() -> DailyOffset:
    return DailyOffset()
