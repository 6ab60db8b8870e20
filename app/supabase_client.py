import logging
from functools import lru_cache

from supabase import Client, ClientOptions, create_client

from .config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_supabase_client() -> Client:
    """
    Service-role client for the review store, shared by every request.
    PostgREST calls use the same timeout as our other outbound HTTP.
    """
    settings = get_settings()
    logger.info("Creating Supabase client for %s", settings.SUPABASE_URL)
    return create_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_SERVICE_ROLE_KEY,
        options=ClientOptions(postgrest_client_timeout=settings.HTTP_TIMEOUT_SECONDS),
    )
