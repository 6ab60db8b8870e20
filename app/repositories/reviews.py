import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import Depends
from supabase import Client

from ..config import get_settings
from ..errors import ReviewNotFound, StorageError
from ..supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

RATING_VALUES = (5, 4, 3, 2, 1)


class ReviewRepository:
    """
    Review persistence on top of the Supabase table and the two SQL functions
    declared in supabase/schema.sql.
    """

    def __init__(self, supabase: Client, table: str = "reviews"):
        self.supabase = supabase
        self.table = table

    def list(self, product_id: str) -> list[dict]:
        try:
            response = (
                self.supabase.table(self.table)
                .select("*")
                .eq("product_id", product_id)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as exc:
            raise StorageError("Failed to fetch reviews") from exc
        return response.data or []

    def create(self, product_id: str, customer_name: str, rating: int, comment: str) -> dict:
        payload = {
            "product_id": product_id,
            "customer_name": customer_name,
            "rating": rating,
            "comment": comment,
            "helpful": 0,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            response = self.supabase.table(self.table).insert(payload).execute()
        except Exception as exc:
            raise StorageError("Failed to save review") from exc
        if not response.data:
            raise StorageError("Store returned no row for the new review")
        return response.data[0]

    def increment_helpful(self, review_id: str) -> int:
        """Bump ``helpful`` by one in a single UPDATE and return the new value."""
        try:
            target_id = str(UUID(str(review_id)))
        except ValueError:
            raise ReviewNotFound(review_id)

        try:
            response = self.supabase.rpc(
                "increment_review_helpful", {"target_id": target_id}
            ).execute()
        except Exception as exc:
            raise StorageError("Failed to update review") from exc

        if not response.data:
            raise ReviewNotFound(review_id)
        return response.data[0]["helpful"]

    def aggregate_by_rating(self) -> dict:
        try:
            response = self.supabase.rpc("review_rating_counts", {}).execute()
        except Exception as exc:
            raise StorageError("Failed to fetch review statistics") from exc

        ratings = {str(value): 0 for value in RATING_VALUES}
        total = 0
        for row in response.data or []:
            count = int(row["count"])
            total += count
            key = str(row["rating"])
            if key in ratings:
                ratings[key] = count
        return {"totalReviews": total, "ratings": ratings}

    def check_connection(self) -> None:
        try:
            self.supabase.table(self.table).select("id").limit(1).execute()
        except Exception as exc:
            raise StorageError("Review store is unreachable") from exc


def get_review_repository(supabase: Client = Depends(get_supabase_client)) -> ReviewRepository:
    return ReviewRepository(supabase, get_settings().REVIEWS_TABLE)
