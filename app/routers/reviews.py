import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..errors import ReviewNotFound, StorageError
from ..repositories.reviews import ReviewRepository, get_review_repository
from ..schemas.reviews import HelpfulOut, HelpfulRequest, ReviewCreate, ReviewOut, ReviewStats, SuccessOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])


@router.get("/reviews", response_model=list[ReviewOut])
def list_reviews(
    product_id: str | None = Query(None, description="External product identifier"),
    repo: ReviewRepository = Depends(get_review_repository),
):
    """Reviews for one product, newest first."""
    if not product_id:
        raise HTTPException(status_code=400, detail="Missing product_id in request")
    try:
        return repo.list(product_id)
    except StorageError as exc:
        logger.exception("Error fetching reviews for %s", product_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post("/reviews", response_model=SuccessOut)
def create_review(payload: ReviewCreate, repo: ReviewRepository = Depends(get_review_repository)):
    if not (payload.product_id and payload.customer_name and payload.rating and payload.comment):
        raise HTTPException(status_code=400, detail="Missing required fields")
    try:
        repo.create(payload.product_id, payload.customer_name, payload.rating, payload.comment)
    except StorageError as exc:
        logger.exception("Error adding review for %s", payload.product_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"success": True}


@router.post("/reviews/helpful", response_model=HelpfulOut)
def mark_helpful(payload: HelpfulRequest, repo: ReviewRepository = Depends(get_review_repository)):
    if not payload.review_id:
        raise HTTPException(status_code=400, detail="Missing review_id")
    try:
        helpful = repo.increment_helpful(payload.review_id)
    except ReviewNotFound as exc:
        raise HTTPException(status_code=404, detail="Review not found.") from exc
    except StorageError as exc:
        logger.exception("Error marking review %s helpful", payload.review_id)
        raise HTTPException(status_code=500, detail="Database error.") from exc
    return {"success": True, "helpful": helpful}


@router.get("/review-stats", response_model=ReviewStats)
def review_stats(repo: ReviewRepository = Depends(get_review_repository)):
    """Review counts per star rating plus the overall total."""
    try:
        return repo.aggregate_by_rating()
    except StorageError as exc:
        logger.exception("Error aggregating review ratings")
        raise HTTPException(status_code=500, detail="Failed to fetch review statistics") from exc
