"""Plant photo analysis route.

POST /api/analyze-plant {image_url, user_id}
    → {predictions: [{issue, confidence, notes}], submission_id, save_error}

Saving the submission is best-effort: when Supabase rejects it, the
predictions are still returned with a temporary id and the save error.
"""

import asyncio
import logging
import time

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from errors import MissingParameterError
from routes.deps import submission_store
from services.analysis import predict_issues
from services.submissions import SubmissionSaveError, SubmissionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class AnalyzeRequest(BaseModel):
    image_url: str | None = None
    user_id: str | None = None


@router.post("/analyze-plant")
async def analyze_plant(
    body: AnalyzeRequest,
    store: SubmissionStore = Depends(submission_store),
) -> dict:
    if not body.image_url or not body.user_id:
        raise MissingParameterError("Missing image_url or user_id")

    predictions = predict_issues(body.image_url)

    save_error = None
    try:
        submission_id = await asyncio.to_thread(store.save, body.user_id, body.image_url, predictions)
    except SubmissionSaveError as e:
        logger.warning("Failed to save submission, continuing with predictions: %s", e)
        submission_id = f"temp-{int(time.time() * 1000)}"
        save_error = e.to_dict()

    return {
        "predictions": [p.to_dict() for p in predictions],
        "submission_id": submission_id,
        "save_error": save_error,
    }
