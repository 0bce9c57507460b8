"""Supabase persistence for plant-photo submissions.

The client is created lazily on first save so the API starts without
Supabase credentials; saves then fail with SubmissionSaveError.
"""

import logging

import httpx
from postgrest import APIError
from supabase import Client, create_client

from services.analysis import Prediction

logger = logging.getLogger(__name__)

SUBMISSIONS_TABLE = "user_submissions"


class SubmissionSaveError(Exception):
    def __init__(self, message: str, code: str | None = None, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code, "hint": self.hint}


class SubmissionStore:
    def __init__(self, url: str | None, key: str | None):
        self._url = url
        self._key = key
        self._client: Client | None = None

    def _get_client(self) -> Client:
        if self._client is None:
            if not self._url or not self._key:
                raise SubmissionSaveError("Supabase is not configured (SUPABASE_URL / SUPABASE_ANON_KEY)")
            url = self._url if self._url.startswith("http") else f"https://{self._url}"
            try:
                self._client = create_client(url, self._key)
            except Exception as e:
                logger.error("Failed to initialize Supabase client: %s", e)
                raise SubmissionSaveError(f"Supabase initialization failed: {e}") from e
            logger.info("Supabase client initialized")
        return self._client

    def save(self, user_id: str, image_url: str, predictions: list[Prediction]) -> str:
        """Insert a submission row and return its id."""
        client = self._get_client()
        try:
            response = (
                client.table(SUBMISSIONS_TABLE)
                .insert({
                    "user_id": user_id,
                    "image_url": image_url,
                    "predicted_issues": [p.issue for p in predictions],
                    "confidence": [p.confidence for p in predictions],
                })
                .execute()
            )
        except APIError as e:
            logger.error("Supabase error %s: %s (details=%s, hint=%s)", e.code, e.message, e.details, e.hint)
            raise SubmissionSaveError(e.message or str(e), code=e.code, hint=e.hint) from e
        except httpx.HTTPError as e:
            logger.error("Supabase unreachable: %s", e)
            raise SubmissionSaveError(f"Supabase unreachable: {e}") from e

        if not response.data:
            raise SubmissionSaveError("Supabase returned no row for the inserted submission")
        row_id = response.data[0].get("id")
        if row_id is None:
            logger.error("Inserted submission row has no id: %s", response.data[0])
            raise SubmissionSaveError("Supabase returned a submission row without an id")
        return str(row_id)
