"""
Nutrition estimation from a meal photo.

Thin passthrough to the Gemini ``generateContent`` endpoint: the photo goes
out with a fixed instruction, the model's JSON reply comes back validated as
calorie and macro totals. Nothing is stored.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Dict, Optional

import httpx
from pydantic import ValidationError

from app.config import settings
from app.exceptions import ServiceValidationError, UpstreamServiceError, UpstreamTimeoutError
from domain.schemas.nutrition_schemas import NutritionEstimate

logger = logging.getLogger("fitcoach.nutrition")

PROMPT = (
    "Analyze the attached image of food. Return a JSON object with your best "
    "estimate of the total calories, protein (in grams), carbohydrates (in grams), "
    "and fat (in grams). The JSON object should have only the following keys: "
    "'calories_kcal', 'protein_g', 'carb_g', 'fat_g'. Do not return any other text "
    "or explanation, only the raw JSON object."
)

RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def build_payload(image_b64: str) -> Dict[str, Any]:
    return {
        "contents": [
            {
                "parts": [
                    {"text": PROMPT},
                    {"inline_data": {"mime_type": "image/jpeg", "data": image_b64}},
                ]
            }
        ]
    }


def strip_code_fences(text: str) -> str:
    """Drop the markdown fences the model sometimes wraps its JSON in"""
    return text.replace("```json", "").replace("```", "").strip()


def extract_reply_text(data: Any) -> str:
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise UpstreamServiceError("Gemini API error: response has no candidate text")


def parse_estimate(text: str) -> NutritionEstimate:
    cleaned = strip_code_fences(text)
    try:
        raw = json.loads(cleaned)
    except ValueError as e:
        raise UpstreamServiceError(f"Could not parse nutrition JSON: {e}")
    try:
        return NutritionEstimate.model_validate(raw)
    except ValidationError as e:
        raise UpstreamServiceError(
            "Nutrition reply is missing or has invalid fields",
            details={"errors": [err.get("msg") for err in e.errors()]},
        )


class NutritionService:
    """
    Gemini vision client.

    The ``httpx.Client`` is injectable so tests can swap in a mock transport;
    ``sleep`` likewise, to keep retry backoff out of test time.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.url = url or settings.gemini_generate_url()
        self.timeout = timeout if timeout is not None else settings.nutrition_timeout_sec
        self.max_retries = max_retries if max_retries is not None else settings.nutrition_max_retries
        self.backoff = backoff if backoff is not None else settings.nutrition_backoff_sec
        self.client = client or httpx.Client(timeout=self.timeout)
        self._sleep = sleep

    def close(self) -> None:
        self.client.close()

    def estimate(self, image_b64: Optional[str]) -> NutritionEstimate:
        """
        Estimate calories and macros for the photographed meal.

        Raises:
            ServiceValidationError: no image supplied (no upstream call is made)
            UpstreamTimeoutError: the upstream call exceeded the time budget
            UpstreamServiceError: upstream failure or an unusable reply
        """
        if not image_b64:
            raise ServiceValidationError("No image data provided.")
        if not self.api_key:
            raise UpstreamServiceError("Gemini API key is not configured")

        response = self._post(build_payload(image_b64))
        if not response.is_success:
            raise UpstreamServiceError(
                f"Gemini API error: {response.reason_phrase} - {response.text}",
                details={"status_code": response.status_code},
            )

        try:
            data = response.json()
        except ValueError:
            raise UpstreamServiceError("Gemini API error: reply is not JSON")

        estimate = parse_estimate(extract_reply_text(data))
        logger.info(
            f"nutrition_estimated kcal={estimate.calories_kcal} protein_g={estimate.protein_g} "
            f"carb_g={estimate.carb_g} fat_g={estimate.fat_g}"
        )
        return estimate

    def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        """POST with exponential backoff on transport errors, 429 and 5xx"""
        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        attempt = 0
        while True:
            try:
                response = self.client.post(
                    self.url, json=payload, headers=headers, timeout=self.timeout
                )
            except httpx.TimeoutException as e:
                # Not retried: the budget is for the whole call
                logger.warning(f"nutrition_upstream_timeout timeout={self.timeout}s error={e!r}")
                raise UpstreamTimeoutError(
                    f"Gemini API did not answer within {self.timeout:g}s"
                )
            except httpx.TransportError as e:
                if attempt >= self.max_retries:
                    logger.error(f"nutrition_upstream_unreachable attempts={attempt + 1} error={e!r}")
                    raise UpstreamServiceError(f"Gemini API unreachable: {e}")
                self._wait(attempt, reason=repr(e))
                attempt += 1
                continue

            if response.status_code in RETRYABLE_STATUS and attempt < self.max_retries:
                self._wait(attempt, reason=f"status={response.status_code}")
                attempt += 1
                continue
            return response

    def _wait(self, attempt: int, reason: str) -> None:
        delay = self.backoff * (2 ** attempt)
        logger.warning(f"nutrition_upstream_retry attempt={attempt + 1} delay={delay}s {reason}")
        self._sleep(delay)
