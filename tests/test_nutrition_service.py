"""
Tests for the Gemini nutrition passthrough, with the upstream answered by an
httpx mock transport.
"""

import json

import httpx
import pytest

from test_fixtures import GEMINI_URL, gemini_reply, make_nutrition_service
from app.exceptions import ServiceValidationError, UpstreamServiceError, UpstreamTimeoutError
from services.nutrition_service import PROMPT, parse_estimate, strip_code_fences

IMAGE = "aGVsbG8tanBlZw=="


def test_estimate_strips_fences_and_sends_prompt():
    """
    Verifies:
    - prompt text and inline JPEG go out in one generateContent call
    - the API key travels as a header, not in the URL
    - ```json fences around the reply are removed before parsing
    """
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        text = '```json\n{"calories_kcal": 540, "protein_g": 32.5, "carb_g": 61, "fat_g": 14}\n```'
        return httpx.Response(200, json=gemini_reply(text))

    service = make_nutrition_service(handler)
    estimate = service.estimate(IMAGE)

    assert estimate.calories_kcal == 540
    assert estimate.protein_g == 32.5
    assert estimate.carb_g == 61
    assert estimate.fat_g == 14

    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == GEMINI_URL
    assert request.headers["x-goog-api-key"] == "test-gemini-key"
    assert "key=" not in str(request.url)
    parts = json.loads(request.content)["contents"][0]["parts"]
    assert parts[0]["text"] == PROMPT
    assert parts[1]["inline_data"] == {"mime_type": "image/jpeg", "data": IMAGE}


@pytest.mark.parametrize("image", [None, ""])
def test_missing_image_makes_no_upstream_call(image):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=gemini_reply("{}"))

    with pytest.raises(ServiceValidationError) as exc:
        make_nutrition_service(handler).estimate(image)

    assert str(exc.value) == "No image data provided."
    assert calls == []


def test_upstream_client_error_surfaces_reason_and_body():
    def handler(request):
        return httpx.Response(400, text='{"error": "image too large"}')

    with pytest.raises(UpstreamServiceError) as exc:
        make_nutrition_service(handler).estimate(IMAGE)

    assert str(exc.value) == 'Gemini API error: Bad Request - {"error": "image too large"}'
    assert not isinstance(exc.value, UpstreamTimeoutError)


def test_retries_on_server_errors_then_succeeds():
    replies = [
        httpx.Response(503, text="overloaded"),
        httpx.Response(429, text="slow down"),
        httpx.Response(
            200,
            json=gemini_reply('{"calories_kcal": 200, "protein_g": 10, "carb_g": 20, "fat_g": 5}'),
        ),
    ]
    delays = []

    service = make_nutrition_service(
        lambda request: replies.pop(0), backoff=0.5, sleep=delays.append
    )

    assert service.estimate(IMAGE).calories_kcal == 200
    assert delays == [0.5, 1.0]


def test_gives_up_after_max_retries():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, text="boom")

    with pytest.raises(UpstreamServiceError) as exc:
        make_nutrition_service(handler, max_retries=2).estimate(IMAGE)

    assert len(calls) == 3
    assert "Internal Server Error - boom" in str(exc.value)


def test_transport_error_is_retried():
    attempts = {"n": 0}

    def handler(request):
        attempts["n"] += 1
        if attempts["n"] == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(
            200, json=gemini_reply('{"calories_kcal": 1, "protein_g": 0, "carb_g": 0, "fat_g": 0}')
        )

    assert make_nutrition_service(handler).estimate(IMAGE).calories_kcal == 1
    assert attempts["n"] == 2


def test_timeout_is_distinct_and_not_retried():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(UpstreamTimeoutError) as exc:
        make_nutrition_service(handler, timeout=2.0).estimate(IMAGE)

    assert exc.value.http_status == 504
    assert len(calls) == 1


def test_reply_without_candidates():
    def handler(request):
        return httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}})

    with pytest.raises(UpstreamServiceError):
        make_nutrition_service(handler).estimate(IMAGE)


def test_reply_that_is_not_json():
    def handler(request):
        return httpx.Response(200, json=gemini_reply("Looks like about 500 calories of pasta."))

    with pytest.raises(UpstreamServiceError) as exc:
        make_nutrition_service(handler).estimate(IMAGE)

    assert "Could not parse nutrition JSON" in str(exc.value)


def test_missing_api_key_fails_before_calling():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200)

    with pytest.raises(UpstreamServiceError):
        make_nutrition_service(handler, api_key="").estimate(IMAGE)
    assert calls == []


def test_parse_estimate_rejects_missing_fields():
    with pytest.raises(UpstreamServiceError):
        parse_estimate('{"calories_kcal": 300, "protein_g": 20}')


def test_strip_code_fences():
    assert strip_code_fences('```json {"a": 1} ```') == '{"a": 1}'
    assert strip_code_fences('  {"a": 1}\n') == '{"a": 1}'
