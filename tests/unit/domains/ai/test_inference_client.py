"""Hugging Face 추론 클라이언트 테스트 (httpx.MockTransport)"""

import json

import httpx
import pytest

from app.core.config import Settings
from app.domains.ai.exceptions import (
    AIErrorCode,
    InferenceFailedException,
    InferenceNotConfiguredException,
)
from app.domains.ai.inference import HuggingFaceInferenceClient, parse_predictions


class TestClassifyImage:
    """이미지 분류 호출"""

    @pytest.mark.asyncio
    async def test_request_format(self, inference_client_factory):
        """Bearer 토큰, MIME 타입, 이미지 바이트를 그대로 전송"""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(
                200, content=json.dumps([{"label": "banana", "score": 0.9}])
            )

        client = inference_client_factory(handler, hf_model_id="org/model")

        predictions = await client.classify_image(b"\x89PNG", mime="image/jpeg")

        request = captured["request"]
        assert request.method == "POST"
        assert str(request.url).endswith("/org/model")
        assert request.headers["Authorization"] == "Bearer hf_test_token"
        assert request.headers["Content-Type"] == "image/jpeg"
        assert request.content == b"\x89PNG"
        assert predictions[0].label == "banana"
        assert predictions[0].probability == pytest.approx(0.9)

    @pytest.mark.asyncio
    async def test_model_override(self, inference_client_factory):
        urls = []

        def handler(request: httpx.Request) -> httpx.Response:
            urls.append(str(request.url))
            return httpx.Response(200, content="[]")

        client = inference_client_factory(handler)

        await client.classify_image(b"img", model_id="custom/model")

        assert urls[0].endswith("/custom/model")

    @pytest.mark.asyncio
    async def test_top_k_sorted(self, inference_client_factory):
        items = [{"label": f"label-{i}", "score": i / 10} for i in range(7)]

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=json.dumps(items))

        client = inference_client_factory(handler, hf_top_k=3)

        predictions = await client.classify_image(b"img")

        assert [p.label for p in predictions] == [
            "label-6",
            "label-5",
            "label-4",
        ]

    @pytest.mark.asyncio
    async def test_not_configured(self):
        client = HuggingFaceInferenceClient(Settings(hf_api_token=""))

        with pytest.raises(InferenceNotConfiguredException) as exc_info:
            await client.classify_image(b"img")

        assert exc_info.value.status_code == 503
        assert exc_info.value.error_code == AIErrorCode.INFERENCE_NOT_CONFIGURED


class TestInferenceFailures:
    """원격 호출 실패 → 502"""

    @pytest.mark.asyncio
    async def test_upstream_error_status(self, inference_client_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                503,
                content=json.dumps(
                    {"error": "Model is loading", "estimated_time": 20.0}
                ),
            )

        client = inference_client_factory(handler)

        with pytest.raises(InferenceFailedException) as exc_info:
            await client.classify_image(b"img")

        exc = exc_info.value
        assert exc.status_code == 502
        assert exc.error_code == AIErrorCode.INFERENCE_FAILED
        assert exc.detail_info["upstream_status"] == 503
        assert "Model is loading" in exc.detail_info["info"]

    @pytest.mark.asyncio
    async def test_error_detail_truncated(self, inference_client_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, content="x" * 2000)

        client = inference_client_factory(handler)

        with pytest.raises(InferenceFailedException) as exc_info:
            await client.classify_image(b"img")

        assert len(exc_info.value.detail_info["info"]) == 500

    @pytest.mark.asyncio
    async def test_timeout(self, inference_client_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = inference_client_factory(handler)

        with pytest.raises(InferenceFailedException) as exc_info:
            await client.classify_image(b"img")

        assert exc_info.value.detail_info["info"] == "추론 요청 시간 초과"

    @pytest.mark.asyncio
    async def test_connection_error(self, inference_client_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = inference_client_factory(handler)

        with pytest.raises(InferenceFailedException):
            await client.classify_image(b"img")

    @pytest.mark.asyncio
    async def test_non_json_response(self, inference_client_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        client = inference_client_factory(handler)

        with pytest.raises(InferenceFailedException):
            await client.classify_image(b"img")


class TestParsePredictions:
    """응답 파싱"""

    def test_batched_response(self):
        data = [[{"label": "apple", "score": 0.3}, {"label": "can", "score": 0.6}]]

        predictions = parse_predictions(data)

        assert [p.label for p in predictions] == ["can", "apple"]

    def test_unexpected_shape(self):
        assert parse_predictions({"error": "bad"}) == []
        assert parse_predictions([]) == []

    def test_skips_non_dict_items_and_missing_fields(self):
        predictions = parse_predictions(["junk", {"label": "banana"}, {"score": 0.4}])

        assert len(predictions) == 2
        assert predictions[0].label == ""
        assert predictions[0].probability == pytest.approx(0.4)
        assert predictions[1].probability == 0.0

    def test_non_numeric_score_counts_as_zero(self):
        predictions = parse_predictions(
            [
                {"label": "banana", "score": "high"},
                {"label": "bottle", "score": [0.9]},
                {"label": "apple", "score": 0.2},
            ]
        )

        assert [p.label for p in predictions] == ["apple", "banana", "bottle"]
        assert predictions[0].probability == pytest.approx(0.2)
        assert predictions[1].probability == 0.0
        assert predictions[2].probability == 0.0

    @pytest.mark.asyncio
    async def test_non_numeric_score_from_upstream(self, inference_client_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, content=json.dumps([{"label": "banana", "score": "high"}])
            )

        client = inference_client_factory(handler)

        predictions = await client.classify_image(b"img")

        assert len(predictions) == 1
        assert predictions[0].label == "banana"
        assert predictions[0].probability == 0.0
