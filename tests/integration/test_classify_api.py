"""분류 API 테스트 - DB 없이 동작하는 엔드포인트 (인증, 분류, 추론)"""

import base64

import httpx
import pytest

from app.core.config import Settings
from app.domains.ai.inference import HuggingFaceInferenceClient, get_inference_client
from app.main import app

IMAGE_B64 = base64.b64encode(b"fake-image-bytes").decode()


class TestAuthenticationRequired:
    """API Key 인증 필수 테스트"""

    @pytest.mark.asyncio
    async def test_missing_api_key_returns_422(self, api_client):
        response = await api_client.post(
            "/api/waste/classify", json={"filename": "a.jpg"}
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_api_key_returns_401(self, api_client):
        response = await api_client.post(
            "/api/ai/classify",
            json={"imageBase64": IMAGE_B64},
            headers={"X-Internal-Api-Key": "invalid-key"},
        )

        assert response.status_code == 401
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "INVALID_API_KEY"

    @pytest.mark.asyncio
    async def test_health_does_not_require_key(self, api_client):
        response = await api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "healthy"


class TestFilenameClassifyAPI:
    """POST /api/waste/classify"""

    @pytest.mark.asyncio
    async def test_classify_filename(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/waste/classify",
            json={"filename": "fruit_peel_compost.jpg"},
            headers=api_key_header,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["category"] == "Organic"
        assert data["confidence"] == 95
        assert data["ecoPoints"] == 14
        assert data["label"] == "Fruit Waste"
        assert data["matchedKeywords"] == ["fruit", "peel", "compost"]
        assert len(data["tips"]) == 5

    @pytest.mark.asyncio
    async def test_image_properties_bonus(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/waste/classify",
            json={
                "filename": "IMG_0001.jpg",
                "fileSize": 2 * 1024 * 1024,
                "width": 1024,
                "height": 768,
            },
            headers=api_key_header,
        )

        data = response.json()["data"]
        assert data["category"] == "General Waste"
        assert data["confidence"] == 58
        assert data["ecoPoints"] == 1

    @pytest.mark.asyncio
    async def test_blank_filename_rejected(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/waste/classify",
            json={"filename": "   "},
            headers=api_key_header,
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestPredictionsClassifyAPI:
    """POST /api/waste/classify/predictions"""

    @pytest.mark.asyncio
    async def test_classify_predictions(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/waste/classify/predictions",
            json={
                "predictions": [
                    {"label": "banana", "probability": 0.7},
                    {"label": "plastic bottle", "probability": 0.2},
                ]
            },
            headers=api_key_header,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["category"] == "Organic"
        assert data["confidence"] == pytest.approx(0.7)
        assert data["topLabel"] == "banana"
        assert data["ecoPoints"] == 10
        assert data["scores"]["Recyclable"] == pytest.approx(0.2)
        assert set(data["scores"]) == {"Recyclable", "Organic", "General Waste"}

    @pytest.mark.asyncio
    async def test_empty_predictions(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/waste/classify/predictions",
            json={"predictions": []},
            headers=api_key_header,
        )

        data = response.json()["data"]
        assert data["category"] == "General Waste"
        assert data["confidence"] == 0
        assert data["ecoPoints"] == 0


class TestImageClassifyAPI:
    """POST /api/ai/classify"""

    @pytest.mark.asyncio
    async def test_classify_image(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/ai/classify",
            json={"imageBase64": IMAGE_B64, "mime": "image/jpeg"},
            headers=api_key_header,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["category"] == "Organic"
        assert data["topLabel"] == "banana"
        assert data["confidence"] == pytest.approx(0.95)
        assert data["ecoPoints"] == 14

    @pytest.mark.asyncio
    async def test_invalid_base64(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/ai/classify",
            json={"imageBase64": "not base64!!"},
            headers=api_key_header,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_IMAGE_PAYLOAD"

    @pytest.mark.asyncio
    async def test_inference_not_configured(self, api_client, api_key_header):
        app.dependency_overrides[get_inference_client] = lambda: (
            HuggingFaceInferenceClient(Settings(hf_api_token=""))
        )

        response = await api_client.post(
            "/api/ai/classify",
            json={"imageBase64": IMAGE_B64},
            headers=api_key_header,
        )

        assert response.status_code == 503
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "INFERENCE_NOT_CONFIGURED"

    @pytest.mark.asyncio
    async def test_upstream_failure(
        self, api_client, api_key_header, inference_client_factory
    ):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, content="internal error")

        failing_client = inference_client_factory(handler)
        app.dependency_overrides[get_inference_client] = lambda: failing_client

        response = await api_client.post(
            "/api/ai/classify",
            json={"imageBase64": IMAGE_B64},
            headers=api_key_header,
        )

        assert response.status_code == 502
        error = response.json()["error"]
        assert error["code"] == "INFERENCE_FAILED"
        assert error["detail"]["upstream_status"] == 500

    @pytest.mark.asyncio
    async def test_unreadable_upstream_score(
        self, api_client, api_key_header, inference_client_factory
    ):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, content='[{"label": "banana", "score": "high"}]'
            )

        odd_client = inference_client_factory(handler)
        app.dependency_overrides[get_inference_client] = lambda: odd_client

        response = await api_client.post(
            "/api/ai/classify",
            json={"imageBase64": IMAGE_B64},
            headers=api_key_header,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["category"] == "General Waste"
        assert data["topLabel"] == "banana"


class TestRequestContext:
    """요청 ID / 처리 시간 헤더"""

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/waste/classify",
            json={"filename": "can.jpg"},
            headers={**api_key_header, "X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"
        assert response.headers["X-Process-Time"].endswith("ms")

    @pytest.mark.asyncio
    async def test_request_id_generated(self, api_client, api_key_header):
        response = await api_client.post(
            "/api/waste/classify",
            json={"filename": "can.jpg"},
            headers=api_key_header,
        )

        assert response.headers["X-Request-ID"]
