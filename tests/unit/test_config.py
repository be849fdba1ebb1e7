"""Config 설정 검증 테스트"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

VALID_KEY = "valid-internal-api-key-with-32-characters-minimum"


class TestDevelopmentConfig:
    """개발 환경 설정 테스트"""

    def test_development_allows_default_keys(self):
        config = Settings(
            app_env="development",
            internal_api_key="your-internal-api-key-here",
        )
        assert config.is_development
        assert not config.is_production

    def test_inference_disabled_without_token(self):
        assert Settings(hf_api_token="").inference_enabled is False
        assert Settings(hf_api_token="hf_abc").inference_enabled is True

    def test_cors_origins_from_comma_separated_string(self):
        config = Settings(cors_origins="http://a.test, http://b.test")

        assert config.cors_origins == ["http://a.test", "http://b.test"]

    def test_inference_bounds(self):
        with pytest.raises(ValidationError):
            Settings(hf_top_k=0)
        with pytest.raises(ValidationError):
            Settings(hf_timeout_seconds=0)

    def test_cors_origins_from_json_string(self):
        config = Settings(cors_origins='["http://a.test"]')

        assert config.cors_origins == ["http://a.test"]


class TestProductionConfig:
    """프로덕션 환경 설정 검증 테스트"""

    def test_production_rejects_default_internal_api_key(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key="your-internal-api-key-here",
            )

        assert "INTERNAL_API_KEY" in str(exc_info.value)

    def test_production_rejects_short_internal_api_key(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(app_env="production", internal_api_key="short-key")

        assert "32 characters" in str(exc_info.value)

    def test_production_accepts_valid_key(self):
        config = Settings(app_env="production", internal_api_key=VALID_KEY)

        assert config.is_production
