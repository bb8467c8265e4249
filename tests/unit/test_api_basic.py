"""API 기본 테스트 (TestClient, 외부 호출 없음)"""

import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from shopcompare import __version__
from shopcompare.api import get_cache_service
from shopcompare.app import create_app
from shopcompare.core.config import settings


@pytest.fixture
def client(cache_service) -> TestClient:
    """Redis 대신 Mock 클라이언트 기반 캐시를 주입한 앱"""
    app = create_app()
    app.dependency_overrides[get_cache_service] = lambda: cache_service
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == __version__


def test_health_degraded_when_redis_down(client, redis_client):
    redis_client.ping.side_effect = RedisConnectionError("down")
    body = client.get("/health").json()
    assert body["status"] == "degraded"


def test_health_without_cache(monkeypatch):
    """캐시를 끈 설정에서는 Redis 없이도 ok"""
    monkeypatch.setattr(settings, "explanation_cache_enabled", False)
    app = create_app()
    app.dependency_overrides[get_cache_service] = lambda: None
    assert TestClient(app).get("/health").json()["status"] == "ok"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_recommendations(client, catalog_payload, profile_payload):
    response = client.post(
        "/api/v1/recommendations",
        json={"catalog": catalog_payload, "profile": profile_payload},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["error_code"] is None

    data = body["data"]
    assert data["mode"] == "recommendation"
    assert data["total"] == 5
    items = data["items"]
    assert [item["rank"] for item in items] == [1, 2, 3, 4, 5]
    assert items[-1]["product_id"] == "galaxy-a55"
    assert all(item["reasons"] == [settings.enrichment_placeholder_reason] for item in items)


def test_recommendations_with_explanations(client, catalog_payload, profile_payload):
    response = client.post(
        "/api/v1/recommendations",
        json={"catalog": catalog_payload, "profile": profile_payload, "limit": 2, "explain": True},
    )
    items = response.json()["data"]["items"]
    assert len(items) == 2
    assert all(item["reasons"] != [settings.enrichment_placeholder_reason] for item in items)


def test_search_by_price(client, catalog_payload, profile_payload):
    response = client.post(
        "/api/v1/search",
        json={
            "query": "Galaxy",
            "catalog": catalog_payload,
            "profile": profile_payload,
            "sort_by": "price_asc",
        },
    )
    body = response.json()
    assert body["status"] == "success"
    ids = [item["product_id"] for item in body["data"]["items"]]
    assert ids == ["galaxy-s24-ultra", "galaxy-a55"]
    assert body["data"]["items"][0]["relevance"] == 1.0


def test_search_no_results(client, catalog_payload, profile_payload):
    response = client.post(
        "/api/v1/search",
        json={"query": "laptop", "catalog": catalog_payload, "profile": profile_payload},
    )
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["items"] == []
    assert body["message"] == "검색 결과가 없습니다."


def test_arabic_search(client, catalog_payload, profile_payload):
    response = client.post(
        "/api/v1/search",
        json={"query": "آيفون", "catalog": catalog_payload, "profile": profile_payload},
    )
    ids = [item["product_id"] for item in response.json()["data"]["items"]]
    assert ids == ["iphone-15-pro-max"]


def test_invalid_sort_key_rejected(client, catalog_payload, profile_payload):
    response = client.post(
        "/api/v1/search",
        json={"query": "galaxy", "catalog": catalog_payload, "profile": profile_payload, "sort_by": "cheapest"},
    )
    assert response.status_code == 422


def test_invalid_priority_rejected(client, catalog_payload, profile_payload):
    profile_payload["priority"] = "cheapest"
    response = client.post(
        "/api/v1/recommendations",
        json={"catalog": catalog_payload, "profile": profile_payload},
    )
    assert response.status_code == 422


def test_missing_catalog_rejected(client, profile_payload):
    response = client.post("/api/v1/recommendations", json={"profile": profile_payload})
    assert response.status_code == 422


def test_domain_error_envelope(catalog_payload, profile_payload):
    """라우트 밖에서 발생한 도메인 예외도 공통 봉투로 응답"""
    from shopcompare.api.routes.ranking_routes import get_combiner
    from shopcompare.core.exceptions import ConfigurationException

    def _broken_combiner():
        raise ConfigurationException("weights do not sum to 1.0")

    app = create_app()
    app.dependency_overrides[get_combiner] = _broken_combiner
    app.dependency_overrides[get_cache_service] = lambda: None
    response = TestClient(app).post(
        "/api/v1/recommendations",
        json={"catalog": catalog_payload, "profile": profile_payload},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert body["error_code"] == "CONFIG_ERROR"


def test_cache_dependency_tolerates_redis_outage(monkeypatch):
    """Redis 연결 실패 시 캐시 없이 동작 (None)"""
    from unittest.mock import patch

    from shopcompare.api.routes import ranking_routes
    from shopcompare.core.exceptions import CacheConnectionException

    monkeypatch.setattr(ranking_routes, "_cache_service", None)
    monkeypatch.setattr(settings, "explanation_cache_enabled", True)
    with patch.object(ranking_routes, "CacheService", side_effect=CacheConnectionException("Redis connection failed")):
        assert ranking_routes.get_cache_service() is None
