"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 도메인 객체/Fake 주입
- 전역 상태 초기화

금지:
- 외부 호출 (HTTP/DB)
- 대량 데이터 (stress 테스트가 직접 생성)
"""

from __future__ import annotations

import asyncio
import copy
import os
import sys
from datetime import datetime, timezone
from unittest.mock import MagicMock
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from shopcompare.models import (  # noqa: E402
    BudgetRange,
    CatalogEntry,
    KeySpecs,
    Offer,
    PriorityMode,
    UseCase,
    UserProfile,
)
from shopcompare.schemas.ranking_schema import CatalogEntryIn, UserProfileIn  # noqa: E402
from shopcompare.services import CacheService  # noqa: E402
from fixtures import PROFILES, SMARTPHONES  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def fixed_now() -> datetime:
    """행동 점수 기준 시각 (재현성)"""
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def smartphone_catalog() -> list[CatalogEntry]:
    """스마트폰 카탈로그 (오퍼 없는 엔트리 1개 포함)"""
    return [CatalogEntryIn.model_validate(item).to_domain() for item in SMARTPHONES]


@pytest.fixture
def balanced_profile() -> UserProfile:
    return UserProfileIn.model_validate(PROFILES["balanced"]).to_domain()


@pytest.fixture
def price_first_profile() -> UserProfile:
    return UserProfileIn.model_validate(PROFILES["price_first"]).to_domain()


@pytest.fixture
def quality_first_profile() -> UserProfile:
    return UserProfileIn.model_validate(PROFILES["quality_first_camera"]).to_domain()


@pytest.fixture
def catalog_payload() -> list[dict]:
    """API 요청용 카탈로그 (dict)"""
    return copy.deepcopy(SMARTPHONES)


@pytest.fixture
def profile_payload() -> dict:
    """API 요청용 프로필 (dict)"""
    return copy.deepcopy(PROFILES["balanced"])


@pytest.fixture
def make_entry():
    """단일 오퍼 엔트리 생성기"""

    def _make(
        product_id: str,
        price: float = 3000,
        name: str | None = None,
        brand: str = "Acme",
        category: str = "smartphones",
        shipping_cost: float = 0,
        rating_average: float | None = 4.5,
        rating_count: int = 100,
        is_verified: bool = False,
        specs: KeySpecs | None = None,
        tags: tuple[str, ...] = (),
    ) -> CatalogEntry:
        offer = Offer(
            offer_id=f"{product_id}-offer",
            price=price,
            shipping_cost=shipping_cost,
            rating_average=rating_average,
            rating_count=rating_count,
            is_verified=is_verified,
        )
        return CatalogEntry(
            product_id=product_id,
            name=name or f"Acme Phone {product_id}",
            brand=brand,
            category=category,
            tags=tags,
            specs=specs or KeySpecs(ram_gb=8, camera_mp=48, battery_mah=4500, refresh_rate_hz=90),
            offers=(offer,),
        )

    return _make


@pytest.fixture
def make_profile():
    """프로필 생성기"""

    def _make(
        budget_min: float = 2000,
        budget_max: float = 5000,
        priority: PriorityMode = PriorityMode.BALANCED,
        use_case: UseCase = UseCase.EVERYDAY,
        interactions=(),
    ) -> UserProfile:
        return UserProfile(
            budget=BudgetRange(min=budget_min, max=budget_max),
            priority=priority,
            use_case=use_case,
            interactions=tuple(interactions),
        )

    return _make


class FakeExplanationProvider:
    """설명 보강 테스트용 provider

    - delay: 호출마다 대기 시간
    - fail_ids: EnrichmentException 을 던질 product_id
    - crash_ids: 일반 예외(RuntimeError)를 던질 product_id (외부 클라이언트 오류 흉내)
    - 동시 실행 수 최대값 기록
    """

    def __init__(
        self,
        delay: float = 0.0,
        fail_ids: tuple[str, ...] = (),
        crash_ids: tuple[str, ...] = (),
    ):
        self.delay = delay
        self.fail_ids = set(fail_ids)
        self.crash_ids = set(crash_ids)
        self.calls = 0
        self.active = 0
        self.max_active = 0

    async def explain(self, result, profile) -> list[str]:
        from shopcompare.core.exceptions import EnrichmentException

        self.calls += 1
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if result.product_id in self.fail_ids:
                raise EnrichmentException(f"provider failed for {result.product_id}")
            if result.product_id in self.crash_ids:
                raise RuntimeError("upstream 502")
            return [f"Good pick: {result.entry.name}"]
        finally:
            self.active -= 1


@pytest.fixture
def fake_provider() -> FakeExplanationProvider:
    return FakeExplanationProvider()


@pytest.fixture
def make_provider():
    """옵션 지정 provider 생성기"""
    return FakeExplanationProvider


@pytest.fixture
def redis_client() -> MagicMock:
    """dict 로 동작하는 Redis 클라이언트 Mock (get/setex/delete/ping)"""
    store: dict[str, str] = {}
    client = MagicMock()
    client.ping.return_value = True
    client.get.side_effect = store.get
    client.setex.side_effect = lambda key, ttl, value: store.__setitem__(key, value)
    client.delete.side_effect = lambda key: 1 if store.pop(key, None) is not None else 0
    client.store = store
    return client


@pytest.fixture
def cache_service(redis_client) -> CacheService:
    return CacheService(redis_client=redis_client, ttl=60)
