"""요청/응답 스키마 유닛 테스트"""
import pytest
from pydantic import ValidationError

from shopcompare.engine import RankedResult
from shopcompare.models import CatalogEntry, InteractionKind, PriorityMode, UseCase
from shopcompare.schemas import CatalogEntryIn, RankedItem, SearchRequest, UserProfileIn


class TestRequestSchemas:
    """요청 스키마 → 도메인 변환"""

    def test_catalog_entry_to_domain(self, catalog_payload):
        entry = CatalogEntryIn.model_validate(catalog_payload[0]).to_domain()
        assert entry.product_id == "iphone-15-pro-max"
        assert entry.tags == ("camera", "flagship")
        assert entry.specs.refresh_rate_hz == 120
        assert entry.offers[1].coupons[0].estimated_value == 200

    def test_missing_specs_default(self):
        entry = CatalogEntryIn(product_id="x", name="X").to_domain()
        assert entry.specs.refresh_rate_hz is None
        assert entry.specs.battery_mah == 0
        assert entry.offers == ()

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            CatalogEntryIn.model_validate(
                {"product_id": "x", "name": "X", "offers": [{"offer_id": "o", "price": -1}]}
            )

    def test_rating_out_of_range(self):
        with pytest.raises(ValidationError):
            CatalogEntryIn.model_validate(
                {"product_id": "x", "name": "X", "offers": [{"offer_id": "o", "price": 1, "rating_average": 6}]}
            )

    def test_profile_to_domain(self, profile_payload):
        profile_payload["priority"] = "price_first"
        profile_payload["interactions"] = [
            {"brand": "Apple", "category": "smartphones", "type": "wishlist", "timestamp": "2025-05-30T10:00:00Z"},
            {"brand": "Sony", "category": "audio", "type": "share", "timestamp": "2025-05-30T10:00:00Z"},
        ]
        profile = UserProfileIn.model_validate(profile_payload).to_domain()
        assert profile.priority == PriorityMode.PRICE_FIRST
        assert profile.use_case == UseCase.EVERYDAY
        assert [i.kind for i in profile.interactions] == [InteractionKind.WISHLIST, InteractionKind.VIEW]

    def test_budget_order(self):
        with pytest.raises(ValidationError):
            UserProfileIn.model_validate({"budget_range": {"min": 5000, "max": 1000}})

    @pytest.mark.parametrize("field,value", [("priority", "cheapest"), ("use_case", "music")])
    def test_unknown_enum_values(self, profile_payload, field, value):
        profile_payload[field] = value
        with pytest.raises(ValidationError):
            UserProfileIn.model_validate(profile_payload)

    def test_sort_by_validated(self, catalog_payload, profile_payload):
        with pytest.raises(ValidationError):
            SearchRequest(query="galaxy", catalog=catalog_payload, profile=profile_payload, sort_by="cheapest")

    def test_sort_by_default(self, catalog_payload, profile_payload):
        request = SearchRequest(query="galaxy", catalog=catalog_payload, profile=profile_payload)
        assert request.sort_by == "score"


class TestResponseSchemas:
    """응답 스키마"""

    def test_ranked_item_from_result(self):
        result = RankedResult(
            entry=CatalogEntry(product_id="p1", name="Pixel", brand="Google", category="smartphones"),
            suitability=0.72,
            relevance=1.0,
            combined=0.916,
            net_price=2899.0,
            rating=4.5,
        )
        item = RankedItem.from_result(1, result)
        assert item.rank == 1
        assert item.product_id == "p1"
        assert item.reasons == ["Analyzing specs..."]
