"""카탈로그 테스트 자산 (엔진 독립)

- 단순 dict만 보관 (API 요청 형식과 동일)
- pytest fixture 선언하지 않음
- 'laptop' 과 편집 거리 2 이내인 단어를 넣지 않음 (스마트폰 전용 카탈로그)
"""

SMARTPHONES = [
    {
        "product_id": "iphone-15-pro-max",
        "name": "Apple iPhone 15 Pro Max 256GB",
        "brand": "Apple",
        "category": "smartphones",
        "tags": ["camera", "flagship"],
        "key_specs": {
            "storage_gb": 256,
            "ram_gb": 8,
            "camera_mp": 48,
            "battery_mah": 4422,
            "screen_size_inch": 6.7,
            "refresh_rate_hz": 120,
        },
        "offers": [
            {
                "offer_id": "iphone-amazon",
                "store_name": "Amazon",
                "price": 4999,
                "shipping_cost": 0,
                "rating_average": 4.8,
                "rating_count": 2100,
                "is_verified": True,
            },
            {
                "offer_id": "iphone-noon",
                "store_name": "Noon",
                "price": 5100,
                "shipping_cost": 25,
                "coupons": [{"code": "SAVE200", "estimated_value": 200}],
                "rating_average": 4.6,
                "rating_count": 90,
                "is_verified": False,
            },
        ],
    },
    {
        "product_id": "galaxy-s24-ultra",
        "name": "Samsung Galaxy S24 Ultra 512GB",
        "brand": "Samsung",
        "category": "smartphones",
        "tags": ["camera", "s-pen"],
        "key_specs": {
            "storage_gb": 512,
            "ram_gb": 12,
            "camera_mp": 200,
            "battery_mah": 5000,
            "screen_size_inch": 6.8,
            "refresh_rate_hz": 120,
        },
        "offers": [
            {
                "offer_id": "s24-jarir",
                "store_name": "Jarir",
                "price": 4599,
                "shipping_cost": 0,
                "rating_average": 4.7,
                "rating_count": 1500,
                "is_verified": True,
            },
        ],
    },
    {
        "product_id": "redmi-note-13-pro",
        "name": "Xiaomi Redmi Note 13 Pro",
        "brand": "Xiaomi",
        "category": "smartphones",
        "tags": ["budget"],
        "key_specs": {
            "storage_gb": 256,
            "ram_gb": 8,
            "camera_mp": 200,
            "battery_mah": 5100,
            "screen_size_inch": 6.67,
            "refresh_rate_hz": 120,
        },
        "offers": [
            {
                "offer_id": "redmi-extra",
                "store_name": "Extra",
                "price": 1299,
                "shipping_cost": 15,
                "rating_average": 4.4,
                "rating_count": 640,
                "is_verified": False,
            },
        ],
    },
    {
        "product_id": "pixel-8",
        "name": "Google Pixel 8 128GB",
        "brand": "Google",
        "category": "smartphones",
        "tags": ["camera"],
        "key_specs": {
            "storage_gb": 128,
            "ram_gb": 8,
            "camera_mp": 50,
            "battery_mah": 4575,
            "screen_size_inch": 6.2,
            "refresh_rate_hz": 120,
        },
        "offers": [
            {
                "offer_id": "pixel-amazon",
                "store_name": "Amazon",
                "price": 2899,
                "shipping_cost": 0,
                "rating_average": 4.5,
                "rating_count": 320,
                "is_verified": True,
            },
        ],
    },
    {
        "product_id": "galaxy-a55",
        "name": "Samsung Galaxy A55",
        "brand": "Samsung",
        "category": "smartphones",
        "tags": [],
        "key_specs": {"ram_gb": 8, "camera_mp": 50, "battery_mah": 5000},
        "offers": [],
    },
]

PROFILES = {
    "balanced": {
        "budget_range": {"min": 2000, "max": 5000},
        "priority": "balanced",
        "use_case": "everyday",
    },
    "price_first": {
        "budget_range": {"min": 2000, "max": 5000},
        "priority": "price-first",
        "use_case": "everyday",
    },
    "quality_first_camera": {
        "budget_range": {"min": 3000, "max": 6000},
        "priority": "quality-first",
        "use_case": "camera",
    },
}
