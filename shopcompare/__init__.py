"""shopcompare - 추천 점수/퍼지 매칭 엔진"""

__version__ = "1.0.0"
