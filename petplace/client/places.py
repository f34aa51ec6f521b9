# petplace/client/places.py
"""
서버 장소 레코드를 화면에서 쓰는 균일한 형태로 정규화하고, 한 번 불러온 목록을 메모리에 보관합니다.
마법사, 검색, 카테고리 섹션, 상세 화면은 모두 같은 PlaceStore 목록을 잘라 쓰거나 걸러 씁니다.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, List, Optional

import requests

from .api_client import PetPlaceApiClient, ApiError

logger = logging.getLogger(__name__)

DEFAULT_PLACE_IMAGE = "https://images.unsplash.com/photo-1518717758536-85ae29035b6d?auto=format&fit=crop&q=80&w=1000"
DEFAULT_LATITUDE = 35.8364
DEFAULT_LONGITUDE = 128.7544

@dataclass
class PlaceSummary:
    id: str
    name: str
    image: str
    description: str
    rating: Optional[float]
    review_count: Optional[int]
    category: Optional[str]
    lat: float
    lng: float
    address: str
    phone: str
    hours: str
    details: str

def normalize_place(raw: Dict[str, Any]) -> PlaceSummary:
    """
    선택 필드가 비어 있으면 기본값을 채웁니다.
    좌표가 0처럼 거짓 값이어도 기본 좌표로 대체합니다.
    """
    photos = raw.get('photos') or []
    return PlaceSummary(
        id=raw.get('placeId'),
        name=raw.get('name'),
        image=photos[0] if photos else DEFAULT_PLACE_IMAGE,
        description=raw.get('address'),
        rating=raw.get('avgRating'),
        review_count=raw.get('reviewCount'),
        category=raw.get('category'),
        lat=raw.get('latitude') or DEFAULT_LATITUDE,
        lng=raw.get('longitude') or DEFAULT_LONGITUDE,
        address=raw.get('address'),
        phone=raw.get('phone') or "",
        hours=raw.get('operationHours') or "",
        details=raw.get('petPolicy') or ""
    )

class LoadStatus(Enum):
    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

class PlaceStore:
    """최초 1회 장소 목록을 불러와 보관합니다. 실패해도 재시도하지 않고 빈 목록으로 남습니다."""

    def __init__(self, api_client: PetPlaceApiClient):
        self.api_client = api_client
        self.places: List[PlaceSummary] = []
        self.status = LoadStatus.PENDING

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.PENDING

    def load(self) -> List[PlaceSummary]:
        if self.status is not LoadStatus.PENDING:
            return self.places
        try:
            self.places = [normalize_place(raw) for raw in self.api_client.get_places()]
            self.status = LoadStatus.SUCCEEDED
            logger.info(f"{len(self.places)}개 장소 로딩 완료")
        except (requests.RequestException, ApiError) as e:
            logger.error(f"장소 로딩 실패: {e}")
            self.places = []
            self.status = LoadStatus.FAILED
        return self.places

    def find(self, place_id: str) -> Optional[PlaceSummary]:
        return next((p for p in self.places if p.id == place_id), None)

    def by_category(self, category: str) -> List[PlaceSummary]:
        return [p for p in self.places if p.category == category]

    def search(self, query: str) -> List[PlaceSummary]:
        """이름 또는 주소에 검색어가 포함된 장소 (대소문자 무시). 빈 검색어는 전체."""
        needle = query.strip().lower()
        if not needle:
            return list(self.places)
        return [
            p for p in self.places
            if needle in (p.name or "").lower() or needle in (p.address or "").lower()
        ]
