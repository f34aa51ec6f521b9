# petplace/models/place.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum

from petplace.utils.datetime_utils import DateTimeUtils

class PlaceCategory(Enum):
    CAFE = "CAFE"
    OUTDOOR = "OUTDOOR"
    RESTAURANT = "RESTAURANT"
    SWIMMING = "SWIMMING"

@dataclass
class Place:
    """
    Firestore 'places' 컬렉션 문서 구조.
    반려동물 동반 가능 장소의 기본 정보와 리뷰 집계 카운터를 함께 보관합니다.
    """
    place_id: str
    name: str
    address: str
    phone: Optional[str] = None
    operation_hours: Optional[str] = None
    pet_policy: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    photos: List[str] = field(default_factory=list)
    category: Optional[str] = None
    review_count: int = 0
    rating_sum: int = 0
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @property
    def avg_rating(self) -> float:
        """리뷰 평균 별점. 리뷰가 없으면 0.0"""
        if not self.review_count:
            return 0.0
        return round(self.rating_sum / self.review_count, 1)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Place":
        """Firestore 문서 딕셔너리로부터 Place 인스턴스를 생성합니다. 알 수 없는 키는 무시합니다."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if known.get('photos') is None:
            known['photos'] = []
        known['review_count'] = known.get('review_count') or 0
        known['rating_sum'] = known.get('rating_sum') or 0
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        """응답 스키마에 전달할 딕셔너리 (파생 필드 avg_rating 포함)."""
        return {
            'place_id': self.place_id,
            'name': self.name,
            'address': self.address,
            'phone': self.phone,
            'operation_hours': self.operation_hours,
            'pet_policy': self.pet_policy,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'photos': list(self.photos),
            'category': self.category,
            'review_count': self.review_count,
            'avg_rating': self.avg_rating,
            'created_at': self.created_at,
        }
