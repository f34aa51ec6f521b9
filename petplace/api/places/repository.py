# petplace/api/places/repository.py
import logging
from typing import List, Optional
from firebase_admin import firestore

from petplace.models.place import Place
from petplace.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

class PlaceRepository:
    """
    'places' 컬렉션에 대한 영속성 경계.
    Firestore는 부분 문자열 검색을 지원하지 않으므로 포함 검색은 전체 문서를 읽은 뒤 애플리케이션에서 필터링합니다.
    """

    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.places_ref = self.db.collection('places')

    def find_all(self) -> List[Place]:
        return [Place.from_dict(doc.to_dict()) for doc in self.places_ref.stream()]

    def find_by_id(self, place_id: str) -> Optional[Place]:
        doc = self.places_ref.document(place_id).get()
        if not doc.exists:
            return None
        return Place.from_dict(doc.to_dict())

    def exists(self, place_id: str) -> bool:
        return self.places_ref.document(place_id).get().exists

    def save(self, place: Place) -> Place:
        data = place.to_dict()
        data.pop('avg_rating')
        data['rating_sum'] = place.rating_sum
        self.places_ref.document(place.place_id).set(DateTimeUtils.for_firestore(data))
        logger.info(f"Place saved: {place.place_id} ({place.name})")
        return place

    def find_by_name_containing(self, keyword: str) -> List[Place]:
        """이름에 keyword가 포함된 장소 (대소문자 구분)."""
        return [place for place in self.find_all() if keyword in (place.name or "")]

    def find_by_address_containing(self, keyword: str) -> List[Place]:
        """주소에 keyword가 포함된 장소 (대소문자 구분)."""
        return [place for place in self.find_all() if keyword in (place.address or "")]

    def update_counters(self, writer, place_id: str, review_delta: int, rating_delta: int) -> None:
        """리뷰 집계 카운터 증감을 주어진 WriteBatch 또는 Transaction에 추가합니다. 커밋은 호출자가 합니다."""
        writer.update(self.places_ref.document(place_id), {
            'review_count': firestore.Increment(review_delta),
            'rating_sum': firestore.Increment(rating_delta)
        })
