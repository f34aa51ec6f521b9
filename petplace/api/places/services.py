# petplace/api/places/services.py
import logging
import uuid
from typing import Dict, Any, List

from petplace.models.place import Place
from .repository import PlaceRepository

class PlaceService:
    """장소 등록/조회/검색 비즈니스 로직을 담당하는 서비스."""

    def __init__(self, place_repository: PlaceRepository):
        self.place_repository = place_repository
        logging.info("PlaceService initialized.")

    def create_place(self, place_data: Dict[str, Any]) -> Dict[str, Any]:
        """[관리자용] 새 장소를 등록합니다. 사진 URL 순서는 요청 순서를 그대로 유지합니다."""
        place = Place(
            place_id=str(uuid.uuid4()),
            name=place_data['name'],
            address=place_data['address'],
            phone=place_data.get('phone'),
            operation_hours=place_data.get('operation_hours'),
            pet_policy=place_data.get('pet_policy'),
            latitude=place_data.get('latitude'),
            longitude=place_data.get('longitude'),
            photos=list(place_data.get('photos') or []),
            category=place_data.get('category')
        )
        saved_place = self.place_repository.save(place)
        return saved_place.to_dict()

    def get_all_places(self) -> List[Dict[str, Any]]:
        return [place.to_dict() for place in self.place_repository.find_all()]

    def get_place_by_id(self, place_id: str) -> Dict[str, Any]:
        place = self.place_repository.find_by_id(place_id)
        if place is None:
            raise FileNotFoundError("존재하지 않는 장소입니다.")
        return place.to_dict()

    def search_places(self, keyword: str) -> List[Dict[str, Any]]:
        """
        이름에 keyword가 포함된 장소를 반환하고, 하나도 없을 때만 주소 검색 결과로 대체합니다.
        두 결과를 합치거나 순위를 매기지 않습니다.
        """
        places = self.place_repository.find_by_name_containing(keyword)
        if not places:
            places = self.place_repository.find_by_address_containing(keyword)
        logging.info(f"Place search for '{keyword}' returned {len(places)} result(s)")
        return [place.to_dict() for place in places]
