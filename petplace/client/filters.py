# petplace/client/filters.py
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from petplace.models.pet import PetSize
from petplace.models.place import PlaceCategory

# (태그, 표시 이름)
AMENITY_OPTIONS = (
    ("parking", "주차"), ("wifi", "Wi-Fi"),
    ("cafe", "카페"), ("restaurant", "음식점"),
    ("outdoor", "야외"), ("water", "물놀이"),
    ("exercise", "운동"), ("grooming", "미용"),
)
PET_SIZE_OPTIONS = (
    (PetSize.SMALL.value, "소형견"),
    (PetSize.MEDIUM.value, "중형견"),
    (PetSize.BIG.value, "대형견"),
)
PLACE_TYPE_OPTIONS = tuple((c.value, c.value) for c in PlaceCategory)

FACETS = ('amenities', 'pet_sizes', 'place_types')

@dataclass
class FilterState:
    amenities: List[str] = field(default_factory=list)
    pet_sizes: List[str] = field(default_factory=list)
    place_types: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {"amenities": list(self.amenities), "petSizes": list(self.pet_sizes), "placeTypes": list(self.place_types)}

class FilterDialog:
    """편의시설/반려동물 크기/장소 유형 태그를 토글로 모았다가 적용 시 호출자에게 넘겨줍니다."""

    def __init__(self, on_apply: Callable[[FilterState], None]):
        self.on_apply = on_apply
        self.selection = FilterState()
        self.is_open = False

    def open(self) -> None:
        # 다이얼로그 세션마다 새로 구성
        self.selection = FilterState()
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def toggle(self, facet: str, tag: str) -> None:
        """태그가 있으면 빼고, 없으면 추가합니다."""
        if facet not in FACETS:
            raise ValueError(f"알 수 없는 필터 항목입니다: {facet}")
        tags = getattr(self.selection, facet)
        if tag in tags:
            tags.remove(tag)
        else:
            tags.append(tag)

    def toggle_amenity(self, tag: str) -> None:
        self.toggle('amenities', tag)

    def toggle_pet_size(self, tag: str) -> None:
        self.toggle('pet_sizes', tag)

    def toggle_place_type(self, tag: str) -> None:
        self.toggle('place_types', tag)

    def is_selected(self, facet: str, tag: str) -> bool:
        return tag in getattr(self.selection, facet)

    def reset(self) -> None:
        self.selection = FilterState()

    def apply(self) -> FilterState:
        applied = FilterState(
            amenities=list(self.selection.amenities),
            pet_sizes=list(self.selection.pet_sizes),
            place_types=list(self.selection.place_types)
        )
        self.on_apply(applied)
        self.close()
        return applied
