# petplace/models/pet.py
from dataclasses import dataclass, asdict
from datetime import date
from typing import Optional, Dict, Any
from enum import Enum
import logging

from petplace.utils.datetime_utils import DateTimeUtils

class PetGender(Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    UNKNOWN = "UNKNOWN"

class PetSize(Enum):
    BIG = "BIG"
    MEDIUM = "MEDIUM"
    SMALL = "SMALL"

@dataclass
class Pet:
    """
    Firestore 'pets' 컬렉션 문서 구조.
    반려동물은 항상 한 명의 소유자(user_id)를 가지며, gender/size는 Enum 이름 문자열로 저장됩니다.
    """
    pet_id: str
    user_id: str
    name: str
    gender: PetGender
    size: PetSize
    birth_date: Optional[date] = None
    age: int = 0
    weight: Optional[float] = None
    special_notes: Optional[str] = None
    breed: Optional[str] = None
    photo_url: Optional[str] = None

    def update_info(self, name: str, gender: PetGender, size: PetSize, birth_date: Optional[date], age: int,
                    weight: Optional[float], special_notes: Optional[str], breed: Optional[str],
                    photo_url: Optional[str]) -> None:
        """변경 가능한 모든 필드를 한 번에 교체합니다. 부분 수정은 지원하지 않습니다."""
        self.name = name
        self.gender = gender
        self.size = size
        self.birth_date = birth_date
        self.age = age
        self.weight = weight
        self.special_notes = special_notes
        self.breed = breed
        self.photo_url = photo_url

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """
        Firestore에서 받은 딕셔너리로부터 Pet 인스턴스를 생성합니다.
        문자열로 저장된 Enum 값과 Timestamp로 저장된 생일을 변환합니다.
        """
        processed_data = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}

        gender_str = processed_data.get('gender')
        try:
            processed_data['gender'] = PetGender(gender_str)
        except ValueError:
            logging.warning(f"Invalid PetGender value '{gender_str}' for pet {processed_data.get('pet_id')}. Defaulting to UNKNOWN.")
            processed_data['gender'] = PetGender.UNKNOWN

        # size는 기본값이 없으므로 잘못된 값이면 예외를 그대로 올립니다.
        processed_data['size'] = PetSize(processed_data.get('size'))

        if processed_data.get('birth_date') is not None:
            processed_data['birth_date'] = DateTimeUtils.to_date(processed_data['birth_date'])

        if processed_data.get('age') is None:
            processed_data['age'] = 0

        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        """Enum을 이름 문자열로 바꾼 딕셔너리. Firestore 저장과 응답 직렬화에 공통으로 사용합니다."""
        pet_dict = asdict(self)
        pet_dict['gender'] = self.gender.value
        pet_dict['size'] = self.size.value
        return pet_dict
