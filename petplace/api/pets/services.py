# petplace/api/pets/services.py
import logging
import uuid
from typing import Dict, Any, Optional, List
from firebase_admin import firestore

from petplace.models.pet import Pet
from petplace.utils.datetime_utils import DateTimeUtils

class PetService:
    """반려동물 프로필 등록/조회/수정/삭제를 전담하는 서비스. 모든 작업은 소유자 기준으로 제한됩니다."""
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.pets_ref = self.db.collection('pets')
        self.users_ref = self.db.collection('users')
        logging.info("PetService initialized.")

    def get_pet_by_id_and_owner(self, pet_id: str, user_id: str) -> Optional[Pet]:
        """
        반려동물 정보를 가져와 Pet 객체로 반환합니다. 소유자가 다르면 None.
        """
        doc = self.pets_ref.document(pet_id).get()
        if doc.exists:
            pet_data = doc.to_dict()
            if pet_data.get('user_id') == user_id:
                return Pet.from_dict(pet_data)
        return None

    def get_pet_profile(self, pet_id: str, user_id: str) -> Pet:
        """[소유자 전용] 반려동물 프로필 정보를 조회합니다."""
        pet = self.get_pet_by_id_and_owner(pet_id, user_id)
        if not pet:
            raise PermissionError("프로필을 조회할 권한이 없거나 반려동물을 찾을 수 없습니다.")
        return pet

    def get_pets_for_user(self, user_id: str) -> List[Pet]:
        docs = self.pets_ref.where('user_id', '==', user_id).stream()
        return [Pet.from_dict(doc.to_dict()) for doc in docs]

    def _save(self, pet: Pet) -> None:
        self.pets_ref.document(pet.pet_id).set(DateTimeUtils.for_firestore(pet.to_dict()))

    def register_pet(self, user_id: str, pet_data: Dict[str, Any]) -> Pet:
        """반려동물을 등록합니다. 소유자는 존재하는 사용자여야 합니다."""
        if not self.users_ref.document(user_id).get().exists:
            raise FileNotFoundError("반려동물을 등록할 사용자를 찾을 수 없습니다.")

        new_pet = Pet(
            pet_id=str(uuid.uuid4()), user_id=user_id,
            name=pet_data['name'], gender=pet_data['gender'], size=pet_data['size'],
            birth_date=pet_data.get('birth_date'), age=pet_data.get('age', 0),
            weight=pet_data.get('weight'), special_notes=pet_data.get('special_notes'),
            breed=pet_data.get('breed'), photo_url=pet_data.get('photo_url')
        )
        self._save(new_pet)
        logging.info(f"Pet {new_pet.pet_id} registered for user {user_id}")
        return new_pet

    def update_pet(self, pet_id: str, user_id: str, pet_data: Dict[str, Any]) -> Pet:
        """반려동물 정보를 전체 교체 방식으로 수정합니다."""
        pet = self.get_pet_by_id_and_owner(pet_id, user_id)
        if not pet:
            raise PermissionError("프로필을 수정할 권한이 없거나 반려동물을 찾을 수 없습니다.")

        pet.update_info(
            name=pet_data['name'], gender=pet_data['gender'], size=pet_data['size'],
            birth_date=pet_data.get('birth_date'), age=pet_data.get('age', 0),
            weight=pet_data.get('weight'), special_notes=pet_data.get('special_notes'),
            breed=pet_data.get('breed'), photo_url=pet_data.get('photo_url')
        )
        self._save(pet)
        logging.info(f"Pet profile replaced for {pet_id}")
        return pet

    def delete_pet(self, pet_id: str, user_id: str) -> None:
        if not self.get_pet_by_id_and_owner(pet_id, user_id):
            raise PermissionError("반려동물을 삭제할 권한이 없거나 반려동물을 찾을 수 없습니다.")
        self.pets_ref.document(pet_id).delete()
        logging.info(f"Pet {pet_id} deleted by user {user_id}")
