# petplace/api/users/services.py
import logging
import uuid
from dataclasses import asdict
from typing import Dict, Any, Optional

import bcrypt
from firebase_admin import firestore

from petplace.models.user import User
from petplace.api.users.schemas import PASSWORD_MAX_BYTES
from petplace.utils.datetime_utils import DateTimeUtils

# 중복 확인이 가능한 필드: 외부 파라미터 이름 -> Firestore 필드 이름
DUPLICATE_CHECK_FIELDS = {
    'loginId': 'login_id',
    'email': 'email',
    'nickname': 'nickname',
}

class DuplicateUserError(ValueError):
    """아이디/이메일/닉네임이 이미 다른 사용자에게 사용 중일 때."""

def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()

def verify_password(plain: str, hashed: str) -> bool:
    if len(plain.encode()) > PASSWORD_MAX_BYTES:
        return False
    return bcrypt.checkpw(plain.encode(), hashed.encode())

class UserService:
    """회원가입, 로그인, 중복 확인, 내 정보 관리를 담당하는 서비스."""

    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.users_ref = self.db.collection('users')

    def _find_one_by(self, field_name: str, value: str) -> Optional[Dict[str, Any]]:
        query = self.users_ref.where(field_name, '==', value).limit(1).stream()
        user_doc = next(query, None)
        return user_doc.to_dict() if user_doc else None

    def is_taken(self, param_name: str, value: str) -> bool:
        """loginId/email/nickname 값이 이미 사용 중이면 True."""
        field_name = DUPLICATE_CHECK_FIELDS.get(param_name)
        if field_name is None:
            raise ValueError(f"중복 확인을 지원하지 않는 항목입니다: {param_name}")
        return self._find_one_by(field_name, value) is not None

    def signup(self, signup_data: Dict[str, Any]) -> User:
        """신규 사용자를 등록합니다. 아이디/이메일/닉네임 중 하나라도 중복이면 DuplicateUserError."""
        for param_name, field_name in DUPLICATE_CHECK_FIELDS.items():
            if self._find_one_by(field_name, signup_data[field_name]) is not None:
                raise DuplicateUserError(f"이미 사용 중인 {param_name} 입니다.")

        user_id = str(uuid.uuid4())
        new_user = User(
            user_id=user_id,
            login_id=signup_data['login_id'],
            email=signup_data['email'],
            nickname=signup_data['nickname'],
            password_hash=hash_password(signup_data['password_raw']),
            name=signup_data.get('name'),
            phone=signup_data.get('phone'),
            birthdate=signup_data.get('birthdate'),
            address=signup_data.get('address'),
            profile_image_url=signup_data.get('profile_image'),
            join_date=DateTimeUtils.now()
        )
        self.users_ref.document(user_id).set(DateTimeUtils.for_firestore(asdict(new_user)))
        logging.info(f"New user signed up: {user_id} ({new_user.login_id})")
        return new_user

    def authenticate(self, login_id: str, password: str) -> Optional[User]:
        """아이디/비밀번호가 일치하면 User, 아니면 None."""
        user_data = self._find_one_by('login_id', login_id)
        if user_data and verify_password(password, user_data['password_hash']):
            return User(**user_data)
        logging.warning(f"Login failed for login_id '{login_id}'")
        return None

    def get_user(self, user_id: str) -> Optional[User]:
        doc = self.users_ref.document(user_id).get()
        if not doc.exists:
            return None
        return User(**doc.to_dict())

    def update_nickname(self, user_id: str, nickname: str) -> User:
        """내 닉네임을 변경합니다. 다른 사용자가 쓰는 닉네임이면 DuplicateUserError."""
        user = self.get_user(user_id)
        if user is None:
            raise FileNotFoundError("사용자를 찾을 수 없습니다.")
        owner = self._find_one_by('nickname', nickname)
        if owner is not None and owner['user_id'] != user_id:
            raise DuplicateUserError("이미 사용 중인 닉네임입니다.")

        self.users_ref.document(user_id).update({'nickname': nickname})
        logging.info(f"Nickname updated for user {user_id}")
        user.nickname = nickname
        return user
