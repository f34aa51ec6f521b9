# petplace/models/user.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from petplace.utils.datetime_utils import DateTimeUtils

@dataclass
class User:
    """
    Firestore 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    """
    user_id: str
    login_id: str
    email: str
    nickname: str
    password_hash: str
    name: Optional[str] = None
    phone: Optional[str] = None
    birthdate: Optional[str] = None
    address: Optional[str] = None
    profile_image_url: Optional[str] = None
    join_date: datetime = field(default_factory=DateTimeUtils.now)
