# petplace/models/review.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List, Optional

from petplace.utils.datetime_utils import DateTimeUtils

@dataclass
class Review:
    """
    Firestore 'reviews' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    """
    review_id: str
    place_id: str
    author: Dict[str, Any]  # {'user_id', 'nickname'}
    rating: int
    content: str = ""
    photos: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=DateTimeUtils.now)
    updated_at: Optional[datetime] = None
