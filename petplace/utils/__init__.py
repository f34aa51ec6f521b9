"""
유틸리티 모듈 패키지

프로젝트 전체에서 공통으로 사용되는 날짜/시간 유틸리티를 포함합니다.
"""

from .datetime_utils import DateTimeUtils, now, for_firestore

__all__ = ['DateTimeUtils', 'now', 'for_firestore']
