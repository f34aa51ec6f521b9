# petplace/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간/날짜 처리를 위한 유틸리티 모듈

- 모든 시각은 UTC timezone-aware datetime으로 다룹니다.
- Firestore는 date 타입을 저장할 수 없으므로 저장 전 datetime으로 변환합니다.
- 반려동물 생일처럼 사용자가 입력한 날짜 문자열(YYYY-MM-DD, YYYYMMDD)을 파싱합니다.
"""

import logging
import re
from datetime import datetime, date, timezone, time
from typing import Union, Optional, Any
from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

# (형식 검사 정규식, strptime 포맷)
INPUT_DATE_FORMATS = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}$"), '%Y-%m-%d'),
    (re.compile(r"^\d{8}$"), '%Y%m%d'),
)

class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def today() -> date:
        return datetime.now(timezone.utc).date()

    @staticmethod
    def parse_date_string(date_string: str) -> date:
        """
        날짜 문자열을 date 객체로 파싱

        지원 포맷:
        - 2024-01-15
        - 2024/01/15
        - 20240115
        """
        try:
            if not date_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")
            return dateutil_parser.parse(date_string.strip()).date()
        except Exception as e:
            logger.error(f"날짜 문자열 파싱 실패: {date_string} - {e}")
            raise ValueError(f"잘못된 날짜 형식입니다: {date_string}")

    @staticmethod
    def parse_input_date(date_string: str) -> date:
        """
        사용자가 입력한 날짜를 YYYY-MM-DD 또는 YYYYMMDD 형식으로만 파싱

        parse_date_string과 달리 빠진 연/월/일을 오늘 날짜로 채우지 않습니다.
        """
        value = (date_string or "").strip()
        for pattern, fmt in INPUT_DATE_FORMATS:
            if pattern.match(value):
                try:
                    return datetime.strptime(value, fmt).date()
                except ValueError:
                    break
        raise ValueError(f"잘못된 날짜 형식입니다: {date_string}")

    @staticmethod
    def to_date_string(d: date) -> str:
        """date 객체를 YYYY-MM-DD 형식 문자열로 변환"""
        return d.strftime('%Y-%m-%d')

    @staticmethod
    def for_firestore(obj: Any) -> Any:
        """
        Firestore 저장을 위해 객체의 날짜/시간 필드를 변환

        변환 규칙:
        - date -> datetime (00:00:00 UTC)
        - timezone-naive datetime -> timezone-aware datetime (UTC)
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, date) and not isinstance(obj, datetime):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)
        elif isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        elif isinstance(obj, dict):
            return {k: DateTimeUtils.for_firestore(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [DateTimeUtils.for_firestore(item) for item in obj]
        return obj

    @staticmethod
    def to_date(value: Union[date, datetime, str, None]) -> Optional[date]:
        """Firestore에서 읽은 값(Timestamp/datetime/문자열)을 date로 변환합니다."""
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return DateTimeUtils.parse_date_string(value)
        if hasattr(value, 'date'):  # Firestore DatetimeWithNanoseconds
            return value.date()
        raise ValueError(f"date로 변환할 수 없는 값입니다: {value!r}")

    @staticmethod
    def calculate_age_years(birthdate: Union[date, datetime, str], on: Optional[date] = None) -> int:
        """생년월일로부터 만 나이(년)를 계산. 미래 날짜는 0살로 취급합니다."""
        birth = DateTimeUtils.to_date(birthdate)
        reference = on or DateTimeUtils.today()
        if birth > reference:
            return 0
        return relativedelta(reference, birth).years


# 편의 함수들
def now() -> datetime:
    return DateTimeUtils.now()

def for_firestore(obj: Any) -> Any:
    return DateTimeUtils.for_firestore(obj)
