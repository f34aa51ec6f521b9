"""
펫플레이스 API 클라이언트 패키지

REST API에서 장소를 불러와 정규화하고, 추천 마법사/필터/회원가입 폼의 화면 상태를 관리합니다.
"""

from .api_client import PetPlaceApiClient, ApiError
from .places import PlaceStore, PlaceSummary, LoadStatus, normalize_place
from .wizard import RecommendationWizard, WizardQuestion, DEFAULT_QUESTIONS
from .filters import FilterDialog, FilterState
from .signup_form import SignupForm, SubmitResult

__all__ = [
    'PetPlaceApiClient', 'ApiError',
    'PlaceStore', 'PlaceSummary', 'LoadStatus', 'normalize_place',
    'RecommendationWizard', 'WizardQuestion', 'DEFAULT_QUESTIONS',
    'FilterDialog', 'FilterState',
    'SignupForm', 'SubmitResult'
]
