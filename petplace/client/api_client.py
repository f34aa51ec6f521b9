# petplace/client/api_client.py

import logging
from typing import Dict, Any, List, Optional

import requests

from petplace.core.config import Config

logger = logging.getLogger(__name__)

# 중복 확인 파라미터 이름 -> 엔드포인트
CHECK_ENDPOINTS = {
    'loginId': '/api/users/check-id',
    'email': '/api/users/check-email',
    'nickname': '/api/users/check-nickname',
}

class ApiError(Exception):
    """서버가 success: false 를 돌려주었거나 JSON이 아닌 응답을 받은 경우."""
    def __init__(self, message: str, status_code: Optional[int] = None, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}

class PetPlaceApiClient:
    """펫플레이스 REST API와의 HTTP 통신을 담당하는 클라이언트입니다."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or Config.PETPLACE_API_BASE_URL).rstrip('/')
        self.timeout = timeout or Config.PETPLACE_HTTP_TIMEOUT
        self.session = session or requests.Session()
        self.access_token: Optional[str] = None

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        headers = kwargs.pop('headers', {})
        if self.access_token:
            headers['Authorization'] = f"Bearer {self.access_token}"

        response = self.session.request(method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs)
        try:
            return response.json()
        except ValueError:
            raise ApiError(f"JSON이 아닌 응답을 받았습니다 (status: {response.status_code})", response.status_code)

    def _require_success(self, result: Dict[str, Any]) -> Dict[str, Any]:
        if not result.get('success'):
            raise ApiError(result.get('message') or "요청이 실패했습니다.", payload=result)
        return result

    def get_places(self) -> List[Dict[str, Any]]:
        """GET /api/places 원본 장소 목록."""
        result = self._require_success(self._request('GET', '/api/places'))
        return result.get('data') or []

    def check_duplicate(self, param_name: str, value: str) -> bool:
        """이미 사용 중이면 True."""
        endpoint = CHECK_ENDPOINTS[param_name]
        result = self._require_success(self._request('GET', endpoint, params={param_name: value}))
        return result.get('data') is True

    def signup(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST /api/users/signup. 실패 응답도 예외 없이 그대로 반환합니다 (메시지 표시용)."""
        return self._request('POST', '/api/users/signup', json=payload)

    def login(self, login_id: str, password: str) -> Dict[str, Any]:
        """로그인에 성공하면 이후 요청에 Access Token을 자동으로 붙입니다."""
        result = self._require_success(self._request('POST', '/api/users/login', json={"loginId": login_id, "password": password}))
        self.access_token = result['data']['accessToken']
        logger.info(f"Logged in as user {result['data'].get('userId')}")
        return result['data']

    def logout(self) -> None:
        self.access_token = None
