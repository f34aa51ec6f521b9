# petplace/client/signup_form.py
"""
회원가입 폼 상태와 제출 전 검증.
형식 오류나 중복 확인 누락이 있으면 서버의 회원가입 API를 호출하지 않습니다.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from petplace.api.users.schemas import (
    PASSWORD_PATTERN, PASSWORD_ERROR, PASSWORD_MAX_BYTES, PASSWORD_LENGTH_ERROR,
    PHONE_PATTERN, PHONE_ERROR, normalize_phone,
)
from .api_client import PetPlaceApiClient, ApiError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "username", "email", "password", "passwordConfirm",
    "name", "nickname", "birthdate", "phone", "address",
)

# 폼 필드 -> (API 파라미터, 표시 이름)
DUPLICATE_CHECKS = {
    "username": ("loginId", "아이디"),
    "email": ("email", "이메일"),
    "nickname": ("nickname", "닉네임"),
}

REQUIRED_ERROR = "필수 입력 항목입니다."
MISMATCH_ERROR = "비밀번호가 일치하지 않습니다."
INVALID_FORM_MESSAGE = "올바르지 않는 형식입니다."
CHECK_REQUIRED_MESSAGE = "아이디, 이메일, 닉네임 중복 확인이 필요합니다."

def validate_password(password: str) -> Optional[str]:
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return PASSWORD_LENGTH_ERROR
    return None if PASSWORD_PATTERN.match(password) else PASSWORD_ERROR

def validate_phone(phone: str) -> Optional[str]:
    return None if PHONE_PATTERN.match(normalize_phone(phone)) else PHONE_ERROR

@dataclass
class SubmitResult:
    success: bool
    message: str

class SignupForm:
    def __init__(self, api_client: PetPlaceApiClient):
        self.api_client = api_client
        self.data: Dict[str, str] = {field: "" for field in REQUIRED_FIELDS}
        self.errors: Dict[str, str] = {}
        # True면 사용 가능 확인 완료, False면 미확인 또는 중복
        self.checks: Dict[str, bool] = {field: False for field in DUPLICATE_CHECKS}

    def change(self, field: str, value: str) -> None:
        """값을 바꾸면 해당 필드의 오류와 중복 확인 상태가 초기화됩니다."""
        if field not in self.data:
            raise KeyError(field)
        self.data[field] = value
        self.errors.pop(field, None)
        if field == "password":
            self.errors.pop("passwordConfirm", None)
        if field in self.checks:
            self.checks[field] = False

    def check_duplicate(self, field: str) -> str:
        """중복 확인을 수행하고 사용자에게 보여줄 메시지를 반환합니다."""
        value = self.data[field]
        if not value:
            return "내용을 입력해주세요."

        param_name, label = DUPLICATE_CHECKS[field]
        try:
            taken = self.api_client.check_duplicate(param_name, value)
        except ApiError as e:
            logger.warning(f"중복 확인 실패 ({field}): {e}")
            return "확인 중 오류가 발생했습니다."
        except requests.RequestException as e:
            logger.error(f"중복 확인 중 서버 연결 실패 ({field}): {e}")
            return "서버 연결에 실패했습니다."

        self.checks[field] = not taken
        return f"중복된 {label} 입니다." if taken else f"사용 가능한 {label} 입니다."

    def validate(self) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for field in REQUIRED_FIELDS:
            if not self.data[field].strip():
                errors[field] = REQUIRED_ERROR

        password_error = validate_password(self.data["password"])
        if password_error:
            errors["password"] = password_error
        elif self.data["password"] != self.data["passwordConfirm"]:
            errors["passwordConfirm"] = MISMATCH_ERROR

        phone_error = validate_phone(self.data["phone"])
        if phone_error:
            errors["phone"] = phone_error

        self.errors = errors
        return errors

    def submit(self) -> SubmitResult:
        if self.validate():
            return SubmitResult(False, INVALID_FORM_MESSAGE)
        if not all(self.checks.values()):
            return SubmitResult(False, CHECK_REQUIRED_MESSAGE)

        payload = {
            "loginId": self.data["username"],
            "email": self.data["email"],
            "passwordRaw": self.data["password"],
            "nickname": self.data["nickname"],
            "name": self.data["name"],
            "phone": self.data["phone"],
            "birthdate": self.data["birthdate"],
            "address": self.data["address"],
            "profileImage": None,
        }
        try:
            result = self.api_client.signup(payload)
        except (requests.RequestException, ApiError) as e:
            logger.error(f"회원가입 요청 실패: {e}")
            return SubmitResult(False, "서버 오류 발생")

        if result.get("success"):
            return SubmitResult(True, "회원가입 성공!")
        return SubmitResult(False, result.get("message") or "가입 실패")
