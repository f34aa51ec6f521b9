# petplace/api/users/schemas.py
import re
from marshmallow import Schema, fields, validate, validates, ValidationError, EXCLUDE

# 최소 8자, 영문 1자 이상 + 숫자 또는 특수문자 1자 이상
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Za-z])(?=.*\d|.*[!@#$%^&*()_+={}\[\]:;\"'<>,.?/\\|`~-]).{8,}$")
PASSWORD_ERROR = "비밀번호는 8자 이상, 영문/숫자/특수문자 중 2가지 이상을 포함해야 합니다."

# bcrypt는 72바이트까지만 해시합니다
PASSWORD_MAX_BYTES = 72
PASSWORD_LENGTH_ERROR = f"비밀번호는 {PASSWORD_MAX_BYTES}바이트를 넘을 수 없습니다."

# 하이픈 등을 제거한 뒤 010으로 시작하는 11자리
PHONE_PATTERN = re.compile(r"^010\d{8}$")
PHONE_ERROR = "전화번호 형식이 올바르지 않습니다. (예: 01012345678)"

def normalize_phone(phone: str) -> str:
    return re.sub(r"[^0-9]", "", phone)

class SignupSchema(Schema):
    """
    POST /api/users/signup
    회원가입 요청 본문. 키 이름은 프론트엔드 규약(camelCase)을 따릅니다.
    """
    class Meta:
        unknown = EXCLUDE

    login_id = fields.Str(data_key="loginId", required=True, validate=validate.Length(min=1, max=30))
    email = fields.Email(required=True)
    password_raw = fields.Str(data_key="passwordRaw", required=True, load_only=True)
    nickname = fields.Str(required=True, validate=validate.Length(min=1, max=20))
    profile_image = fields.URL(data_key="profileImage", allow_none=True, load_default=None)
    name = fields.Str(allow_none=True, load_default=None)
    phone = fields.Str(allow_none=True, load_default=None)
    birthdate = fields.Str(allow_none=True, load_default=None)
    address = fields.Str(allow_none=True, load_default=None)

    @validates("password_raw")
    def validate_password(self, value, **kwargs):
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValidationError(PASSWORD_LENGTH_ERROR)
        if not PASSWORD_PATTERN.match(value):
            raise ValidationError(PASSWORD_ERROR)

    @validates("phone")
    def validate_phone(self, value, **kwargs):
        if value is not None and not PHONE_PATTERN.match(normalize_phone(value)):
            raise ValidationError(PHONE_ERROR)

class LoginSchema(Schema):
    login_id = fields.Str(data_key="loginId", required=True)
    password = fields.Str(required=True, load_only=True)

class NicknameUpdateSchema(Schema):
    """PATCH /api/users/me 닉네임 변경 요청 스키마."""
    nickname = fields.Str(required=True, validate=validate.Length(min=1, max=20, error="닉네임은 1~20자 사이여야 합니다."))

class UserProfileResponseSchema(Schema):
    """내 정보 응답 스키마. 비밀번호 해시는 포함하지 않습니다."""
    user_id = fields.Str(data_key="userId", dump_only=True)
    login_id = fields.Str(data_key="loginId")
    email = fields.Str()
    nickname = fields.Str()
    name = fields.Str(allow_none=True)
    phone = fields.Str(allow_none=True)
    birthdate = fields.Str(allow_none=True)
    address = fields.Str(allow_none=True)
    profile_image_url = fields.Str(data_key="profileImage", allow_none=True)
    join_date = fields.DateTime(data_key="joinDate")
