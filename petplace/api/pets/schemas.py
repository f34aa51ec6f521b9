# petplace/api/pets/schemas.py
from marshmallow import Schema, fields, validate, post_load, ValidationError
from petplace.models.pet import PetGender, PetSize
from petplace.utils.datetime_utils import DateTimeUtils

class PetWriteSchema(Schema):
    """
    POST /api/pets 등록, PUT /api/pets/<pet_id> 수정 공통 스키마.
    수정도 전체 필드를 교체하므로 등록과 같은 규칙을 사용합니다.
    """
    name = fields.Str(required=True, validate=validate.Length(min=1, max=20))
    gender = fields.Str(required=True, validate=validate.OneOf([e.value for e in PetGender]))
    size = fields.Str(required=True, validate=validate.OneOf([e.value for e in PetSize]))
    # YYYY-MM-DD 또는 YYYYMMDD
    birth_date = fields.Str(data_key="birthDate", allow_none=True, load_default=None)
    age = fields.Int(allow_none=True, load_default=None, validate=validate.Range(min=0, max=40))
    weight = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=0.1, max=200.0))
    special_notes = fields.Str(data_key="specialNotes", allow_none=True, load_default=None, validate=validate.Length(max=500))
    breed = fields.Str(allow_none=True, load_default=None, validate=validate.Length(max=30))
    photo_url = fields.URL(data_key="photoUrl", allow_none=True, load_default=None)

    @post_load
    def convert_values(self, data, **kwargs):
        """문자열 생일을 date로 바꾸고, 나이가 없으면 생일로부터 계산합니다."""
        if data.get('birth_date'):
            try:
                data['birth_date'] = DateTimeUtils.parse_input_date(data['birth_date'])
            except ValueError:
                raise ValidationError({"birthDate": ["생일은 YYYY-MM-DD 또는 YYYYMMDD 형식이어야 합니다."]})
        else:
            data['birth_date'] = None

        if data.get('age') is None:
            data['age'] = DateTimeUtils.calculate_age_years(data['birth_date']) if data['birth_date'] else 0

        data['gender'] = PetGender(data['gender'])
        data['size'] = PetSize(data['size'])
        return data

class PetResponseSchema(Schema):
    """반려동물 프로필 응답 스키마."""
    pet_id = fields.Str(data_key="petId", dump_only=True)
    user_id = fields.Str(data_key="ownerId", dump_only=True)
    name = fields.Str()
    gender = fields.Str()
    size = fields.Str()
    birth_date = fields.Date(data_key="birthDate", allow_none=True)
    age = fields.Int()
    weight = fields.Float(allow_none=True)
    special_notes = fields.Str(data_key="specialNotes", allow_none=True)
    breed = fields.Str(allow_none=True)
    photo_url = fields.Str(data_key="photoUrl", allow_none=True)
