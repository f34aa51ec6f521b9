# petplace/api/places/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE
from petplace.models.place import PlaceCategory

class PlaceCreateSchema(Schema):
    """POST /api/places 장소 등록 요청 스키마."""
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    address = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    phone = fields.Str(allow_none=True, load_default=None)
    operation_hours = fields.Str(data_key="operationHours", allow_none=True, load_default=None)
    pet_policy = fields.Str(data_key="petPolicy", allow_none=True, load_default=None)
    latitude = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=-90, max=90))
    longitude = fields.Float(allow_none=True, load_default=None, validate=validate.Range(min=-180, max=180))
    photos = fields.List(fields.URL(), load_default=list)
    category = fields.Str(allow_none=True, load_default=None, validate=validate.OneOf([c.value for c in PlaceCategory]))

class PlaceSearchQuerySchema(Schema):
    """GET /api/places/search 쿼리 파라미터 스키마."""
    class Meta:
        unknown = EXCLUDE

    keyword = fields.Str(required=True, error_messages={"required": "검색어(keyword)는 필수입니다."})

class PlaceResponseSchema(Schema):
    """장소 응답 스키마. 프론트엔드 규약에 맞춰 camelCase 키로 직렬화합니다."""
    place_id = fields.Str(data_key="placeId", dump_only=True)
    name = fields.Str()
    address = fields.Str()
    phone = fields.Str(allow_none=True)
    operation_hours = fields.Str(data_key="operationHours", allow_none=True)
    pet_policy = fields.Str(data_key="petPolicy", allow_none=True)
    latitude = fields.Float(allow_none=True)
    longitude = fields.Float(allow_none=True)
    photos = fields.List(fields.Str())
    category = fields.Str(allow_none=True)
    avg_rating = fields.Float(data_key="avgRating")
    review_count = fields.Int(data_key="reviewCount")
    created_at = fields.DateTime(data_key="createdAt")
