# petplace/api/reviews/schemas.py
from marshmallow import Schema, fields, validate

class ReviewAuthorSchema(Schema):
    user_id = fields.Str(data_key="userId")
    nickname = fields.Str(allow_none=True)

class ReviewWriteSchema(Schema):
    """
    POST /api/places/{place_id}/reviews, PUT /api/reviews/{review_id}
    리뷰 작성/수정 요청 본문. 수정도 전체 필드를 다시 보냅니다.
    """
    rating = fields.Int(
        required=True,
        validate=validate.Range(min=1, max=5, error="별점은 1~5 사이여야 합니다."),
        error_messages={"required": "별점을 선택해주세요."}
    )
    content = fields.Str(load_default="", validate=validate.Length(max=500, error="리뷰 내용은 최대 500자입니다."))
    photos = fields.List(fields.URL(), load_default=list)

class ReviewResponseSchema(Schema):
    review_id = fields.Str(data_key="reviewId")
    place_id = fields.Str(data_key="placeId")
    author = fields.Nested(ReviewAuthorSchema)
    rating = fields.Int()
    content = fields.Str()
    photos = fields.List(fields.Str())
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt", allow_none=True)
