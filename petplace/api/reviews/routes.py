# petplace/api/reviews/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from .schemas import ReviewWriteSchema, ReviewResponseSchema

reviews_bp = Blueprint('reviews_bp', __name__)

@reviews_bp.route('/places/<string:place_id>/reviews', methods=['GET'])
def get_reviews(place_id: str):
    """특정 장소의 리뷰 목록을 조회합니다."""
    review_service = current_app.services['reviews']
    try:
        reviews = review_service.get_reviews_for_place(place_id)
        return jsonify({"success": True, "data": ReviewResponseSchema(many=True).dump(reviews)}), 200
    except FileNotFoundError as e:
        return jsonify({"success": False, "error_code": "PLACE_NOT_FOUND", "message": str(e)}), 404
    except Exception as e:
        logging.error(f"리뷰 목록 조회 중 오류 발생 (place_id: {place_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "INTERNAL_SERVER_ERROR", "message": "리뷰 목록 조회 중 오류가 발생했습니다."}), 500

@reviews_bp.route('/places/<string:place_id>/reviews', methods=['POST'])
@jwt_required()
def create_review(place_id: str):
    """
    특정 장소에 리뷰를 작성합니다.
    - 성공 시 장소의 리뷰 수와 평균 별점이 함께 갱신됩니다.
    """
    review_service = current_app.services['reviews']
    user_id = get_jwt_identity()
    try:
        data = ReviewWriteSchema().load(request.get_json() or {})
        new_review = review_service.create_review(place_id, user_id, data)
        return jsonify({"success": True, "data": ReviewResponseSchema().dump(new_review)}), 201
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except FileNotFoundError as e:
        return jsonify({"success": False, "error_code": "RESOURCE_NOT_FOUND", "message": str(e)}), 404
    except Exception as e:
        logging.error(f"리뷰 작성 중 오류 발생 (place_id: {place_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "REVIEW_CREATION_FAILED", "message": "리뷰 작성 중 오류가 발생했습니다."}), 500

@reviews_bp.route('/reviews/<string:review_id>', methods=['PUT'])
@jwt_required()
def update_review(review_id: str):
    """본인이 작성한 리뷰를 수정합니다."""
    review_service = current_app.services['reviews']
    user_id = get_jwt_identity()
    try:
        data = ReviewWriteSchema().load(request.get_json() or {})
        updated = review_service.update_review(review_id, user_id, data)
        return jsonify({"success": True, "data": ReviewResponseSchema().dump(updated)}), 200
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"success": False, "error_code": "FORBIDDEN", "message": str(e)}), 403
    except FileNotFoundError as e:
        return jsonify({"success": False, "error_code": "REVIEW_NOT_FOUND", "message": str(e)}), 404
    except Exception as e:
        logging.error(f"리뷰 수정 중 오류 발생 (review_id: {review_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "REVIEW_UPDATE_FAILED", "message": "리뷰 수정 중 오류가 발생했습니다."}), 500

@reviews_bp.route('/reviews/<string:review_id>', methods=['DELETE'])
@jwt_required()
def delete_review(review_id: str):
    """본인이 작성한 리뷰를 삭제합니다."""
    review_service = current_app.services['reviews']
    user_id = get_jwt_identity()
    try:
        review_service.delete_review(review_id, user_id)
        return jsonify({"success": True, "message": "리뷰가 삭제되었습니다."}), 200
    except PermissionError as e:
        return jsonify({"success": False, "error_code": "FORBIDDEN", "message": str(e)}), 403
    except FileNotFoundError as e:
        return jsonify({"success": False, "error_code": "REVIEW_NOT_FOUND", "message": str(e)}), 404
    except Exception as e:
        logging.error(f"리뷰 삭제 중 오류 발생 (review_id: {review_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "REVIEW_DELETION_FAILED", "message": "리뷰 삭제 중 오류가 발생했습니다."}), 500
