# petplace/api/places/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from .schemas import PlaceCreateSchema, PlaceSearchQuerySchema, PlaceResponseSchema

places_bp = Blueprint('places_bp', __name__)

@places_bp.route('', methods=['GET'])
def get_all_places():
    """전체 장소 목록을 조회합니다."""
    place_service = current_app.services['places']
    try:
        places = place_service.get_all_places()
        return jsonify({"success": True, "data": PlaceResponseSchema(many=True).dump(places)}), 200
    except Exception as e:
        logging.error(f"Get all places API error: {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "FETCH_FAILED", "message": "장소 목록 조회 중 오류가 발생했습니다."}), 500

@places_bp.route('', methods=['POST'])
@jwt_required()
def create_place():
    """[관리자용] 장소 등록 API."""
    place_service = current_app.services['places']
    try:
        validated_data = PlaceCreateSchema().load(request.get_json() or {})
        new_place = place_service.create_place(validated_data)
        return jsonify({"success": True, "data": PlaceResponseSchema().dump(new_place)}), 201
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Place registration API error: {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "PLACE_REGISTRATION_FAILED", "message": "장소 등록 중 오류가 발생했습니다."}), 500

@places_bp.route('/search', methods=['GET'])
def search_places():
    """이름 우선, 결과가 없으면 주소로 장소를 검색합니다."""
    place_service = current_app.services['places']
    try:
        query = PlaceSearchQuerySchema().load(request.args)
        places = place_service.search_places(query['keyword'])
        return jsonify({"success": True, "data": PlaceResponseSchema(many=True).dump(places)}), 200
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Place search API error: {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "SEARCH_FAILED", "message": "장소 검색 중 오류가 발생했습니다."}), 500

@places_bp.route('/<string:place_id>', methods=['GET'])
def get_place(place_id: str):
    """특정 장소의 상세 정보를 조회합니다."""
    place_service = current_app.services['places']
    try:
        place = place_service.get_place_by_id(place_id)
        return jsonify({"success": True, "data": PlaceResponseSchema().dump(place)}), 200
    except FileNotFoundError as e:
        return jsonify({"success": False, "error_code": "PLACE_NOT_FOUND", "message": str(e)}), 404
    except Exception as e:
        logging.error(f"Get place API error (place_id: {place_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "FETCH_FAILED", "message": "장소 조회 중 오류가 발생했습니다."}), 500
