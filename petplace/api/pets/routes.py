# petplace/api/pets/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from .schemas import PetWriteSchema, PetResponseSchema

pets_bp = Blueprint('pets_bp', __name__)

@pets_bp.route('', methods=['GET'])
@jwt_required()
def get_my_pets():
    """내 반려동물 목록을 조회합니다."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        pets = [pet.to_dict() for pet in pet_service.get_pets_for_user(user_id)]
        return jsonify({"success": True, "data": PetResponseSchema(many=True).dump(pets)}), 200
    except Exception as e:
        logging.error(f"Get pets API error (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "FETCH_FAILED", "message": "반려동물 목록 조회 중 오류가 발생했습니다."}), 500

@pets_bp.route('', methods=['POST'])
@jwt_required()
def register_pet():
    """반려동물 등록 API."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        validated_data = PetWriteSchema().load(request.get_json() or {})
        new_pet = pet_service.register_pet(user_id, validated_data)
        return jsonify({"success": True, "data": PetResponseSchema().dump(new_pet.to_dict())}), 201
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except FileNotFoundError as e:
        return jsonify({"success": False, "error_code": "USER_NOT_FOUND", "message": str(e)}), 404
    except Exception as e:
        logging.error(f"Pet registration API error: {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "PET_REGISTRATION_FAILED", "message": "반려동물 등록 중 오류가 발생했습니다."}), 500

@pets_bp.route('/<string:pet_id>', methods=['GET'])
@jwt_required()
def get_pet_profile(pet_id: str):
    """[소유자 전용] 특정 반려동물의 프로필 정보를 조회합니다."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        pet = pet_service.get_pet_profile(pet_id, user_id)
        return jsonify({"success": True, "data": PetResponseSchema().dump(pet.to_dict())}), 200
    except PermissionError as e:
        return jsonify({"success": False, "error_code": "FORBIDDEN_OR_NOT_FOUND", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Get pet profile API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "FETCH_FAILED", "message": "프로필 조회 중 오류가 발생했습니다."}), 500

@pets_bp.route('/<string:pet_id>', methods=['PUT'])
@jwt_required()
def update_pet(pet_id: str):
    """[소유자 전용] 반려동물 정보를 전체 교체 방식으로 수정합니다."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        validated_data = PetWriteSchema().load(request.get_json() or {})
        updated_pet = pet_service.update_pet(pet_id, user_id, validated_data)
        return jsonify({"success": True, "data": PetResponseSchema().dump(updated_pet.to_dict())}), 200
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"success": False, "error_code": "FORBIDDEN_OR_NOT_FOUND", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Update pet API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "INTERNAL_SERVER_ERROR", "message": "프로필 수정 중 오류가 발생했습니다."}), 500

@pets_bp.route('/<string:pet_id>', methods=['DELETE'])
@jwt_required()
def delete_pet(pet_id: str):
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        pet_service.delete_pet(pet_id, user_id)
        return jsonify({"success": True, "message": "반려동물 정보가 삭제되었습니다."}), 200
    except PermissionError as e:
        return jsonify({"success": False, "error_code": "FORBIDDEN_OR_NOT_FOUND", "message": str(e)}), 403
