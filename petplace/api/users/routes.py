# petplace/api/users/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity, create_access_token
from marshmallow import ValidationError

from petplace.api.users.services import DuplicateUserError
from petplace.api.users.schemas import SignupSchema, LoginSchema, NicknameUpdateSchema, UserProfileResponseSchema

users_bp = Blueprint('users_bp', __name__)

def _check_duplicate(param_name: str):
    user_service = current_app.services['users']
    value = request.args.get(param_name)
    if not value:
        return jsonify({"success": False, "error_code": "INVALID_PARAMETER", "message": f"'{param_name}' 파라미터가 필요합니다."}), 400
    try:
        return jsonify({"success": True, "data": user_service.is_taken(param_name, value)}), 200
    except Exception as e:
        logging.error(f"중복 확인 중 오류 발생 ({param_name}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "CHECK_FAILED", "message": "확인 중 오류가 발생했습니다."}), 500

@users_bp.route('/check-id', methods=['GET'])
def check_login_id():
    """아이디 중복 확인. data가 true이면 이미 사용 중입니다."""
    return _check_duplicate('loginId')

@users_bp.route('/check-email', methods=['GET'])
def check_email():
    return _check_duplicate('email')

@users_bp.route('/check-nickname', methods=['GET'])
def check_nickname():
    return _check_duplicate('nickname')

@users_bp.route('/signup', methods=['POST'])
def signup():
    """회원가입 API."""
    user_service = current_app.services['users']
    try:
        data = SignupSchema().load(request.get_json() or {})
        new_user = user_service.signup(data)
        return jsonify({"success": True, "message": "회원가입 성공!", "data": {"userId": new_user.user_id}}), 201
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "message": "올바르지 않는 형식입니다.", "details": err.messages}), 400
    except DuplicateUserError as e:
        return jsonify({"success": False, "error_code": "DUPLICATE_USER", "message": str(e)}), 409
    except Exception as e:
        logging.error(f"회원가입 처리 중 오류 발생: {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "SIGNUP_FAILED", "message": "가입 실패"}), 500

@users_bp.route('/login', methods=['POST'])
def login():
    """아이디/비밀번호 로그인. 성공 시 Access Token을 발급합니다."""
    user_service = current_app.services['users']
    try:
        data = LoginSchema().load(request.get_json() or {})
        user = user_service.authenticate(data['login_id'], data['password'])
        if user is None:
            return jsonify({"success": False, "error_code": "INVALID_CREDENTIALS", "message": "아이디 또는 비밀번호가 올바르지 않습니다."}), 401

        access_token = create_access_token(identity=user.user_id)
        return jsonify({
            "success": True,
            "data": {"accessToken": access_token, "userId": user.user_id, "nickname": user.nickname}
        }), 200
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"로그인 처리 중 오류 발생: {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부 오류가 발생했습니다."}), 500

@users_bp.route('/me', methods=['GET'])
@jwt_required()
def get_my_profile():
    user_service = current_app.services['users']
    user_id = get_jwt_identity()
    user = user_service.get_user(user_id)
    if user is None:
        return jsonify({"success": False, "error_code": "USER_NOT_FOUND", "message": "사용자를 찾을 수 없습니다."}), 404
    return jsonify({"success": True, "data": UserProfileResponseSchema().dump(user)}), 200

@users_bp.route('/me', methods=['PATCH'])
@jwt_required()
def update_my_nickname():
    """
    현재 로그인된 사용자의 닉네임을 변경합니다.
    """
    user_service = current_app.services['users']
    user_id = get_jwt_identity()
    try:
        data = NicknameUpdateSchema().load(request.get_json() or {})
        updated_user = user_service.update_nickname(user_id, data['nickname'])
        return jsonify({"success": True, "data": UserProfileResponseSchema().dump(updated_user)}), 200
    except ValidationError as err:
        return jsonify({"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except FileNotFoundError as e:
        return jsonify({"success": False, "error_code": "USER_NOT_FOUND", "message": str(e)}), 404
    except DuplicateUserError as e:
        return jsonify({"success": False, "error_code": "DUPLICATE_NICKNAME", "message": str(e)}), 409
    except Exception as e:
        logging.error(f"닉네임 변경 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"success": False, "error_code": "INTERNAL_SERVER_ERROR", "message": "닉네임 변경 중 서버 오류가 발생했습니다."}), 500
