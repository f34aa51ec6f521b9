# petplace/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
from flask_jwt_extended import JWTManager
import firebase_admin
from firebase_admin import credentials, firestore

# - 설정
from petplace.core.config import config_by_name

# - API 블루프린트
from petplace.api.places.routes import places_bp
from petplace.api.reviews.routes import reviews_bp
from petplace.api.users.routes import users_bp
from petplace.api.pets.routes import pets_bp

# - 서비스 모듈
from petplace.api.places.repository import PlaceRepository
from petplace.api.places.services import PlaceService
from petplace.api.reviews.services import ReviewService
from petplace.api.users.services import UserService
from petplace.api.pets.services import PetService

def _init_firestore(app: Flask):
    """Firebase Admin SDK를 초기화하고 Firestore 클라이언트를 반환합니다."""
    if not firebase_admin._apps:
        cred_path = app.config['FIREBASE_CREDENTIALS_PATH']
        if not cred_path or not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
        firebase_admin.initialize_app(credentials.Certificate(cred_path))
    return firestore.client()

def create_app(config_name: str = None, db=None):
    """
    Flask 애플리케이션 팩토리 함수.
    db를 넘기면 Firebase 초기화 없이 해당 Firestore 클라이언트를 사용합니다 (테스트용).
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 확장 기능 및 외부 서비스 초기화
    # =====================================================================================
    JWTManager(app)

    if db is None:
        db = _init_firestore(app)

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    place_repository = PlaceRepository(db)
    app.services['places'] = PlaceService(place_repository)
    app.services['reviews'] = ReviewService(place_repository, db)
    app.services['users'] = UserService(db)
    app.services['pets'] = PetService(db)

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(places_bp, url_prefix='/api/places')
    app.register_blueprint(reviews_bp, url_prefix='/api')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(pets_bp, url_prefix='/api/pets')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"success": False, "error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 라우트에서 처리되지 않은 모든 예외를 여기서 처리
        if isinstance(err, HTTPException):
            # 404, 405 등은 상태 코드를 그대로 유지
            return jsonify({"success": False, "error_code": err.name.upper().replace(' ', '_'), "message": err.description}), err.code
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"success": False, "error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부에서 예상치 못한 오류가 발생했습니다."}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
