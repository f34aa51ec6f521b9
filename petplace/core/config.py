# petplace/core/config.py

import os
from datetime import timedelta

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # JWT 서명 키. .env 파일 또는 환경 변수에서 읽어옵니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES_HOURS', 12)))

    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

    # 클라이언트 패키지(petplace.client)가 호출할 API 서버 주소와 요청 타임아웃(초)
    PETPLACE_API_BASE_URL = os.getenv('PETPLACE_API_BASE_URL', 'http://localhost:5000')
    PETPLACE_HTTP_TIMEOUT = float(os.getenv('PETPLACE_HTTP_TIMEOUT', 10))

class DevelopmentConfig(Config):
    """개발 환경 설정. 코드 변경 시 자동 재시작, 상세 에러 페이지가 활성화됩니다."""
    DEBUG = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)

class TestingConfig(Config):
    """테스트 환경 설정. Firestore 클라이언트는 테스트에서 직접 주입합니다."""
    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'petplace-testing-secret-key-0123456789')
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')

class ProductionConfig(Config):
    DEBUG = False

# FLASK_ENV 값에 따라 create_app에서 설정 클래스를 선택합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
