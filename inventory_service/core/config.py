# inventory_service/core/config.py

from typing import Any
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

from inventory_service import APP_NAME, APP_VERSION

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
# 패키지 디렉토리 (HTML 폼이 패키지 데이터로 함께 설치됨)
PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = APP_NAME
    APP_VERSION: str = APP_VERSION
    APP_DESCRIPTION: str = "Документація для сервісу інвентаризації."
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging")

    # --- 서버 설정 (CLI 옵션으로 덮어쓸 수 있음) ---
    HOST: str = Field("127.0.0.1", description="Server listen address")
    PORT: int = Field(3000, description="Server listen port")

    # --- 파일 저장 설정 ---
    # CACHE_DIR: 업로드된 사진이 저장되는 디렉토리 (시작 시 없으면 생성)
    CACHE_DIR: str = Field(os.path.join(BASE_DIR, "cache"), description="Directory for cached photo files.")
    STATIC_DIR: str = Field(os.path.join(PACKAGE_DIR, "static"), description="Directory holding the HTML forms.")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 상대 경로로 지정된 경우 절대 경로로 변환합니다.
        self.CACHE_DIR = os.path.abspath(self.CACHE_DIR)
        self.STATIC_DIR = os.path.abspath(self.STATIC_DIR)

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.DEBUG_MODE else self.LOG_LEVEL.upper()


settings = Settings()
