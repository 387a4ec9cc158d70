from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 저장 파일 경로
    DATA_DIR: Path = Path("data")
    STOCK_FILE: str = "saved_stocks.txt"
    STOCKTYPE_FILE: str = "saved_stocktypes.txt"

    # 최초 실행 시 등록되는 기본 재고 유형
    DEFAULT_STOCK_TYPE: str = "Uncategorised"

    # 서버 설정
    DEBUG: bool = True

    # 로그 설정
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # 환경변수 파일
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def stock_path(self) -> Path:
        return self.DATA_DIR / self.STOCK_FILE

    @property
    def stocktype_path(self) -> Path:
        return self.DATA_DIR / self.STOCKTYPE_FILE


# 전역 설정 인스턴스
settings = Settings()
