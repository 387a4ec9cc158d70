from fastapi import Request

from app.models.stock_registry import StockRegistry
from app.services.stock_service import StockService
from app.services.storage_service import StorageService


# 레지스트리 의존성 (앱 시작 시 한 번 생성되어 app.state 에 보관)
def get_registry(request: Request) -> StockRegistry:
    return request.app.state.registry


# 저장 서비스 의존성
def get_storage(request: Request) -> StorageService:
    return request.app.state.storage


# 명령 처리 서비스 의존성
def get_stock_service(request: Request) -> StockService:
    return StockService(get_registry(request), get_storage(request))
