from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.core.dependencies import get_registry, get_stock_service
from app.models.stock_registry import StockRegistry
from app.services.stock_service import StockService

# 텍스트 출력 API 라우터
# 재고 코드 / 유형 이름 경로와 겹치지 않도록 별도 경로 사용
router = APIRouter(tags=["Text"])


# 전체 재고 텍스트 조회
@router.get("/stocks-text", response_class=PlainTextResponse)
def read_stocks_text(registry: StockRegistry = Depends(get_registry)):
    return str(registry)


# 전체 재고 유형 텍스트 조회
@router.get("/stocktypes-text", response_class=PlainTextResponse)
def read_stock_types_text(registry: StockRegistry = Depends(get_registry)):
    return registry.to_stock_type_string()


# 특정 유형의 재고 텍스트 조회
@router.get("/stocktypes-text/{stock_type}", response_class=PlainTextResponse)
def read_stock_type_text(stock_type: str, service: StockService = Depends(get_stock_service)):
    service.require_stock_type(stock_type)
    return service.registry.query_stocks(stock_type)
