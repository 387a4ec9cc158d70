from fastapi import APIRouter, Depends

from app.core.dependencies import get_registry, get_stock_service
from app.models.stock_registry import StockRegistry
from app.schemas.command_schema import CommandResponse
from app.schemas.stock_schema import (
    StockCreate,
    StockEdit,
    StockQuantityResponse,
    StockResponse,
)
from app.schemas.table_schema import TableStruct
from app.services.stock_service import StockService

# 재고 관련 API 라우터
router = APIRouter(prefix="/stocks", tags=["Stocks"])


# 전체 재고 테이블 조회
@router.get("/", response_model=TableStruct)
def read_stocks(registry: StockRegistry = Depends(get_registry)):
    return registry.get_all_stocks_struct()


# 단일 재고 조회
@router.get("/{stock_code}", response_model=StockResponse)
def read_stock(stock_code: str, service: StockService = Depends(get_stock_service)):
    return StockResponse.model_validate(service.find_stock(stock_code))


# 재고 수량 조회
@router.get("/{stock_code}/quantity", response_model=StockQuantityResponse)
def read_stock_quantity(stock_code: str, service: StockService = Depends(get_stock_service)):
    return StockQuantityResponse(stock_code=stock_code, quantity=service.get_stock_quantity(stock_code))


# 재고 생성
@router.post("/", response_model=CommandResponse, status_code=201)
def create_stock(stock: StockCreate, service: StockService = Depends(get_stock_service)):
    new = service.add_stock(
        stock.stock_type,
        stock.stock_code,
        stock.quantity,
        stock.description,
        stock.minimum,
        stock.loaned,
    )

    return CommandResponse(
        message=f"Nice! I have successfully added the stock: {new.summary()}",
        stocks=[StockResponse.model_validate(new)],
        table=service.registry.get_all_stocks_struct(),
    )


# 재고 수정 (한 번에 한 속성)
@router.put("/{stock_code}", response_model=CommandResponse)
def update_stock(stock_code: str, edit: StockEdit, service: StockService = Depends(get_stock_service)):
    edited = service.edit_stock(stock_code, edit.property, edit.new_value)

    return CommandResponse(
        message=f"Awesome! I have successfully updated the following stock: {edited.summary()}",
        stocks=[StockResponse.model_validate(edited)],
        table=service.registry.get_all_stocks_struct(),
    )


# 재고 삭제
@router.delete("/{stock_code}", response_model=CommandResponse)
def delete_stock(stock_code: str, service: StockService = Depends(get_stock_service)):
    deleted = service.delete_stock(stock_code)

    return CommandResponse(
        message=f"I deleted the following stock: {deleted.summary()}",
        stocks=[StockResponse.model_validate(deleted)],
        table=service.registry.get_all_stocks_struct(),
    )
