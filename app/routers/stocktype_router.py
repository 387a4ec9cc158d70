from fastapi import APIRouter, Depends

from app.core.dependencies import get_registry, get_stock_service
from app.models.stock_registry import StockRegistry
from app.schemas.command_schema import CommandResponse
from app.schemas.stock_schema import StockResponse
from app.schemas.stocktype_schema import StockTypeCreate, StockTypeRename
from app.schemas.table_schema import TableStruct
from app.services.stock_service import StockService

# 재고 유형 관련 API 라우터
router = APIRouter(prefix="/stocktypes", tags=["StockTypes"])


# 전체 재고 유형 테이블 조회
@router.get("/", response_model=TableStruct)
def read_stock_types(registry: StockRegistry = Depends(get_registry)):
    return registry.get_all_stock_types_struct()


# 특정 유형의 재고 테이블 조회
@router.get("/{stock_type}", response_model=TableStruct)
def read_stock_type(stock_type: str, service: StockService = Depends(get_stock_service)):
    service.require_stock_type(stock_type)
    return service.registry.get_all_stocks_in_stock_type_struct(stock_type)


# 재고 유형 생성
@router.post("/", response_model=CommandResponse, status_code=201)
def create_stock_type(stock_type: StockTypeCreate, service: StockService = Depends(get_stock_service)):
    name = service.add_stock_type(stock_type.name)

    return CommandResponse(
        message=f"Nice! I have successfully added the stocktype: {name}",
        table=service.registry.get_all_stock_types_struct(),
    )


# 재고 유형 이름 변경
@router.put("/{stock_type}", response_model=CommandResponse)
def rename_stock_type(stock_type: str, rename: StockTypeRename, service: StockService = Depends(get_stock_service)):
    updated = service.rename_stock_type(stock_type, rename.new_name)

    return CommandResponse(
        message=f"Awesome! I have successfully renamed the stocktype {stock_type} to {rename.new_name.strip()}. "
        f"{len(updated)} stock(s) updated.",
        stocks=[StockResponse.model_validate(s) for s in updated],
        table=service.registry.get_all_stocks_struct(),
    )


# 재고 유형 삭제 (소속 재고 포함)
@router.delete("/{stock_type}", response_model=CommandResponse)
def delete_stock_type(stock_type: str, service: StockService = Depends(get_stock_service)):
    deleted = service.delete_stock_type(stock_type)

    return CommandResponse(
        message=f"I deleted the stocktype {stock_type} and {len(deleted)} stock(s) under it.",
        stocks=[StockResponse.model_validate(s) for s in deleted],
        table=service.registry.get_all_stock_types_struct(),
    )
