from enum import Enum

from pydantic import BaseModel, Field

from app.schemas.stock_schema import StockResponse
from app.schemas.table_schema import TableStruct


# 명령 종류
class CommandType(str, Enum):
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"
    ADD_STOCKTYPE = "add_stocktype"
    EDIT_STOCKTYPE = "edit_stocktype"
    DELETE_STOCKTYPE = "delete_stocktype"
    IMPORT = "import"


# 변경 명령 응답 (메시지 + 변경된 재고 + 갱신된 테이블)
class CommandResponse(BaseModel):
    message: str
    stocks: list[StockResponse] = Field(default_factory=list)
    table: TableStruct
