from pydantic import BaseModel, ConfigDict

from app.models.stock_model import StockProperty


# 재고 생성 스키마
class StockCreate(BaseModel):
    stock_type: str
    stock_code: str
    quantity: int
    description: str = ""
    minimum: int = 0
    loaned: int = 0


# 재고 수정 스키마 (한 번에 한 속성)
class StockEdit(BaseModel):
    property: StockProperty
    new_value: str


# 재고 응답 스키마
class StockResponse(BaseModel):
    stock_type: str
    stock_code: str
    quantity: int
    description: str
    minimum: int
    loaned: int

    model_config = ConfigDict(from_attributes=True)


# 재고 수량 응답 스키마
class StockQuantityResponse(BaseModel):
    stock_code: str
    quantity: int
