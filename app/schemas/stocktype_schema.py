from pydantic import BaseModel


# 재고 유형 생성 스키마
class StockTypeCreate(BaseModel):
    name: str


# 재고 유형 이름 변경 스키마
class StockTypeRename(BaseModel):
    new_name: str
