from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.exceptions import InvalidInputError, NotFoundError


# 수정 가능한 재고 속성 (닫힌 집합)
class StockProperty(str, Enum):
    STOCKTYPE = "stock_type"
    STOCKCODE = "stock_code"
    QUANTITY = "quantity"
    DESCRIPTION = "description"
    MINIMUM = "minimum"
    LOANED = "loaned"


# pydantic 검증 오류를 한 줄 메시지로 변환
def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ())) or "value"
        parts.append(f"{field}: {err.get('msg')}")
    return "Invalid stock details (" + "; ".join(parts) + ")"


class Stock(BaseModel):
    """
    재고 한 건

    생성 시점과 속성 변경 시점 모두 필드 규칙을 검증하며,
    검증 실패 시 레코드는 변경되지 않는다.
    """

    model_config = ConfigDict(validate_assignment=True)

    # 재고 유형 (카테고리 이름)
    stock_type: str = Field(min_length=1)

    # 재고 코드 (레지스트리 전체에서 유일)
    stock_code: str = Field(min_length=1)

    # 현재 수량
    quantity: int = Field(ge=0)

    # 설명
    description: str = ""

    # 표시용 부가 속성 (최소 수량 / 대여 수량)
    minimum: int = Field(default=0, ge=0)
    loaned: int = Field(default=0, ge=0)

    @field_validator("stock_type", "stock_code", mode="before")
    @classmethod
    def _strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    # 유형 파일은 한 줄에 유형 하나이므로 줄바꿈 금지
    @field_validator("stock_type")
    @classmethod
    def _single_line_type(cls, value: str) -> str:
        if "\r" in value or "\n" in value:
            raise ValueError("stock type cannot contain line breaks")
        return value

    # CREATE 검증 오류를 InvalidInputError 로 변환하여 생성
    @classmethod
    def create(
        cls,
        stock_type: str,
        stock_code: str,
        quantity: int,
        description: str = "",
        minimum: int = 0,
        loaned: int = 0,
    ) -> "Stock":
        try:
            return cls(
                stock_type=stock_type,
                stock_code=stock_code,
                quantity=quantity,
                description=description,
                minimum=minimum,
                loaned=loaned,
            )
        except ValidationError as e:
            raise InvalidInputError(describe_validation_error(e)) from e

    # UPDATE 단일 속성 변경
    def set_property(self, stock_code: str, stock_property: StockProperty, new_value: str) -> "Stock":
        if stock_code != self.stock_code:
            raise NotFoundError.for_stock_code(stock_code)

        try:
            if stock_property == StockProperty.STOCKTYPE:
                self.stock_type = new_value
            elif stock_property == StockProperty.STOCKCODE:
                self.stock_code = new_value
            elif stock_property == StockProperty.QUANTITY:
                self.quantity = new_value
            elif stock_property == StockProperty.DESCRIPTION:
                self.description = new_value
            elif stock_property == StockProperty.MINIMUM:
                self.minimum = new_value
            elif stock_property == StockProperty.LOANED:
                self.loaned = new_value
            else:
                raise InvalidInputError(f"Unknown stock property: {stock_property}")
        except ValidationError as e:
            raise InvalidInputError(describe_validation_error(e)) from e

        return self

    # 테이블 출력용 행
    def data_row(self) -> list[str]:
        return [
            self.stock_type,
            self.stock_code,
            str(self.quantity),
            self.description,
            str(self.minimum),
            str(self.loaned),
        ]

    # 텍스트 출력용 한 줄 (유형 블록 내부)
    def to_line(self) -> str:
        return f"{self.stock_code} | {self.quantity} | {self.description}"

    # 확인 메시지용 요약
    def summary(self) -> str:
        return f"{self.stock_type} | {self.stock_code} | {self.quantity} | {self.description}"
