import csv
from io import StringIO
from typing import Iterable, Iterator

from app.core.exceptions import (
    DuplicateCodeError,
    DuplicateStockTypeError,
    InvalidInputError,
    NotFoundError,
)
from app.models.stock_model import Stock, StockProperty
from app.schemas.table_schema import TableStruct

SEPARATOR = "------------------------\n"

STOCK_COLUMNS = ("Stock Type", "Stock Code", "Total", "Description", "Minimum", "Loaned")
STOCKTYPE_STOCK_COLUMNS = ("Stock Type", "Stock Code", "Quantity", "Description", "Minimum", "Loaned")


def _clean_name(name: str, label: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInputError(f"The {label} cannot be empty.")
    if "\r" in cleaned or "\n" in cleaned:
        raise InvalidInputError(f"The {label} cannot contain line breaks.")
    return cleaned


class StockRegistry:
    """
    재고 레지스트리

    모든 재고 레코드를 등록 순서대로 보관하며, 재고 코드의 유일성을 보장한다.
    재고 유형 이름 목록을 별도로 유지하여 재고가 없는 유형도 저장/조회할 수 있다.
    레코드 변경은 반드시 이 클래스의 메서드를 통해서만 이루어진다.
    """

    def __init__(self, stocks: Iterable[Stock] | None = None, stock_types: Iterable[str] | None = None):
        self._stocks: list[Stock] = []
        self._stock_types: list[str] = []

        for name in stock_types or ():
            self._register_stock_type(_clean_name(name, "stock type"))

        # 기존 저장 데이터로 복원 (중복 코드는 거부)
        for stock in stocks or ():
            if self.is_existing_stock_code(stock.stock_code):
                raise DuplicateCodeError.for_stock_code(stock.stock_code)
            self._stocks.append(stock)
            self._register_stock_type(stock.stock_type)

    def __len__(self) -> int:
        return len(self._stocks)

    def __iter__(self) -> Iterator[Stock]:
        return iter(list(self._stocks))

    def is_empty(self) -> bool:
        return not self._stocks

    def _register_stock_type(self, name: str) -> None:
        if name not in self._stock_types:
            self._stock_types.append(name)

    # ------------------------------------------------------------------
    # 재고 CRUD
    # ------------------------------------------------------------------

    # CREATE 재고 등록
    def add_stock(
        self,
        stock_type: str,
        stock_code: str,
        quantity: int,
        description: str = "",
        minimum: int = 0,
        loaned: int = 0,
    ) -> Stock:
        stock = Stock.create(stock_type, stock_code, quantity, description, minimum, loaned)

        # 중복 코드 검사 후 추가
        if self.is_existing_stock_code(stock.stock_code):
            raise DuplicateCodeError.for_stock_code(stock.stock_code)

        self._stocks.append(stock)
        self._register_stock_type(stock.stock_type)
        return stock

    # UPDATE 단일 속성 수정 (검증 후 적용)
    def set_stock(self, stock_code: str, stock_property: StockProperty, new_value: str) -> Stock:
        stock = self.find_stock(stock_code)
        if stock is None:
            raise NotFoundError.for_stock_code(stock_code)

        if stock_property == StockProperty.STOCKCODE:
            new_code = str(new_value).strip()
            if new_code != stock.stock_code and self.is_existing_stock_code(new_code):
                raise DuplicateCodeError.for_stock_code(new_code)

        updated = stock.set_property(stock_code, stock_property, new_value)

        if stock_property == StockProperty.STOCKTYPE:
            self._register_stock_type(updated.stock_type)
        return updated

    # DELETE 재고 삭제 (없으면 None)
    def delete_stock(self, stock_code: str) -> Stock | None:
        for i, stock in enumerate(self._stocks):
            if stock.stock_code == stock_code:
                return self._stocks.pop(i)
        return None

    # READ 재고 코드로 조회 (없으면 None)
    def find_stock(self, stock_code: str) -> Stock | None:
        for stock in self._stocks:
            if stock.stock_code == stock_code:
                return stock
        return None

    def is_existing_stock_code(self, stock_code: str) -> bool:
        return self.find_stock(stock_code) is not None

    # ------------------------------------------------------------------
    # 재고 유형
    # ------------------------------------------------------------------

    def is_existing_stock_type(self, stock_type: str) -> bool:
        return stock_type in self._stock_types

    # CREATE 재고 유형 추가
    def add_stock_type(self, name: str) -> str:
        name = _clean_name(name, "stock type")
        if self.is_existing_stock_type(name):
            raise DuplicateStockTypeError.for_stock_type(name)
        self._stock_types.append(name)
        return name

    # UPDATE 재고 유형 이름 일괄 변경
    def set_stock_type(self, stock_type: str, new_name: str) -> list[Stock]:
        new_name = _clean_name(new_name, "stock type")
        if stock_type == new_name:
            return self.get_stock_type(stock_type)

        updated = []
        for stock in self._stocks:
            if stock.stock_type == stock_type:
                stock.stock_type = new_name
                updated.append(stock)

        # 유형 목록 갱신 (이미 있는 이름이면 병합)
        if stock_type in self._stock_types:
            index = self._stock_types.index(stock_type)
            if new_name in self._stock_types:
                del self._stock_types[index]
            else:
                self._stock_types[index] = new_name
        elif updated:
            self._register_stock_type(new_name)

        return updated

    # DELETE 재고 유형과 소속 재고 전체 삭제
    def delete_stock_type(self, stock_type: str) -> list[Stock]:
        if not self.is_existing_stock_type(stock_type):
            raise NotFoundError.for_stock_type(stock_type)

        deleted = [stock for stock in self._stocks if stock.stock_type == stock_type]
        self._stocks = [stock for stock in self._stocks if stock.stock_type != stock_type]
        self._stock_types.remove(stock_type)
        return deleted

    # READ 유형별 재고 목록
    def get_stock_type(self, stock_type: str) -> list[Stock]:
        return [stock for stock in self._stocks if stock.stock_type == stock_type]

    def get_stock_type_names(self) -> list[str]:
        return list(self._stock_types)

    # 유형별 총 수량
    def get_stock_type_quantity(self, stock_type: str) -> int:
        return sum(stock.quantity for stock in self._stocks if stock.stock_type == stock_type)

    # ------------------------------------------------------------------
    # 집계
    # ------------------------------------------------------------------

    def get_total_number_of_stocks(self) -> int:
        return len(self._stocks)

    # 재고 코드별 수량 (없으면 None)
    def get_stock_quantity(self, stock_code: str) -> int | None:
        stock = self.find_stock(stock_code)
        if stock is None:
            return None
        return stock.quantity

    # ------------------------------------------------------------------
    # 화면 출력
    # ------------------------------------------------------------------

    def _stock_type_block(self, stock_type: str) -> str:
        lines = [stock_type] + [stock.to_line() for stock in self.get_stock_type(stock_type)]
        return "\n".join(lines)

    def __str__(self) -> str:
        ret = "CURRENT INVENTORY\n"
        for stock_type in self._stock_types:
            # 총 수량이 0인 유형은 출력하지 않음
            if self.get_stock_type_quantity(stock_type) == 0:
                continue
            ret += SEPARATOR
            ret += self._stock_type_block(stock_type) + "\n"
        return ret

    # 특정 유형의 재고 텍스트
    def query_stocks(self, stock_type: str) -> str:
        ret = f"{stock_type} INVENTORY\n"
        ret += SEPARATOR
        for stock in self.get_stock_type(stock_type):
            ret += stock.to_line() + "\n"
        return ret

    # 전체 유형 목록 텍스트
    def to_stock_type_string(self) -> str:
        ret = "LISTING STOCKTYPES\n"
        for stock_type in self._stock_types:
            ret += SEPARATOR
            ret += stock_type + "\n"
        return ret

    # 전체 재고 테이블
    def get_all_stocks_struct(self) -> TableStruct:
        table = TableStruct(title="Stock List")
        table.set_table_columns(*STOCK_COLUMNS)
        table.set_table_data([stock.data_row() for stock in self._stocks])
        return table

    # 전체 유형 테이블
    def get_all_stock_types_struct(self) -> TableStruct:
        table = TableStruct(title="Stocktype List")
        table.set_table_columns("Stock Type")
        table.set_table_data([[name] for name in self._stock_types])
        return table

    # 특정 유형의 재고 테이블
    def get_all_stocks_in_stock_type_struct(self, stock_type: str) -> TableStruct:
        table = TableStruct(title=f"Stock List: {stock_type}")
        table.set_table_columns(*STOCKTYPE_STOCK_COLUMNS)
        table.set_table_data([stock.data_row() for stock in self.get_stock_type(stock_type)])
        return table

    # ------------------------------------------------------------------
    # 저장용 직렬화
    # ------------------------------------------------------------------

    def save_details_string(self) -> str:
        """
        재고 파일 내용 생성

        유형마다 유형 이름 한 칸짜리 행으로 시작하고,
        이어서 재고마다 code,quantity,description,minimum,loaned 다섯 칸 행을 쓴다.
        재고가 없는 유형은 건너뛴다.
        """
        buffer = StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        for stock_type in self._stock_types:
            stocks = self.get_stock_type(stock_type)
            if not stocks:
                continue
            writer.writerow([stock_type])
            for stock in stocks:
                writer.writerow(
                    [stock.stock_code, stock.quantity, stock.description, stock.minimum, stock.loaned]
                )
        return buffer.getvalue()

    # 유형 파일 내용 생성 (한 줄에 하나)
    def save_stock_types_string(self) -> str:
        return "".join(f"{stock_type}\n" for stock_type in self._stock_types)
