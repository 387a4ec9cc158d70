import csv
from io import StringIO
from pathlib import Path

import structlog

from app.core.exceptions import InvalidInputError, InventoryError, StorageError
from app.models.stock_model import Stock
from app.models.stock_registry import StockRegistry

logger = structlog.get_logger(__name__)


# 재고 파일 / 재고 유형 파일 저장 및 복원 서비스
class StorageService:
    def __init__(self, stock_file: Path, stocktype_file: Path):
        self.stock_file = Path(stock_file)
        self.stocktype_file = Path(stocktype_file)

    # 저장 파일 존재 여부 (최초 실행 판단용)
    def exists(self) -> bool:
        return self.stock_file.exists() or self.stocktype_file.exists()

    # SAVE 레지스트리 전체를 두 파일로 저장
    def save(self, registry: StockRegistry) -> None:
        try:
            self.stock_file.parent.mkdir(parents=True, exist_ok=True)
            self.stocktype_file.parent.mkdir(parents=True, exist_ok=True)
            self.stock_file.write_text(registry.save_details_string(), encoding="utf-8", newline="")
            self.stocktype_file.write_text(registry.save_stock_types_string(), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not save inventory: {e}") from e

        logger.info(
            "Inventory saved",
            stock_file=str(self.stock_file),
            stocks=registry.get_total_number_of_stocks(),
            stock_types=len(registry.get_stock_type_names()),
        )

    # LOAD 저장 파일로부터 레지스트리 복원
    def load(self) -> StockRegistry:
        stock_types = self._read_stock_types()
        stocks = self._read_stocks()

        try:
            registry = StockRegistry(stocks, stock_types)
        except InventoryError as e:
            raise StorageError(f"{self.stock_file}: {e.message}") from e

        logger.info(
            "Inventory loaded",
            stock_file=str(self.stock_file),
            stocks=registry.get_total_number_of_stocks(),
            stock_types=len(registry.get_stock_type_names()),
        )
        return registry

    def _read_stock_types(self) -> list[str]:
        if not self.stocktype_file.exists():
            return []

        try:
            content = self.stocktype_file.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not read {self.stocktype_file}: {e}") from e

        # 빈 줄 스킵
        return [line.strip() for line in content.splitlines() if line.strip()]

    def _read_stocks(self) -> list[Stock]:
        if not self.stock_file.exists():
            return []

        try:
            # 설명 안의 줄바꿈(\r\n)을 그대로 보존
            with self.stock_file.open(encoding="utf-8", newline="") as f:
                content = f.read()
        except OSError as e:
            raise StorageError(f"Could not read {self.stock_file}: {e}") from e

        return parse_stock_details(content, source=str(self.stock_file))


def parse_stock_details(content: str, source: str = "<string>") -> list[Stock]:
    """
    재고 파일 내용을 Stock 목록으로 변환

    한 칸짜리 행은 재고 유형 머리글, 다섯 칸짜리 행은 현재 유형에 속한 재고이다.
    """
    reader = csv.reader(StringIO(content, newline=""))
    stocks = []
    stock_type = None

    for row in reader:
        line_no = reader.line_num

        # 빈 행 스킵
        if not row or not any(cell.strip() for cell in row):
            continue

        # 유형 머리글
        if len(row) == 1:
            stock_type = row[0]
            continue

        if len(row) != 5:
            raise StorageError(f"{source}:{line_no}: expected 5 fields, found {len(row)}")
        if stock_type is None:
            raise StorageError(f"{source}:{line_no}: stock listed before any stock type")

        code, quantity, description, minimum, loaned = row
        try:
            stocks.append(Stock.create(stock_type, code, quantity, description, minimum, loaned))
        except InvalidInputError as e:
            raise StorageError(f"{source}:{line_no}: {e.message}") from e

    return stocks
