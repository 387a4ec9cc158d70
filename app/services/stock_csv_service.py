import csv
from io import StringIO

import structlog

from app.core.exceptions import InvalidInputError
from app.models.stock_model import Stock, StockProperty
from app.models.stock_registry import StockRegistry

logger = structlog.get_logger(__name__)

REQUIRED_COLUMNS = ["stock_type", "stock_code", "quantity"]
TEMPLATE_COLUMNS = ["stock_type", "stock_code", "quantity", "description", "minimum", "loaned"]

# 기존 재고 갱신 시 비교하는 속성
_UPDATABLE = [
    (StockProperty.STOCKTYPE, "stock_type"),
    (StockProperty.QUANTITY, "quantity"),
    (StockProperty.DESCRIPTION, "description"),
    (StockProperty.MINIMUM, "minimum"),
    (StockProperty.LOANED, "loaned"),
]


# CSV 일괄 등록 처리 서비스
class StockCsvService:

    # CSV 바이트를 문자열로 디코딩
    @staticmethod
    def _decode(content: bytes) -> str:
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError:
            return content.decode("cp949")

    # CSV 템플릿 (헤더 한 줄)
    @staticmethod
    def template() -> str:
        return ",".join(TEMPLATE_COLUMNS) + "\n"

    # CSV 행을 검증하여 Stock 후보 목록과 갱신 대상 속성으로 변환
    @staticmethod
    def parse_csv(content: bytes) -> tuple[list[Stock], list[tuple[StockProperty, str]]]:
        decoded = StockCsvService._decode(content)
        reader = csv.DictReader(StringIO(decoded, newline=""))

        # 헤더 유효성 확인
        if not reader.fieldnames:
            raise InvalidInputError("Could not read the CSV header.")

        # 헤더 공백 제거
        reader.fieldnames = [h.strip() for h in reader.fieldnames]

        # 필수 컬럼 확인
        for h in REQUIRED_COLUMNS:
            if h not in reader.fieldnames:
                raise InvalidInputError(f"The CSV is missing the '{h}' column.")

        # 파일에 있는 컬럼만 기존 재고 갱신에 사용
        updatable = [(prop, field) for prop, field in _UPDATABLE if field in reader.fieldnames]

        candidates = []
        seen = set()
        for row in reader:
            # 빈 행 스킵
            if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
                continue

            try:
                stock = Stock.create(
                    stock_type=(row.get("stock_type") or "").strip(),
                    stock_code=(row.get("stock_code") or "").strip(),
                    quantity=(row.get("quantity") or "").strip(),
                    description=(row.get("description") or "").strip(),
                    minimum=(row.get("minimum") or "0").strip(),
                    loaned=(row.get("loaned") or "0").strip(),
                )
            except InvalidInputError as e:
                raise InvalidInputError(f"CSV line {reader.line_num}: {e.message}") from e

            # 파일 내 중복 코드 확인
            if stock.stock_code in seen:
                raise InvalidInputError(
                    f'CSV line {reader.line_num}: stock code "{stock.stock_code}" appears more than once.'
                )
            seen.add(stock.stock_code)
            candidates.append(stock)

        return candidates, updatable

    # CSV를 처리하고 처리된 행 수 반환
    @staticmethod
    def process_csv(registry: StockRegistry, content: bytes) -> int:
        # 모든 행 검증 후 적용 (중간 실패 없음)
        candidates, updatable = StockCsvService.parse_csv(content)

        count = 0
        for candidate in candidates:
            existing = registry.find_stock(candidate.stock_code)

            # 기존 재고 업데이트
            if existing:
                changed = []
                for stock_property, field in updatable:
                    old_value = getattr(existing, field)
                    new_value = getattr(candidate, field)
                    if old_value != new_value:
                        changed.append(f"{field} {old_value!r}->{new_value!r}")
                        registry.set_stock(existing.stock_code, stock_property, str(new_value))

                # 변경된 항목이 있을 때만 로그 기록
                if changed:
                    logger.info("CSV stock updated", stock_code=existing.stock_code, changes=", ".join(changed))

            # 신규 재고 등록
            else:
                registry.add_stock(
                    candidate.stock_type,
                    candidate.stock_code,
                    candidate.quantity,
                    candidate.description,
                    candidate.minimum,
                    candidate.loaned,
                )
                logger.info("CSV stock added", stock_code=candidate.stock_code)

            count += 1

        return count
