import structlog

from app.core.exceptions import InventoryError, NotFoundError
from app.core.logging import bind_command, clear_command
from app.models.stock_model import Stock, StockProperty
from app.models.stock_registry import StockRegistry
from app.schemas.command_schema import CommandType
from app.services.stock_csv_service import StockCsvService
from app.services.storage_service import StorageService

logger = structlog.get_logger(__name__)


class StockService:
    """
    재고 명령 처리 서비스

    레지스트리 연산을 호출하고, 성공한 변경 명령에 한해 저장을 수행한다.
    실패한 명령은 예외를 그대로 올리며 저장하지 않는다.
    """

    def __init__(self, registry: StockRegistry, storage: StorageService):
        self.registry = registry
        self.storage = storage

    # 변경 명령 공통 처리 (로그 컨텍스트 + 성공 시 저장)
    def _run(self, command_type: CommandType, operation, **context):
        bind_command(command_type)
        try:
            result = operation()
        except InventoryError as e:
            logger.warning("Command rejected", error=e.code, detail=e.message, **context)
            raise
        else:
            self.storage.save(self.registry)
            logger.info("Command applied", **context)
            return result
        finally:
            clear_command()

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
        return self._run(
            CommandType.ADD,
            lambda: self.registry.add_stock(stock_type, stock_code, quantity, description, minimum, loaned),
            stock_code=stock_code,
        )

    # UPDATE 재고 속성 수정
    def edit_stock(self, stock_code: str, stock_property: StockProperty, new_value: str) -> Stock:
        return self._run(
            CommandType.EDIT,
            lambda: self.registry.set_stock(stock_code, stock_property, new_value),
            stock_code=stock_code,
            property=stock_property.value,
        )

    # DELETE 재고 삭제
    def delete_stock(self, stock_code: str) -> Stock:
        def delete():
            deleted = self.registry.delete_stock(stock_code)
            if deleted is None:
                raise NotFoundError.for_stock_code(stock_code)
            return deleted

        return self._run(CommandType.DELETE, delete, stock_code=stock_code)

    # CREATE 재고 유형 추가
    def add_stock_type(self, name: str) -> str:
        return self._run(
            CommandType.ADD_STOCKTYPE,
            lambda: self.registry.add_stock_type(name),
            stock_type=name,
        )

    # UPDATE 재고 유형 이름 변경
    def rename_stock_type(self, stock_type: str, new_name: str) -> list[Stock]:
        def rename():
            if not self.registry.is_existing_stock_type(stock_type):
                raise NotFoundError.for_stock_type(stock_type)
            return self.registry.set_stock_type(stock_type, new_name)

        return self._run(
            CommandType.EDIT_STOCKTYPE,
            rename,
            stock_type=stock_type,
            new_name=new_name,
        )

    # DELETE 재고 유형 삭제 (소속 재고 포함)
    def delete_stock_type(self, stock_type: str) -> list[Stock]:
        return self._run(
            CommandType.DELETE_STOCKTYPE,
            lambda: self.registry.delete_stock_type(stock_type),
            stock_type=stock_type,
        )

    # CREATE/UPDATE CSV 일괄 등록
    def import_csv(self, content: bytes) -> int:
        return self._run(
            CommandType.IMPORT,
            lambda: StockCsvService.process_csv(self.registry, content),
            size=len(content),
        )

    # READ 재고 코드로 조회
    def find_stock(self, stock_code: str) -> Stock:
        stock = self.registry.find_stock(stock_code)
        if stock is None:
            raise NotFoundError.for_stock_code(stock_code)
        return stock

    # READ 재고 수량 조회
    def get_stock_quantity(self, stock_code: str) -> int:
        quantity = self.registry.get_stock_quantity(stock_code)
        if quantity is None:
            raise NotFoundError.for_stock_code(stock_code)
        return quantity

    # READ 유형 존재 확인
    def require_stock_type(self, stock_type: str) -> str:
        if not self.registry.is_existing_stock_type(stock_type):
            raise NotFoundError.for_stock_type(stock_type)
        return stock_type
