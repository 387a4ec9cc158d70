"""
재고 레지스트리 예외 계층

모든 예외는 InventoryError 를 상속하며, 라우터 계층에서는
status_code / code 를 그대로 HTTP 응답으로 변환한다.
"""


class InventoryError(Exception):
    """재고 관련 모든 오류의 기본 클래스"""

    code: str = "inventory_error"
    status_code: int = 400

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "An unspecified inventory error occurred."
        self.message = message
        super().__init__(message)


class NotFoundError(InventoryError):
    """존재하지 않는 재고 코드 / 재고 유형을 참조한 경우"""

    code = "not_found"
    status_code = 404

    @classmethod
    def for_stock_code(cls, stock_code: str) -> "NotFoundError":
        return cls(
            f'Sorry, the stock code "{stock_code}" cannot be found in the system. '
            "Please enter a different stock code."
        )

    @classmethod
    def for_stock_type(cls, stock_type: str) -> "NotFoundError":
        return cls(
            f'Sorry, the stock type "{stock_type}" cannot be found in the system. '
            "Please enter a different stock type."
        )


class DuplicateCodeError(InventoryError):
    """이미 사용 중인 재고 코드로 등록 / 수정하려는 경우"""

    code = "duplicate_stock_code"
    status_code = 409

    @classmethod
    def for_stock_code(cls, stock_code: str) -> "DuplicateCodeError":
        return cls(
            f'Sorry, the stock code "{stock_code}" is already assigned to a stock in the system. '
            "Please enter a different stock code."
        )


class DuplicateStockTypeError(InventoryError):
    """이미 존재하는 재고 유형을 다시 등록하려는 경우"""

    code = "duplicate_stock_type"
    status_code = 409

    @classmethod
    def for_stock_type(cls, stock_type: str) -> "DuplicateStockTypeError":
        return cls(
            f'Sorry, the stock type "{stock_type}" is already in the system. '
            "Please enter a different stock type."
        )


class InvalidInputError(InventoryError):
    """필드 값이 형식에 맞지 않는 경우 (음수 수량, 빈 코드 등)"""

    code = "invalid_input"
    status_code = 400


class StorageError(InventoryError):
    """저장 파일을 읽거나 쓸 수 없는 경우"""

    code = "storage_error"
    status_code = 500
