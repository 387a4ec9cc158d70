from app.models.stock_model import Stock, StockProperty
from app.models.stock_registry import StockRegistry

__all__ = ["Stock", "StockProperty", "StockRegistry"]
