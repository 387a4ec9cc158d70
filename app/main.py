# app/main.py
from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.dependencies import get_registry
from app.core.exceptions import InventoryError
from app.core.logging import configure_logging
from app.models.stock_registry import StockRegistry
from app.routers.stock_csv_router import router as stock_csv_router
from app.routers.stock_router import router as stock_router
from app.routers.stocktype_router import router as stocktype_router
from app.routers.text_router import router as text_router
from app.services.storage_service import StorageService

logger = structlog.get_logger(__name__)


# --------------------------------
# 서버 이벤트 (시작 시 복원, 종료 시 저장)
# --------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)

    storage = StorageService(settings.stock_path, settings.stocktype_path)
    first_run = not storage.exists()
    registry = storage.load()

    # 최초 실행 시 기본 유형 등록
    if first_run:
        registry.add_stock_type(settings.DEFAULT_STOCK_TYPE)
        storage.save(registry)

    app.state.storage = storage
    app.state.registry = registry
    logger.info("Server started", stocks=len(registry), first_run=first_run)

    yield

    # 종료 직전 마지막 상태 저장
    storage.save(registry)
    logger.info("Server stopped")


app = FastAPI(title="Stock Registry Server", debug=settings.DEBUG, lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(stock_router)
app.include_router(stocktype_router)

# /stocks-text
# /stocktypes-text
# /stocktypes-text/{stock_type}
app.include_router(text_router)

# /stock/csv/upload
# /stock/csv/template
app.include_router(stock_csv_router, prefix="/stock")


# --------------------------------
# 재고 예외 → HTTP 응답 변환
# --------------------------------
@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


# --------------------------------
# 기본 페이지
# --------------------------------
@app.get("/")
def root(registry: StockRegistry = Depends(get_registry)):
    return {
        "stocks": registry.get_total_number_of_stocks(),
        "stock_types": len(registry.get_stock_type_names()),
    }

