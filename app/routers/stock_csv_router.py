from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse

from app.core.dependencies import get_stock_service
from app.services.stock_csv_service import StockCsvService
from app.services.stock_service import StockService

# CSV 업로드 전용 라우터
router = APIRouter(tags=["StockCsv"])


# 재고 CSV 업로드 처리
@router.post("/csv/upload")
def upload_stock_csv(file: UploadFile = File(...), service: StockService = Depends(get_stock_service)):
    # CSV 파일 확장자 검사
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only .csv files can be uploaded.")

    # 업로드된 파일 내용 읽기
    content = file.file.read()

    # CSV 처리 (오류는 전역 예외 핸들러에서 변환)
    result = service.import_csv(content)

    return {
        "message": "CSV upload complete",
        "processed_rows": result,
        "table": service.registry.get_all_stocks_struct(),
    }


# 재고 CSV 템플릿 다운로드
@router.get("/csv/template", response_class=PlainTextResponse)
def download_stock_csv_template():
    return PlainTextResponse(
        StockCsvService.template(),
        media_type="text/csv",
        headers={
            "Content-Disposition": 'attachment; filename="stock_template.csv"'
        },
    )
