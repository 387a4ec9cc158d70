from pydantic import BaseModel, Field


# 화면 테이블 출력 구조 (제목 / 컬럼 / 행)
class TableStruct(BaseModel):
    title: str
    columns: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    def set_table_columns(self, *columns: str) -> None:
        self.columns = list(columns)

    def set_table_data(self, rows: list[list[str]]) -> None:
        self.rows = rows
