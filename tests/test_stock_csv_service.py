"""Tests for CSV bulk import."""

import pytest

from app.core.exceptions import InvalidInputError
from app.services.stock_csv_service import StockCsvService


def _csv(*lines):
    return ("\n".join(lines) + "\n").encode("utf-8")


class TestProcessCsv:
    def test_adds_new_and_updates_existing(self, stationery):
        content = _csv(
            "stock_type,stock_code,quantity,description",
            "Stationery,PEN01,40,Blue pen",
            "Tools,HAM01,2,Hammer",
        )
        count = StockCsvService.process_csv(stationery, content)

        assert count == 2
        assert stationery.find_stock("PEN01").quantity == 40
        assert stationery.find_stock("HAM01").stock_type == "Tools"
        assert [s.stock_code for s in stationery] == ["PEN01", "RUL01", "HAM01"]

    def test_optional_columns_default(self, registry):
        StockCsvService.process_csv(registry, _csv("stock_type,stock_code,quantity", "Food,EGG01,12"))
        egg = registry.find_stock("EGG01")
        assert (egg.description, egg.minimum, egg.loaned) == ("", 0, 0)

    def test_missing_optional_columns_keep_existing_values(self, stationery):
        StockCsvService.process_csv(stationery, _csv("stock_type,stock_code,quantity", "Stationery,RUL01,7"))
        ruler = stationery.find_stock("RUL01")
        assert (ruler.quantity, ruler.description, ruler.minimum) == (7, "Steel ruler", 1)

    def test_present_optional_column_is_applied(self, stationery):
        StockCsvService.process_csv(
            stationery, _csv("stock_type,stock_code,quantity,minimum", "Stationery,RUL01,3,4")
        )
        ruler = stationery.find_stock("RUL01")
        assert (ruler.description, ruler.minimum) == ("Steel ruler", 4)

    def test_blank_rows_and_header_spaces(self, registry):
        content = _csv(" stock_type , stock_code ,quantity", "", "Food,EGG01,12", ",,")
        assert StockCsvService.process_csv(registry, content) == 1

    def test_cp949_content_is_decoded(self, registry):
        content = "stock_type,stock_code,quantity,description\n식품,EGG01,12,계란\n".encode("cp949")
        StockCsvService.process_csv(registry, content)
        assert registry.find_stock("EGG01").description == "계란"

    def test_missing_required_column(self, registry):
        with pytest.raises(InvalidInputError, match="quantity"):
            StockCsvService.process_csv(registry, _csv("stock_type,stock_code", "Food,EGG01"))

    def test_bad_row_leaves_registry_untouched(self, stationery):
        content = _csv(
            "stock_type,stock_code,quantity",
            "Stationery,PEN01,99",
            "Tools,HAM01,-2",
        )
        with pytest.raises(InvalidInputError, match="line 3"):
            StockCsvService.process_csv(stationery, content)
        assert stationery.find_stock("PEN01").quantity == 10
        assert stationery.find_stock("HAM01") is None

    def test_repeated_code_in_file_is_rejected(self, registry):
        content = _csv("stock_type,stock_code,quantity", "Food,EGG01,1", "Food,EGG01,2")
        with pytest.raises(InvalidInputError, match="more than once"):
            StockCsvService.process_csv(registry, content)
        assert registry.is_empty()

    def test_template(self):
        assert StockCsvService.template() == "stock_type,stock_code,quantity,description,minimum,loaned\n"
