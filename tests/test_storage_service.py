"""Tests for text-file persistence of the registry."""

import pytest

from app.core.exceptions import StorageError
from app.models.stock_registry import StockRegistry
from app.services.storage_service import StorageService, parse_stock_details


def _records(registry):
    return [
        (s.stock_type, s.stock_code, s.quantity, s.description, s.minimum, s.loaned)
        for s in registry
    ]


class TestRoundTrip:
    def test_save_then_load_restores_records_and_types(self, stationery, storage):
        stationery.add_stock("Tools", "HAM01", 2, 'Claw hammer, "heavy"', loaned=1)
        stationery.add_stock("Tools", "NAIL01", 0, "Nails\nassorted")

        storage.save(stationery)
        loaded = storage.load()

        assert _records(loaded) == _records(stationery)
        assert loaded.get_stock_type_names() == ["Stationery", "Tools"]

    def test_carriage_returns_in_descriptions_survive(self, storage):
        registry = StockRegistry()
        registry.add_stock("Office Supplies", "BOX01", 1, "line1\r\nline2")
        storage.save(registry)

        loaded = storage.load()
        assert _records(loaded) == _records(registry)
        assert loaded.get_stock_type_names() == ["Office Supplies"]

    def test_empty_stock_types_survive(self, storage):
        registry = StockRegistry()
        registry.add_stock_type("Uncategorised")
        storage.save(registry)

        loaded = storage.load()
        assert loaded.is_empty()
        assert loaded.get_stock_type_names() == ["Uncategorised"]

    def test_records_are_regrouped_by_type(self, storage):
        registry = StockRegistry()
        registry.add_stock("A", "A1", 1, "")
        registry.add_stock("B", "B1", 1, "")
        registry.add_stock("A", "A2", 1, "")
        storage.save(registry)

        assert [s.stock_code for s in storage.load()] == ["A1", "A2", "B1"]

    def test_save_writes_both_files(self, stationery, storage):
        storage.save(stationery)
        assert storage.stock_file.read_text(encoding="utf-8") == stationery.save_details_string()
        assert storage.stocktype_file.read_text(encoding="utf-8") == "Stationery\nTools\n"

    def test_save_creates_missing_directories(self, stationery, tmp_path):
        nested = StorageService(tmp_path / "a" / "stocks.txt", tmp_path / "b" / "types.txt")
        nested.save(stationery)
        assert nested.exists()


class TestLoad:
    def test_missing_files_give_empty_registry(self, storage):
        assert not storage.exists()
        registry = storage.load()
        assert registry.is_empty()
        assert registry.get_stock_type_names() == []

    def test_stock_before_type_header_is_rejected(self):
        with pytest.raises(StorageError, match="before any stock type"):
            parse_stock_details("PEN01,10,Blue pen,0,0\n")

    def test_wrong_field_count_is_rejected(self):
        with pytest.raises(StorageError, match="expected 5 fields"):
            parse_stock_details("Stationery\nPEN01,10,Blue pen\n")

    def test_invalid_quantity_names_the_line(self):
        with pytest.raises(StorageError, match=":2:"):
            parse_stock_details("Stationery\nPEN01,ten,Blue pen,0,0\n")

    def test_duplicate_codes_in_file_are_rejected(self, storage):
        storage.stock_file.write_text("Stationery\nPEN01,1,a,0,0\nPEN01,2,b,0,0\n", encoding="utf-8")
        with pytest.raises(StorageError):
            storage.load()

    def test_blank_lines_are_ignored(self):
        stocks = parse_stock_details("\nStationery\n\nPEN01,10,Blue pen,0,0\n\n")
        assert [s.stock_code for s in stocks] == ["PEN01"]
