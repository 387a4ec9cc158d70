"""API tests for the /stocks endpoints."""


class TestReadStocks:
    def test_read_all_stocks_table(self, client):
        response = client.get("/stocks/")
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Stock List"
        assert body["rows"][0] == ["Stationery", "PEN01", "10", "Blue pen", "0", "0"]

    def test_read_stocks_text(self, client):
        response = client.get("/stocks-text")
        assert response.status_code == 200
        assert response.text.startswith("CURRENT INVENTORY\n")
        assert "PEN01 | 10 | Blue pen" in response.text

    def test_stock_coded_text_is_readable(self, client, stationery):
        stationery.add_stock("Tools", "text", 4, "Text marker")
        response = client.get("/stocks/text")
        assert response.status_code == 200
        assert response.json()["description"] == "Text marker"
        assert client.get("/stocks/text/quantity").json()["quantity"] == 4

    def test_read_single_stock(self, client):
        response = client.get("/stocks/PEN01")
        assert response.status_code == 200
        assert response.json()["quantity"] == 10

    def test_read_missing_stock(self, client):
        response = client.get("/stocks/MISSING")
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_read_quantity(self, client):
        assert client.get("/stocks/RUL01/quantity").json() == {"stock_code": "RUL01", "quantity": 3}
        assert client.get("/stocks/MISSING/quantity").status_code == 404


class TestMutateStocks:
    def test_create_stock(self, client, stationery, storage):
        response = client.post(
            "/stocks/",
            json={"stock_type": "Tools", "stock_code": "HAM01", "quantity": 2, "description": "Hammer"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Nice! I have successfully added the stock: Tools | HAM01 | 2 | Hammer"
        assert body["stocks"][0]["stock_code"] == "HAM01"
        assert len(body["table"]["rows"]) == 3
        assert stationery.find_stock("HAM01") is not None
        assert storage.exists()

    def test_create_duplicate_stock(self, client, storage):
        response = client.post(
            "/stocks/",
            json={"stock_type": "Stationery", "stock_code": "PEN01", "quantity": 5, "description": "Red pen"},
        )
        assert response.status_code == 409
        assert "already assigned" in response.json()["detail"]
        assert not storage.exists()

    def test_create_negative_quantity(self, client):
        response = client.post(
            "/stocks/",
            json={"stock_type": "Stationery", "stock_code": "PEN02", "quantity": -5},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_input"

    def test_edit_stock(self, client):
        response = client.put("/stocks/PEN01", json={"property": "quantity", "new_value": "25"})
        assert response.status_code == 200
        assert response.json()["message"] == (
            "Awesome! I have successfully updated the following stock: Stationery | PEN01 | 25 | Blue pen"
        )

    def test_edit_code_to_existing_code(self, client, stationery):
        response = client.put("/stocks/PEN01", json={"property": "stock_code", "new_value": "RUL01"})
        assert response.status_code == 409
        assert [s.stock_code for s in stationery] == ["PEN01", "RUL01"]

    def test_edit_unknown_property(self, client):
        response = client.put("/stocks/PEN01", json={"property": "colour", "new_value": "red"})
        assert response.status_code == 422

    def test_delete_stock(self, client, stationery):
        response = client.delete("/stocks/PEN01")
        assert response.status_code == 200
        assert response.json()["stocks"][0]["stock_code"] == "PEN01"
        assert stationery.find_stock("PEN01") is None

    def test_delete_missing_stock(self, client):
        assert client.delete("/stocks/MISSING").status_code == 404


class TestRoot:
    def test_root_summary(self, client):
        assert client.get("/").json() == {"stocks": 2, "stock_types": 2}
