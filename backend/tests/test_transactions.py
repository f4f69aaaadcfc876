# backend/tests/test_transactions.py
from datetime import datetime
from bson import ObjectId

SALE = {
    "customer_name": "Dewi",
    "phone_number": "081298765432",
    "service_type": "Cuci Setrika",
    "weight_per_kg": 3.5,
    "total_price": 24500,
    "payment_method": "cash"
}


async def test_sale_defaults_transaction_date_and_formats_it(client, staff_headers):
    response = await client.post("/transaction", json=SALE, headers=staff_headers)

    transaction = response.json()["transaction"]
    stamped = datetime.fromisoformat(transaction["transaction_date"])
    assert transaction["formatted_date"] == stamped.strftime("%d/%m/%Y")


async def test_sale_keeps_client_transaction_date(client, staff_headers):
    response = await client.post(
        "/transaction", json={**SALE, "transaction_date": "2024-03-07T09:30:00"}, headers=staff_headers
    )

    transaction_id = response.json()["transaction"]["id"]
    fetched = (await client.get("/transaction-id", params={"id": transaction_id}, headers=staff_headers)).json()
    assert fetched["formatted_date"] == "07/03/2024"


async def test_formatted_date_is_not_stored(client, staff_headers, db):
    await client.post("/transaction", json=SALE, headers=staff_headers)

    stored = await db["transactions"].find_one({})
    assert "formatted_date" not in stored


async def test_sale_update_and_delete(client, staff_headers):
    created = (await client.post("/transaction", json=SALE, headers=staff_headers)).json()["transaction"]

    updated = await client.put(
        "/transaction-id", params={"id": created["id"]}, json={**SALE, "total_price": 30000}, headers=staff_headers
    )
    listed = await client.get("/transaction", headers=staff_headers)
    deleted = await client.delete("/transaction-id", params={"id": created["id"]}, headers=staff_headers)

    assert updated.status_code == 200
    assert listed.json()[0]["total_price"] == 30000
    assert deleted.status_code == 200
    assert (await client.get("/transaction", headers=staff_headers)).status_code == 404


async def test_item_crud(client, staff_headers):
    created = await client.post(
        "/item", json={"item_name": "Detergent", "quantity": 10, "price": 25000}, headers=staff_headers
    )
    item = created.json()["item"]

    await client.put(
        "/item-id", params={"id": item["id"]}, json={"item_name": "Detergent", "quantity": 8, "price": 25000},
        headers=staff_headers
    )
    fetched = (await client.get("/item-id", params={"id": item["id"]}, headers=staff_headers)).json()

    assert created.json()["message"] == "Item created successfully"
    assert fetched["quantity"] == 8


async def test_item_transaction_date_is_stamped_by_server(client, staff_headers):
    body = {
        "item_id": str(ObjectId()),
        "item_name": "Detergent",
        "transaction_type": "usage",
        "quantity": 2,
        "stock_after": 8,
        "date": "2001-01-01T00:00:00"
    }

    response = await client.post("/item-transaction", json=body, headers=staff_headers)

    transaction = response.json()["transaction"]
    assert datetime.fromisoformat(transaction["date"]).year != 2001
    assert transaction["stock_after"] == 8


async def test_item_transaction_rejects_unknown_type(client, staff_headers):
    body = {"item_id": str(ObjectId()), "transaction_type": "theft", "quantity": 1}

    response = await client.post("/item-transaction", json=body, headers=staff_headers)

    assert response.status_code == 400


async def test_item_transaction_summary(client, staff_headers):
    item_id = str(ObjectId())
    created = await client.post(
        "/item-transaction",
        json={"item_id": item_id, "item_name": "Softener", "transaction_type": "purchase", "quantity": 5, "stock_after": 5},
        headers=staff_headers
    )

    summary = await client.get("/item-transaction-summary", headers=staff_headers)

    transaction_id = created.json()["transaction"]["id"]
    assert summary.json() == [{"id": transaction_id, "item_id": item_id, "item_name": "Softener"}]


async def test_stock_transaction_keeps_free_form_fields(client, staff_headers):
    body = {"item_name": "Hanger", "quantity": 50, "rack": "B2", "id": "STK-001"}

    response = await client.post("/stock-transaction", json=body, headers=staff_headers)

    transaction = response.json()["transaction"]
    assert ObjectId.is_valid(transaction["id"])
    assert transaction["rack"] == "B2"

    fetched = (await client.get("/stock-transaction-id", params={"id": transaction["id"]}, headers=staff_headers)).json()
    assert fetched["rack"] == "B2"
    assert fetched["item_name"] == "Hanger"


async def test_stock_transaction_update(client, staff_headers):
    created = (await client.post("/stock-transaction", json={"item_name": "Hanger", "quantity": 50}, headers=staff_headers)).json()

    response = await client.put(
        "/stock-transaction-id",
        params={"id": created["transaction"]["id"]},
        json={"item_name": "Hanger", "quantity": 45, "note": "5 rusak"},
        headers=staff_headers
    )
    fetched = (await client.get("/stock-transaction-id", params={"id": created["transaction"]["id"]}, headers=staff_headers)).json()

    assert response.status_code == 200
    assert fetched["quantity"] == 45
    assert fetched["note"] == "5 rusak"


async def test_every_list_endpoint_reports_empty_collection(client, admin_headers):
    for path in ("/supplier", "/item", "/item-transaction", "/stock-transaction", "/transaction", "/employee"):
        response = await client.get(path, headers=admin_headers)
        assert response.status_code == 404, path
