# backend/tests/test_customers.py
from bson import ObjectId

CUSTOMER = {
    "name": "Dewi",
    "phone": "081298765432",
    "address": "Jl. Sudirman 5",
    "email": "dewi@example.com"
}


async def create_customer(client, headers, **overrides):
    response = await client.post("/customer", json={**CUSTOMER, **overrides}, headers=headers)
    assert response.status_code == 200
    return response.json()["customer"]


async def test_list_of_empty_collection_is_not_found(client, staff_headers):
    response = await client.get("/customer", headers=staff_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "No customers found"}


async def test_create_echoes_generated_id(client, staff_headers):
    response = await client.post("/customer", json=CUSTOMER, headers=staff_headers)

    body = response.json()
    assert body["message"] == "Customer created successfully"
    assert ObjectId.is_valid(body["customer"]["id"])
    assert body["customer"]["name"] == "Dewi"


async def test_create_rejects_malformed_json(client, staff_headers):
    response = await client.post(
        "/customer",
        content="{\"name\": ",
        headers={**staff_headers, "Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}


async def test_create_rejects_invalid_email(client, staff_headers):
    response = await client.post("/customer", json={**CUSTOMER, "email": "dewi-at-example"}, headers=staff_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}


async def test_email_is_optional(client, staff_headers):
    payload = {"name": "Budi", "phone": "0811"}
    response = await client.post("/customer", json=payload, headers=staff_headers)

    assert response.status_code == 200
    assert response.json()["customer"]["email"] is None


async def test_list_and_get(client, staff_headers):
    first = await create_customer(client, staff_headers)
    await create_customer(client, staff_headers, name="Eka")

    listed = await client.get("/customer", headers=staff_headers)
    fetched = await client.get("/customer-id", params={"id": first["id"]}, headers=staff_headers)

    assert [customer["name"] for customer in listed.json()] == ["Dewi", "Eka"]
    assert fetched.json() == first


async def test_get_requires_id(client, staff_headers):
    response = await client.get("/customer-id", headers=staff_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "ID not provided"}


async def test_get_rejects_malformed_id(client, staff_headers):
    response = await client.get("/customer-id", params={"id": "12345"}, headers=staff_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid ID"}


async def test_get_unknown_id_is_not_found(client, staff_headers):
    response = await client.get("/customer-id", params={"id": str(ObjectId())}, headers=staff_headers)

    assert response.status_code == 404


async def test_update_writes_allowed_fields_only(client, staff_headers):
    created = await create_customer(client, staff_headers)
    other_id = str(ObjectId())

    response = await client.put(
        "/customer-id",
        params={"id": created["id"]},
        json={**CUSTOMER, "name": "Dewi Lestari", "id": other_id},
        headers=staff_headers
    )

    assert response.json() == {"message": "Customer updated successfully"}
    fetched = (await client.get("/customer-id", params={"id": created["id"]}, headers=staff_headers)).json()
    assert fetched["name"] == "Dewi Lestari"
    assert fetched["id"] == created["id"]


async def test_update_unknown_id_is_not_found(client, staff_headers):
    response = await client.put("/customer-id", params={"id": str(ObjectId())}, json=CUSTOMER, headers=staff_headers)

    assert response.status_code == 404


async def test_delete(client, staff_headers):
    created = await create_customer(client, staff_headers)

    deleted = await client.delete("/customer-id", params={"id": created["id"]}, headers=staff_headers)
    again = await client.delete("/customer-id", params={"id": created["id"]}, headers=staff_headers)

    assert deleted.json() == {"message": "Customer deleted successfully"}
    assert again.status_code == 404


async def test_names_and_contact(client, staff_headers):
    created = await create_customer(client, staff_headers)

    names = await client.get("/customer-names", headers=staff_headers)
    contact = await client.get("/customer-name", params={"id": created["id"]}, headers=staff_headers)

    assert names.json() == [{"id": created["id"], "name": "Dewi", "phone": "081298765432"}]
    assert contact.json() == {"name": "Dewi", "phone": "081298765432"}


async def test_unsupported_method(client, staff_headers):
    response = await client.patch("/customer-id", params={"id": str(ObjectId())}, headers=staff_headers)

    assert response.status_code == 405
