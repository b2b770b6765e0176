"""Tests for the categories API routes."""

from unittest.mock import MagicMock

from bson import ObjectId


def categories(mock_db):
    return mock_db["categories"]


def test_create_from_legacy_field(client, mock_db):
    new_id = ObjectId()
    categories(mock_db).insert_one.return_value = MagicMock(inserted_id=new_id)

    response = client.post("/api/v1/categories", json={"category_name": "  Mammals "})

    assert response.status_code == 201
    assert response.json()["id"] == str(new_id)
    assert response.json()["name"] == "Mammals"


def test_create_requires_name(client, mock_db):
    response = client.post("/api/v1/categories", json={"name": "   "})

    assert response.status_code == 400
    assert response.json()["code"] == "CATEGORY_400_1"
    categories(mock_db).insert_one.assert_not_called()


def test_create_name_too_long(client):
    response = client.post("/api/v1/categories", json={"name": "x" * 101})
    assert response.status_code == 400
    assert response.json()["code"] == "CATEGORY_400_2"


def test_get_legacy_document(client, mock_db, oid):
    categories(mock_db).find_one.return_value = {"_id": oid, "category_name": "Birds"}

    response = client.get(f"/api/v1/categories/{oid}")

    assert response.status_code == 200
    assert response.json()["name"] == "Birds"
    assert response.json()["updatedAt"] == response.json()["createdAt"]


def test_get_malformed_id(client, mock_db):
    assert client.get("/api/v1/categories/abc").status_code == 400
    categories(mock_db).find_one.assert_not_called()


def test_list_by_name(client, mock_db, oid, set_find_result):
    collection = categories(mock_db)
    set_find_result(collection, [{"_id": oid, "name": "Mammals"}])
    collection.count_documents.return_value = 1

    response = client.get("/api/v1/categories?name=mam&sort=name&order=asc")

    assert response.status_code == 200
    assert response.json()["total"] == 1
    expected = {"$or": [{"name": {"$regex": "mam", "$options": "i"}}]}
    collection.find.assert_called_once_with(expected)
    collection.find.return_value.sort.assert_called_once_with([("name", 1)])
    collection.count_documents.assert_called_once_with(expected)


def test_update_name(client, mock_db, oid):
    collection = categories(mock_db)
    collection.find_one_and_update.return_value = {"_id": oid, "name": "Reptiles"}

    response = client.put(f"/api/v1/categories/{oid}", json={"name": "Reptiles"})

    assert response.status_code == 200
    assert response.json()["name"] == "Reptiles"
    update = collection.find_one_and_update.call_args[0][1]
    assert update["$set"]["name"] == "Reptiles"
    assert "updatedAt" in update["$set"]


def test_update_not_found(client, mock_db, oid):
    categories(mock_db).find_one_and_update.return_value = None
    assert client.put(f"/api/v1/categories/{oid}", json={"name": "Reptiles"}).status_code == 404


def test_delete(client, mock_db, oid):
    categories(mock_db).delete_one.return_value = MagicMock(deleted_count=1)
    assert client.delete(f"/api/v1/categories/{oid}").status_code == 204

    categories(mock_db).delete_one.return_value = MagicMock(deleted_count=0)
    assert client.delete(f"/api/v1/categories/{oid}").status_code == 404
