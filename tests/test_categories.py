# =============================================================================
# tests/test_categories.py - Category routes
# =============================================================================

from app.models.product import Product


def create(client, headers, name):
    return client.post("/category", json={"category_name": name}, headers=headers)


class TestCreateCategory:

    def test_requires_identity(self, client):
        res = create(client, {}, "Shoes")
        assert res.status_code == 401
        assert res.json()["success"] is False

    def test_create_stamps_creator(self, client, admin, auth_headers):
        res = create(client, auth_headers, "  Shoes  ")

        assert res.status_code == 201
        data = res.json()["data"]
        assert data["category_name"] == "Shoes"
        assert data["createdBy"] == {"id": admin.id, "name": "Alice Admin", "email": "a@x.com"}
        assert data["isActive"] is True

    def test_empty_or_blank_name_rejected(self, client, auth_headers):
        assert create(client, auth_headers, "").status_code == 400
        assert create(client, auth_headers, "   ").status_code == 400
        assert client.post("/category", json={}, headers=auth_headers).status_code == 400

    def test_trimmed_equal_names_collide(self, client, auth_headers):
        assert create(client, auth_headers, "Shoes").status_code == 201

        res = create(client, auth_headers, " Shoes ")
        assert res.status_code == 400
        assert res.json()["message"] == "Category already exists"

        assert client.get("/category").json()["count"] == 1


class TestReadCategory:

    def test_list_is_public_and_newest_first(self, client, auth_headers):
        create(client, auth_headers, "Shoes")
        create(client, auth_headers, "Hats")

        res = client.get("/category")
        assert res.status_code == 200
        assert [c["category_name"] for c in res.json()["data"]] == ["Hats", "Shoes"]

    def test_get_missing(self, client):
        res = client.get("/category/404")
        assert res.status_code == 404
        assert res.json() == {"success": False, "message": "Category not found"}


class TestUpdateCategory:

    def test_rename(self, client, auth_headers):
        cid = create(client, auth_headers, "Shoes").json()["data"]["id"]

        res = client.put(f"/category/{cid}", json={"category_name": " Boots "}, headers=auth_headers)
        assert res.status_code == 200
        assert res.json()["data"]["category_name"] == "Boots"

    def test_rename_to_existing_name(self, client, auth_headers):
        create(client, auth_headers, "Shoes")
        cid = create(client, auth_headers, "Hats").json()["data"]["id"]

        res = client.put(f"/category/{cid}", json={"category_name": "Shoes "}, headers=auth_headers)
        assert res.status_code == 400

    def test_update_requires_identity(self, client, auth_headers):
        cid = create(client, auth_headers, "Shoes").json()["data"]["id"]
        assert client.put(f"/category/{cid}", json={"category_name": "X"}).status_code == 401


class TestDeleteCategory:

    def test_delete(self, client, auth_headers):
        cid = create(client, auth_headers, "Shoes").json()["data"]["id"]

        assert client.delete(f"/category/{cid}").status_code == 401
        assert client.delete(f"/category/{cid}", headers=auth_headers).status_code == 200
        assert client.get(f"/category/{cid}").status_code == 404

    def test_delete_refused_while_referenced(self, client, db, auth_headers):
        cid = create(client, auth_headers, "Shoes").json()["data"]["id"]
        db.add(Product(product_name="Runner", description="", category_id=cid))
        db.commit()

        res = client.delete(f"/category/{cid}", headers=auth_headers)
        assert res.status_code == 400
        assert client.get(f"/category/{cid}").status_code == 200
