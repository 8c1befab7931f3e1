# =============================================================================
# tests/test_products.py - Product routes
# =============================================================================


def make_category(client, headers, name="Shoes"):
    return client.post("/category", json={"category_name": name}, headers=headers).json()["data"]["id"]


class TestCreateProduct:

    def test_requires_identity(self, client, media_host):
        res = client.post("/product", data={"productName": "Runner"})
        assert res.status_code == 401
        assert media_host.uploaded == []

    def test_without_category_has_null_reference(self, client, admin, auth_headers):
        res = client.post(
            "/product",
            data={"productName": "  Runner ", "description": " Light shoe "},
            headers=auth_headers,
        )

        assert res.status_code == 201
        data = res.json()["data"]
        assert data["productName"] == "Runner"
        assert data["description"] == "Light shoe"
        assert data["categoryId"] is None
        assert data["category"] is None
        assert data["productImage"] is None
        assert data["createdBy"]["id"] == admin.id

    def test_with_existing_category(self, client, auth_headers):
        cid = make_category(client, auth_headers)
        res = client.post(
            "/product",
            data={"productName": "Runner", "categoryId": str(cid)},
            headers=auth_headers,
        )

        assert res.status_code == 201
        data = res.json()["data"]
        assert data["categoryId"] == cid
        assert data["category"] == {"id": cid, "category_name": "Shoes"}

    def test_unknown_category_rejected(self, client, auth_headers, media_host):
        res = client.post(
            "/product",
            data={"productName": "Runner", "categoryId": "999"},
            headers=auth_headers,
        )
        assert res.status_code == 400
        assert res.json()["message"] == "Invalid category"

        res = client.post(
            "/product",
            data={"productName": "Runner", "categoryId": "abc"},
            headers=auth_headers,
        )
        assert res.status_code == 400
        assert client.get("/product").json()["count"] == 0

    def test_blank_name_rejected(self, client, auth_headers):
        res = client.post("/product", data={"productName": "   "}, headers=auth_headers)
        assert res.status_code == 400

    def test_image_is_uploaded(self, client, auth_headers, media_host, png_bytes):
        res = client.post(
            "/product",
            data={"productName": "Runner"},
            files={"productImage": ("shoe.png", png_bytes, "image/png")},
            headers=auth_headers,
        )

        assert res.status_code == 201
        assert res.json()["data"]["productImage"] == media_host.uploaded[0]
        assert "/products/" in media_host.uploaded[0]

    def test_non_image_upload_rejected(self, client, auth_headers, media_host):
        res = client.post(
            "/product",
            data={"productName": "Runner"},
            files={"productImage": ("notes.txt", b"hello", "text/plain")},
            headers=auth_headers,
        )
        assert res.status_code == 400
        assert media_host.uploaded == []

        res = client.post(
            "/product",
            data={"productName": "Runner"},
            files={"productImage": ("fake.png", b"not really a png", "image/png")},
            headers=auth_headers,
        )
        assert res.status_code == 400
        assert res.json()["message"] == "Invalid image file"


class TestReadProduct:

    def test_list_and_get_are_public(self, client, auth_headers):
        pid = client.post("/product", data={"productName": "Runner"}, headers=auth_headers).json()["data"]["id"]

        res = client.get("/product")
        assert res.status_code == 200
        assert res.json()["count"] == 1

        assert client.get(f"/product/{pid}").json()["data"]["productName"] == "Runner"
        assert client.get("/product/999").status_code == 404


class TestUpdateProduct:

    def test_update_fields_and_category(self, client, auth_headers):
        cid = make_category(client, auth_headers)
        pid = client.post("/product", data={"productName": "Runner"}, headers=auth_headers).json()["data"]["id"]

        res = client.put(
            f"/product/{pid}",
            data={"description": "Fast", "categoryId": str(cid)},
            headers=auth_headers,
        )
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["productName"] == "Runner"
        assert data["description"] == "Fast"
        assert data["categoryId"] == cid

    def test_update_with_unknown_category(self, client, auth_headers):
        pid = client.post("/product", data={"productName": "Runner"}, headers=auth_headers).json()["data"]["id"]
        res = client.put(f"/product/{pid}", data={"categoryId": "999"}, headers=auth_headers)
        assert res.status_code == 400

    def test_replacing_image_releases_old_one(self, client, auth_headers, media_host, png_bytes):
        pid = client.post(
            "/product",
            data={"productName": "Runner"},
            files={"productImage": ("a.png", png_bytes, "image/png")},
            headers=auth_headers,
        ).json()["data"]["id"]

        res = client.put(
            f"/product/{pid}",
            files={"productImage": ("b.png", png_bytes, "image/png")},
            headers=auth_headers,
        )
        assert res.status_code == 200
        assert res.json()["data"]["productImage"] == media_host.uploaded[1]
        assert media_host.destroyed == ["products/img1"]

    def test_update_requires_identity(self, client, auth_headers):
        pid = client.post("/product", data={"productName": "Runner"}, headers=auth_headers).json()["data"]["id"]
        assert client.put(f"/product/{pid}", data={"description": "x"}).status_code == 401


class TestDeleteProduct:

    def test_delete_releases_image(self, client, auth_headers, media_host, png_bytes):
        pid = client.post(
            "/product",
            data={"productName": "Runner"},
            files={"productImage": ("a.png", png_bytes, "image/png")},
            headers=auth_headers,
        ).json()["data"]["id"]

        assert client.delete(f"/product/{pid}").status_code == 401

        res = client.delete(f"/product/{pid}", headers=auth_headers)
        assert res.status_code == 200
        assert media_host.destroyed == ["products/img1"]
        assert client.get(f"/product/{pid}").status_code == 404
