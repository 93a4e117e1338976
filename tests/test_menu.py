import os


def create_item(client, **fields):
    files = fields.pop("files", None)
    response = client.post("/api/menu", data=fields, files=files)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["success"] is True
    return body["itemId"]


def menu_items(client):
    return client.get("/api/menu").json()["items"]


def find(client, item_id):
    return next(i for i in menu_items(client) if i["id"] == item_id)


def test_menu_is_seeded_and_public(client):
    response = client.get("/api/menu")

    assert response.status_code == 200
    names = {item["name"] for item in response.json()["items"]}
    assert names == {"Sample Coffee", "Sample Sandwich"}


def test_create_update_scenario(admin_client):
    item_id = create_item(admin_client, name="Tea", price="80")

    items = menu_items(admin_client)
    assert items[0]["id"] == item_id
    assert items[0]["name"] == "Tea"
    assert items[0]["price"] == 80
    assert items[0]["image"] is None

    response = admin_client.put(f"/api/menu/{item_id}", data={"price": "90"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Menu item updated"}

    item = find(admin_client, item_id)
    assert item["price"] == 90
    assert item["name"] == "Tea"
    assert item["image"] is None


def test_update_name_only(admin_client):
    item_id = create_item(admin_client, name="Tea", price="80")

    admin_client.put(f"/api/menu/{item_id}", data={"name": "Green Tea", "price": ""})

    item = find(admin_client, item_id)
    assert item["name"] == "Green Tea"
    assert item["price"] == 80


def test_create_requires_name_and_price(admin_client):
    for data in [{"name": "Tea"}, {"price": "80"}, {}, {"name": "  ", "price": "80"}]:
        response = admin_client.post("/api/menu", data=data)
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Name and price required"}

    assert len(menu_items(admin_client)) == 2


def test_invalid_price(admin_client):
    for price in ["cheap", "-1", "nan"]:
        response = admin_client.post("/api/menu", data={"name": "Tea", "price": price})
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid price"}


def test_nothing_to_update(admin_client):
    item_id = menu_items(admin_client)[0]["id"]

    response = admin_client.put(f"/api/menu/{item_id}", data={})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Nothing to update"}


def test_update_missing_item(admin_client):
    response = admin_client.put("/api/menu/999", data={"price": "10"})

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_create_with_image(admin_client, settings, png_bytes):
    item_id = create_item(
        admin_client,
        name="Croissant",
        price="150",
        files={"image": ("croissant.png", png_bytes, "image/png")},
    )

    image_url = find(admin_client, item_id)["image"]
    assert image_url.startswith("/uploads/menu/")
    assert image_url.endswith(".jpg")

    stored = os.path.join(settings.UPLOAD_FOLDER, "menu", os.path.basename(image_url))
    assert os.path.exists(stored)

    served = admin_client.get(image_url)
    assert served.status_code == 200
    assert served.headers["content-type"] == "image/jpeg"


def test_replacing_image_removes_old_file(admin_client, settings, png_bytes):
    item_id = create_item(
        admin_client,
        name="Croissant",
        price="150",
        files={"image": ("a.png", png_bytes, "image/png")},
    )
    old_url = find(admin_client, item_id)["image"]

    response = admin_client.put(
        f"/api/menu/{item_id}",
        files={"image": ("b.png", png_bytes, "image/png")},
    )
    assert response.status_code == 200

    item = find(admin_client, item_id)
    assert item["image"] != old_url
    assert item["name"] == "Croissant"
    assert item["price"] == 150

    menu_dir = os.path.join(settings.UPLOAD_FOLDER, "menu")
    assert not os.path.exists(os.path.join(menu_dir, os.path.basename(old_url)))
    assert os.path.exists(os.path.join(menu_dir, os.path.basename(item["image"])))


def test_rejects_non_image_upload(admin_client):
    response = admin_client.post(
        "/api/menu",
        data={"name": "Tea", "price": "80"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert len(menu_items(admin_client)) == 2


def test_rejects_corrupt_image(admin_client):
    response = admin_client.post(
        "/api/menu",
        data={"name": "Tea", "price": "80"},
        files={"image": ("broken.png", b"not really a png", "image/png")},
    )

    assert response.status_code == 400
    assert len(menu_items(admin_client)) == 2


def test_delete_is_idempotent(admin_client, settings, png_bytes):
    item_id = create_item(
        admin_client,
        name="Muffin",
        price="95",
        files={"image": ("m.png", png_bytes, "image/png")},
    )
    image_url = find(admin_client, item_id)["image"]

    assert admin_client.delete(f"/api/menu/{item_id}").status_code == 200
    second = admin_client.delete(f"/api/menu/{item_id}")

    assert second.status_code == 200
    assert second.json() == {"success": True, "message": "Menu item deleted"}
    assert item_id not in [i["id"] for i in menu_items(admin_client)]
    assert not os.path.exists(os.path.join(settings.UPLOAD_FOLDER, "menu", os.path.basename(image_url)))
