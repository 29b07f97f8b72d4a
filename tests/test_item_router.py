import pytest

from imageshop.repositories.item_repository import ItemRepository
from imageshop.services.file_storage_service import FileStorageService


@pytest.fixture
def storage(test_settings):
    return FileStorageService(test_settings)


@pytest.fixture
def png_item(db_session, storage):
    preview = storage.upload_file("cat_small.png", b"\x89PNG-preview")
    picture = storage.upload_file("cat.png", b"\x89PNG-full")
    return ItemRepository(db_session).create(
        item_name="Cat", price=400, description="meow", picture_url=picture, preview_url=preview
    )


class TestDisplay:
    def test_png_preview_has_image_content_type(self, client, png_item):
        res = client.get("/item/display", params={"itemId": png_item.item_id})

        assert res.status_code == 200
        assert res.headers["content-type"] == "image/png"
        assert res.content == b"\x89PNG-preview"

    def test_unknown_extension_has_no_content_type(self, client, db_session, storage):
        preview = storage.upload_file("photo.bmp", b"BMdata")
        item = ItemRepository(db_session).create(
            item_name="Bitmap", price=10, picture_url=preview, preview_url=preview
        )

        res = client.get("/item/display", params={"itemId": item.item_id})

        assert res.status_code == 200
        assert "content-type" not in res.headers
        assert res.content == b"BMdata"

    def test_missing_file_returns_bare_400(self, client, db_session):
        item = ItemRepository(db_session).create(
            item_name="Ghost", price=10, picture_url="gone.png", preview_url="gone.png"
        )

        res = client.get("/item/display", params={"itemId": item.item_id})

        assert res.status_code == 400
        assert res.content == b""

    def test_unknown_item_is_404(self, client):
        res = client.get("/item/display", params={"itemId": 9999})
        assert res.status_code == 404
        assert res.json()["success"] is False


class TestItemAdmin:
    def test_register_multipart(self, client, login_as, admin, storage):
        login_as(admin)

        res = client.post(
            "/item/register",
            data={"itemName": "Sea", "price": "250", "description": "blue"},
            files={
                "picture": ("sea.jpg", b"jpeg-bytes", "image/jpeg"),
                "preview": ("sea_small.jpg", b"small-bytes", "image/jpeg"),
            },
        )

        assert res.status_code == 200
        body = res.json()
        assert body["success"] is True
        item = body["data"]["item"]
        assert item["item_name"] == "Sea"
        assert item["price"] == 250
        assert storage.load_file(item["picture_url"]) == b"jpeg-bytes"
        assert storage.load_file(item["preview_url"]) == b"small-bytes"

    def test_register_forbidden_for_member(self, client, login_as, member):
        login_as(member)

        res = client.post(
            "/item/register",
            data={"itemName": "Sea", "price": "250"},
            files={
                "picture": ("sea.jpg", b"x", "image/jpeg"),
                "preview": ("sea_small.jpg", b"y", "image/jpeg"),
            },
        )

        assert res.status_code == 403

    def test_remove(self, client, login_as, admin, png_item):
        login_as(admin)

        res = client.post("/item/remove", params={"itemId": png_item.item_id})

        assert res.status_code == 200
        assert client.get("/item/read", params={"itemId": png_item.item_id}).status_code == 404


class TestBuy:
    def test_buy_success(self, client, login_as, member, png_item):
        login_as(member)

        res = client.post("/item/buy", params={"itemId": png_item.item_id})

        assert res.status_code == 200
        body = res.json()
        assert body["data"]["message"] == "구매가 완료되었습니다."
        assert body["data"]["coin_after"] == 600
        assert body["meta"]["redirect"] == "/item/success"

        listed = client.get("/useritem/list").json()["data"]
        assert listed["count"] == 1
        assert listed["user_items"][0]["item_name"] == "Cat"

    def test_buy_insufficient_balance(self, client, login_as, other_member, png_item):
        login_as(other_member)

        res = client.post("/item/buy", params={"itemId": png_item.item_id})

        assert res.status_code == 400
        assert res.json()["error"]["code"] == "BALANCE_001"

    def test_buy_twice_conflicts(self, client, login_as, member, png_item):
        login_as(member)
        client.post("/item/buy", params={"itemId": png_item.item_id})

        res = client.post("/item/buy", params={"itemId": png_item.item_id})

        assert res.status_code == 409

    def test_buy_requires_login(self, client, png_item):
        res = client.post("/item/buy", params={"itemId": png_item.item_id})
        assert res.status_code == 401

    def test_download_purchased_picture(self, client, login_as, member, png_item):
        login_as(member)
        purchase = client.post("/item/buy", params={"itemId": png_item.item_id}).json()["data"]

        res = client.get("/useritem/download", params={"userItemNo": purchase["user_item_no"]})

        assert res.status_code == 200
        assert res.content == b"\x89PNG-full"
        assert res.headers["content-type"] == "image/png"
        assert res.headers["content-disposition"].startswith("attachment;")
        assert "cat.png" in res.headers["content-disposition"]
