import base64
import io
import os

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def _stored_path(app, public_id, suffix):
    return os.path.join(app.config["UPLOAD_FOLDER"], public_id + suffix)


def test_upload_multipart(client, app, user):
    resp = client.post(
        "/api/uploads/image",
        headers=user["headers"],
        data={"file": (io.BytesIO(PNG_BYTES), "report scan.png"), "folder": "reports"},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["publicId"].startswith("reports/")
    assert body["url"].endswith(".png")

    with open(_stored_path(app, body["publicId"], ".png"), "rb") as fh:
        assert fh.read() == PNG_BYTES


def test_upload_data_url(client, app, user):
    data_url = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()
    resp = client.post("/api/uploads/image", headers=user["headers"], json={"file": data_url})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["publicId"].startswith("nutricare/")

    with open(_stored_path(app, body["publicId"], ".png"), "rb") as fh:
        assert fh.read() == PNG_BYTES

    # the returned url is served back
    path = body["url"].split("://", 1)[1].split("/", 1)[1]
    served = client.get("/" + path)
    assert served.status_code == 200
    assert served.data == PNG_BYTES
    served.close()


def test_upload_requires_file(client, user):
    resp = client.post("/api/uploads/image", headers=user["headers"], json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No file provided"}


def test_upload_rejects_bad_input(client, user):
    for payload in (
        {"file": "just text"},
        {"file": "data:image/png;base64,@@@not-base64@@@"},
        {"file": "data:image/tiff;base64," + base64.b64encode(b"II*").decode()},
    ):
        resp = client.post("/api/uploads/image", headers=user["headers"], json=payload)
        assert resp.status_code == 400, payload


def test_upload_rejects_non_image_file(client, user):
    resp = client.post(
        "/api/uploads/image",
        headers=user["headers"],
        data={"file": (io.BytesIO(b"hello"), "notes.txt")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400


def test_upload_requires_token(client):
    assert client.post("/api/uploads/image", json={"file": "x"}).status_code == 401
