from fastapi import FastAPI
from fastapi.testclient import TestClient

from llamablog import dependencies as deps
from llamablog.routers import images
from llamablog.security import get_settings
from llamablog.services.image_service import (
    ImageRegistry,
    get_content_type_from_filename,
)
from llamablog.settings import Settings


def build_client(images_dir):
    registry = ImageRegistry()
    registry.register("diagram", light="diagram-light.png", dark="diagram-dark.png")

    app = FastAPI()
    app.dependency_overrides[deps.get_image_registry] = lambda: registry
    app.dependency_overrides[get_settings] = lambda: Settings(
        IMAGES_DIR=str(images_dir)
    )
    app.include_router(images.router)
    return TestClient(app)


def test_get_image_serves_theme_and_headers(tmp_path):
    (tmp_path / "diagram-light.png").write_bytes(b"LIGHT")
    (tmp_path / "diagram-dark.png").write_bytes(b"DARK!")
    client = build_client(tmp_path)

    res = client.get("/images/diagram", params={"theme": "dark"})

    assert res.status_code == 200
    assert res.content == b"DARK!"
    assert res.headers["content-type"] == get_content_type_from_filename("x.png")
    assert res.headers["Content-Length"] == "5"
    assert res.headers["Accept-Ranges"] == "bytes"


def test_get_image_defaults_to_light(tmp_path):
    (tmp_path / "diagram-light.png").write_bytes(b"LIGHT")
    client = build_client(tmp_path)

    res = client.get("/images/diagram")

    assert res.status_code == 200
    assert res.content == b"LIGHT"


def test_get_image_rejects_unknown_theme(tmp_path):
    res = build_client(tmp_path).get("/images/diagram", params={"theme": "sepia"})
    assert res.status_code == 422


def test_get_image_returns_404_for_unregistered_name(tmp_path):
    assert build_client(tmp_path).get("/images/missing").status_code == 404


def test_get_image_returns_404_when_file_missing(tmp_path):
    assert build_client(tmp_path).get("/images/diagram").status_code == 404
