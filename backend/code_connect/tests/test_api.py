import json

import pytest
from httpx import ASGITransport, AsyncClient

from code_connect.api import app
from code_connect.errors import FormatterError


def create_body(tmp_path, prop_mapping=None):
    body = {
        "component": {
            "id": "1:2",
            "name": "Button",
            "normalizedName": "Button",
            "figmaNodeUrl": "https://www.figma.com/design/abc123/Kit?node-id=1-2",
            "componentPropertyDefinitions": {
                "Label#1:2": {"type": "TEXT", "defaultValue": "Click"},
                "Icon": {"type": "INSTANCE_SWAP"},
            },
        },
        "destinationDir": str(tmp_path),
    }
    if prop_mapping is not None:
        body["propMapping"] = prop_mapping
    return body


@pytest.mark.asyncio
async def test_health_check():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/v1/healthz")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["formatter"] == "none"


@pytest.mark.asyncio
async def test_create_then_conflict(tmp_path):
    body = create_body(
        tmp_path,
        prop_mapping={"label": {"kind": "string", "args": {"figmaPropName": "Label#1:2"}}},
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        first = await ac.post("/v1/create", json=body)
        second = await ac.post("/v1/create", json=body)

    file_path = str(tmp_path / "Button.figma.tsx")
    assert first.status_code == 200
    assert first.json() == {"createdFiles": [{"filePath": file_path}], "messages": []}

    assert second.status_code == 200
    data = second.json()
    assert data["createdFiles"] == []
    assert data["messages"] == [
        {"message": f"File {file_path} already exists, skipping creation", "level": "ERROR"}
    ]

    source = (tmp_path / "Button.figma.tsx").read_text(encoding="utf-8")
    assert '"label": figma.string("Label#1:2"),' in source
    assert '// "icon": figma.instance("Icon"),' in source


@pytest.mark.asyncio
async def test_unsupported_intrinsic_is_rejected(tmp_path):
    body = create_body(
        tmp_path,
        prop_mapping={"icon": {"kind": "nested-props", "args": {"layer": "Icon", "props": {}}}},
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.post("/v1/create", json=body)
    assert resp.status_code == 422
    assert "nested-props" in resp.json()["detail"]
    assert not (tmp_path / "Button.figma.tsx").exists()


@pytest.mark.asyncio
async def test_invalid_payload_is_rejected(tmp_path):
    body = create_body(tmp_path, prop_mapping={"items": {"kind": "children", "args": {"layers": []}}})
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.post("/v1/create", json=body)
    assert resp.status_code == 422


class RejectingFormatter:
    def format(self, source):
        raise FormatterError("Unexpected token")


@pytest.mark.asyncio
async def test_formatter_failure_returns_500(tmp_path, monkeypatch):
    monkeypatch.setattr("code_connect.service.create.get_formatter", lambda: RejectingFormatter())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.post("/v1/create", json=create_body(tmp_path))
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Error formatting generated file: Unexpected token"
    assert not (tmp_path / "Button.figma.tsx").exists()


@pytest.mark.asyncio
async def test_unsupported_value_mapping_target_is_rejected(tmp_path):
    body = create_body(
        tmp_path,
        prop_mapping={
            "size": {"kind": "enum", "args": {"figmaPropName": "Size", "valueMapping": {"A": float("nan")}}}
        },
    )
    content = json.dumps(body)
    assert "NaN" in content
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.post("/v1/create", content=content, headers={"Content-Type": "application/json"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Unsupported value mapping target: nan"
    assert not (tmp_path / "Button.figma.tsx").exists()
