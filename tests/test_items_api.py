"""
Item API tests - listing, creation, owner-only partial updates.
"""

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, headers: dict, **fields) -> dict:
    body = {"title": "Livro de Java", "type": "doacao", **fields}
    response = await client.post("/items", headers=headers, json=body)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_list_items_empty(client: AsyncClient):
    response = await client.get("/items")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_item_requires_auth(client: AsyncClient):
    response = await client.post("/items", json={"title": "Foo", "type": "troca"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token ausente"}


@pytest.mark.asyncio
async def test_create_item_with_auth(client: AsyncClient, auth_headers: dict, test_user):
    data = await _create(
        client,
        auth_headers,
        description="Novo",
        imageUrl="https://img.example.com/livro.png",
        ownerId=999,
    )
    assert data["title"] == "Livro de Java"
    assert data["type"] == "doacao"
    assert data["imageUrl"] == "https://img.example.com/livro.png"
    assert data["ownerId"] == test_user.id
    assert "id" in data and "createdAt" in data


@pytest.mark.asyncio
async def test_create_item_accepts_any_type(client: AsyncClient, auth_headers: dict):
    data = await _create(client, auth_headers, type="emprestimo")
    assert data["type"] == "emprestimo"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"title": "Foo"}, {"type": "troca"}, {"title": "", "type": "troca"}])
async def test_create_item_requires_title_and_type(client: AsyncClient, auth_headers: dict, body):
    response = await client.post("/items", headers=auth_headers, json=body)
    assert response.status_code == 400
    assert response.json()["error"] == "Campos obrigatórios: title, type"


@pytest.mark.asyncio
async def test_list_items_newest_first_with_owner(client: AsyncClient, make_user):
    owner, headers = await make_user(name="Demo", email="demo@reuse.com")
    first = await _create(client, headers, title="Primeiro")
    second = await _create(client, headers, title="Segundo")

    response = await client.get("/items")
    assert response.status_code == 200
    items = response.json()
    assert [i["id"] for i in items] == [second["id"], first["id"]]
    assert items[0]["owner"] == {"id": owner.id, "name": "Demo"}


@pytest.mark.asyncio
async def test_owner_partial_update(client: AsyncClient, auth_headers: dict):
    item = await _create(client, auth_headers, description="Novo")
    response = await client.put(
        f"/items/{item['id']}",
        headers=auth_headers,
        json={"price": 25.5, "openToTrade": True, "usageTime": "2 anos"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["price"] == 25.5
    assert data["openToTrade"] is True
    assert data["usageTime"] == "2 anos"
    # untouched fields keep their values
    assert data["title"] == "Livro de Java"
    assert data["description"] == "Novo"


@pytest.mark.asyncio
async def test_update_null_clears_optional_field(client: AsyncClient, auth_headers: dict):
    item = await _create(client, auth_headers, description="Novo")
    response = await client.put(f"/items/{item['id']}", headers=auth_headers, json={"description": None})
    assert response.status_code == 200
    assert response.json()["description"] is None


@pytest.mark.asyncio
async def test_update_cannot_change_owner(client: AsyncClient, auth_headers: dict, test_user):
    item = await _create(client, auth_headers)
    response = await client.put(f"/items/{item['id']}", headers=auth_headers, json={"ownerId": 999})
    assert response.status_code == 200
    assert response.json()["ownerId"] == test_user.id


@pytest.mark.asyncio
async def test_non_owner_gets_403(client: AsyncClient, make_user):
    _, owner_headers = await make_user(email="a@x.com")
    _, other_headers = await make_user(email="b@x.com", name="Bruno")
    item = await _create(client, owner_headers)

    response = await client.put(f"/items/{item['id']}", headers=other_headers, json={"title": "Meu agora"})
    assert response.status_code == 403
    assert response.json() == {"error": "Sem permissão"}


@pytest.mark.asyncio
async def test_non_owner_gets_403_before_validation(client: AsyncClient, make_user):
    _, owner_headers = await make_user(email="a@x.com")
    _, other_headers = await make_user(email="b@x.com", name="Bruno")
    item = await _create(client, owner_headers)

    response = await client.put(f"/items/{item['id']}", headers=other_headers, json={"price": -1, "title": "x"})
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_unknown_item(client: AsyncClient, auth_headers: dict):
    response = await client.put("/items/12345", headers=auth_headers, json={"title": "Novo título"})
    assert response.status_code == 404
    assert response.json() == {"error": "Item não encontrado"}


@pytest.mark.asyncio
async def test_update_requires_auth(client: AsyncClient):
    response = await client.put("/items/1", json={"title": "Novo título"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_non_numeric_id(client: AsyncClient, auth_headers: dict):
    response = await client.put("/items/abc", headers=auth_headers, json={"title": "Novo título"})
    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, field, message",
    [
        ({"title": "x"}, "title", "Título muito curto"),
        ({"title": None}, "title", "Título não pode ser nulo"),
        ({"imageUrl": "not a url"}, "imageUrl", "URL da imagem inválida"),
        ({"price": -1}, "price", "Preço não pode ser negativo"),
    ],
)
async def test_update_validation(client: AsyncClient, auth_headers: dict, body, field, message):
    item = await _create(client, auth_headers)
    response = await client.put(f"/items/{item['id']}", headers=auth_headers, json=body)
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == message
    assert data["fields"][field] == [message]


@pytest.mark.asyncio
async def test_bodyless_update_by_non_owner_is_403(client: AsyncClient, make_user):
    _, owner_headers = await make_user(email="a@x.com")
    _, other_headers = await make_user(email="b@x.com", name="Bruno")
    item = await _create(client, owner_headers)

    response = await client.put(f"/items/{item['id']}", headers=other_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_bodyless_update_of_unknown_item_is_404(client: AsyncClient, auth_headers: dict):
    response = await client.put("/items/9999", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_bodyless_update_by_owner_changes_nothing(client: AsyncClient, auth_headers: dict):
    item = await _create(client, auth_headers, description="Novo")
    response = await client.put(f"/items/{item['id']}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == item["title"]
    assert data["description"] == "Novo"


@pytest.mark.asyncio
async def test_price_as_string_rejected(client: AsyncClient, auth_headers: dict):
    item = await _create(client, auth_headers)
    response = await client.put(f"/items/{item['id']}", headers=auth_headers, json={"price": "10"})
    assert response.status_code == 400
    assert "price" in response.json()["fields"]


@pytest.mark.asyncio
@pytest.mark.parametrize("literal", [b"Infinity", b"-Infinity", b"NaN"])
async def test_non_finite_price_rejected(client: AsyncClient, auth_headers: dict, literal):
    item = await _create(client, auth_headers)
    response = await client.put(
        f"/items/{item['id']}",
        headers={**auth_headers, "Content-Type": "application/json"},
        content=b'{"price": ' + literal + b"}",
    )
    assert response.status_code == 400
    assert "price" in response.json()["fields"]
