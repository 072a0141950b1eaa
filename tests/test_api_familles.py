"""
Tests for the family REST resource mounted at ``/api/familles``.
"""

from fastapi.testclient import TestClient

from tests.conftest import APP_NAME

DEFAULT_NOM_FAMILLE = "AAAAAAAAAA"
UPDATED_NOM_FAMILLE = "BBBBBBBBBB"

DEFAULT_DESCRIPTION = "AAAAAAAAAA"
UPDATED_DESCRIPTION = "BBBBBBBBBB"

DEFAULT_IMAGE_FAMIILE = "AAAAAAAAAA"
UPDATED_IMAGE_FAMIILE = "BBBBBBBBBB"


def default_famille() -> dict:
    return {
        "nom_famille": DEFAULT_NOM_FAMILLE,
        "description": DEFAULT_DESCRIPTION,
        "image_famiile": DEFAULT_IMAGE_FAMIILE,
    }


def create_famille(client: TestClient, **overrides) -> dict:
    response = client.post("/api/familles", json={**default_famille(), **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_famille(client: TestClient):
    size_before = len(client.get("/api/familles").json())

    response = client.post("/api/familles", json=default_famille())

    assert response.status_code == 201
    body = response.json()
    assert body["id"] is not None
    assert response.headers["Location"].endswith(f"/api/familles/{body['id']}")
    assert response.headers[f"X-{APP_NAME}-alert"] == f"A new famille is created with identifier {body['id']}"
    assert response.headers[f"X-{APP_NAME}-params"] == str(body["id"])

    familles = client.get("/api/familles").json()
    assert len(familles) == size_before + 1
    test_famille = familles[-1]
    assert test_famille["nom_famille"] == DEFAULT_NOM_FAMILLE
    assert test_famille["description"] == DEFAULT_DESCRIPTION
    assert test_famille["image_famiile"] == DEFAULT_IMAGE_FAMIILE


def test_create_famille_with_existing_id(client: TestClient):
    """A new family cannot already have an id; nothing is stored."""
    size_before = len(client.get("/api/familles").json())

    response = client.post("/api/familles", json={**default_famille(), "id": 1})

    assert response.status_code == 400
    assert response.json()["message"] == "error.idexists"
    assert response.json()["entity_name"] == "famille"
    assert response.headers[f"X-{APP_NAME}-error"] == "error.idexists"
    assert len(client.get("/api/familles").json()) == size_before


def test_create_famille_with_invalid_body(client: TestClient):
    response = client.post("/api/familles", json={"description": "no name"})
    assert response.status_code == 422


def test_get_all_familles(client: TestClient):
    famille = create_famille(client)

    response = client.get("/api/familles?sort=id,desc")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    familles = response.json()
    assert famille["id"] in [f["id"] for f in familles]
    assert DEFAULT_NOM_FAMILLE in [f["nom_famille"] for f in familles]
    assert DEFAULT_DESCRIPTION in [f["description"] for f in familles]
    assert DEFAULT_IMAGE_FAMIILE in [f["image_famiile"] for f in familles]


def test_get_all_familles_sorted(client: TestClient):
    first = create_famille(client, nom_famille="Carabidae")
    second = create_famille(client, nom_famille="Apidae")

    ids_desc = [f["id"] for f in client.get("/api/familles", params={"sort": "id,desc"}).json()]
    assert ids_desc == [second["id"], first["id"]]

    names = [f["nom_famille"] for f in client.get("/api/familles", params={"sort": "nom_famille,asc"}).json()]
    assert names == ["Apidae", "Carabidae"]


def test_get_famille(client: TestClient):
    famille = create_famille(client)

    response = client.get(f"/api/familles/{famille['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == famille["id"]
    assert body["nom_famille"] == DEFAULT_NOM_FAMILLE
    assert body["description"] == DEFAULT_DESCRIPTION
    assert body["image_famiile"] == DEFAULT_IMAGE_FAMIILE
    assert body["ordre_id"] is None


def test_get_non_existing_famille(client: TestClient):
    response = client.get(f"/api/familles/{2**63 - 1}")
    assert response.status_code == 404


def test_update_famille(client: TestClient):
    famille = create_famille(client)
    size_before = len(client.get("/api/familles").json())

    updated = {
        "id": famille["id"],
        "nom_famille": UPDATED_NOM_FAMILLE,
        "description": UPDATED_DESCRIPTION,
        "image_famiile": UPDATED_IMAGE_FAMIILE,
    }
    response = client.put("/api/familles", json=updated)

    assert response.status_code == 200
    assert response.headers[f"X-{APP_NAME}-alert"] == f"A famille is updated with identifier {famille['id']}"
    familles = client.get("/api/familles").json()
    assert len(familles) == size_before
    test_famille = familles[-1]
    assert test_famille["nom_famille"] == UPDATED_NOM_FAMILLE
    assert test_famille["description"] == UPDATED_DESCRIPTION
    assert test_famille["image_famiile"] == UPDATED_IMAGE_FAMIILE


def test_update_non_existing_famille(client: TestClient):
    """Without an id the update is rejected and nothing is stored."""
    size_before = len(client.get("/api/familles").json())

    response = client.put("/api/familles", json=default_famille())

    assert response.status_code == 400
    assert response.json()["message"] == "error.idnull"
    assert len(client.get("/api/familles").json()) == size_before


def test_delete_famille(client: TestClient):
    famille = create_famille(client)
    size_before = len(client.get("/api/familles").json())

    response = client.delete(f"/api/familles/{famille['id']}")

    assert response.status_code == 200
    assert response.headers[f"X-{APP_NAME}-alert"] == f"A famille is deleted with identifier {famille['id']}"
    assert len(client.get("/api/familles").json()) == size_before - 1


def test_delete_non_existing_famille(client: TestClient):
    create_famille(client)
    response = client.delete(f"/api/familles/{2**62}")
    assert response.status_code == 200
    assert len(client.get("/api/familles").json()) == 1


def test_famille_with_ordre(client: TestClient):
    ordre = client.post("/api/ordres", json={"nom_ordre": "Coleoptera"}).json()
    famille = create_famille(client, ordre_id=ordre["id"])
    assert famille["ordre_id"] == ordre["id"]
    assert client.get(f"/api/familles/{famille['id']}").json()["ordre_id"] == ordre["id"]


def test_famille_with_unknown_ordre(client: TestClient):
    response = client.post("/api/familles", json={**default_famille(), "ordre_id": 999})
    assert response.status_code == 400
    assert response.json()["message"] == "error.validation"
    assert client.get("/api/familles").json() == []


def test_famille_with_ordre_id_beyond_sqlite_range(client: TestClient):
    response = client.post("/api/familles", json={**default_famille(), "ordre_id": 2**63})
    assert response.status_code == 422
    assert client.get("/api/familles").json() == []
