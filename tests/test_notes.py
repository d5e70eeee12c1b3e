# tests/test_notes.py
import uuid

from tidydesk.notes.models import Note


def _create(client, headers, title="T", content="C"):
    r = client.post("/api/v1/notes/", headers=headers, json={"title": title, "content": content})
    assert r.status_code == 201
    return r.get_json()


def test_create_then_get_round_trip(client, auth_headers):
    carol = auth_headers("carol@example.com")
    note = _create(client, carol, "T", "C")

    r = client.get(f"/api/v1/notes/{note['id']}", headers=carol)
    assert r.status_code == 200
    got = r.get_json()
    assert got["title"] == "T"
    assert got["content"] == "C"
    assert got["owner_email"] == "carol@example.com"
    assert got["created_at"] and got["updated_at"]
    assert uuid.UUID(got["id"])


def test_notes_crud_and_isolation(client, auth_headers):
    carol = auth_headers("carol@example.com")
    dave = auth_headers("dave@example.com")

    # Carol crée une note
    note_id = _create(client, carol, "N1", "C1")["id"]

    # Carol la voit dans sa liste, Dave non
    r = client.get("/api/v1/notes/", headers=carol)
    assert r.status_code == 200
    assert [n["id"] for n in r.get_json()["data"]] == [note_id]
    r = client.get("/api/v1/notes/", headers=dave)
    assert r.get_json() == {"status": "success", "data": []}

    # Dave ne peut ni lire, ni modifier, ni supprimer: 404 (pas 403)
    assert client.get(f"/api/v1/notes/{note_id}", headers=dave).status_code == 404
    r = client.put(f"/api/v1/notes/{note_id}", headers=dave, json={"title": "X", "content": "Y"})
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "not_found"
    assert client.delete(f"/api/v1/notes/{note_id}", headers=dave).status_code == 404

    # la note de Carol est intacte
    r = client.get(f"/api/v1/notes/{note_id}", headers=carol)
    assert r.get_json()["title"] == "N1"

    # Carol met à jour sa note
    r = client.put(f"/api/v1/notes/{note_id}", headers=carol, json={"title": "N1-EDIT", "content": "C2"})
    assert r.status_code == 200
    assert r.get_json()["title"] == "N1-EDIT"
    assert r.get_json()["content"] == "C2"

    # Carol supprime sa note
    r = client.delete(f"/api/v1/notes/{note_id}", headers=carol)
    assert r.status_code == 200
    assert r.get_data() == b""

    # re-get -> 404, et absente de la liste
    assert client.get(f"/api/v1/notes/{note_id}", headers=carol).status_code == 404
    assert client.get("/api/v1/notes/", headers=carol).get_json()["data"] == []


def test_delete_twice_is_not_found(client, auth_headers):
    amy = auth_headers("amy@example.com")
    note_id = _create(client, amy)["id"]
    assert client.delete(f"/api/v1/notes/{note_id}", headers=amy).status_code == 200
    assert client.delete(f"/api/v1/notes/{note_id}", headers=amy).status_code == 404


def test_create_with_empty_fields_is_rejected(client, app, auth_headers):
    amy = auth_headers("amy@example.com")
    for body in ({"title": "", "content": "C"},
                 {"title": "T", "content": ""},
                 {"title": "   ", "content": "C"},
                 {"title": "T"},
                 {}):
        r = client.post("/api/v1/notes/", headers=amy, json=body)
        assert r.status_code == 400
        assert r.get_json()["error"]["code"] == "validation_error"

    with app.app_context():
        assert Note.query.count() == 0


def test_unknown_fields_are_rejected(client, app, auth_headers):
    amy = auth_headers("amy@example.com")
    r = client.post("/api/v1/notes/", headers=amy,
                    json={"title": "T", "content": "C", "owner_email": "bob@example.com"})
    assert r.status_code == 400
    assert "owner_email" in r.get_json()["error"]["details"]

    note_id = _create(client, amy)["id"]
    r = client.put(f"/api/v1/notes/{note_id}", headers=amy,
                   json={"title": "T", "content": "C", "owner_email": "bob@example.com"})
    assert r.status_code == 400

    with app.app_context():
        assert Note.query.filter_by(owner_email="bob@example.com").count() == 0


def test_update_requires_full_body(client, auth_headers):
    amy = auth_headers("amy@example.com")
    note_id = _create(client, amy, "T", "C")["id"]
    r = client.put(f"/api/v1/notes/{note_id}", headers=amy, json={"title": "only title"})
    assert r.status_code == 400
    assert client.get(f"/api/v1/notes/{note_id}", headers=amy).get_json()["title"] == "T"


def test_update_unknown_id_leaves_storage_unchanged(client, app, auth_headers):
    amy = auth_headers("amy@example.com")
    _create(client, amy, "T", "C")

    r = client.put(f"/api/v1/notes/{uuid.uuid4()}", headers=amy, json={"title": "X", "content": "Y"})
    assert r.status_code == 404
    with app.app_context():
        assert [(n.title, n.content) for n in Note.query.all()] == [("T", "C")]


def test_malformed_id_is_not_found(client, auth_headers):
    r = client.get("/api/v1/notes/not-a-uuid", headers=auth_headers("amy@example.com"))
    assert r.status_code == 404


def test_notes_listed_newest_first(client, auth_headers):
    amy = auth_headers("amy@example.com")
    # créées dans la même seconde
    ids = [_create(client, amy, f"T{i}", "C")["id"] for i in range(3)]
    listed = [n["id"] for n in client.get("/api/v1/notes/", headers=amy).get_json()["data"]]
    assert listed == list(reversed(ids))

    # une mise à jour ne change pas l'ordre
    client.put(f"/api/v1/notes/{ids[0]}", headers=amy, json={"title": "edited", "content": "C"})
    listed = [n["id"] for n in client.get("/api/v1/notes/", headers=amy).get_json()["data"]]
    assert listed == list(reversed(ids))
