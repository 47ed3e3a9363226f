"""API tests for /api/participantes."""


def emails(client):
    return [p["email"] for p in client.get("/api/participantes").json()]


# --- GET ---

def test_list_participantes_seeded(client, taller_id):
    resp = client.get("/api/participantes")
    assert resp.status_code == 200
    participantes = resp.json()
    assert [p["email"] for p in participantes] == ["ana@demo.com", "luis@demo.com"]
    assert all(p["tallerId"] == taller_id for p in participantes)


def test_missing_telefono_is_omitted(client, store):
    luis = store.participantes[1]
    data = client.get(f"/api/participantes/{luis.id}").json()
    assert "telefono" not in data
    assert data == {"id": luis.id, "nombre": "Luis Rojas", "email": "luis@demo.com", "tallerId": luis.tallerId}


def test_get_participante_not_found(client):
    resp = client.get("/api/participantes/unknown-id")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Participante no encontrado"}


# --- POST ---

def test_create_participante(client, participante_payload):
    resp = client.post("/api/participantes", json=participante_payload)
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"]
    assert {k: v for k, v in data.items() if k != "id"} == participante_payload
    assert emails(client)[-1] == "marta@demo.com"


def test_create_without_telefono(client, participante_payload):
    del participante_payload["telefono"]
    resp = client.post("/api/participantes", json=participante_payload)
    assert resp.status_code == 201
    assert "telefono" not in resp.json()


def test_create_keeps_extra_fields(client, participante_payload):
    resp = client.post("/api/participantes", json=dict(participante_payload, notas="x"))
    assert resp.status_code == 201
    created = resp.json()
    assert created["notas"] == "x"
    assert client.get(f"/api/participantes/{created['id']}").json()["notas"] == "x"
    resp = client.put(f"/api/participantes/{created['id']}", json={"telefono": "123"})
    assert resp.json()["notas"] == "x"


def test_create_unknown_taller(client, participante_payload):
    resp = client.post("/api/participantes", json=dict(participante_payload, tallerId="no-existe"))
    assert resp.status_code == 400
    assert resp.json() == {"message": "El tallerId proporcionado no existe."}


def test_create_missing_taller(client, participante_payload):
    del participante_payload["tallerId"]
    resp = client.post("/api/participantes", json=participante_payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "El tallerId es requerido."}


def test_create_duplicate_email(client, participante_payload):
    resp = client.post("/api/participantes", json=dict(participante_payload, email="ana@demo.com"))
    assert resp.status_code == 400
    assert resp.json() == {"message": "El email ya está registrado por otro participante."}
    assert emails(client).count("ana@demo.com") == 1


def test_create_same_email_twice(client, participante_payload):
    assert client.post("/api/participantes", json=participante_payload).status_code == 201
    assert client.post("/api/participantes", json=participante_payload).status_code == 400
    assert emails(client).count("marta@demo.com") == 1


def test_create_invalid_email(client, participante_payload):
    resp = client.post("/api/participantes", json=dict(participante_payload, email="marta.demo.com"))
    assert resp.status_code == 400
    assert resp.json() == {"message": "El email es requerido y debe tener un formato válido."}


def test_create_short_nombre(client, participante_payload):
    resp = client.post("/api/participantes", json=dict(participante_payload, nombre="M"))
    assert resp.status_code == 400
    assert "nombre" in resp.json()["message"]


def test_create_for_new_taller(client, participante_payload, taller_payload):
    taller = client.post("/api/talleres", json=taller_payload).json()
    resp = client.post("/api/participantes", json=dict(participante_payload, tallerId=taller["id"]))
    assert resp.status_code == 201
    assert resp.json()["tallerId"] == taller["id"]


# --- PUT ---

def test_update_only_telefono(client, store):
    ana = store.participantes[0]
    resp = client.put(f"/api/participantes/{ana.id}", json={"telefono": "123"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["telefono"] == "123"
    assert (data["nombre"], data["email"], data["tallerId"]) == (ana.nombre, ana.email, ana.tallerId)


def test_update_adds_telefono(client, store):
    luis = store.participantes[1]
    resp = client.put(f"/api/participantes/{luis.id}", json={"telefono": "700-33333"})
    assert resp.status_code == 200
    assert resp.json()["telefono"] == "700-33333"


def test_update_with_own_email(client, store):
    ana = store.participantes[0]
    resp = client.put(f"/api/participantes/{ana.id}", json={"email": ana.email, "nombre": "Ana P."})
    assert resp.status_code == 200
    assert resp.json()["nombre"] == "Ana P."


def test_update_to_taken_email(client, store):
    ana, luis = store.participantes
    resp = client.put(f"/api/participantes/{luis.id}", json={"email": ana.email})
    assert resp.status_code == 400
    assert resp.json() == {"message": "El email ya está registrado por otro participante."}
    assert client.get(f"/api/participantes/{luis.id}").json()["email"] == "luis@demo.com"


def test_update_moves_to_other_taller(client, store):
    ana = store.participantes[0]
    other = store.talleres[1].id
    resp = client.put(f"/api/participantes/{ana.id}", json={"tallerId": other})
    assert resp.status_code == 200
    assert resp.json()["tallerId"] == other


def test_update_to_unknown_taller(client, store):
    ana = store.participantes[0]
    resp = client.put(f"/api/participantes/{ana.id}", json={"tallerId": "no-existe"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "El tallerId proporcionado no existe."}


def test_update_participante_not_found(client):
    resp = client.put("/api/participantes/unknown-id", json={"telefono": "123"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Participante no encontrado"}


# --- DELETE ---

def test_delete_participante(client, store):
    luis = store.participantes[1]
    resp = client.delete(f"/api/participantes/{luis.id}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert emails(client) == ["ana@demo.com"]


def test_deleted_email_can_be_reused(client, store, participante_payload):
    luis = store.participantes[1]
    client.delete(f"/api/participantes/{luis.id}")
    resp = client.post("/api/participantes", json=dict(participante_payload, email="luis@demo.com"))
    assert resp.status_code == 201


def test_delete_participante_not_found(client):
    resp = client.delete("/api/participantes/unknown-id")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Participante no encontrado"}


# --- workshop delete leaves orphans ---

def test_deleting_taller_orphans_participants(client, store, taller_id):
    assert client.delete(f"/api/talleres/{taller_id}").status_code == 204
    participantes = client.get("/api/participantes").json()
    assert len(participantes) == 2
    assert all(p["tallerId"] == taller_id for p in participantes)


def test_orphan_update_fails_until_reassigned(client, store, taller_id):
    ana = store.participantes[0]
    client.delete(f"/api/talleres/{taller_id}")
    resp = client.put(f"/api/participantes/{ana.id}", json={"telefono": "123"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "El tallerId proporcionado no existe."}
    other = store.talleres[0].id
    resp = client.put(f"/api/participantes/{ana.id}", json={"telefono": "123", "tallerId": other})
    assert resp.status_code == 200
    assert resp.json()["tallerId"] == other
