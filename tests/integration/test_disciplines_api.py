def _discipline(client, name="Long Jump", result_type="multiple_times", aggregation_method="best_result"):
    r = client.post(
        "/disciplines/",
        json={"name": name, "result_type": result_type, "aggregation_method": aggregation_method},
    )
    assert r.status_code == 201, r.text
    return r.json()


def _child(client, name="Kid"):
    r = client.post("/children/", json={"name": name, "birth_date": "2016-03-03", "gender": "male"})
    assert r.status_code == 201, r.text
    return r.json()


def test_disciplines_crud_flow(client):
    d = _discipline(client)
    assert d["result_type"] == "multiple_times"
    assert d["aggregation_method"] == "best_result"

    r_update = client.put(f"/disciplines/{d['id']}", json={"aggregation_method": "mean"})
    assert r_update.status_code == 200
    assert r_update.json()["aggregation_method"] == "mean"
    assert r_update.json()["name"] == "Long Jump"

    r_delete = client.delete(f"/disciplines/{d['id']}")
    assert r_delete.status_code == 200
    assert r_delete.json()["id"] == d["id"]
    assert r_delete.json()["name"] == "Long Jump"

    assert client.get(f"/disciplines/{d['id']}").status_code == 404
    assert client.delete(f"/disciplines/{d['id']}").status_code == 404
    assert client.put(f"/disciplines/{d['id']}", json={"name": "X"}).status_code == 404


def test_disciplines_listed_in_creation_order(client):
    for name in ["Sprint", "Archery", "Sit-ups"]:
        _discipline(client, name=name)
    assert [d["name"] for d in client.get("/disciplines/").json()] == ["Sprint", "Archery", "Sit-ups"]


def test_discipline_enum_validation(client):
    r = client.post(
        "/disciplines/",
        json={"name": "Chess", "result_type": "one_time", "aggregation_method": "median"},
    )
    assert r.status_code == 422
    r = client.post(
        "/disciplines/",
        json={"name": "Chess", "result_type": "elo", "aggregation_method": "sum"},
    )
    assert r.status_code == 422


def test_assignment_flow(client):
    d = _discipline(client)
    child = _child(client)

    r_assign = client.post(f"/disciplines/{d['id']}/children/{child['id']}")
    assert r_assign.status_code == 201
    assert r_assign.json()["discipline_id"] == d["id"]

    assert client.post(f"/disciplines/{d['id']}/children/{child['id']}").status_code == 409

    detail = client.get(f"/disciplines/{d['id']}/children").json()
    assert [c["name"] for c in detail["children"]] == ["Kid"]

    r_remove = client.delete(f"/disciplines/{d['id']}/children/{child['id']}")
    assert r_remove.status_code == 200
    assert r_remove.json()["child_id"] == child["id"]

    assert client.delete(f"/disciplines/{d['id']}/children/{child['id']}").status_code == 404


def test_assignment_requires_existing_rows(client):
    d = _discipline(client)
    child = _child(client)
    assert client.post(f"/disciplines/{d['id']}/children/9999").status_code == 404
    assert client.post(f"/disciplines/9999/children/{child['id']}").status_code == 404
    assert client.get("/disciplines/9999/children").status_code == 404
