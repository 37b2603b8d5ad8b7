import pytest


def _create_child(client, name="Ana", birth_date="2015-06-01", gender="female"):
    r = client.post("/children/", json={"name": name, "birth_date": birth_date, "gender": gender})
    assert r.status_code == 201, r.text
    return r.json()


def test_healthcheck(client):
    r = client.get("/healthcheck")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["timestamp"]


def test_children_crud_flow(client):
    child = _create_child(client)
    assert child["name"] == "Ana"
    assert child["gender"] == "female"
    assert child["birth_date"] == "2015-06-01"
    child_id = child["id"]

    r_get = client.get(f"/children/{child_id}")
    assert r_get.status_code == 200
    assert r_get.json()["name"] == "Ana"

    r_update = client.put(f"/children/{child_id}", json={"name": "Ana Maria"})
    assert r_update.status_code == 200
    updated = r_update.json()
    assert updated["name"] == "Ana Maria"
    # untouched fields survive a partial update
    assert updated["gender"] == "female"
    assert updated["birth_date"] == "2015-06-01"

    r_del = client.delete(f"/children/{child_id}")
    assert r_del.status_code == 200
    assert r_del.json() == {"success": True}

    assert client.get(f"/children/{child_id}").status_code == 404


def test_delete_missing_child_reports_failure(client):
    r = client.delete("/children/9999")
    assert r.status_code == 200
    assert r.json() == {"success": False}


def test_update_missing_child_is_404(client):
    r = client.put("/children/9999", json={"name": "Ghost"})
    assert r.status_code == 404


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "birth_date": "2015-06-01", "gender": "male"},
        {"name": "Bo", "birth_date": "2015-06-01", "gender": "robot"},
        {"name": "Bo", "gender": "male"},
    ],
)
def test_create_child_validation(client, payload):
    assert client.post("/children/", json=payload).status_code == 422


def test_list_children_filters(client):
    _create_child(client, name="Anna Smith", birth_date="2014-01-01", gender="female")
    _create_child(client, name="Johann", birth_date="2015-02-02", gender="male")
    _create_child(client, name="Joanna", birth_date="2014-01-01", gender="other")

    all_children = client.get("/children/").json()
    assert len(all_children) == 3

    by_name = client.get("/children/", params={"name": "ANN"}).json()
    assert sorted(c["name"] for c in by_name) == ["Anna Smith", "Joanna", "Johann"]

    by_date = client.get("/children/", params={"birth_date": "2014-01-01"}).json()
    assert sorted(c["name"] for c in by_date) == ["Anna Smith", "Joanna"]

    by_gender = client.get("/children/", params={"gender": "male"}).json()
    assert [c["name"] for c in by_gender] == ["Johann"]

    combined = client.get("/children/", params={"name": "jo", "birth_date": "2014-01-01"}).json()
    assert [c["name"] for c in combined] == ["Joanna"]


def test_child_detail_views(client):
    child = _create_child(client)
    group = client.post("/groups/", json={"name": "Eagles"}).json()
    discipline = client.post(
        "/disciplines/",
        json={"name": "Long Jump", "result_type": "multiple_times", "aggregation_method": "best_result"},
    ).json()

    assert client.post(f"/groups/{group['id']}/children/{child['id']}").status_code == 201
    assert client.post(f"/disciplines/{discipline['id']}/children/{child['id']}").status_code == 201

    with_groups = client.get(f"/children/{child['id']}/groups").json()
    assert [g["name"] for g in with_groups["groups"]] == ["Eagles"]
    assert with_groups["name"] == "Ana"

    with_disciplines = client.get(f"/children/{child['id']}/disciplines").json()
    assert [d["name"] for d in with_disciplines["disciplines"]] == ["Long Jump"]

    assert client.get("/children/9999/groups").status_code == 404
    assert client.get("/children/9999/disciplines").status_code == 404
