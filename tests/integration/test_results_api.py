import logging

import pytest


def _child(client, name):
    r = client.post("/children/", json={"name": name, "birth_date": "2015-07-07", "gender": "female"})
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _discipline(client, name, aggregation_method, result_type="multiple_numbers"):
    r = client.post(
        "/disciplines/",
        json={"name": name, "result_type": result_type, "aggregation_method": aggregation_method},
    )
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _record(client, child_id, discipline_id, value, attempt_number=None):
    payload = {"child_id": child_id, "discipline_id": discipline_id, "value": value}
    if attempt_number is not None:
        payload["attempt_number"] = attempt_number
    r = client.post("/results/", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_record_result_defaults_attempt_number(client):
    child_id = _child(client, "Ana")
    discipline_id = _discipline(client, "Sprint", "best_result", result_type="one_time")

    recorded = _record(client, child_id, discipline_id, 12)
    assert recorded["attempt_number"] == 1
    assert recorded["value"] == 12.0
    assert recorded["recorded_at"]


def test_record_result_for_missing_rows_is_404(client):
    child_id = _child(client, "Ana")
    discipline_id = _discipline(client, "Sprint", "best_result")

    r = client.post("/results/", json={"child_id": 9999, "discipline_id": discipline_id, "value": 1})
    assert r.status_code == 404
    r = client.post("/results/", json={"child_id": child_id, "discipline_id": 9999, "value": 1})
    assert r.status_code == 404


@pytest.mark.parametrize(
    "overrides",
    [
        {"value": "NaN"},
        {"value": "Infinity"},
        {"attempt_number": 0},
        {"value": "fast"},
    ],
)
def test_record_result_validation(client, overrides):
    child_id = _child(client, "Ana")
    discipline_id = _discipline(client, "Sprint", "best_result")
    payload = {"child_id": child_id, "discipline_id": discipline_id, "value": 1.5, **overrides}
    assert client.post("/results/", json=payload).status_code == 422


def test_long_jump_best_result_ranking(client):
    a = _child(client, "A")
    b = _child(client, "B")
    jump = _discipline(client, "Long Jump", "best_result", result_type="multiple_times")
    for attempt, value in enumerate([3.2, 4.1, 3.9], start=1):
        _record(client, a, jump, value, attempt)
    _record(client, b, jump, 4.5)

    body = client.get(f"/disciplines/{jump}/results").json()
    assert body["name"] == "Long Jump"
    assert body["aggregation_method"] == "best_result"
    assert body["result_type_label"] == "Multiple Attempts"
    assert body["aggregation_label"] == "Best Result"
    assert body["expects_attempt_number"] is True

    rows = body["results"]
    assert [(r["child_name"], r["aggregated_value"], r["total_attempts"], r["rank"]) for r in rows] == [
        ("B", 4.5, 1, 1),
        ("A", 4.1, 3, 2),
    ]
    assert rows[0]["attempts_label"] == "1 attempt"
    assert rows[1]["attempts_label"] == "3 attempts"
    assert rows[0]["value_label"] == "Best"


def test_situps_sum_and_archery_mean(client):
    b = _child(client, "B")
    c = _child(client, "C")
    situps = _discipline(client, "Sit-ups", "sum", result_type="number")
    archery = _discipline(client, "Archery", "mean")

    _record(client, b, situps, 10)
    _record(client, b, situps, 15)
    for value in [7, 9, 8]:
        _record(client, c, archery, value)

    situps_rows = client.get(f"/disciplines/{situps}/results").json()["results"]
    assert [(r["child_id"], r["aggregated_value"], r["total_attempts"]) for r in situps_rows] == [(b, 25.0, 2)]

    archery_body = client.get(f"/disciplines/{archery}/results").json()
    assert archery_body["aggregation_label"] == "Average"
    assert [(r["child_id"], r["aggregated_value"], r["total_attempts"]) for r in archery_body["results"]] == [
        (c, 8.0, 3)
    ]


def test_discipline_without_results_ranks_nobody(client):
    discipline_id = _discipline(client, "Chess", "sum", result_type="one_time")
    body = client.get(f"/disciplines/{discipline_id}/results").json()
    assert body["results"] == []
    assert body["expects_attempt_number"] is False


def test_results_for_missing_discipline_is_404(client):
    assert client.get("/disciplines/9999/results").status_code == 404


def test_duplicate_attempt_numbers_all_count(client):
    child_id = _child(client, "Ana")
    discipline_id = _discipline(client, "Sit-ups", "sum")
    _record(client, child_id, discipline_id, 10, 1)
    _record(client, child_id, discipline_id, 12, 1)

    rows = client.get(f"/disciplines/{discipline_id}/results").json()["results"]
    assert rows[0]["aggregated_value"] == 22.0
    assert rows[0]["total_attempts"] == 2


def test_changing_method_reranks_existing_results(client):
    steady = _child(client, "Steady")
    spiky = _child(client, "Spiky")
    discipline_id = _discipline(client, "Darts", "best_result")
    for value in [6, 6, 6]:
        _record(client, steady, discipline_id, value)
    for value in [9, 1, 1]:
        _record(client, spiky, discipline_id, value)

    best = client.get(f"/disciplines/{discipline_id}/results").json()["results"]
    assert [r["child_name"] for r in best] == ["Spiky", "Steady"]

    client.put(f"/disciplines/{discipline_id}", json={"aggregation_method": "sum"})
    summed = client.get(f"/disciplines/{discipline_id}/results").json()
    assert summed["aggregation_label"] == "Sum Total"
    assert [(r["child_name"], r["aggregated_value"]) for r in summed["results"]] == [
        ("Steady", 18.0),
        ("Spiky", 11.0),
    ]


def test_ties_keep_first_recorded_child_first(client):
    first = _child(client, "First")
    second = _child(client, "Second")
    discipline_id = _discipline(client, "Sprint", "best_result")
    _record(client, first, discipline_id, 5)
    _record(client, second, discipline_id, 5)

    rows = client.get(f"/disciplines/{discipline_id}/results").json()["results"]
    assert [r["child_name"] for r in rows] == ["First", "Second"]
    # ranks are positional, ties are not collapsed
    assert [r["rank"] for r in rows] == [1, 2]


def test_list_child_results(client):
    child_id = _child(client, "Ana")
    other_id = _child(client, "Bo")
    discipline_id = _discipline(client, "Archery", "mean")
    _record(client, child_id, discipline_id, 7, 1)
    _record(client, child_id, discipline_id, 9, 2)
    _record(client, other_id, discipline_id, 3, 1)

    rows = client.get("/results/", params={"child_id": child_id, "discipline_id": discipline_id}).json()
    assert [(r["value"], r["attempt_number"]) for r in rows] == [(7.0, 1), (9.0, 2)]

    assert client.get("/results/", params={"child_id": child_id}).status_code == 422


def test_deleting_child_removes_its_results_from_ranking(client):
    stays = _child(client, "Stays")
    leaves = _child(client, "Leaves")
    discipline_id = _discipline(client, "Sit-ups", "sum")
    _record(client, stays, discipline_id, 10)
    _record(client, leaves, discipline_id, 30)

    client.delete(f"/children/{leaves}")

    rows = client.get(f"/disciplines/{discipline_id}/results").json()["results"]
    assert [r["child_name"] for r in rows] == ["Stays"]
    assert client.get("/results/", params={"child_id": leaves, "discipline_id": discipline_id}).json() == []


def test_deleting_discipline_removes_its_results(client, db):
    from camp.db import models

    child_id = _child(client, "Ana")
    discipline_id = _discipline(client, "Sit-ups", "sum")
    _record(client, child_id, discipline_id, 10)

    client.delete(f"/disciplines/{discipline_id}")

    assert db.query(models.Measurement).filter_by(discipline_id=discipline_id).count() == 0


@pytest.mark.parametrize("value", [1e308, -1e13])
def test_record_result_rejects_oversized_values(client, value):
    child_id = _child(client, "Ana")
    discipline_id = _discipline(client, "Sit-ups", "sum")
    r = client.post("/results/", json={"child_id": child_id, "discipline_id": discipline_id, "value": value})
    assert r.status_code == 422
    assert client.get("/results/", params={"child_id": child_id, "discipline_id": discipline_id}).json() == []


def test_largest_values_still_rank(client):
    child_id = _child(client, "Ana")
    discipline_id = _discipline(client, "Sit-ups", "mean")
    _record(client, child_id, discipline_id, 1e12)
    _record(client, child_id, discipline_id, 1e12)

    r = client.get(f"/disciplines/{discipline_id}/results")
    assert r.status_code == 200
    assert r.json()["results"][0]["aggregated_value"] == 1e12


def test_not_found_failures_are_logged(client, caplog):
    discipline_id = _discipline(client, "Sit-ups", "sum")
    caplog.set_level(logging.WARNING)

    client.post("/results/", json={"child_id": 9999, "discipline_id": discipline_id, "value": 1})
    client.get("/disciplines/9999/results")

    messages = [rec.getMessage() for rec in caplog.records]
    assert any(m.startswith("record_failed: child_id=9999") for m in messages)
    assert any(m.startswith("ranking_failed: discipline_id=9999") for m in messages)
