import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

from student_api.core.exceptions import StorageError

ALICE = {
    "name": "Alice Johnson",
    "class": "Grade 10",
    "age": 15,
    "email": "alice@example.com",
    "phone_number": "1234567890",
    "nationality": "American",
}
BOB = {
    "name": "Bob Smith",
    "class": "Grade 12",
    "age": 17,
    "email": "bob@example.com",
    "phone_number": "0987654321",
    "nationality": "British",
}


def drop_table(client):
    with client.app.state.storage.engine.begin() as conn:
        conn.execute(text("DROP TABLE students"))


@pytest.mark.parametrize("path,expected", [
    ("/", "Student API - Welcome to !"),
    ("/hello", "Student API - Welcome to hello!"),
    ("/students/", "Student API - Welcome to students/!"),
])
def test_welcome_echoes_path(client, path, expected):
    response = client.get(path)
    assert response.status_code == 200
    assert response.text == expected
    assert response.headers["content-type"].startswith("text/plain")


def test_welcome_answers_any_method(client):
    response = client.post("/anything")
    assert response.status_code == 200
    assert response.text == "Student API - Welcome to anything!"


def test_list_empty_table_is_empty_array(client):
    response = client.get("/students")
    assert response.status_code == 200
    assert response.text == "[]"


def test_list_seeded_students(seeded_client):
    response = seeded_client.get("/students")
    assert response.status_code == 200
    students = response.json()
    assert len(students) == 3
    assert ALICE in students
    assert all("id" not in s for s in students)


def test_list_failure_is_500_with_error_text(client):
    drop_table(client)
    response = client.get("/students")
    assert response.status_code == 500
    assert "no such table" in response.text


def test_add_echoes_record_and_lists_it(client):
    response = client.post("/addStudents", json=ALICE)
    assert response.status_code == 200
    assert response.json() == ALICE
    assert client.get("/students").json() == [ALICE]


def test_add_with_missing_fields_uses_zero_values(client):
    response = client.post("/addStudents", json={"name": "Dana"})
    expected = {"name": "Dana", "class": "", "age": 0, "email": "", "phone_number": "", "nationality": ""}
    assert response.status_code == 200
    assert response.json() == expected
    assert client.get("/students").json() == [expected]


def test_add_accepts_any_method(client):
    response = client.put("/addStudents", json=BOB)
    assert response.status_code == 200
    assert client.get("/students").json() == [BOB]


@pytest.mark.parametrize("body", [b"{not json", b"", b'{"age": "old"}'])
def test_add_malformed_body_is_400_and_inserts_nothing(seeded_client, body):
    response = seeded_client.post("/addStudents", content=body)
    assert response.status_code == 400
    assert response.text == "Invalid request payload"
    assert len(seeded_client.get("/students").json()) == 3


def test_add_get_without_body_is_400(client):
    response = client.get("/addStudents")
    assert response.status_code == 400


def test_add_failure_is_500(client):
    drop_table(client)
    response = client.post("/addStudents", json=ALICE)
    assert response.status_code == 500
    assert response.text == "Error inserting into database"


def test_search_by_nationality(seeded_client):
    response = seeded_client.get("/search", params={"nationality": "Brit"})
    assert response.status_code == 200
    assert response.json() == [BOB]


def test_search_by_name_after_add(client):
    client.post("/addStudents", json=ALICE)
    response = client.get("/search", params={"name": "Alice"})
    assert response.json() == [ALICE]


def test_search_without_params_equals_list(seeded_client):
    searched = seeded_client.get("/search").json()
    listed = seeded_client.get("/students").json()
    key = lambda s: s["name"]
    assert sorted(searched, key=key) == sorted(listed, key=key)


def test_search_no_match_is_empty_array(seeded_client):
    response = seeded_client.get("/search", params={"name": "Zed"})
    assert response.status_code == 200
    assert response.text == "[]"


def test_search_failure_is_500(client):
    drop_table(client)
    response = client.get("/search", params={"name": "Alice"})
    assert response.status_code == 500
    assert "no such table" in response.text


def test_restart_reseeds_and_duplicates(database_url, make_client):
    with make_client(database_url, seed=True):
        pass
    with make_client(database_url, seed=True) as c:
        assert len(c.get("/students").json()) == 6


def test_startup_fails_when_database_cannot_open(tmp_path, make_client):
    bad_url = f"sqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}"
    with pytest.raises(StorageError):
        with make_client(bad_url, seed=False):
            pass


@pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "PURGE"])
def test_uncommon_methods_reach_handlers(seeded_client, method):
    response = seeded_client.request(method, "/students")
    assert response.status_code == 200
    assert len(response.json()) == 3

    response = seeded_client.request(method, "/")
    assert response.status_code == 200
    assert response.text == "Student API - Welcome to !"


def test_uncommon_method_on_search(seeded_client):
    response = seeded_client.request("TRACE", "/search", params={"nationality": "Brit"})
    assert response.status_code == 200
    assert response.json() == [BOB]


def test_add_age_beyond_int64_is_400(seeded_client):
    response = seeded_client.post("/addStudents", json={"name": "Big", "age": 2**63})
    assert response.status_code == 400
    assert response.text == "Invalid request payload"
    assert len(seeded_client.get("/students").json()) == 3


def test_add_reporting_zero_rows_is_500(client, monkeypatch):
    class NoRows:
        rowcount = 0

    monkeypatch.setattr(Session, "execute", lambda self, *args, **kwargs: NoRows())
    response = client.post("/addStudents", json=ALICE)
    monkeypatch.undo()

    assert response.status_code == 500
    assert response.text == "No rows inserted"
    assert client.get("/students").json() == []


def test_add_ignores_python_field_name(client):
    response = client.post("/addStudents", json={"name": "Gus", "class_": "G9"})
    assert response.status_code == 200
    assert response.json()["class"] == ""


def test_search_repeated_param_uses_first_value(seeded_client):
    response = seeded_client.get("/search?name=Alice&name=Bob")
    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["Alice Johnson"]
