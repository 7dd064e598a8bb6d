"""Unit tests for the JSON-file stores."""

import json
import threading
from datetime import datetime

import pytest

from stockdesk.services import store_service
from stockdesk.services.store_service import (
    AlertStore,
    BlogStore,
    JsonStore,
    PersistenceError,
    RecordNotFound,
)


@pytest.fixture
def store(tmp_path):
    s = JsonStore(str(tmp_path / "checklists.json"))
    s.ensure_file()
    return s


def _read(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def test_ensure_file_creates_empty_array(tmp_path):
    s = JsonStore(str(tmp_path / "nested" / "things.json"))
    s.ensure_file()
    assert _read(s.path) == []
    assert s.name == "things"


def test_ensure_file_keeps_existing_data(tmp_path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps([{"id": 1}]), encoding="utf-8")
    s = JsonStore(str(path))
    s.ensure_file()
    assert s.list() == [{"id": 1}]


def test_list_missing_file_is_empty(tmp_path):
    assert JsonStore(str(tmp_path / "nope.json")).list() == []


def test_list_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "c.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonStore(str(path)).list() == []


def test_list_non_array_is_empty(tmp_path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")
    assert JsonStore(str(path)).list() == []


def test_create_assigns_server_fields(store):
    rec = store.create({"title": "t1", "id": 42, "createdAt": "1999-01-01T00:00:00.000Z"})
    assert rec["title"] == "t1"
    assert isinstance(rec["id"], int) and rec["id"] > 42
    assert rec["createdAt"] != "1999-01-01T00:00:00.000Z"
    datetime.strptime(rec["createdAt"], "%Y-%m-%dT%H:%M:%S.%fZ")
    assert store.list() == [rec]


def test_create_ids_are_unique(store):
    ids = [store.create({"n": i})["id"] for i in range(5)]
    assert len(set(ids)) == 5
    assert [r["n"] for r in store.list()] == [0, 1, 2, 3, 4]


def test_update_shallow_merges(store):
    rec = store.create({"title": "t1", "items": ["a"], "done": False})
    updated = store.update(rec["id"], {"done": True, "items": ["b"]})
    assert updated["title"] == "t1"
    assert updated["done"] is True
    assert updated["items"] == ["b"]
    assert "updatedAt" in updated
    assert store.list() == [updated]


def test_update_keeps_id_and_created_at(store):
    rec = store.create({"title": "t1"})
    updated = store.update(rec["id"], {"id": 1, "createdAt": "x"})
    assert updated["id"] == rec["id"]
    assert updated["createdAt"] == rec["createdAt"]


def test_update_missing_raises(store):
    store.create({"title": "t1"})
    with pytest.raises(RecordNotFound):
        store.update(999999, {"title": "x"})


def test_get(store):
    rec = store.create({"title": "t1"})
    assert store.get(rec["id"]) == rec
    with pytest.raises(RecordNotFound):
        store.get(rec["id"] + 1000)


def test_delete_removes_exactly_one(store):
    a = store.create({"title": "a"})
    b = store.create({"title": "b"})
    removed = store.delete(a["id"])
    assert removed == a
    assert store.list() == [b]


def test_delete_missing_raises_and_keeps_file(store):
    a = store.create({"title": "a"})
    with pytest.raises(RecordNotFound):
        store.delete(a["id"] + 1000)
    assert store.list() == [a]


def test_write_failure_raises_persistence_error(store, monkeypatch):
    def boom(file_path, data):
        raise OSError("disk full")

    monkeypatch.setattr(store_service, "write_json", boom)
    with pytest.raises(PersistenceError) as exc:
        store.create({"title": "t1"})
    assert isinstance(exc.value.cause, OSError)
    assert store.list() == []


def test_alert_status_forced_active(tmp_path):
    s = AlertStore(str(tmp_path / "alerts.json"))
    rec = s.create({"ticker": "AAPL", "status": "triggered"})
    assert rec["status"] == "active"
    updated = s.update(rec["id"], {"status": "triggered"})
    assert updated["status"] == "triggered"


def test_blog_defaults_and_read_time(tmp_path):
    s = BlogStore(str(tmp_path / "blog.json"), default_author="Desk")
    post = s.create({"title": "no content"})
    assert post["author"] == "Desk"
    assert post["readTime"] == 5

    long_post = s.create({"title": "long", "content": "word " * 1000, "author": "Dana"})
    assert long_post["author"] == "Dana"
    assert long_post["readTime"] == 5

    short = s.create({"content": "word " * 201})
    assert short["readTime"] == 2


def test_blog_read_time_recomputed_only_with_content(tmp_path):
    s = BlogStore(str(tmp_path / "blog.json"))
    post = s.create({"content": "word " * 900})
    assert post["readTime"] == 5
    retitled = s.update(post["id"], {"title": "new"})
    assert retitled["readTime"] == 5
    longer = s.update(post["id"], {"content": "word " * 1401})
    assert longer["readTime"] == 8


def test_blog_list_newest_first(tmp_path):
    path = tmp_path / "blog.json"
    posts = [
        {"id": 1, "title": "old", "createdAt": "2024-01-01T00:00:00.000Z"},
        {"id": 3, "title": "newest", "createdAt": "2024-03-01T00:00:00.000Z"},
        {"id": 2, "title": "middle", "createdAt": "2024-02-01T00:00:00.000Z"},
    ]
    path.write_text(json.dumps(posts), encoding="utf-8")
    s = BlogStore(str(path))
    assert [p["title"] for p in s.list()] == ["newest", "middle", "old"]
    # File order is untouched
    assert [p["id"] for p in _read(path)] == [1, 3, 2]


def test_concurrent_creates_keep_every_record(store):
    n_threads, per_thread = 8, 20
    start = threading.Barrier(n_threads)

    def worker(n):
        start.wait()
        for i in range(per_thread):
            store.create({"worker": n, "seq": i})

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    records = store.list()
    assert len(records) == n_threads * per_thread
    assert len({r["id"] for r in records}) == n_threads * per_thread


def test_blog_null_author_gets_default(tmp_path):
    s = BlogStore(str(tmp_path / "blog.json"), default_author="Desk")
    assert s.create({"title": "t", "author": None})["author"] == "Desk"
    assert s.create({"title": "t", "author": ""})["author"] == "Desk"
