"""
Unit tests using FastAPI TestClient (no separate server needed).
"""

from urllib.parse import quote

import pytest
from fastapi.testclient import TestClient

from worddict import config
from worddict.server.deps import open_dictionary, get_dictionary
from worddict.server.main import app


@pytest.fixture
def path(tmp_path, monkeypatch):
    path = tmp_path / "dictionary.db"
    monkeypatch.setattr(config, "DICTIONARY_PATH", path)
    return path


@pytest.fixture
def client(path):
    open_dictionary()
    return TestClient(app)


@pytest.fixture
def seeded(client):
    for left, right in [("Althasol", "阿爾瑟索"), ("Aldun", "奧爾敦"), ("Alduin", "阿爾杜因"), ("Alduin", "奥杜因")]:
        r = client.post("/api/dictionary/entries", json={"left": left, "right": right})
        assert r.status_code == 200
    return client


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "worddict API"


class TestEntries:
    def test_create_and_extend(self, client):
        r = client.post("/api/dictionary/entries", json={"left": "Alduin", "right": "阿爾杜因"})
        assert r.status_code == 200
        assert r.json()["created"] is True

        r = client.post("/api/dictionary/entries", json={"left": "alduin", "right": "奥杜因"})
        assert r.status_code == 200
        data = r.json()
        assert data["created"] is False
        assert data["entry"]["left"] == "Alduin"
        assert data["entry"]["history"] == ["阿爾杜因", "奥杜因"]

    def test_persisted(self, seeded, path):
        assert path.read_text(encoding="utf-8").splitlines()[0] == "Alduin = 阿爾杜因 --> 奥杜因"

    def test_duplicate(self, seeded):
        r = seeded.post("/api/dictionary/entries", json={"left": "Alduin", "right": "奥杜因"})
        assert r.status_code == 409

    def test_rejections(self, client):
        for left, right in [("a", "a"), ("a=b", "c"), ("a", "b --> c")]:
            r = client.post("/api/dictionary/entries", json={"left": left, "right": right})
            assert r.status_code == 400
        assert get_dictionary().count() == 0

    def test_get_entry(self, seeded):
        r = seeded.get("/api/dictionary/entries/ALDUIN")
        assert r.status_code == 200
        entry = r.json()
        assert entry["left"] == "Alduin"
        assert entry["right"] == "奥杜因"

    def test_entry_not_found(self, client):
        r = client.get("/api/dictionary/entries/nonexistent")
        assert r.status_code == 404

    def test_list(self, seeded):
        r = seeded.get("/api/dictionary")
        assert r.status_code == 200
        data = r.json()
        assert data["count"] == 3
        assert [e["left"] for e in data["entries"]] == ["Alduin", "Aldun", "Althasol"]

    @pytest.mark.parametrize("left", ["and/or", "what?", "C#", "a/b/c"])
    def test_terms_with_url_characters(self, client, left):
        r = client.post("/api/dictionary/entries", json={"left": left, "right": "x"})
        assert r.status_code == 200

        url = f"/api/dictionary/entries/{quote(left, safe='')}"
        r = client.get(url)
        assert r.status_code == 200
        assert r.json()["left"] == left

        r = client.delete(url)
        assert r.status_code == 200
        assert r.json()["deleted"] == left
        assert get_dictionary().count() == 0

    def test_delete(self, seeded):
        r = seeded.delete("/api/dictionary/entries/aldun")
        assert r.status_code == 200
        assert r.json()["deleted"] == "Aldun"

        r = seeded.get("/api/dictionary/entries/Aldun")
        assert r.status_code == 404

        r = seeded.delete("/api/dictionary/entries/Aldun")
        assert r.status_code == 404


class TestLookup:
    def test_left_substring(self, seeded):
        r = seeded.get("/api/dictionary/lookup", params={"term": "ald"})
        assert r.status_code == 200
        assert [e["left"] for e in r.json()["entries"]] == ["Alduin", "Aldun"]

    def test_left_exact(self, seeded):
        r = seeded.get("/api/dictionary/lookup", params={"term": "aldun", "exact": True})
        assert r.json()["indices"] == [1]

    def test_right(self, seeded):
        r = seeded.get("/api/dictionary/lookup", params={"term": "阿爾杜因", "side": "right", "exact": True})
        assert [e["left"] for e in r.json()["entries"]] == ["Alduin"]

        r = seeded.get("/api/dictionary/lookup", params={"term": "瑟", "side": "right"})
        assert [e["left"] for e in r.json()["entries"]] == ["Althasol"]

    def test_no_match(self, seeded):
        r = seeded.get("/api/dictionary/lookup", params={"term": "zzz", "side": "right"})
        assert r.json() == {"indices": [], "entries": []}

    def test_bad_side(self, client):
        r = client.get("/api/dictionary/lookup", params={"term": "a", "side": "middle"})
        assert r.status_code == 422


class TestSuggestions:
    def test_empty_dictionary(self, client):
        r = client.get("/api/suggestions", params={"name": "al"})
        assert r.status_code == 200
        assert r.json() == {}

    def test_pairs(self, seeded):
        r = seeded.get("/api/suggestions", params={"name": "ald"})
        assert r.json() == {
            "Alduin": ["阿爾杜因", "奥杜因"],
            "Aldun": ["奧爾敦"],
        }


class TestReload:
    def test_reload(self, client, path):
        path.write_text("cat = 貓\ndog = 狗", encoding="utf-8")
        r = client.post("/api/dictionary/reload")
        assert r.status_code == 200
        assert r.json()["count"] == 2

    def test_broken_file_keeps_current_table(self, seeded, path):
        path.write_text("cat = 貓\ncat = 猫", encoding="utf-8")
        r = seeded.post("/api/dictionary/reload")
        assert r.status_code == 422
        assert "line 2" in r.json()["detail"]
        assert get_dictionary().count() == 3
