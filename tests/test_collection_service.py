"""
CRUD use cases against a temporary collection file.
"""
from __future__ import annotations

import itertools
import json
import sys
from pathlib import Path

import pytest

# Makes the mockapi package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mockapi.repositories.json_storage import JsonCollectionStore  # noqa: E402
from mockapi.services.collection_service import (  # noqa: E402
    CollectionService,
    RecordNotFoundError,
    timestamp_id,
)


@pytest.fixture()
def service(tmp_path):
    path = tmp_path / "cars.json"
    path.write_text("[]", encoding="utf-8")
    counter = itertools.count(1000)
    return CollectionService("cars", JsonCollectionStore(path), id_factory=lambda: str(next(counter)))


def _on_disk(svc: CollectionService) -> list:
    return json.loads(svc.store.path.read_text(encoding="utf-8"))


def test_timestamp_id_is_numeric_string():
    value = timestamp_id()
    assert isinstance(value, str)
    assert value.isdigit()


def test_create_then_get(service):
    created = service.create({"make": "Toyota"})
    assert created == {"make": "Toyota", "id": "1000"}
    assert service.get("1000") == created
    assert _on_disk(service) == [created]


def test_create_overwrites_client_id(service):
    created = service.create({"id": "mine", "make": "Ford"})
    assert created["id"] == "1000"
    with pytest.raises(RecordNotFoundError):
        service.get("mine")


def test_create_does_not_mutate_payload(service):
    payload = {"make": "Honda"}
    service.create(payload)
    assert payload == {"make": "Honda"}


def test_list_preserves_insertion_order(service):
    for i in range(12):
        service.create({"n": i})
    page = service.list(page=2, limit=5)
    assert [r["n"] for r in page.data] == [5, 6, 7, 8, 9]
    assert page.total_items == 12


def test_get_unknown_raises(service):
    with pytest.raises(RecordNotFoundError) as err:
        service.get("doesnotexist")
    assert err.value.collection == "cars"
    assert err.value.record_id == "doesnotexist"


def test_update_shallow_merges(service):
    service.create({"make": "Toyota", "model": "Corolla", "extras": {"gps": True}})
    updated = service.update("1000", {"model": "Camry", "extras": {"sunroof": True}})
    assert updated == {"make": "Toyota", "model": "Camry", "extras": {"sunroof": True}, "id": "1000"}
    assert service.get("1000") == updated


def test_update_can_reassign_id(service):
    service.create({"make": "Toyota"})
    updated = service.update("1000", {"id": "renamed"})
    assert updated["id"] == "renamed"
    assert service.get("renamed")["make"] == "Toyota"
    with pytest.raises(RecordNotFoundError):
        service.get("1000")


def test_update_unknown_raises(service):
    with pytest.raises(RecordNotFoundError):
        service.update("nope", {"make": "Kia"})
    assert _on_disk(service) == []


def test_delete_then_get_raises(service):
    service.create({"make": "Toyota"})
    service.create({"make": "Ford"})
    service.delete("1000")
    with pytest.raises(RecordNotFoundError):
        service.get("1000")
    assert _on_disk(service) == [{"make": "Ford", "id": "1001"}]


def test_delete_unknown_leaves_collection_unchanged(service):
    service.create({"make": "Toyota"})
    before = service.store.path.read_text(encoding="utf-8")
    with pytest.raises(RecordNotFoundError):
        service.delete("nope")
    assert service.store.path.read_text(encoding="utf-8") == before


def test_interleaved_writers_last_save_wins(tmp_path):
    path = tmp_path / "cars.json"
    path.write_text('[{"id": "1", "make": "Toyota", "model": "Corolla"}]', encoding="utf-8")
    store = JsonCollectionStore(path)
    first = store.load()
    second = store.load()
    first[0]["make"] = "Honda"
    second[0]["model"] = "Camry"
    store.save(first)
    store.save(second)
    assert store.load() == [{"id": "1", "make": "Toyota", "model": "Camry"}]
