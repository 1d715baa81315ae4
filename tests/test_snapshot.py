import json
from typing import Any

import pytest
from pydantic import BaseModel

from exceptions import SerializationFailedError
from schemas import ATMRead, EntityKind, ServiceRead
from snapshot import build_snapshot, serialize_snapshot


def test_build_snapshot_returns_rows_in_store_order(repo):
    repo.add_service("Gas")
    names = [s.name for s in build_snapshot(repo, EntityKind.SERVICES)]
    assert names == ["Mobile", "Internet", "Water", "Gas"]


def test_serialize_keeps_field_order():
    data = serialize_snapshot([ATMRead(id=1, city="Dushanbe", district="Sino", street="Rudaki 10")])
    text = data.decode("utf-8")
    assert text.index('"id"') < text.index('"city"') < text.index('"district"') < text.index('"street"')
    assert json.loads(data) == [{"id": 1, "city": "Dushanbe", "district": "Sino", "street": "Rudaki 10"}]


def test_serialize_is_indented_and_deterministic():
    records = [ServiceRead(id=1, name="Water", balance=0), ServiceRead(id=2, name="Gas", balance=15)]
    data = serialize_snapshot(records)
    assert data == serialize_snapshot(list(records))
    assert b'\n   {\n      "id": 1,' in data


def test_serialize_empty_table():
    assert serialize_snapshot([]) == b"[]"


def test_serialize_keeps_non_ascii_text():
    data = serialize_snapshot([ATMRead(id=1, city="Душанбе", district="Сино", street="Рудаки")])
    assert "Душанбе".encode("utf-8") in data


def test_card_snapshot_carries_large_pans(repo):
    data = serialize_snapshot(build_snapshot(repo, EntityKind.CARDS))
    assert json.loads(data)[0]["pan"] == 2021600000000000


class Opaque(BaseModel):
    value: Any


def test_unserializable_record_raises_serialization_error():
    with pytest.raises(SerializationFailedError):
        serialize_snapshot([Opaque(value=object())])
