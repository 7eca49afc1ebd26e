"""Tests for investsmart.records.store."""

import gc
import json
import threading
import weakref
from dataclasses import dataclass

import pytest
from loguru import logger

from investsmart.core.exceptions import RecordError, StorageError
from investsmart.core.storage import InMemoryStore, LocalStore
from investsmart.records import Holding, Lead, MonotonicIdGenerator, RecordStore


@pytest.fixture
def leads(memory_store):
    return RecordStore(Lead, memory_store, "invest_leads")


class TestAddRemoveList:
    def test_starts_empty(self, leads):
        assert leads.list() == []
        assert len(leads) == 0

    def test_add_prepends_and_persists(self, leads, memory_store):
        first = leads.add(name="Asha", email="asha@example.com")
        second = leads.add(name="Ravi")

        assert [lead.id for lead in leads.list()] == [second.id, first.id]
        stored = json.loads(memory_store.get("invest_leads"))
        assert [entry["id"] for entry in stored] == [second.id, first.id]
        assert stored[1]["email"] == "asha@example.com"

    def test_add_sequence_properties(self, leads):
        for i in range(25):
            before = len(leads)
            lead = leads.add(name=f"Lead {i}")
            assert len(leads) == before + 1
            assert leads.get(lead.id) == lead
        ids = [lead.id for lead in leads.list()]
        assert len(set(ids)) == len(ids)

    def test_remove(self, leads, memory_store):
        keep = leads.add(name="Keep")
        drop = leads.add(name="Drop")

        assert leads.remove(drop.id) is True
        assert [lead.id for lead in leads.list()] == [keep.id]
        assert leads.get(drop.id) is None
        assert [e["id"] for e in json.loads(memory_store.get("invest_leads"))] == [keep.id]

    def test_remove_missing_is_noop(self, leads):
        leads.add(name="Only")
        assert leads.remove(12345) is False
        assert len(leads) == 1

    def test_remove_on_empty_store(self, leads, memory_store):
        assert leads.remove(1) is False
        assert json.loads(memory_store.get("invest_leads")) == []

    def test_list_returns_copy(self, leads):
        leads.add(name="A")
        snapshot = leads.list()
        snapshot.clear()
        assert len(leads) == 1

    def test_iteration_order(self, leads):
        a = leads.add(name="A")
        b = leads.add(name="B")
        assert [r.id for r in leads] == [b.id, a.id]

    def test_bad_fields_raise_record_error(self, leads, memory_store):
        with pytest.raises(RecordError, match="Lead"):
            leads.add(name="A", favourite_colour="blue")
        assert len(leads) == 0
        assert memory_store.get("invest_leads") is None

    def test_holdings_collection(self, memory_store):
        holdings = RecordStore(Holding, memory_store, "invest_holdings")
        h = holdings.add(name="NIFTY ETF", invested="10000", current=12_000)
        assert h.invested == 10_000.0
        assert json.loads(memory_store.get("invest_holdings"))[0] == {
            "name": "NIFTY ETF",
            "invested": 10_000.0,
            "current": 12_000.0,
            "id": h.id,
        }


class TestIds:
    def test_rapid_adds_get_unique_ids(self, memory_store):
        frozen = MonotonicIdGenerator(clock=lambda: 1_000.0)
        store = RecordStore(Lead, memory_store, "invest_leads", id_generator=frozen)
        ids = [store.add(name=str(i)).id for i in range(50)]
        assert len(set(ids)) == 50

    def test_ids_not_reused_after_reload(self, memory_store):
        memory_store.set(
            "invest_leads",
            json.dumps([{"name": "Old", "email": "", "phone": "", "note": "", "id": 9_000_000, "created_at": ""}]),
        )
        store = RecordStore(Lead, memory_store, "invest_leads", id_generator=MonotonicIdGenerator(clock=lambda: 1.0))
        assert store.add(name="New").id == 9_000_001

    def test_removed_id_not_reused(self, memory_store):
        store = RecordStore(Lead, memory_store, "invest_leads", id_generator=MonotonicIdGenerator(clock=lambda: 1.0))
        lead = store.add(name="A")
        store.remove(lead.id)
        assert store.add(name="B").id != lead.id


class TestLoad:
    def test_round_trip(self, memory_store):
        store = RecordStore(Lead, memory_store, "invest_leads")
        store.add(name="Asha", email="asha@example.com", phone="98200", note="SIP enquiry")
        store.add(name="Ravi", note="Wants a call, after 6pm")

        reloaded = RecordStore(Lead, memory_store, "invest_leads")
        assert reloaded.list() == store.list()

    def test_round_trip_local_store(self, tmp_path):
        provider = LocalStore(base_path=str(tmp_path))
        store = RecordStore(Holding, provider, "invest_holdings")
        store.add(name="Gold", invested=5_000, current=5_250.75)

        reloaded = RecordStore(Holding, LocalStore(base_path=str(tmp_path)), "invest_holdings")
        assert reloaded.list() == store.list()

    def test_load_picks_up_external_changes(self, memory_store, leads):
        other = RecordStore(Lead, memory_store, "invest_leads")
        other.add(name="Elsewhere")
        assert len(leads) == 0
        assert len(leads.load()) == 1

    @pytest.mark.parametrize(
        "blob",
        [
            "not json at all",
            "{}",
            '"a string"',
            "[1, 2, 3]",
            '[{"name": "x"}]',
            '[{"name": "x", "email": "", "phone": "", "note": "", "id": "abc", "created_at": ""}]',
            '[{"name": "x", "email": "", "phone": "", "note": "", "id": 1, "created_at": "", "extra": 1}]',
            pytest.param("[" * 100_000 + "]" * 100_000, id="deeply-nested-array"),
        ],
    )
    def test_malformed_blob_resets_to_empty(self, blob):
        provider = InMemoryStore({"invest_leads": blob})
        store = RecordStore(Lead, provider, "invest_leads")
        assert store.list() == []

    def test_duplicate_ids_reset_to_empty(self):
        entry = {"name": "x", "email": "", "phone": "", "note": "", "id": 1, "created_at": ""}
        provider = InMemoryStore({"invest_leads": json.dumps([entry, entry])})
        assert RecordStore(Lead, provider, "invest_leads").list() == []

    def test_reset_is_logged(self):
        messages = []
        handler_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            RecordStore(Lead, InMemoryStore({"invest_leads": "garbage"}), "invest_leads")
        finally:
            logger.remove(handler_id)
        assert any("invest_leads" in m for m in messages)

    def test_recovers_after_reset(self):
        provider = InMemoryStore({"invest_leads": "garbage"})
        store = RecordStore(Lead, provider, "invest_leads")
        store.add(name="Fresh")
        assert len(json.loads(provider.get("invest_leads"))) == 1

    def test_unreadable_provider_loads_empty(self):
        class BrokenRead(InMemoryStore):
            def get(self, key):
                raise StorageError("disk on fire")

        assert RecordStore(Lead, BrokenRead(), "invest_leads").list() == []


class TestPersistFailure:
    def test_failed_write_leaves_collection_unchanged(self):
        class ReadOnly(InMemoryStore):
            def set(self, key, value):
                raise StorageError("read-only")

        store = RecordStore(Lead, ReadOnly(), "invest_leads")
        with pytest.raises(StorageError):
            store.add(name="Lost")
        assert store.list() == []


class TestConstruction:
    def test_requires_dataclass_with_id(self, memory_store):
        @dataclass
        class NoId:
            name: str

        with pytest.raises(TypeError, match="'id'"):
            RecordStore(NoId, memory_store, "x")

    def test_requires_create(self, memory_store):
        @dataclass
        class NoCreate:
            id: int

        with pytest.raises(TypeError, match="create"):
            RecordStore(NoCreate, memory_store, "x")

    def test_repr(self, leads):
        assert "Lead" in repr(leads)
        assert "invest_leads" in repr(leads)


class TestConcurrency:
    def test_concurrent_adds_serialize(self, memory_store):
        store = RecordStore(Lead, memory_store, "invest_leads")

        def worker(n):
            for i in range(20):
                store.add(name=f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 100
        persisted = json.loads(memory_store.get("invest_leads"))
        assert len(persisted) == 100
        assert len({e["id"] for e in persisted}) == 100

    def test_lock_does_not_keep_provider_alive(self):
        provider = InMemoryStore()
        RecordStore(Lead, provider, "invest_leads").add(name="A")
        ref = weakref.ref(provider)

        del provider
        gc.collect()
        assert ref() is None


class TestSharedCollection:
    """Two stores over the same provider and key behave as one collection."""

    @pytest.fixture
    def frozen_clock(self):
        return lambda: 1_000.0

    def test_sequential_adds_get_distinct_ids(self, memory_store, frozen_clock):
        first = RecordStore(Lead, memory_store, "invest_leads", MonotonicIdGenerator(clock=frozen_clock))
        second = RecordStore(Lead, memory_store, "invest_leads", MonotonicIdGenerator(clock=frozen_clock))

        a = first.add(name="From first")
        b = second.add(name="From second")

        assert a.id != b.id
        persisted = json.loads(memory_store.get("invest_leads"))
        assert [e["id"] for e in persisted] == [b.id, a.id]

    def test_add_keeps_records_from_other_store(self, tmp_path):
        first = RecordStore(Holding, LocalStore(base_path=str(tmp_path)), "invest_holdings")
        second = RecordStore(Holding, LocalStore(base_path=str(tmp_path)), "invest_holdings")

        first.add(name="Gold", invested=5_000, current=5_100)
        second.add(name="Silver", invested=2_000, current=1_900)

        reloaded = RecordStore(Holding, LocalStore(base_path=str(tmp_path)), "invest_holdings")
        assert [h.name for h in reloaded] == ["Silver", "Gold"]
        assert [h.name for h in second] == ["Silver", "Gold"]

    def test_remove_keeps_records_from_other_store(self, memory_store):
        first = RecordStore(Lead, memory_store, "invest_leads")
        second = RecordStore(Lead, memory_store, "invest_leads")

        doomed = first.add(name="Doomed")
        survivor = second.add(name="Survivor")

        assert first.remove(doomed.id) is True
        assert [lead.id for lead in first.list()] == [survivor.id]
        assert [e["id"] for e in json.loads(memory_store.get("invest_leads"))] == [survivor.id]

    def test_remove_sees_record_added_elsewhere(self, memory_store):
        first = RecordStore(Lead, memory_store, "invest_leads")
        second = RecordStore(Lead, memory_store, "invest_leads")

        lead = second.add(name="Added via second")
        assert first.remove(lead.id) is True
        assert json.loads(memory_store.get("invest_leads")) == []

    def test_concurrent_adds_across_stores(self, memory_store):
        stores = [RecordStore(Lead, memory_store, "invest_leads") for _ in range(4)]

        def worker(store, n):
            for i in range(10):
                store.add(name=f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(s, n)) for n, s in enumerate(stores)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        persisted = json.loads(memory_store.get("invest_leads"))
        assert len(persisted) == 40
        assert len({e["id"] for e in persisted}) == 40
