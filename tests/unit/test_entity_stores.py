"""Contract tests run against every entity store backend."""

from datetime import timedelta

import pytest

from models import Dwelling, Invoice, Lease, Ledger, Payment, Service, Site, Tenant
from storage import (
    DuplicateEntityError,
    EntityConflictError,
    EntityNotFoundError,
    PersistenceError,
    is_kind,
    where,
)
from utils.currency import DOLLAR

from tests.factories import at, make_term


def full_lease():
    return Lease(
        tenant="Jane",
        site="A1",
        term=make_term(),
        rent=250 * DOLLAR,
        services={
            "rent": Service(credits=[250 * DOLLAR], debits=[250 * DOLLAR], invoices=[1]),
            "utility": Service(debits=[42 * DOLLAR]),
        },
    )


class TestQueryAndList:
    def test_empty_store(self, store):
        assert store.query() is None
        assert store.list() == []

    def test_query_returns_first_match(self, store):
        store.create(Tenant(name="Jane", contact="a"))
        store.create(Tenant(name="Bob", contact="a"))
        found = store.query(is_kind(Tenant), lambda t: t.contact == "a")
        assert found == Tenant(name="Jane", contact="a")

    def test_query_not_found(self, store):
        store.create(Tenant(name="Jane"))
        assert store.query(where(Site, number="Jane")) is None

    def test_list_preserves_order_within_kind(self, store):
        for number in ["C3", "A1", "B2"]:
            store.create(Site(number=number))
        assert [s.number for s in store.list(is_kind(Site))] == ["C3", "A1", "B2"]

    def test_list_heterogeneous(self, store):
        store.create(Tenant(name="Jane"))
        store.create(Site(number="A1"))
        store.create(full_lease())
        kinds = sorted(type(e).__name__ for e in store.list())
        assert kinds == ["Lease", "Site", "Tenant"]


class TestCreate:
    def test_duplicate_identity_rejected(self, store):
        store.create(Site(number="A1", dwelling=Dwelling.CABIN))
        with pytest.raises(DuplicateEntityError):
            store.create(Site(number="A1", dwelling=Dwelling.HOUSE))
        assert store.list(is_kind(Site)) == [Site(number="A1", dwelling=Dwelling.CABIN)]

    def test_same_identity_different_kind_allowed(self, store):
        store.create(Tenant(name="A1"))
        store.create(Site(number="A1"))
        assert len(store.list()) == 2

    def test_conflicting_lease_rejected(self, store):
        term = make_term()
        store.create(Lease(tenant="Jane", site="A1", term=term))
        with pytest.raises(EntityConflictError):
            store.create(Lease(tenant="Bob", site="A1", term=term))

    def test_different_terms_accepted(self, store):
        store.create(Lease(tenant="Jane", site="A1", term=make_term(day=1)))
        store.create(Lease(tenant="Jane", site="A1", term=make_term(day=5)))
        assert len(store.list(is_kind(Lease))) == 2


class TestUpdateAndSave:
    def test_update_replaces(self, store):
        store.create(Tenant(name="Jane", contact="old"))
        store.update(Tenant(name="Jane", contact="new"))
        assert store.list(is_kind(Tenant)) == [Tenant(name="Jane", contact="new")]

    def test_update_missing_raises(self, store):
        with pytest.raises(EntityNotFoundError):
            store.update(Tenant(name="Ghost"))
        assert store.list() == []

    def test_save_upserts(self, store):
        store.save(Tenant(name="Jane", contact="a"))
        store.save(Tenant(name="Jane", contact="b"))
        store.save(Tenant(name="Bob"))
        assert store.list(is_kind(Tenant)) == [Tenant(name="Jane", contact="b"), Tenant(name="Bob")]


class TestDelete:
    def test_delete(self, store):
        store.create(Site(number="A1"))
        store.create(Site(number="B2"))
        store.delete(Site(number="A1"))
        assert store.list(is_kind(Site)) == [Site(number="B2")]

    def test_delete_missing_leaves_store_unchanged(self, store):
        store.create(Site(number="A1"))
        before = store.list()
        with pytest.raises(EntityNotFoundError):
            store.delete(Site(number="Z9"))
        assert store.list() == before

    def test_identity_free_again_after_delete(self, store):
        store.create(Site(number="A1"))
        store.delete(Site(number="A1"))
        store.create(Site(number="A1", dwelling=Dwelling.FLAT))
        assert store.list() == [Site(number="A1", dwelling=Dwelling.FLAT)]


class TestRoundTrip:
    def test_lease_round_trip(self, store):
        lease = full_lease()
        store.create(lease)
        assert store.query(is_kind(Lease)) == lease

    def test_invoice_round_trip(self, store):
        invoice = Invoice(
            id=7,
            bill=200 * DOLLAR,
            issued=at(1),
            due=at(1) + timedelta(days=14),
            balance=Ledger(
                debits=[Payment(time=at(1), amount=200 * DOLLAR)],
                credits=[Payment(time=at(3), amount=50 * DOLLAR)],
            ),
        )
        store.create(invoice)
        assert store.query(is_kind(Invoice)) == invoice


class TestIsolation:
    def test_mutating_a_result_does_not_change_the_store(self, store):
        store.create(full_lease())
        lease = store.query(is_kind(Lease))
        lease.services["utility"].credits.append(DOLLAR)
        assert store.query(is_kind(Lease)) == full_lease()


class TestSerializationFailures:
    @pytest.mark.parametrize("backend", ["file_store", "sql_store"])
    def test_unserializable_entity_surfaces_persistence_error(self, request, backend):
        store = request.getfixturevalue(backend)
        broken = Tenant.model_construct(name="Jane", contact=object())

        with pytest.raises(PersistenceError):
            store.save(broken)
        assert store.list() == []
