"""Unit tests for composable entity predicates."""

from models import Lease, Site, Tenant
from storage import Predicates, apply, has_identity, is_kind, where

from tests.factories import make_term


class TestPredicates:
    def test_empty_list_matches_everything(self):
        assert Predicates()(Tenant(name="a"))
        assert apply(object(), [])

    def test_all_must_match(self):
        tenant = Tenant(name="a", contact="x")
        assert apply(tenant, [is_kind(Tenant), lambda e: e.contact == "x"])
        assert not apply(tenant, [is_kind(Tenant), lambda e: e.contact == "y"])

    def test_stops_at_first_failure(self):
        calls = []

        def never(entity):
            calls.append("never")
            return False

        def tracked(entity):
            calls.append("tracked")
            return True

        assert not Predicates([never, tracked])(Tenant(name="a"))
        assert calls == ["never"]

    def test_predicate_list_nests_as_predicate(self):
        inner = Predicates([is_kind(Site), where(Site, number="A1")])
        assert apply(Site(number="A1"), [inner])
        assert not apply(Site(number="B2"), [inner])


class TestKindChecks:
    def test_other_kinds_do_not_match_and_do_not_raise(self):
        predicate = is_kind(Lease, lambda lease: lease.site == "A1")
        assert not predicate(Tenant(name="A1"))
        assert not predicate("A1")
        assert not predicate(None)

    def test_where_compares_fields(self):
        term = make_term()
        lease = Lease(tenant="a", site="A1", term=term)
        assert where(Lease, site="A1", term=term)(lease)
        assert not where(Lease, site="A1", term=make_term(day=2))(lease)
        assert not where(Site, number="A1")(lease)

    def test_has_identity(self):
        assert has_identity(Site, "A1")(Site(number="A1"))
        assert not has_identity(Tenant, "A1")(Site(number="A1"))
