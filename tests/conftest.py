"""Shared fixtures: one store per backend, a recording notifier, a fixed clock."""

import pytest

from database import init_db, make_engine, make_session_factory
from models import Dwelling, Site, Tenant
from services import InvoiceService, LeasingService
from storage import FileStore, MemoryStore
from storage.sql import SqlStore

from tests.factories import FIXED_NOW, RecordingNotifier


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return FileStore(str(tmp_path / "data" / "store.json"))


@pytest.fixture
def sql_store(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'store.db'}")
    init_db(engine)
    yield SqlStore(make_session_factory(engine))
    engine.dispose()


@pytest.fixture(params=["memory", "file", "sql"])
def store(request):
    """Each backend in turn; they share one contract."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def invoice_service(memory_store, clock):
    return InvoiceService(memory_store, clock=clock, invoice_net_days=14)


@pytest.fixture
def leasing(memory_store, notifier, invoice_service):
    return LeasingService(memory_store, notifier, invoices=invoice_service)


@pytest.fixture
def jane():
    return Tenant(name="Jane Citizen", contact="jane@example.com")


@pytest.fixture
def cabin():
    return Site(number="A1", dwelling=Dwelling.CABIN)
