"""
Shared fixtures for the CRM search tests.

The sample data mirrors a small CRM: one contact whose name also appears in a
deal title, plus deals linked by contact id only.
"""

import json

import pytest

from config.settings import SearchSettings
from core.models.domain import Contact, Deal
from core.search.pipeline import SearchPipeline
from core.session import HistoryNavigator, PointerEventHub, QuerySession
from core.store.memory_store import InMemoryEntityStore


@pytest.fixture
def alice():
    return Contact(id="c1", first_name="Alice", last_name="Nguyen", email="alice@x.com")


@pytest.fixture
def bob():
    return Contact(id="c2", first_name="Bob", last_name="Stone", email="bob@stone.io", phone="+1 (555) 010-2233")


@pytest.fixture
def contacts(alice, bob):
    return [alice, bob]


@pytest.fixture
def deals():
    return [
        Deal(id="d1", title="Renewal", contact_ids=("c1",)),
        Deal(id="d2", title="Alice Follow-up", contact_ids=()),
        Deal(id="d3", title="Hardware order", contact_ids=("c2", "ghost")),
    ]


@pytest.fixture
def store(deals, contacts):
    return InMemoryEntityStore(deals=deals, contacts=contacts)


@pytest.fixture
def pipeline(store):
    return SearchPipeline(store, SearchSettings())


@pytest.fixture
def navigator():
    return HistoryNavigator()


@pytest.fixture
def pointer_hub():
    return PointerEventHub()


@pytest.fixture
def session(pipeline, navigator, pointer_hub):
    return QuerySession(pipeline, navigator, pointer_hub)


@pytest.fixture
def snapshot_file(tmp_path):
    payload = {
        "contacts": [
            {"id": "c1", "firstName": "Alice", "lastName": "Nguyen", "email": "alice@x.com"},
            {"id": "c2", "firstName": "Bob", "lastName": "Stone", "phone": "555-0199"},
        ],
        "deals": [
            {"id": "d1", "title": "Renewal", "contactIds": ["c1"]},
            {"id": "d2", "title": "Alice Follow-up", "contactIds": []},
        ],
    }
    path = tmp_path / "crm.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
