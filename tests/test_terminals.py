from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

import chat_server
import document_store
from document_store import TerminalStore
from errors import ConfigurationError


class FakeDoc:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return self._data


class FakeFirestore:
    def __init__(self, docs):
        self.docs = docs
        self.requested = []

    def collection(self, name):
        self.requested.append(name)
        return SimpleNamespace(get=lambda: self.docs)


def test_list_terminals_merges_id_and_fields():
    client = FakeFirestore([FakeDoc('t1', {'name': 'North', 'lat': 1.5}), FakeDoc('t2', None)])
    store = TerminalStore('terminals', client=client)
    assert store.list_terminals() == [{'id': 't1', 'name': 'North', 'lat': 1.5}, {'id': 't2'}]
    assert client.requested == ['terminals']


def test_missing_service_account_is_a_configuration_error(monkeypatch):
    def no_app():
        raise ValueError("The default Firebase app does not exist.")

    monkeypatch.setattr(document_store.firebase_admin, 'get_app', no_app)
    with pytest.raises(ConfigurationError):
        TerminalStore(service_account=None).list_terminals()
    with pytest.raises(ConfigurationError):
        TerminalStore(service_account='{not json').list_terminals()


def test_app_initialized_from_service_account(monkeypatch):
    def no_app():
        raise ValueError("The default Firebase app does not exist.")

    captured = {}

    def initialize_app(cred):
        captured['cred'] = cred
        return 'app'

    monkeypatch.setattr(document_store.firebase_admin, 'get_app', no_app)
    monkeypatch.setattr(document_store.credentials, 'Certificate', lambda info: ('cert', info['project_id']))
    monkeypatch.setattr(document_store.firebase_admin, 'initialize_app', initialize_app)
    monkeypatch.setattr(document_store.firestore, 'client',
                        lambda app: FakeFirestore([FakeDoc('t1', {'name': 'A'})]))

    store = TerminalStore(service_account='{"project_id": "demo"}')
    assert store.list_terminals() == [{'id': 't1', 'name': 'A'}]
    assert captured['cred'] == ('cert', 'demo')


def test_mapdata_endpoint(monkeypatch):
    monkeypatch.setattr(chat_server, 'terminal_store',
                        TerminalStore(client=FakeFirestore([FakeDoc('t1', {'name': 'North'})])))
    r = TestClient(chat_server.app).get('/api/mapdata')
    assert r.status_code == 200
    assert r.json() == {'terminals': [{'id': 't1', 'name': 'North'}]}


def test_mapdata_failure_returns_500(monkeypatch):
    def broken():
        raise RuntimeError("permission denied")

    monkeypatch.setattr(chat_server, 'terminal_store', SimpleNamespace(list_terminals=broken))
    r = TestClient(chat_server.app).get('/api/mapdata')
    assert r.status_code == 500
    assert r.json() == {'error': 'Failed to fetch terminals'}
