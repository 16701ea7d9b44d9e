"""Tests for the HTTP binding."""

import pytest
from fastapi.testclient import TestClient

from syncstore.main import create_app

ALICE = {'X-Identity': 'alice'}
BOB = {'X-Identity': 'bob'}
HASH_HEX = '01' * 32


@pytest.fixture
def client(store):
    """Create FastAPI test client around the test store."""
    return TestClient(create_app(store))


@pytest.fixture
def alice_setup(client):
    client.post('/devices', json={'device_id': 'laptop', 'device_name': 'Laptop'}, headers=ALICE)
    client.post('/content', json={
        'content_id': 'doc', 'title': 'T', 'content_type': 'txt', 'size_bytes': 100
    }, headers=ALICE)
    return client


def test_root_endpoint(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.json()['status'] == 'running'
    assert 'X-Request-ID' in response.headers


def test_identity_header_required(client):
    response = client.get('/devices')
    assert response.status_code == 422


def test_blank_identity_rejected(client):
    response = client.get('/devices', headers={'X-Identity': '  '})
    assert response.status_code == 401


def test_register_and_list_devices(client):
    response = client.post('/devices', json={'device_id': 'laptop', 'device_name': 'Laptop'}, headers=ALICE)
    assert response.status_code == 201
    assert response.json()['device_id'] == 'laptop'

    response = client.get('/devices', headers=ALICE)
    assert [d['device_id'] for d in response.json()['devices']] == ['laptop']

    response = client.get('/devices', headers=BOB)
    assert response.json()['devices'] == []


def test_register_duplicate_device(alice_setup):
    response = alice_setup.post('/devices', json={'device_id': 'laptop', 'device_name': 'X'}, headers=ALICE)
    assert response.status_code == 409
    assert response.json()['code'] == 'DEVICE_EXISTS'


def test_remove_device(alice_setup):
    assert alice_setup.delete('/devices/laptop', headers=ALICE).status_code == 204

    response = alice_setup.delete('/devices/laptop', headers=ALICE)
    assert response.status_code == 404
    assert response.json()['code'] == 'DEVICE_NOT_FOUND'


def test_content_lifecycle(alice_setup):
    response = alice_setup.get('/content/alice/doc', headers=BOB)
    assert response.status_code == 200
    assert response.json()['latest_version'] == 1

    response = alice_setup.put('/content/doc', json={
        'title': 'T2', 'content_type': 'txt', 'size_bytes': 200
    }, headers=ALICE)
    assert response.status_code == 204
    assert alice_setup.get('/content/alice/doc', headers=ALICE).json()['title'] == 'T2'

    assert alice_setup.delete('/content/doc', headers=ALICE).status_code == 204
    assert alice_setup.get('/content/alice/doc', headers=ALICE).status_code == 404
    assert alice_setup.get('/content/alice/doc/exists', headers=ALICE).json() == {'exists': False}


def test_create_duplicate_content(alice_setup):
    response = alice_setup.post('/content', json={
        'content_id': 'doc', 'title': 'T', 'content_type': 'txt', 'size_bytes': 1
    }, headers=ALICE)
    assert response.status_code == 409
    assert response.json()['code'] == 'ALREADY_EXISTS'


def test_update_content_errors(alice_setup):
    body = {'title': 'T', 'content_type': 'txt', 'size_bytes': 1}

    response = alice_setup.put('/content/doc', json=body, headers=BOB)
    assert response.status_code == 403
    assert response.json()['code'] == 'NOT_AUTHORIZED'

    response = alice_setup.put('/content/missing', json=body, headers=ALICE)
    assert response.status_code == 404
    assert response.json()['code'] == 'NOT_FOUND'


def test_add_version_and_read_back(alice_setup):
    response = alice_setup.post('/content/doc/versions', json={
        'hash': HASH_HEX, 'device_id': 'laptop', 'change_description': 'init', 'size_bytes': 10
    }, headers=ALICE)
    assert response.status_code == 201
    assert response.json() == {'version': 2}

    response = alice_setup.get('/content/alice/doc/versions/2', headers=ALICE)
    assert response.status_code == 200
    assert response.json()['hash'] == HASH_HEX
    assert response.json()['device_id'] == 'laptop'

    response = alice_setup.get('/content/alice/doc/sync/laptop', headers=ALICE)
    assert response.json()['latest_version'] == 2

    assert alice_setup.get('/content/alice/doc/versions/1', headers=ALICE).status_code == 404


def test_add_version_errors(alice_setup):
    body = {'hash': HASH_HEX, 'device_id': 'phone', 'change_description': 'x', 'size_bytes': 1}
    response = alice_setup.post('/content/doc/versions', json=body, headers=ALICE)
    assert response.status_code == 403
    assert response.json()['code'] == 'INVALID_DEVICE'

    body = {'hash': 'zz', 'device_id': 'laptop', 'change_description': 'x', 'size_bytes': 1}
    response = alice_setup.post('/content/doc/versions', json=body, headers=ALICE)
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_INPUT'

    body = {'hash': '01' * 16, 'device_id': 'laptop', 'change_description': 'x', 'size_bytes': 1}
    response = alice_setup.post('/content/doc/versions', json=body, headers=ALICE)
    assert response.status_code == 400


def test_update_sync_status(alice_setup):
    response = alice_setup.put('/content/doc/sync/laptop', json={'synced_version': 1}, headers=ALICE)
    assert response.status_code == 200
    assert response.json()['latest_version'] == 1

    response = alice_setup.put('/content/doc/sync/laptop', json={'synced_version': 2}, headers=ALICE)
    assert response.status_code == 404
    assert response.json()['code'] == 'VERSION_NOT_FOUND'

    response = alice_setup.put('/content/doc/sync/laptop', json={'synced_version': 0}, headers=ALICE)
    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_VERSION'


def test_request_validation(client):
    response = client.post('/devices', json={'device_id': 'laptop'}, headers=ALICE)
    assert response.status_code == 422


def test_size_above_integer_range_rejected(client):
    response = client.post('/content', json={
        'content_id': 'big', 'title': 'T', 'content_type': 'txt', 'size_bytes': 2**64 - 1
    }, headers=ALICE)
    assert response.status_code == 422
    assert client.get('/content/alice/big/exists', headers=ALICE).json() == {'exists': False}


def test_version_lookup_above_integer_range(alice_setup):
    response = alice_setup.get(f'/content/alice/doc/versions/{2**63}', headers=ALICE)
    assert response.status_code == 404


def test_recreate_deleted_content_with_history(alice_setup):
    alice_setup.post('/content/doc/versions', json={
        'hash': HASH_HEX, 'device_id': 'laptop', 'change_description': 'init', 'size_bytes': 10
    }, headers=ALICE)
    alice_setup.delete('/content/doc', headers=ALICE)

    response = alice_setup.post('/content', json={
        'content_id': 'doc', 'title': 'T', 'content_type': 'txt', 'size_bytes': 1
    }, headers=ALICE)
    assert response.status_code == 409
    assert response.json()['code'] == 'ALREADY_EXISTS'
    assert alice_setup.get('/content/alice/doc/versions/2', headers=ALICE).status_code == 200
