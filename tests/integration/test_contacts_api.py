"""
Integration tests for the contact form endpoints.
"""

import pytest

from estimator.models import Contact


CONTACT = {
    'name': 'Jane Doe',
    'email': 'jane@example.com',
    'company': 'Acme',
    'projectType': 'Mobile App',
    'message': 'We need an app for our stores.',
}


class TestCreateContact:

    def test_create(self, client, session):
        response = client.post('/api/contacts', json=CONTACT)

        assert response.status_code == 201
        data = response.get_json()['data']
        assert data['status'] == 'new'
        assert data['projectType'] == 'Mobile App'
        assert session.query(Contact).count() == 1

    @pytest.mark.parametrize('field, value, message', [
        ('name', '', 'Name is required'),
        ('email', 'jane', 'Valid email is required'),
        ('email', None, 'Valid email is required'),
        ('message', '   ', 'Message is required'),
    ])
    def test_required_fields(self, client, session, field, value, message):
        response = client.post('/api/contacts', json=dict(CONTACT, **{field: value}))

        assert response.status_code == 400
        assert response.get_json()['error'] == message
        assert session.query(Contact).count() == 0


class TestContactAdmin:

    def _create(self, client, **overrides):
        return client.post('/api/contacts', json=dict(CONTACT, **overrides)).get_json()['data']['id']

    def test_status_flow_stamps_first_response(self, client):
        contact_id = self._create(client)

        data = client.put(f'/api/contacts/{contact_id}', json={'status': 'in-progress'}).get_json()['data']
        assert data['status'] == 'in-progress'
        assert data['respondedAt'] is None

        data = client.put(f'/api/contacts/{contact_id}', json={'status': 'responded'}).get_json()['data']
        responded_at = data['respondedAt']
        assert responded_at is not None

        data = client.put(f'/api/contacts/{contact_id}', json={'status': 'closed'}).get_json()['data']
        assert data['status'] == 'closed'
        assert data['respondedAt'] == responded_at

    @pytest.mark.parametrize('method', ['get', 'put', 'delete'])
    def test_id_beyond_integer_range_is_404(self, client, method):
        response = getattr(client, method)('/api/contacts/100000000000000000000', json={'status': 'closed'})

        assert response.status_code == 404
        assert response.get_json()['error'] == 'Contact not found'

    def test_invalid_status(self, client):
        contact_id = self._create(client)

        response = client.put(f'/api/contacts/{contact_id}', json={'status': 'spam'})
        assert response.status_code == 400

    def test_list_filter_and_delete(self, client, session):
        first = self._create(client)
        second = self._create(client, email='john@example.com')
        client.put(f'/api/contacts/{second}', json={'status': 'closed'})

        body = client.get('/api/contacts').get_json()
        assert body['count'] == 2

        body = client.get('/api/contacts?status=new').get_json()
        assert [c['id'] for c in body['data']] == [first]

        assert client.delete(f'/api/contacts/{first}').status_code == 200
        assert client.get(f'/api/contacts/{first}').status_code == 404
        assert session.query(Contact).count() == 1
