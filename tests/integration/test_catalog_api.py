"""
Integration tests for the catalog CRUD endpoints.
"""

import pytest

from estimator.models import Currency, Industry


class TestIndustries:

    def test_create_derives_slug(self, client):
        response = client.post('/api/industries', json={'name': 'Food & Beverage'})

        assert response.status_code == 201
        data = response.get_json()['data']
        assert data['slug'] == 'food-beverage'
        assert data['isActive'] is True

    def test_rename_updates_slug(self, client, catalog):
        response = client.put(f"/api/industries/{catalog['fintech']}", json={'name': 'Financial Services'})

        assert response.status_code == 200
        assert response.get_json()['data']['slug'] == 'financial-services'

    @pytest.mark.parametrize('payload, message', [
        ({'name': 'Healthcare', 'slug': '!!!'}, 'slug must contain letters or digits'),
        ({'name': '!!!'}, 'name must contain letters or digits'),
    ])
    def test_empty_slug_is_rejected(self, client, session, payload, message):
        response = client.post('/api/industries', json=payload)

        assert response.status_code == 400
        assert response.get_json()['error'] == message
        assert session.query(Industry).count() == 0

    def test_rename_to_symbols_only_is_rejected(self, client, session, catalog):
        response = client.put(f"/api/industries/{catalog['fintech']}", json={'name': '&&&'})

        assert response.status_code == 400
        assert session.get(Industry, catalog['fintech']).slug == 'fintech'

    def test_duplicate_name_is_rejected(self, client, catalog):
        response = client.post('/api/industries', json={'name': 'Fintech'})

        assert response.status_code == 400
        assert response.get_json() == {'success': False, 'error': 'Industry already exists'}

    def test_name_too_short(self, client):
        response = client.post('/api/industries', json={'name': 'X'})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'name must be at least 2 characters'

    def test_delete(self, client, session, catalog):
        response = client.delete(f"/api/industries/{catalog['fintech']}")

        assert response.status_code == 200
        assert session.query(Industry).count() == 0


class TestSoftwareTypes:

    def test_crud(self, client):
        response = client.post('/api/software-types', json={
            'name': 'CRM System', 'category': 'web', 'basePrice': 35000,
        })
        assert response.status_code == 201
        item = response.get_json()['data']
        assert item['basePrice'] == 35000
        assert item['complexity'] == 'medium'

        response = client.put(f"/api/software-types/{item['id']}", json={'basePrice': 36000.5})
        assert response.status_code == 200
        updated = response.get_json()['data']
        assert updated['basePrice'] == 36000.5
        assert updated['name'] == 'CRM System'

        response = client.get(f"/api/software-types/{item['id']}")
        assert response.get_json()['data']['basePrice'] == 36000.5

        assert client.delete(f"/api/software-types/{item['id']}").status_code == 200
        assert client.get(f"/api/software-types/{item['id']}").status_code == 404

    def test_invalid_category(self, client):
        response = client.post('/api/software-types', json={'name': 'Game', 'category': 'console'})

        assert response.status_code == 400
        assert response.get_json()['error'].startswith('category must be one of')

    def test_negative_price(self, client):
        response = client.post('/api/software-types', json={'name': 'Game', 'category': 'other', 'basePrice': -1})

        assert response.status_code == 400

    def test_active_filter(self, client, catalog):
        client.put(f"/api/software-types/{catalog['mobile_app']}", json={'isActive': False})

        active = client.get('/api/software-types?active=true').get_json()
        assert [item['name'] for item in active['data']] == ['Web App']

        inactive = client.get('/api/software-types?active=false').get_json()
        assert [item['name'] for item in inactive['data']] == ['Mobile App']

        everything = client.get('/api/software-types').get_json()
        assert everything['count'] == 2

    @pytest.mark.parametrize('method', ['get', 'put', 'delete'])
    def test_id_beyond_integer_range_is_404(self, client, method):
        response = getattr(client, method)('/api/software-types/100000000000000000000', json={'basePrice': 1})

        assert response.status_code == 404
        assert response.get_json()['error'] == 'Software type not found'

    def test_update_missing_row_is_404_before_validation(self, client):
        response = client.put('/api/software-types/999', json={'category': 'console'})

        assert response.status_code == 404
        assert response.get_json()['error'] == 'Software type not found'


class TestTimelinesAndFeatures:

    @pytest.mark.parametrize('payload', [
        {'label': '2 years', 'durationInMonths': 24, 'multiplier': 3.5},
        {'label': '2 years', 'durationInMonths': 61},
        {'label': 'ab', 'durationInMonths': 2},
    ])
    def test_timeline_ranges(self, client, payload):
        assert client.post('/api/timelines', json=payload).status_code == 400

    def test_timelines_ordered_by_duration(self, client, catalog):
        client.post('/api/timelines', json={'label': '12+ months', 'durationInMonths': 18, 'multiplier': 0.7})

        labels = [t['label'] for t in client.get('/api/timelines').get_json()['data']]
        assert labels == ['1-2 months', '3-6 months', '12+ months']

    def test_feature_requires_hours(self, client):
        response = client.post('/api/features', json={'name': 'Chat Support', 'category': 'engagement'})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'estimatedHours is required'

    def test_feature_prerequisites(self, client, catalog):
        response = client.post('/api/features', json={
            'name': 'Subscriptions',
            'category': 'commerce',
            'estimatedHours': 60,
            'basePrice': 4000,
            'prerequisites': [catalog['payment_gateway']],
        })

        assert response.status_code == 201
        assert response.get_json()['data']['prerequisites'] == [catalog['payment_gateway']]

    def test_tech_stack_multiplier_range(self, client):
        response = client.post('/api/tech-stacks', json={
            'name': 'Rust', 'category': 'backend', 'hourlyRateMultiplier': 6,
        })

        assert response.status_code == 400


class TestCurrencies:

    def test_code_is_uppercased(self, client):
        response = client.post('/api/currencies', json={
            'code': 'gbp', 'name': 'British Pound', 'symbol': '£', 'exchangeRate': 0.8,
        })

        assert response.status_code == 201
        assert response.get_json()['data']['code'] == 'GBP'

    @pytest.mark.parametrize('payload', [
        {'code': 'EU', 'name': 'Euro', 'symbol': '€'},
        {'code': 'EUR', 'name': 'Euro', 'symbol': '€', 'exchangeRate': 0},
        {'code': 'EUR', 'name': 'Euro', 'symbol': '€', 'exchangeRate': -2},
        {'code': 'EUR', 'name': 'E', 'symbol': '€'},
    ])
    def test_invalid_currency(self, client, payload):
        assert client.post('/api/currencies', json=payload).status_code == 400

    def test_setting_base_flips_the_others(self, client, session, catalog):
        response = client.put(f"/api/currencies/{catalog['inr']}", json={'isBaseCurrency': True})

        assert response.status_code == 200
        assert response.get_json()['data']['isBaseCurrency'] is True

        base = session.query(Currency).filter(Currency.is_base_currency == True).all()
        assert [c.code for c in base] == ['INR']

    def test_create_new_base_currency(self, client, session, catalog):
        response = client.post('/api/currencies', json={
            'code': 'EUR', 'name': 'Euro', 'symbol': '€', 'exchangeRate': 0.92, 'isBaseCurrency': True,
        })

        assert response.status_code == 201
        codes = [c.code for c in session.query(Currency).filter(Currency.is_base_currency == True)]
        assert codes == ['EUR']

    def test_resaving_base_currency_keeps_it(self, client, session, catalog):
        response = client.put(f"/api/currencies/{catalog['usd']}", json={'isBaseCurrency': True, 'symbol': 'US$'})

        assert response.status_code == 200
        usd = session.get(Currency, catalog['usd'])
        assert usd.is_base_currency is True
        assert usd.symbol == 'US$'

    def test_cannot_delete_base_currency(self, client, session, catalog):
        response = client.delete(f"/api/currencies/{catalog['usd']}")

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Cannot delete base currency'
        assert session.get(Currency, catalog['usd']) is not None

    def test_delete_other_currency(self, client, session, catalog):
        assert client.delete(f"/api/currencies/{catalog['inr']}").status_code == 200
        assert session.get(Currency, catalog['inr']) is None

    def test_duplicate_code(self, client, catalog):
        response = client.post('/api/currencies', json={'code': 'USD', 'name': 'Dollar', 'symbol': '$'})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Currency already exists'
