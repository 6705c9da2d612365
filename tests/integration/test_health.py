"""
Integration tests for health, metrics, CORS, error envelopes and CLI commands.
"""

from estimator.models import Currency, Feature, SoftwareType


def test_health(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    assert response.get_json() == {'status': 'OK', 'database': 'connected', 'message': 'Server is running'}


def test_cache_health_when_disabled(client):
    response = client.get('/api/health/cache')

    assert response.status_code == 200
    assert response.get_json() == {'status': 'OK', 'cache': 'disabled'}


def test_unknown_route_uses_error_envelope(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'error': 'Not Found'}


def test_metrics_endpoint(client, estimation_payload):
    client.post('/api/estimations', json=estimation_payload)

    response = client.get('/metrics')
    assert response.status_code == 200
    assert b'estimations_created_total{currency="USD"}' in response.data
    assert b'http_requests_total' in response.data


def test_cors_headers_for_client_origin(app, client):
    origin = app.config['CLIENT_URL']

    response = client.get('/api/health', headers={'Origin': origin})
    assert response.headers['Access-Control-Allow-Origin'] == origin

    response = client.get('/api/health', headers={'Origin': 'http://evil.example'})
    assert 'Access-Control-Allow-Origin' not in response.headers


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=['init-db'])

    assert result.exit_code == 0
    assert 'Tables created' in result.output


def test_seed_data_is_idempotent(app, session):
    runner = app.test_cli_runner()

    first = runner.invoke(args=['seed-data'])
    assert first.exit_code == 0, first.output
    assert 'Currency: 4 created' in first.output

    second = runner.invoke(args=['seed-data'])
    assert second.exit_code == 0, second.output
    assert 'Currency: 0 created' in second.output

    assert session.query(Currency).count() == 4
    assert session.query(SoftwareType).count() == 6
    assert session.query(Feature).count() == 10
    base = session.query(Currency).filter(Currency.is_base_currency == True).all()
    assert [c.code for c in base] == ['USD']
