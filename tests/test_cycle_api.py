SKIP_CYCLE = ['REST', 'Push', 'REST', 'Pull']


def test_today_returns_resolution(client):
    response = client.post('/v1/cycle/today', json={
        'log': [{'date': '2024-04-01', 'plannedType': 'Push', 'actualType': 'REST', 'cycleIndex': 1}],
        'cycle': SKIP_CYCLE,
        'today': '2024-04-02',
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data['today'] == 'Push'
    assert data['cycle_index'] == 1
    assert data['branch'] == 'skip_retry'
    assert data['trace'][-1]['event'] == 'resolved'


def test_today_with_empty_log(client):
    response = client.post('/v1/cycle/today', json={'log': [], 'cycle': ['Upper', 'Lower'], 'today': '2024-04-02'})
    assert response.status_code == 200
    assert response.get_json()['today'] == 'Upper'


def test_today_requires_cycle(client):
    response = client.post('/v1/cycle/today', json={'log': []})
    assert response.status_code == 400
    assert 'cycle' in response.get_json()['error']


def test_today_rejects_non_json(client):
    response = client.post('/v1/cycle/today', data='not json', content_type='text/plain')
    assert response.status_code == 400


def test_today_rejects_malformed_entries(client):
    response = client.post('/v1/cycle/today', json={'log': [{'actual_type': 'Push'}], 'cycle': SKIP_CYCLE})
    assert response.status_code == 400
    assert 'date' in response.get_json()['error']


def test_planned_for_date(client):
    response = client.post('/v1/cycle/planned', json={
        'log': [{'date': '2024-04-01', 'planned_type': 'REST', 'actual_type': 'REST', 'cycle_index': 0}],
        'cycle': SKIP_CYCLE,
        'date': '2024-04-03',
    })
    assert response.status_code == 200
    assert response.get_json() == {'date': '2024-04-03', 'planned': 'REST', 'cycle_index': 2, 'logged': False}


def test_planned_requires_date(client):
    response = client.post('/v1/cycle/planned', json={'log': [], 'cycle': SKIP_CYCLE})
    assert response.status_code == 400


def test_presets(client):
    response = client.get('/v1/cycle/presets')
    assert response.status_code == 200
    presets = response.get_json()['presets']
    ids = [p['id'] for p in presets]
    assert 'upper-lower-4day' in ids
    upper_lower = presets[ids.index('upper-lower-4day')]
    assert upper_lower['stats'] == {'length': 7, 'training_days': 4, 'rest_days': 3, 'frequency': 57}


def test_unknown_route_is_json_404(client):
    response = client.get('/v1/cycle/nowhere')
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_non_object_body_is_rejected(client):
    for path in ('/v1/cycle/today', '/v1/cycle/planned'):
        response = client.post(path, json=['REST', 'Push'])
        assert response.status_code == 400
