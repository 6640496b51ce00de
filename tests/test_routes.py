"""
End-to-end form tests through the Flask test client.
"""

import json

from config.settings import USER_STORE_KEY, LOGGED_USER_KEY


def test_signup_page_renders(client):
    response = client.get('/signup')
    assert response.status_code == 200
    assert b'id="signupForm"' in response.data
    assert b'id="signupError"' in response.data


def test_signup_redirects_to_login_with_notice(client, storage, ann):
    response = client.post('/signup', data=ann)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')

    users = json.loads(storage.get_item(USER_STORE_KEY))
    assert [u['email'] for u in users] == ['Ann@Example.com']

    page = client.get('/')
    assert b'Account created successfully' in page.data


def test_signup_error_keeps_fields_but_not_passwords(client, storage, ann):
    ann['confirmPassword'] = 'different'
    response = client.post('/signup', data=ann)

    assert response.status_code == 200
    assert b'Passwords do not match.' in response.data
    assert b'value="Ann@Example.com"' in response.data
    assert b'secret1' not in response.data
    assert storage.get_item(USER_STORE_KEY) is None


def test_signup_duplicate_email(client, ann):
    client.post('/signup', data=ann)
    ann['signupEmail'] = 'ANN@example.com'

    response = client.post('/signup', data=ann)
    assert response.status_code == 200
    assert b'An account with this email already exists.' in response.data


def test_error_is_cleared_on_next_submission(client, ann):
    bad = dict(ann, fullName='')
    first = client.post('/signup', data=bad)
    assert b'Please enter your full name.' in first.data

    second = client.post('/signup', data=dict(ann, signupPassword='123', confirmPassword='123'))
    assert b'Please enter your full name.' not in second.data
    assert b'Password must be at least 6 characters.' in second.data


def test_login_round_trip(client, storage, ann):
    client.post('/signup', data=ann)

    response = client.post('/', data={'loginEmail': 'ann@example.com', 'loginPassword': 'secret1'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/dashboard')

    stored = json.loads(storage.get_item(USER_STORE_KEY))[0]
    assert json.loads(storage.get_item(LOGGED_USER_KEY)) == stored

    dashboard = client.get('/dashboard')
    assert dashboard.status_code == 200
    assert b'Welcome, Ann' in dashboard.data


def test_login_wrong_password(client, storage, ann):
    client.post('/signup', data=ann)

    response = client.post('/', data={'loginEmail': 'ann@example.com', 'loginPassword': 'secret2'})
    assert response.status_code == 200
    assert b'Incorrect password.' in response.data
    assert b'No account found' not in response.data
    assert storage.get_item(LOGGED_USER_KEY) is None


def test_login_unknown_email(client):
    response = client.post('/', data={'loginEmail': 'ghost@example.com', 'loginPassword': 'secret1'})
    assert response.status_code == 200
    assert b'No account found with this email.' in response.data
    assert b'value="ghost@example.com"' in response.data


def test_login_invalid_email(client):
    response = client.post('/', data={'loginEmail': 'ghost', 'loginPassword': 'secret1'})
    assert b'Please enter a valid email.' in response.data


def test_login_prefill_from_query_string(client):
    response = client.get('/?email=x@y.com')
    assert response.status_code == 200
    assert b'value="x@y.com"' in response.data


def test_login_prefill_is_url_decoded(client):
    response = client.get('/?email=a%2Bb%40y.com')
    assert b'value="a+b@y.com"' in response.data


def test_login_page_without_prefill(client):
    response = client.get('/')
    assert b'id="loginEmail" name="loginEmail" value=""' in response.data
    assert b'style="display: none"' in response.data


def test_dashboard_requires_login(client):
    response = client.get('/dashboard', follow_redirects=True)
    assert response.status_code == 200
    assert b'Please log in first.' in response.data
    assert b'id="loginForm"' in response.data


def test_storage_status(client, ann):
    client.post('/signup', data=ann)

    response = client.get('/admin/storage/status')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'
    assert response.get_json()['users'] == 1
