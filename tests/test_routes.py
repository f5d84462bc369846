import logging

from extensions import contact_flows
from utils.data import CONTACT_INFO, SECTION_IDS


VISIBLE_BANNER = 'class="alert alert-success" role="status"'
HIDDEN_BANNER = 'class="alert alert-success d-none" role="status"'


def page(client):
    response = client.get('/')
    assert response.status_code == 200
    return response.get_data(as_text=True)


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_index_renders_sections_in_order(client):
    html = page(client)
    positions = [html.index(f'id="{section}"') for section in SECTION_IDS]
    assert positions == sorted(positions)
    assert '<nav id="main-nav"' in html
    assert html.index('<nav id="main-nav"') < positions[0]
    assert html.rindex('<footer') > positions[-1]


def test_index_navigation_anchors(client):
    html = page(client)
    for section in SECTION_IDS:
        assert f'class="nav-link" href="#{section}"' in html


def test_index_contact_info_entries(client):
    html = page(client)
    assert html.count('class="contact-info-entry') == 4
    positions = [html.index(f'href="{entry.href}"') for entry in CONTACT_INFO]
    assert positions == sorted(positions)


def test_index_has_required_contact_inputs(client):
    html = page(client)
    assert 'type="email" class="form-control" id="contact-email" name="email" value="" required' in html
    assert HIDDEN_BANNER in html


def test_security_headers(client):
    response = client.get('/')
    assert response.headers['X-Content-Type-Options'] == 'nosniff'
    assert 'Content-Security-Policy' in response.headers


def test_update_field_endpoint(client):
    response = client.post('/contact/field', json={'field': 'name', 'value': 'Jane'})
    assert response.status_code == 200
    body = response.get_json()
    assert body['submission'] == {'name': 'Jane', 'email': '', 'message': ''}
    assert body['state'] == 'editing'

    client.post('/contact/field', json={'field': 'email', 'value': 'jane@example.com'})
    state = client.get('/contact/state').get_json()
    assert state['submission'] == {'name': 'Jane', 'email': 'jane@example.com', 'message': ''}


def test_update_unknown_field_is_rejected(client):
    response = client.post('/contact/field', json={'field': 'phone', 'value': '555'})
    assert response.status_code == 400
    assert 'Unknown contact field' in response.get_json()['error']


def test_update_field_requires_text(client):
    response = client.post('/contact/field', json={'field': 'name', 'value': 42})
    assert response.status_code == 400


def test_submit_rejects_values_that_are_not_text(client, transport):
    response = client.post('/contact', json={'name': None, 'email': 'jane@example.com', 'message': 'Hello'})

    assert response.status_code == 400
    assert response.get_json()['fields'] == ['name']
    assert transport.calls == []
    assert client.get('/contact/state').get_json()['submission']['name'] == ''


def test_submit_success_scenario(client, transport, timers, jane):
    response = client.post('/contact', json=jane)

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['outcome'] == 'sent'
    assert body['banner_visible'] is True
    assert body['banner_message'] == 'Message Sent Successfully!'
    assert body['submission'] == {'name': '', 'email': '', 'message': ''}
    assert transport.calls == [jane]

    html = page(client)
    assert VISIBLE_BANNER in html
    assert 'Message Sent Successfully!' in html
    assert 'id="contact-name" name="name" value=""' in html

    [timer] = timers.timers
    assert timer.interval == 5.0
    timer.fire()
    assert client.get('/contact/state').get_json()['banner_visible'] is False
    assert HIDDEN_BANNER in page(client)


def test_submit_with_empty_email_is_blocked(client, transport, jane):
    jane['email'] = ''
    response = client.post('/contact', json=jane)

    assert response.status_code == 400
    body = response.get_json()
    assert body['outcome'] == 'invalid'
    assert 'email' in body['errors']
    assert transport.calls == []
    assert body['submission'] == {'name': 'Jane Doe', 'email': '', 'message': 'Hello'}


def test_submit_failure_scenario(client, transport, timers, jane, caplog):
    transport.fail = True

    with caplog.at_level(logging.ERROR):
        response = client.post('/contact', json=jane)

    body = response.get_json()
    assert response.status_code == 200
    assert body['success'] is False
    assert body['outcome'] == 'failed'
    assert body['banner_visible'] is False
    assert body['submission'] == jane
    assert timers.timers == []
    assert 'Contact form delivery failed' in caplog.text

    html = page(client)
    assert HIDDEN_BANNER in html
    assert 'value="Jane Doe"' in html
    assert 'value="jane@example.com"' in html
    assert '>Hello</textarea>' in html


def test_form_post_redirects_to_contact_anchor(client, transport, jane):
    response = client.post('/contact', data=jane)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/#contact')
    assert transport.calls == [jane]


def test_each_session_gets_its_own_form(app, jane):
    first = app.test_client()
    second = app.test_client()

    first.post('/contact/field', json={'field': 'name', 'value': 'Jane'})
    assert second.get('/contact/state').get_json()['submission']['name'] == ''
    assert first.get('/contact/state').get_json()['submission']['name'] == 'Jane'


def test_double_submission_sends_twice(client, transport, jane):
    client.post('/contact', json=jane)
    client.post('/contact', json=jane)
    assert transport.calls == [jane, jane]


def test_resume_is_served(client):
    response = client.get('/resume')
    assert response.status_code == 200
    assert response.mimetype == 'application/pdf'
    assert response.data.startswith(b'%PDF')
    response.close()


def test_missing_resume_is_404(app, client):
    app.config['RESUME_FILENAME'] = 'missing.pdf'
    assert client.get('/resume').status_code == 404


def test_unknown_path_json_404(client):
    response = client.get('/nope', headers={'Accept': 'application/json'})
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Not found'}


def test_unknown_path_html_404(client):
    response = client.get('/nope')
    assert response.status_code == 404
    assert b'Page not found' in response.data


def test_page_views_do_not_mount_contact_forms(app):
    for _ in range(50):
        assert app.test_client().get('/').status_code == 200
        app.test_client().get('/contact/state')
    assert len(app.extensions['contact_flows']) == 0


def test_flow_store_is_bounded_by_config(app, transport, timers):
    app.config['CONTACT_MAX_FLOWS'] = 2
    contact_flows.init_app(app, transport=transport, timer_factory=timers)

    for _ in range(5):
        app.test_client().post('/contact/field', json={'field': 'name', 'value': 'Jane'})
    assert len(app.extensions['contact_flows']) == 2
