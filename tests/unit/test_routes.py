"""
Unit tests for the HTTP routes.
"""

import pytest

from berichte.signature.payload import PNG_DATA_URI_PREFIX

LEISTUNGSAUFTRAG = {
    'einsatzort': 'Weißwasser, Hauptstraße 5',
    'rgEmpfaenger': 'Stadtwerke Weißwasser',
    'artDerArbeit': 'Hausanschluss Wasser',
    'datum': '2024-03-15',
    'items': [{'id': '1', 'beschreibung': 'Pumpeninstallation', 'einheitNetto': '500', 'stundenStuck': '4'}],
}

TAGESBERICHT = {
    'datum': '15.03.2024',
    'auftraggeber': 'Stadtwerke Weißwasser',
    'ort': 'Weißwasser',
    'artDerArbeit': 'Rohrbruch beheben',
}


class TestIndex:
    def test_index(self, client):
        resp = client.get('/')
        assert resp.status_code == 200


class TestDocuments:
    def test_leistungsauftrag_pdf(self, client):
        resp = client.post('/leistungsauftrag', json=LEISTUNGSAUFTRAG)

        assert resp.status_code == 200
        assert resp.mimetype == 'application/pdf'
        assert resp.data.startswith(b'%PDF')
        assert 'Leistungsauftrag_2024-03-15.pdf' in resp.headers['Content-Disposition']

    def test_tagesbericht_with_art_der_arbeit_only(self, client):
        resp = client.post('/tagesbericht', json=TAGESBERICHT)

        assert resp.status_code == 200
        assert 'Tagesbericht_2024-03-15.pdf' in resp.headers['Content-Disposition']

    def test_without_items_is_unprocessable(self, client):
        payload = dict(LEISTUNGSAUFTRAG, items=[{'beschreibung': ''}])
        resp = client.post('/leistungsauftrag', json=payload)

        assert resp.status_code == 422
        assert resp.get_json() == {
            'error': 'Fehler',
            'msg': 'Bitte fügen Sie mindestens eine Leistungsposition hinzu.',
        }

    def test_missing_required_field(self, client):
        payload = dict(LEISTUNGSAUFTRAG)
        payload.pop('einsatzort')
        resp = client.post('/leistungsauftrag', json=payload)

        assert resp.status_code == 400
        body = resp.get_json()
        assert body['error'] == 'Ungültige Eingabe'
        assert body['details'][0]['loc'] == ['einsatzort']

    @pytest.mark.parametrize("route", ['/leistungsauftrag', '/tagesbericht'])
    def test_no_json(self, client, route):
        resp = client.post(route, data='kein json', content_type='text/plain')
        assert resp.status_code == 400


class TestSignatur:
    def test_replayed_stroke(self, client):
        events = [
            {'type': 'pointerdown', 'clientX': 110, 'clientY': 60},
            {'type': 'pointermove', 'clientX': 150, 'clientY': 80},
            {'type': 'pointerup'},
        ]
        resp = client.post('/signatur', json={
            'events': events,
            'rect': {'left': 100, 'top': 50, 'width': 200, 'height': 60},
        })

        assert resp.status_code == 200
        body = resp.get_json()
        assert body['signature'].startswith(PNG_DATA_URI_PREFIX)
        assert body['hasContent'] is True

    def test_clear_returns_empty(self, client, signature_payload):
        resp = client.post('/signatur', json={'value': signature_payload, 'events': [{'type': 'clear'}]})
        assert resp.get_json() == {'signature': '', 'hasContent': False}

    def test_existing_value_kept_without_events(self, client, signature_payload):
        resp = client.post('/signatur', json={'value': signature_payload})
        body = resp.get_json()
        assert body == {'signature': signature_payload, 'hasContent': True}

    def test_events_must_be_a_list(self, client):
        resp = client.post('/signatur', json={'events': 'mousedown'})
        assert resp.status_code == 400
