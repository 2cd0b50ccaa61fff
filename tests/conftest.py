"""
Pytest configuration and shared fixtures.

- Test-Config (Log-Datei im temporären Verzeichnis)
- Beispielberichte für beide Vorlagen
- eine echte Unterschrift, erzeugt über SignatureCapture
- Flask-App und Test-Client
"""

import pytest
from unittest.mock import Mock

from berichte.config import Config
from berichte.models import LeistungsauftragRequest, TagesberichtRequest, LeistungsItem, ArbeitsItem
from berichte.signature.capture import SignatureCapture
from berichte.signature.input_adapter import PointerSample


@pytest.fixture(scope="session")
def test_config(tmp_path_factory):
    log_dir = tmp_path_factory.mktemp("logs")

    class TestConfig(Config):
        TESTING = True
        LOG_PATH = str(log_dir / "test.log")

    return TestConfig


@pytest.fixture
def signature_payload():
    """Eine gezeichnete Unterschrift als PNG-Data-URI."""
    capture = SignatureCapture()
    capture.begin(PointerSample(10, 60))
    for x in range(20, 200, 10):
        capture.extend(PointerSample(x, 60 + (x % 30) - 15))
    return capture.end()


@pytest.fixture
def leistungsauftrag_record():
    return LeistungsauftragRequest(
        einsatzort="Weißwasser, Hauptstraße 5",
        rg_empfaenger="Stadtwerke Weißwasser",
        art_der_arbeit="Hausanschluss Wasser",
        datum="2024-03-15",
        items=[
            LeistungsItem(id="1", beschreibung="Pumpeninstallation", einheit_netto="500",
                          stunden_stueck="4", m3m="", km="", bemerkung=""),
        ],
    )


@pytest.fixture
def tagesbericht_record():
    return TagesberichtRequest(
        datum="2024-03-15",
        auftraggeber="Stadtwerke Weißwasser",
        ort="Weißwasser",
        wochentag="Freitag",
        items=[
            ArbeitsItem(id="1", beschreibung="Graben ausheben", menge="3", einheit="Std."),
        ],
    )


@pytest.fixture
def observer():
    return Mock()


@pytest.fixture
def sink():
    return Mock()


@pytest.fixture
def app(test_config):
    from app import create_app
    return create_app(test_config)


@pytest.fixture
def client(app):
    return app.test_client()
