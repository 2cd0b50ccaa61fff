# berichte/routes.py
import io
import logging
from functools import wraps

from flask import request, send_file, jsonify
from pydantic import ValidationError

from berichte.config import Config
from berichte.models import LeistungsauftragRequest, TagesberichtRequest
from berichte.normalizers import normalize_leistungsauftrag, normalize_tagesbericht
from berichte.notifications import NotificationCollector
from berichte.pdf.report_service import ReportService, BufferSink
from berichte.signature.capture import SignatureCapture, PayloadHolder
from berichte.signature.input_adapter import SurfaceRect, replay

logger = logging.getLogger(__name__)

FORMS = {
    'leistungsauftrag': (normalize_leistungsauftrag, LeistungsauftragRequest),
    'tagesbericht': (normalize_tagesbericht, TagesberichtRequest),
}


def handle_errors(logger):
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ValidationError as e:
                return jsonify({'error': 'Ungültige Eingabe',
                                'details': e.errors(include_url=False, include_context=False)}), 400
            except Exception as e:
                logger.exception("Unerwarteter Fehler")
                return jsonify({'error': 'Interner Serverfehler', 'msg': str(e)}), 500
        return decorated
    return decorator


def _parse_rect(raw):
    if not isinstance(raw, dict):
        return None
    try:
        return SurfaceRect(float(raw.get('left', 0)), float(raw.get('top', 0)),
                           float(raw['width']), float(raw['height']))
    except (KeyError, TypeError, ValueError):
        return None


def init_routes(app, logger):
    config = app.config.get('BERICHTE_CONFIG') or Config
    report_service = ReportService(config)

    @app.route('/')
    def index():
        return "Rohrnetz Beil: Berichte"

    def _generate(kind):
        payload = request.get_json(silent=True)
        if not payload or not isinstance(payload, dict):
            return jsonify({'error': 'JSON-Daten ungültig oder fehlend'}), 400

        normalize, model = FORMS[kind]
        record = model(**normalize(payload))

        sink = BufferSink()
        notes = NotificationCollector(logger)
        report_service.generate(kind, record, sink, notes)

        if notes.failed or sink.data is None:
            note = notes.last
            return jsonify({'error': note.title if note else 'Fehler',
                            'msg': note.message if note else ''}), 422

        return send_file(io.BytesIO(sink.data), mimetype='application/pdf',
                         as_attachment=True, download_name=sink.filename)

    @app.route('/leistungsauftrag', methods=['POST'])
    @handle_errors(logger)
    def leistungsauftrag():
        return _generate('leistungsauftrag')

    @app.route('/tagesbericht', methods=['POST'])
    @handle_errors(logger)
    def tagesbericht():
        return _generate('tagesbericht')

    @app.route('/signatur', methods=['POST'])
    @handle_errors(logger)
    def signatur():
        """
        Rendert eine aufgezeichnete Ereignisfolge zu einer Unterschrift.
        Erwartet: {'events': [...], 'rect': {left, top, width, height}, 'value': '<data-uri>'}
        """
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict) or not isinstance(payload.get('events', []), list):
            return jsonify({'error': 'JSON-Daten ungültig oder fehlend'}), 400

        initial = str(payload.get('value') or '')
        holder = PayloadHolder(initial)
        capture = SignatureCapture.from_config(config, observer=holder, initial_payload=initial,
                                               rect=_parse_rect(payload.get('rect')))
        replay(capture, payload.get('events') or [])
        return jsonify({'signature': holder.payload, 'hasContent': capture.has_content})
