from flask import Flask
from berichte.config import Config
from berichte.routes import init_routes
import logging
from logging.handlers import RotatingFileHandler
import os


def setup_logging(log_path=None):
    # Logger des Pakets; die Modul-Logger (berichte.*) hängen darunter
    logger = logging.getLogger('berichte')
    logger.setLevel(logging.INFO)

    LOG_PATH = log_path or Config.LOG_PATH

    # Verhindert doppelte Handler bei mehrfachen Aufrufen
    if not logger.handlers:
        file_handler = RotatingFileHandler(LOG_PATH, maxBytes=10_000_000, backupCount=5, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)
        logger.addHandler(stream_handler)

    return logger


def create_app(config=Config):
    app = Flask(__name__)

    # Konfiguration laden
    app.config.from_object(config)
    app.config['BERICHTE_CONFIG'] = config

    logger = setup_logging(getattr(config, 'LOG_PATH', None))

    init_routes(app, logger)

    # Unbehandelte Ausnahmen pro Anfrage vollständig protokollieren
    from flask import got_request_exception, request
    import traceback

    def _log_request_exception(sender, exception, **extra):
        rid = request.headers.get('X-Request-ID', '') or ''
        logger.error("Unbehandelte Ausnahme (rid=%s): %s", rid, traceback.format_exc())

    got_request_exception.connect(_log_request_exception, app)

    return app


if __name__ == '__main__':
    # Nur für den lokalen Start; in Produktion läuft gunicorn mit wsgi:app
    app = create_app()

    port = int(os.environ.get('PORT', 5000))
    try:
        import platform
        # Unter Windows läuft gunicorn nicht, dort waitress
        if platform.system().lower().startswith('win'):
            from waitress import serve
            serve(app, host='0.0.0.0', port=port)
        else:
            app.run(host='0.0.0.0', port=port, debug=Config.DEBUG)
    except Exception as e:
        logger = setup_logging()
        logger.exception("Fehler beim lokalen Start der App: %s", e)
        raise
