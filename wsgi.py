# wsgi.py
import os
from app import create_app

# Kein Debug in Produktion durch FLASK_ENV/DEBUG
os.environ.setdefault('FLASK_ENV', 'production')

app = create_app()

# für gunicorn: wsgi:app
