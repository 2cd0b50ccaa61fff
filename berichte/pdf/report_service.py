# berichte/pdf/report_service.py
import logging
from typing import Optional, Protocol

from berichte.config import Config
from berichte.errors import ValidationFailure
from berichte.notifications import Notification, NotificationObserver, SUCCESS, ERROR

from .composer import DocumentComposer
from .renderer import PDFRenderer
from .templates import TEMPLATES

logger = logging.getLogger(__name__)

SUCCESS_TITLE = 'PDF erfolgreich erstellt!'


class DocumentSink(Protocol):
    def __call__(self, data: bytes, filename: str) -> None:
        ...


class BufferSink:
    """Behält das zuletzt übergebene Dokument (für die HTTP-Antwort)."""

    def __init__(self):
        self.data: Optional[bytes] = None
        self.filename: Optional[str] = None

    def __call__(self, data: bytes, filename: str) -> None:
        self.data = data
        self.filename = filename


class ReportService:
    def __init__(self, config=Config):
        self.config = config
        self.composers = {key: DocumentComposer(tpl, config) for key, tpl in TEMPLATES.items()}

    def composer(self, kind: str) -> DocumentComposer:
        try:
            return self.composers[kind]
        except KeyError:
            raise ValueError(f"Unbekannte Vorlage: {kind}") from None

    def generate(self, kind: str, record, sink: DocumentSink, observer: NotificationObserver) -> Optional[str]:
        """
        Prüft, komponiert und rendert den Bericht und übergibt das PDF an sink.
        Genau eine Benachrichtigung pro Aufruf: Erfolg oder Fehler.
        Gibt den Dateinamen zurück, bei Prüfungsfehler None.
        Fehler der Senke werden nicht abgefangen.
        """
        composer = self.composer(kind)
        try:
            artifact = composer.compose(record)
        except ValidationFailure as e:
            logger.info("%s nicht erzeugt: %s", composer.template.name, e.message)
            observer.notify(Notification(ERROR, e.title, e.message))
            return None

        renderer = PDFRenderer(composer.fonts, composer.tables, self.config)
        data = renderer.render(artifact)
        sink(data, artifact.filename)

        observer.notify(Notification(SUCCESS, SUCCESS_TITLE,
                                     f"Ihr {composer.template.name} wurde heruntergeladen."))
        return artifact.filename
