# berichte/pdf/signature_drawer.py
import logging

from berichte.errors import ImageDecodeFailure
from berichte.signature.payload import decode_data_uri, open_image_bytes

from .artifact import Artifact, ImageBlock, BOLD, NORMAL
from .layout import Cursor, emit_text

logger = logging.getLogger(__name__)

SLOT_X = (20.0, 120.0)
SLOT_LABELS = ('Unterschrift Kunde:', 'Unterschrift Mitarbeiter:')
IMAGE_OFFSET = 2.0
PLACEHOLDER_OFFSET = 10.0


class SignatureDrawer:
    """Zwei Unterschriftsfelder nebeneinander, jedes unabhängig: Bild oder Platzhalter."""

    def __init__(self, config):
        self.size = float(getattr(config, 'FIELD_FONT_SIZE', 9.0))
        self.image_w = float(getattr(config, 'SIGNATURE_IMAGE_W_MM', 50.0))
        self.image_h = float(getattr(config, 'SIGNATURE_IMAGE_H_MM', 15.0))
        self.placeholder = getattr(config, 'PLACEHOLDER', '—')

    def _image_bytes(self, payload: str):
        if not payload:
            return None
        try:
            raw = decode_data_uri(payload)
            # nur Bytes weitergeben, die Pillow auch als Bild öffnet
            open_image_bytes(raw)
            return raw
        except ImageDecodeFailure as e:
            logger.warning("Unterschrift nicht lesbar, Platzhalter wird gesetzt: %s", e)
            return None

    def draw_signatures(self, artifact: Artifact, cursor: Cursor, kunde: str, mitarbeiter: str) -> Cursor:
        y = cursor.y
        for x, label, payload in zip(SLOT_X, SLOT_LABELS, (kunde, mitarbeiter)):
            emit_text(artifact, cursor, x, y, label, weight=BOLD, size=self.size)
            data = self._image_bytes(payload)
            if data is not None:
                artifact.add(ImageBlock(cursor.page, x, y + IMAGE_OFFSET, self.image_w, self.image_h, data))
            else:
                emit_text(artifact, cursor, x, y + PLACEHOLDER_OFFSET, self.placeholder, weight=NORMAL, size=self.size)
        return cursor
