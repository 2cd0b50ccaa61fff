# berichte/signature/capture.py
import logging
from enum import Enum
from typing import Optional, Protocol, Tuple

from PIL import Image, ImageDraw

from berichte.errors import ImageDecodeFailure
from .input_adapter import PointerSample, SurfaceRect
from .payload import encode_png_data_uri, open_payload_image

logger = logging.getLogger(__name__)


class CaptureState(Enum):
    IDLE = 'idle'
    DRAWING = 'drawing'


class PayloadObserver(Protocol):
    def on_payload_changed(self, payload: str) -> None:
        ...


class SignatureCapture:
    """
    Zeichenfläche für freihändige Unterschriften.

    Zustände: IDLE -> begin -> DRAWING -> extend* -> end -> IDLE.
    clear() ist aus beiden Zuständen erlaubt und veröffentlicht ''.
    Nur end() und clear() verändern die veröffentlichte Unterschrift.
    """

    def __init__(self, observer: Optional[PayloadObserver] = None,
                 width: int = 400, height: int = 120,
                 initial_payload: str = '',
                 rect: Optional[SurfaceRect] = None,
                 stroke_width: int = 2,
                 stroke_color: Tuple[int, int, int, int] = (0, 0, 0, 255)):
        self.observer = observer
        self.width = int(width)
        self.height = int(height)
        self.stroke_width = stroke_width
        self.stroke_color = stroke_color
        self.rect = rect or SurfaceRect(0, 0, self.width, self.height)

        self.state = CaptureState.IDLE
        self.has_content = False
        self._last: Optional[Tuple[float, float]] = None
        self.image = self._blank()
        self._draw = ImageDraw.Draw(self.image)

        if initial_payload:
            self._seed(initial_payload)

    @classmethod
    def from_config(cls, config, observer=None, initial_payload='', rect=None):
        return cls(
            observer=observer,
            width=int(getattr(config, 'SIGNATURE_WIDTH', 400)),
            height=int(getattr(config, 'SIGNATURE_HEIGHT', 120)),
            initial_payload=initial_payload,
            rect=rect,
            stroke_width=int(getattr(config, 'SIGNATURE_STROKE_WIDTH', 2)),
            stroke_color=tuple(getattr(config, 'SIGNATURE_STROKE_COLOR', (0, 0, 0, 255))),
        )

    def _blank(self) -> Image.Image:
        return Image.new('RGBA', (self.width, self.height), (0, 0, 0, 0))

    def _seed(self, payload: str) -> None:
        try:
            img = open_payload_image(payload).convert('RGBA')
        except ImageDecodeFailure as e:
            logger.debug("Vorhandene Unterschrift nicht lesbar, Fläche bleibt leer: %s", e)
            return
        self.image.paste(img, (0, 0), img)
        self.has_content = True

    def surface_point(self, sample: PointerSample) -> Tuple[float, float]:
        p = self.rect.to_surface(sample, self.width, self.height)
        return p.x, p.y

    def _dot(self, x: float, y: float) -> None:
        # runde Enden und Verbindungen
        r = self.stroke_width / 2.0
        self._draw.ellipse([x - r, y - r, x + r, y + r], fill=self.stroke_color)

    def begin(self, sample: PointerSample) -> bool:
        if self.state is not CaptureState.IDLE:
            return False
        self.state = CaptureState.DRAWING
        self.has_content = True
        self._last = self.surface_point(sample)
        return True

    def extend(self, sample: PointerSample) -> bool:
        if self.state is not CaptureState.DRAWING or self._last is None:
            return False
        x0, y0 = self._last
        x1, y1 = self.surface_point(sample)
        self._draw.line([(x0, y0), (x1, y1)], fill=self.stroke_color, width=self.stroke_width)
        self._dot(x0, y0)
        self._dot(x1, y1)
        self._last = (x1, y1)
        return True

    def end(self) -> Optional[str]:
        if self.state is not CaptureState.DRAWING:
            return None
        self.state = CaptureState.IDLE
        self._last = None
        payload = self.to_data_uri()
        self._publish(payload)
        return payload

    def clear(self) -> str:
        self.image = self._blank()
        self._draw = ImageDraw.Draw(self.image)
        self.state = CaptureState.IDLE
        self._last = None
        self.has_content = False
        self._publish('')
        return ''

    def to_data_uri(self) -> str:
        return encode_png_data_uri(self.image)

    def _publish(self, payload: str) -> None:
        if self.observer is not None:
            self.observer.on_payload_changed(payload)


class PayloadHolder:
    """Einfacher Beobachter: merkt sich die zuletzt veröffentlichte Unterschrift."""

    def __init__(self, payload: str = ''):
        self.payload = payload
        self.changes = 0

    def on_payload_changed(self, payload: str) -> None:
        self.payload = payload
        self.changes += 1
