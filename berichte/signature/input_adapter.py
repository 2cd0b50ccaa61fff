# berichte/signature/input_adapter.py
"""
Übersetzt Maus-, Pointer- und Touch-Ereignisse in PointerSample-Werte.
Die Zeichenfläche selbst kennt keine Gerätetypen.
"""
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

BEGIN_EVENTS = {'mousedown', 'pointerdown', 'touchstart'}
MOVE_EVENTS = {'mousemove', 'pointermove', 'touchmove'}
END_EVENTS = {'mouseup', 'pointerup', 'mouseleave', 'pointerleave', 'touchend', 'touchcancel'}
CLEAR_EVENTS = {'clear'}


@dataclass(frozen=True)
class PointerSample:
    """Position in Bildschirmkoordinaten (clientX/clientY)."""
    x: float
    y: float


@dataclass(frozen=True)
class SurfaceRect:
    """Angezeigte Lage und Größe der Zeichenfläche (getBoundingClientRect)."""
    left: float
    top: float
    width: float
    height: float

    def to_surface(self, sample: PointerSample, backing_w: float, backing_h: float) -> PointerSample:
        # Skalierung: angezeigte Größe kann von der Pixelgröße abweichen
        scale_x = backing_w / self.width if self.width else 1.0
        scale_y = backing_h / self.height if self.height else 1.0
        return PointerSample((sample.x - self.left) * scale_x, (sample.y - self.top) * scale_y)


def sample_from_event(event: Mapping[str, Any]) -> Optional[PointerSample]:
    """
    Touch: nur der erste aktive Berührungspunkt zählt.
    Maus/Pointer: clientX/clientY des Ereignisses.
    """
    touches = event.get('touches')
    if touches:
        first = touches[0]
        return PointerSample(float(first['clientX']), float(first['clientY']))
    if 'clientX' in event and 'clientY' in event:
        return PointerSample(float(event['clientX']), float(event['clientY']))
    return None


def replay(capture, events: Iterable[Mapping[str, Any]]) -> Optional[str]:
    """
    Spielt eine aufgezeichnete Ereignisfolge auf einer SignatureCapture ab.
    Gibt die zuletzt veröffentlichte Unterschrift zurück (None, wenn keine).
    """
    last = None
    for event in events:
        kind = str(event.get('type', '')).lower()
        if kind in CLEAR_EVENTS:
            last = capture.clear()
        elif kind in BEGIN_EVENTS:
            sample = sample_from_event(event)
            if sample is not None:
                capture.begin(sample)
        elif kind in MOVE_EVENTS:
            sample = sample_from_event(event)
            if sample is not None:
                capture.extend(sample)
        elif kind in END_EVENTS:
            payload = capture.end()
            if payload is not None:
                last = payload
    return last
