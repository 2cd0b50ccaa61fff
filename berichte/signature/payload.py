# berichte/signature/payload.py
import base64
import binascii
import io

from PIL import Image, UnidentifiedImageError

from berichte.errors import ImageDecodeFailure

PNG_DATA_URI_PREFIX = 'data:image/png;base64,'


def encode_png_data_uri(img: Image.Image) -> str:
    out = io.BytesIO()
    img.save(out, format='PNG')
    return PNG_DATA_URI_PREFIX + base64.b64encode(out.getvalue()).decode('ascii')


def decode_data_uri(payload: str) -> bytes:
    """
    Liefert die Bildbytes einer 'data:image/...;base64,...'-URI.
    Alles andere führt zu ImageDecodeFailure.
    """
    if not payload:
        raise ImageDecodeFailure('Leere Unterschrift')
    header, sep, data = str(payload).partition(',')
    if not sep or not header.startswith('data:image/') or not header.endswith(';base64'):
        raise ImageDecodeFailure('Keine Bild-Data-URI')
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeFailure(f'Ungültiges Base64: {e}') from e
    if not raw:
        raise ImageDecodeFailure('Leere Bilddaten')
    return raw


def open_payload_image(payload: str) -> Image.Image:
    return open_image_bytes(decode_data_uri(payload))


def open_image_bytes(raw: bytes) -> Image.Image:
    try:
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeFailure(f'Bild nicht lesbar: {e}') from e
    return img
