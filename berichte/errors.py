# berichte/errors.py


class ComposerError(Exception):
    """Basisklasse für Fehler der Dokumenterzeugung."""


class ValidationFailure(ComposerError):
    """
    Die Pflichtbedingung vor der Komposition ist nicht erfüllt
    (z. B. keine ausgefüllte Position). Es wird kein Dokument erzeugt.
    """

    def __init__(self, message: str, title: str = 'Fehler'):
        super().__init__(message)
        self.title = title
        self.message = message


class ImageDecodeFailure(ComposerError):
    """Eine Unterschrift (Data-URI) konnte nicht dekodiert werden."""
