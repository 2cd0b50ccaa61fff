from pydantic import BaseModel, Field, field_validator
from typing import List

REQUIRED_MESSAGE = 'Pflichtfeld nicht ausgefüllt'


def _require(v):
    if v is None:
        raise ValueError(REQUIRED_MESSAGE)
    if isinstance(v, str) and not v.strip():
        raise ValueError(REQUIRED_MESSAGE)
    return v.strip() if isinstance(v, str) else v


def _check_signature(v):
    if v is None:
        return ''
    v = str(v).strip()
    if v and not v.startswith('data:image/'):
        raise ValueError('Unterschrift muss eine Bild-Data-URI sein')
    return v


class LeistungsItem(BaseModel):
    id: str = ''
    beschreibung: str = ''
    einheit_netto: str = ''
    stunden_stueck: str = ''
    m3m: str = ''
    km: str = ''
    bemerkung: str = ''


class ArbeitsItem(BaseModel):
    id: str = ''
    beschreibung: str = ''
    menge: str = ''
    einheit: str = ''


class LeistungsauftragRequest(BaseModel):
    einsatzort: str
    rg_empfaenger: str
    art_der_arbeit: str
    datum: str
    monteur: str = ''
    telefon_nr: str = ''
    blockschrift: str = ''
    sonstiges: str = ''
    items: List[LeistungsItem] = Field(default_factory=list)
    signatur_kunde: str = ''
    signatur_mitarbeiter: str = ''

    @field_validator('einsatzort', 'rg_empfaenger', 'art_der_arbeit', 'datum', mode='before')
    @classmethod
    def validate_required(cls, v):
        return _require(v)

    @field_validator('signatur_kunde', 'signatur_mitarbeiter', mode='before')
    @classmethod
    def validate_signature(cls, v):
        return _check_signature(v)


class TagesberichtRequest(BaseModel):
    datum: str
    auftraggeber: str
    ort: str
    wochentag: str = ''
    strasse_haus_nr: str = ''
    tel_nr: str = ''
    monteur_arbeitszeit: str = ''
    art_der_arbeit: str = ''
    # Geräte und Maschinen
    kipper_montage: str = ''
    minibagger: str = ''
    radlader: str = ''
    man_rb810: str = ''
    neusson: str = ''
    container: str = ''
    atlas: str = ''
    sonstiges: str = ''
    bs_aufgestellt_am: str = ''
    material_beschreibung: str = ''
    material_menge: str = ''
    items: List[ArbeitsItem] = Field(default_factory=list)
    signatur_kunde: str = ''
    signatur_mitarbeiter: str = ''

    @field_validator('datum', 'auftraggeber', 'ort', mode='before')
    @classmethod
    def validate_required(cls, v):
        return _require(v)

    @field_validator('signatur_kunde', 'signatur_mitarbeiter', mode='before')
    @classmethod
    def validate_signature(cls, v):
        return _check_signature(v)
