# berichte/normalizers.py
import json
import re
from typing import Dict, Any, List, Optional
from datetime import datetime

LEISTUNGSAUFTRAG_FIELDS = {
    'einsatzort': 'einsatzort',
    'rgEmpfaenger': 'rg_empfaenger',
    'artDerArbeit': 'art_der_arbeit',
    'datum': 'datum',
    'monteur': 'monteur',
    'telefonNr': 'telefon_nr',
    'blockschrift': 'blockschrift',
    'sonstiges': 'sonstiges',
    'signatureKunde': 'signatur_kunde',
    'signatureMitarbeiter': 'signatur_mitarbeiter',
    'unterschriftKunde': 'signatur_kunde',
    'unterschriftMitarbeiter': 'signatur_mitarbeiter',
}

TAGESBERICHT_FIELDS = {
    'datum': 'datum',
    'wochentag': 'wochentag',
    'ort': 'ort',
    'strasseHausNr': 'strasse_haus_nr',
    'auftraggeber': 'auftraggeber',
    'telNr': 'tel_nr',
    'monteurArbeitszeit': 'monteur_arbeitszeit',
    'artDerArbeit': 'art_der_arbeit',
    'kipperMontage': 'kipper_montage',
    'minibagger': 'minibagger',
    'radlader': 'radlader',
    'bsAufgestelltAm': 'bs_aufgestellt_am',
    'manRb810': 'man_rb810',
    'neusson': 'neusson',
    'sonstiges': 'sonstiges',
    'container': 'container',
    'atlas': 'atlas',
    'materialBeschreibung': 'material_beschreibung',
    'materialMenge': 'material_menge',
    'signatureKunde': 'signatur_kunde',
    'signatureMitarbeiter': 'signatur_mitarbeiter',
    'unterschriftKunde': 'signatur_kunde',
    'unterschriftMitarbeiter': 'signatur_mitarbeiter',
}

LEISTUNGS_ITEM_FIELDS = {
    'id': 'id',
    'beschreibung': 'beschreibung',
    'einheitNetto': 'einheit_netto',
    'stundenStuck': 'stunden_stueck',
    'stundenStueck': 'stunden_stueck',
    'm3m': 'm3m',
    'km': 'km',
    'bemerkung': 'bemerkung',
}

ARBEITS_ITEM_FIELDS = {
    'id': 'id',
    'beschreibung': 'beschreibung',
    'menge': 'menge',
    'einheit': 'einheit',
}

ITEM_KEYS = ['items', 'positionen', 'arbeitsItems', 'arbeits_items', 'leistungen']


def _pick_first(d: Dict[str, Any], keys: List[str], default=''):
    for k in keys:
        if k in d and d[k] is not None:
            return d[k]
    return default


def _safe_str(x: Any) -> str:
    if x is None:
        return ''
    return str(x)


def _try_parse_date(value: Any) -> Optional[datetime]:
    """
    Erkennt ISO-Datum (Formular <input type="date">) sowie deutsche
    Schreibweisen. Gibt None zurück, wenn nichts passt.
    """
    v = _safe_str(value).strip()
    if not v:
        return None
    fmts = [
        "%Y-%m-%d",
        "%d.%m.%Y",
        "%d.%m.%y",
        "%d/%m/%Y",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%dT%H:%M",
    ]
    for f in fmts:
        try:
            return datetime.strptime(v, f)
        except ValueError:
            continue
    m = re.search(r'(\d{4}-\d{2}-\d{2})', v)
    if m:
        try:
            return datetime.strptime(m.group(1), "%Y-%m-%d")
        except ValueError:
            pass
    return None


def normalize_date(value: Any) -> str:
    """Bringt ein Datum auf ISO 'yyyy-mm-dd'; Unlesbares bleibt unverändert."""
    dt = _try_parse_date(value)
    if dt is None:
        return _safe_str(value).strip()
    return dt.strftime("%Y-%m-%d")


def _map_fields(raw: Dict[str, Any], mapping: Dict[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for src, dst in mapping.items():
        if dst in out:
            continue
        if src in raw and raw[src] is not None:
            out[dst] = _safe_str(raw[src])
        elif dst in raw and raw[dst] is not None:
            out[dst] = _safe_str(raw[dst])
    return out


def _parse_items(raw_items: Any) -> List[Any]:
    if raw_items is None:
        return []
    if isinstance(raw_items, (bytes, bytearray)):
        raw_items = raw_items.decode('utf-8')
    if isinstance(raw_items, str):
        try:
            parsed = json.loads(raw_items)
        except ValueError:
            return []
        return parsed if isinstance(parsed, list) else []
    if isinstance(raw_items, (list, tuple)):
        return list(raw_items)
    return []


def normalize_items(raw_items: Any, mapping: Dict[str, str]) -> List[Dict[str, str]]:
    """
    Normalisiert die Positionsliste. Reihenfolge bleibt erhalten;
    fehlende ids werden fortlaufend vergeben.
    """
    out = []
    for idx, item in enumerate(_parse_items(raw_items)):
        if not isinstance(item, dict):
            continue
        it = _map_fields(item, mapping)
        if not it.get('id'):
            it['id'] = str(idx + 1)
        out.append(it)
    return out


def _normalize(payload: Dict[str, Any], fields: Dict[str, str], item_fields: Dict[str, str]) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        return payload

    normalized = _map_fields(payload, fields)
    if 'datum' in normalized:
        normalized['datum'] = normalize_date(normalized['datum'])
    normalized['items'] = normalize_items(_pick_first(payload, ITEM_KEYS, None), item_fields)
    return normalized


def normalize_leistungsauftrag(payload: Dict[str, Any]) -> Dict[str, Any]:
    return _normalize(payload, LEISTUNGSAUFTRAG_FIELDS, LEISTUNGS_ITEM_FIELDS)


def normalize_tagesbericht(payload: Dict[str, Any]) -> Dict[str, Any]:
    return _normalize(payload, TAGESBERICHT_FIELDS, ARBEITS_ITEM_FIELDS)
