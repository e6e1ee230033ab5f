"""
Normalización de campos numéricos en texto libre.

Los listings guardan precios, alquileres y rendimientos como texto
("$520,000", "Over $500,000", "$480/w", "5.2%"). Todas las funciones
de este módulo son puras y totales: ante un input que no se puede leer
devuelven None, nunca lanzan.
"""

import math
import re
from typing import Any, Optional

# Scoring
_PRICE_RE = re.compile(r"[\d,]+")
_YIELD_RE = re.compile(r"[\d.]+")
_FLOAT_PREFIX_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")

# Alta de listings
_GROUPED_NUMBER_RE = re.compile(r"\d[\d,]*")
_PERCENT_RE = re.compile(r"(\d+(?:\.\d+)?)%")
_DECIMAL_RE = re.compile(r"\d+(?:\.\d+)?")
_SYMBOLS_RE = re.compile(r"[$,%]")


def _finite(number: float) -> Optional[float]:
    # Textos con cientos de dígitos se leen como inf
    return number if math.isfinite(number) else None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return _finite(float(value))
    except OverflowError:
        return None


def normalize_price(value: Any) -> Optional[float]:
    """
    Extrae un precio de un número o de texto libre.

    Toma la primera secuencia de dígitos y comas: "$520,000" -> 520000.0,
    "Over $500,000" -> 500000.0. No interpreta rangos.
    """
    if isinstance(value, str):
        match = _PRICE_RE.search(value)
        if match:
            digits = match.group(0).replace(",", "")
            if digits:
                return _finite(float(digits))
        return None
    return _as_number(value)


def normalize_yield(value: Any) -> Optional[float]:
    """
    Extrae un porcentaje de un número o de texto libre.

    Toma la primera secuencia de dígitos y puntos: "5.2%" -> 5.2.
    """
    if isinstance(value, str):
        match = _YIELD_RE.search(value)
        if match:
            # "5.2.1" se lee como 5.2; "..." no es un número
            number = _FLOAT_PREFIX_RE.match(match.group(0))
            if number:
                return _finite(float(number.group(0)))
        return None
    return _as_number(value)


def parse_int_prefix(value: Any) -> Optional[int]:
    """
    Entero al comienzo del valor: "1995" -> 1995, " 1995 approx" -> 1995.

    Texto que no empieza con un número ("circa 1990") devuelve None.
    Los números se truncan.
    """
    if isinstance(value, str):
        match = _INT_PREFIX_RE.match(value)
        return int(match.group(1)) if match else None
    number = _as_number(value)
    return int(number) if number is not None else None


def round_half_up(value: float) -> int:
    """Redondeo comercial: las mitades suben (7.5 -> 8, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def parse_price_range(text: Any) -> tuple[Optional[float], Optional[float]]:
    """
    Interpreta un precio pedido como rango (min, max).

    - "Over $500,000"        -> (500000, None)
    - "Under $600,000"       -> (None, 600000)
    - "Up to $600,000"       -> (None, 600000)
    - "From $500,000"        -> (500000, None)
    - "$500,000 - $550,000"  -> (500000, 550000)
    - "$520,000"             -> (520000, 520000)
    """
    if not isinstance(text, str):
        return None, None

    numbers = [
        _finite(float(raw.replace(",", ""))) for raw in _GROUPED_NUMBER_RE.findall(text)
    ]
    if not numbers:
        return None, None

    cleaned = text.lower()
    first = numbers[0]
    second = numbers[1] if len(numbers) > 1 else None

    if "over" in cleaned:
        return first, None
    if "under" in cleaned or "up to" in cleaned:
        return None, first
    if "from" in cleaned:
        return first, second
    if len(numbers) == 2:
        return first, second
    return first, first


def parse_rent(text: Any) -> Optional[float]:
    """Primer número del texto de alquiler: "$480 per week" -> 480."""
    if not isinstance(text, str):
        return None
    match = _GROUPED_NUMBER_RE.search(text)
    return _finite(float(match.group(0).replace(",", ""))) if match else None


def parse_yield_percent(text: Any) -> Optional[float]:
    """Número seguido de '%': "Yield 5.2%" -> 5.2. Sin '%' devuelve None."""
    if not isinstance(text, str):
        return None
    match = _PERCENT_RE.search(text)
    return _finite(float(match.group(1))) if match else None


def extract_single_number(text: Any) -> Optional[float]:
    """Primer número (entero o decimal) ignorando '$', ',' y '%'."""
    if not isinstance(text, str) or not text:
        return None
    sanitized = _SYMBOLS_RE.sub("", text).lower()
    match = _DECIMAL_RE.search(sanitized)
    return _finite(float(match.group(0))) if match else None
