"""Tolking og formatering av tall på norsk (desimalkomma, mellomrom som tusenskille)."""

import math

_SPACES = (" ", "\u00a0", "\u202f")


def _strip_spaces(text: str) -> str:
    for space in _SPACES:
        text = text.replace(space, "")
    return text


def parse_decimal(value: str | float | int | None) -> float | None:
    """
    Tolker et tall skrevet med komma eller punktum som desimalskille.

    "7,5" -> 7.5, "600 000" -> 600000.0. Tom eller ugyldig tekst gir None,
    det vil si "ingen verdi ennå".
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    text = _strip_spaces(value.strip()).replace(",", ".")
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_income(value: str | float | int | None) -> float | None:
    """Årslønn fra tekst med siffergrupper, for eksempel "600 000"."""
    return parse_decimal(value)


def format_income(amount: float | int | None) -> str:
    """Heltall med mellomrom som tusenskille: 600000 -> "600 000"."""
    if amount is None:
        return ""
    rounded = math.floor(amount + 0.5)
    return f"{rounded:,}".replace(",", " ")


_INCOME_CHARS = frozenset("0123456789,.")


def format_income_input(text: str) -> str:
    """
    Formaterer det brukeren skrev i lønnsfeltet.

    Bare ASCII-sifre og desimalskille beholdes ("600 000 kr" -> "600 000").
    Øre avrundes til hele kroner: "600000,50" -> "600 001". Tekst som ikke
    er et tall gir tom streng.
    """
    kept = "".join(ch for ch in text if ch in _INCOME_CHARS)
    amount = parse_decimal(kept)
    if amount is None:
        return ""
    return format_income(amount)


def format_decimal(value: float | None, decimals: int = 2) -> str:
    """Norsk tallformat: 1234.5 -> "1 234,50"."""
    if value is None:
        return ""
    text = f"{value:,.{decimals}f}"
    return text.replace(",", " ").replace(".", ",")


def format_nok(amount: float | None) -> str:
    """Kronebeløp uten øre: 616000 -> "616 000 kr"."""
    if amount is None:
        return ""
    return f"{format_income(amount)} kr"
