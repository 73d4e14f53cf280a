import datetime

from fastapi import HTTPException, status

from fastlonn.core.config import MAX_YEAR, MIN_YEAR


def validate_year(year: int) -> int:
    """
    Sikrer at året er innenfor det kalkulatoren støtter.

    Returnerer året hvis det er gyldig, ellers kastes 400.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
        )
    return year


def validate_date_params(year: int, month: int, day: int) -> datetime.date:
    """
    Validerer år, måned og dag og returnerer datoen.

    Ugyldige verdier gir HTTP 400.
    """
    validate_year(year)
    try:
        return datetime.date(year, month, day)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date",
        ) from None
