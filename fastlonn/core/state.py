# fastlonn/core/state.py
"""
Persisted calculator state.

CalculatorState sits between the app and a storage adapter. The in-memory
copy is authoritative for the running session: failed writes are logged as
warnings and never surface to the user.
"""

import datetime
from typing import Any

from pydantic import BaseModel

from fastlonn.core.config import (
    DEFAULT_CALCULATION_METHOD,
    DEFAULT_HOURS_PER_DAY,
    DEFAULT_VACATION_PAY_PERCENT,
)
from fastlonn.core.constants import (
    KEY_CALCULATION_METHOD,
    KEY_EMPLOYER_COVERS_ABOVE_6G,
    KEY_EMPLOYER_COVERS_SYKE_ABOVE_6G,
    KEY_EMPLOYER_PAYS_VACATION_ON_NAV_SICK,
    KEY_HOURS_PER_DAY,
    KEY_HOURS_PER_DAY_DISPLAY,
    KEY_SELECTED_YEAR,
    KEY_VACATION_PAY,
    KEY_VACATION_PAY_DISPLAY,
    KEY_YEARLY_INCOME,
)
from fastlonn.core.formatting import format_decimal, format_income_input, parse_decimal
from fastlonn.core.logging_config import get_logger
from fastlonn.core.models import CalculationMethod
from fastlonn.core.storage import Storage, StorageError

logger = get_logger(__name__)


def _default_display(value: float) -> str:
    text = format_decimal(value, 2)
    return text.rstrip("0").rstrip(",")


#: Standardverdier for alle globale nøkler.
FORM_DEFAULTS: dict[str, Any] = {
    KEY_YEARLY_INCOME: "",
    KEY_VACATION_PAY: DEFAULT_VACATION_PAY_PERCENT,
    KEY_VACATION_PAY_DISPLAY: _default_display(DEFAULT_VACATION_PAY_PERCENT),
    KEY_HOURS_PER_DAY: DEFAULT_HOURS_PER_DAY,
    KEY_HOURS_PER_DAY_DISPLAY: _default_display(DEFAULT_HOURS_PER_DAY),
    KEY_CALCULATION_METHOD: DEFAULT_CALCULATION_METHOD,
    KEY_EMPLOYER_COVERS_ABOVE_6G: False,
    KEY_EMPLOYER_COVERS_SYKE_ABOVE_6G: False,
    KEY_EMPLOYER_PAYS_VACATION_ON_NAV_SICK: False,
}


class FormState(BaseModel):
    """Skjemaverdiene slik de er lagret."""

    selected_year: int
    yearly_income: str
    vacation_pay: float | None
    vacation_pay_display: str
    hours_per_day: float | None
    hours_per_day_display: str
    calculation_method: CalculationMethod
    employer_covers_above_6g: bool
    employer_covers_syke_above_6g: bool
    employer_pays_vacation_on_nav_sick: bool


class FormUpdate(BaseModel):
    """Felter brukeren kan endre. Tallfelt kommer som tekst fra skjemaet."""

    yearly_income: str | None = None
    vacation_pay: str | None = None
    hours_per_day: str | None = None
    calculation_method: CalculationMethod | None = None
    employer_covers_above_6g: bool | None = None
    employer_covers_syke_above_6g: bool | None = None
    employer_pays_vacation_on_nav_sick: bool | None = None


class CalculatorState:
    """Key-value state with write-through persistence."""

    def __init__(self, storage: Storage):
        self._storage = storage
        self._cache: dict[str, Any] = {}
        self.write_count = 0

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._cache:
            try:
                self._cache[key] = self._storage.get(key)
            except StorageError as e:
                logger.warning("Could not read %s from storage: %s", key, e)
                self._cache[key] = None
        value = self._cache[key]
        if value is None:
            return FORM_DEFAULTS.get(key, default) if default is None else default
        return value

    def set(self, key: str, value: Any) -> bool:
        """
        Set a value and persist it.

        Returns False when the value equals what is already stored, in which
        case nothing is written.
        """
        if key in self._cache and self._cache[key] == value:
            return False
        self._cache[key] = value
        self._persist(key, value)
        return True

    def delete(self, key: str) -> None:
        self._cache[key] = None
        try:
            self._storage.delete(key)
        except StorageError as e:
            logger.warning("Could not delete %s from storage: %s", key, e)

    def _persist(self, key: str, value: Any) -> None:
        self.write_count += 1
        try:
            self._storage.set(key, value)
        except StorageError as e:
            logger.warning("Could not persist %s, keeping in-memory value: %s", key, e)

    # ============ Typed access ============

    @property
    def selected_year(self) -> int:
        year = self.get(KEY_SELECTED_YEAR)
        return int(year) if year is not None else datetime.date.today().year

    @selected_year.setter
    def selected_year(self, year: int) -> None:
        self.set(KEY_SELECTED_YEAR, int(year))

    def form(self) -> FormState:
        method = self.get(KEY_CALCULATION_METHOD)
        try:
            calculation_method = CalculationMethod(method)
        except ValueError:
            logger.warning("Unknown calculation method %r in storage, using default", method)
            calculation_method = CalculationMethod(DEFAULT_CALCULATION_METHOD)

        return FormState(
            selected_year=self.selected_year,
            yearly_income=self.get(KEY_YEARLY_INCOME),
            # The typed text decides; a stored null would otherwise read as the default.
            vacation_pay=parse_decimal(self.get(KEY_VACATION_PAY_DISPLAY)),
            vacation_pay_display=self.get(KEY_VACATION_PAY_DISPLAY),
            hours_per_day=parse_decimal(self.get(KEY_HOURS_PER_DAY_DISPLAY)),
            hours_per_day_display=self.get(KEY_HOURS_PER_DAY_DISPLAY),
            calculation_method=calculation_method,
            employer_covers_above_6g=bool(self.get(KEY_EMPLOYER_COVERS_ABOVE_6G)),
            employer_covers_syke_above_6g=bool(self.get(KEY_EMPLOYER_COVERS_SYKE_ABOVE_6G)),
            employer_pays_vacation_on_nav_sick=bool(self.get(KEY_EMPLOYER_PAYS_VACATION_ON_NAV_SICK)),
        )

    def update_form(self, update: FormUpdate) -> FormState:
        """
        Apply a form update.

        Numeric fields keep the text the user typed in the *Display key and
        the parsed number (or None when unparseable) in the numeric key.
        """
        if update.yearly_income is not None:
            self.set(KEY_YEARLY_INCOME, format_income_input(update.yearly_income))

        if update.vacation_pay is not None:
            self.set(KEY_VACATION_PAY_DISPLAY, update.vacation_pay)
            self.set(KEY_VACATION_PAY, parse_decimal(update.vacation_pay))

        if update.hours_per_day is not None:
            self.set(KEY_HOURS_PER_DAY_DISPLAY, update.hours_per_day)
            self.set(KEY_HOURS_PER_DAY, parse_decimal(update.hours_per_day))

        if update.calculation_method is not None:
            self.set(KEY_CALCULATION_METHOD, update.calculation_method.value)

        toggles = {
            KEY_EMPLOYER_COVERS_ABOVE_6G: update.employer_covers_above_6g,
            KEY_EMPLOYER_COVERS_SYKE_ABOVE_6G: update.employer_covers_syke_above_6g,
            KEY_EMPLOYER_PAYS_VACATION_ON_NAV_SICK: update.employer_pays_vacation_on_nav_sick,
        }
        for key, value in toggles.items():
            if value is not None:
                self.set(key, value)

        return self.form()

    def reset_form(self) -> None:
        """Restore every global form field to its default."""
        for key, value in FORM_DEFAULTS.items():
            self.set(key, value)
