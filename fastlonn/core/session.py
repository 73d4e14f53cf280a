"""Samler lager, dagstatus og dra-kontroller for én bruker."""

from fastlonn.core.day_states import DayStateStore
from fastlonn.core.drag_paint import DragPaintController
from fastlonn.core.logging_config import get_logger
from fastlonn.core.salary import compute_for_state
from fastlonn.core.state import CalculatorState
from fastlonn.core.storage import Storage

logger = get_logger(__name__)


class CalculatorSession:
    """
    Tilstanden til kalkulatoren.

    Lages én gang ved oppstart og deles av alle forespørsler; appen er et
    lokalt verktøy for én bruker.
    """

    def __init__(self, storage: Storage):
        self.state = CalculatorState(storage)
        self.days = DayStateStore(self.state)
        self.controller = DragPaintController(self.days)

    @property
    def year(self) -> int:
        return self.days.year

    def select_year(self, year: int) -> None:
        """Bytter aktivt år. En pågående dragbevegelse avbrytes."""
        self.controller.cancel()
        self.state.selected_year = year
        self.days.switch_year(year)
        logger.info("Selected year %s", year)

    def reset(self) -> None:
        """Nullstiller skjemaet og dagene i valgt år. Andre år røres ikke."""
        self.controller.cancel()
        self.state.reset_form()
        self.days.clear()
        logger.info("Reset form and day states for %s", self.year)

    def result(self, year: int | None = None):
        return compute_for_state(self.state, self.days, year)
