"""Rutenett (7 x 6) per måned for visning av kalenderen."""

import datetime

from pydantic import BaseModel

from fastlonn.core.config import GRID_COLUMNS, GRID_ROWS
from fastlonn.core.constants import MONTH_NAMES_NO, WEEKDAY_NAMES_NO
from fastlonn.core.drag_paint import StatusLookup, date_for_cell
from fastlonn.core.holidays import holiday_names_for_year, is_holiday, is_weekend
from fastlonn.core.models import DayStatus


class GridCell(BaseModel):
    row: int
    col: int
    date: datetime.date | None = None
    status: DayStatus | None = None
    is_weekend: bool = False
    is_holiday: bool = False
    holiday_name: str | None = None
    paintable: bool = False
    # Nabo med samme status; brukes til felles avrundede hjørner.
    join_left: bool = False
    join_right: bool = False
    join_up: bool = False
    join_down: bool = False


class MonthGrid(BaseModel):
    year: int
    month: int
    name: str
    weekday_names: tuple[str, ...] = WEEKDAY_NAMES_NO
    cells: list[GridCell]

    def rows(self) -> list[list[GridCell]]:
        return [self.cells[r * GRID_COLUMNS:(r + 1) * GRID_COLUMNS] for r in range(GRID_ROWS)]


def month_grid(
    year: int,
    month: int,
    status_of: StatusLookup,
    holiday_set: frozenset[datetime.date] | None = None,
) -> MonthGrid:
    """Bygger cellene for en måned, med status og gruppering av like naboer."""
    names = holiday_names_for_year(year)
    if holiday_set is None:
        holiday_set = frozenset(names)

    cells: list[GridCell] = []
    for row in range(GRID_ROWS):
        for col in range(GRID_COLUMNS):
            d = date_for_cell(year, month, row, col)
            if d is None:
                cells.append(GridCell(row=row, col=col))
                continue
            weekend = is_weekend(d)
            holiday = is_holiday(d, holiday_set)
            cells.append(
                GridCell(
                    row=row,
                    col=col,
                    date=d,
                    status=status_of(d),
                    is_weekend=weekend,
                    is_holiday=holiday,
                    holiday_name=names.get(d),
                    paintable=not weekend and not holiday,
                )
            )

    def status_at(r: int, c: int) -> DayStatus | None:
        if 0 <= r < GRID_ROWS and 0 <= c < GRID_COLUMNS:
            return cells[r * GRID_COLUMNS + c].status
        return None

    for cell in cells:
        if cell.status is None:
            continue
        cell.join_left = status_at(cell.row, cell.col - 1) == cell.status
        cell.join_right = status_at(cell.row, cell.col + 1) == cell.status
        cell.join_up = status_at(cell.row - 1, cell.col) == cell.status
        cell.join_down = status_at(cell.row + 1, cell.col) == cell.status

    return MonthGrid(year=year, month=month, name=MONTH_NAMES_NO[month - 1], cells=cells)


def year_grid(year: int, status_of: StatusLookup) -> list[MonthGrid]:
    """Alle tolv månedene i et år."""
    holiday_set = frozenset(holiday_names_for_year(year))
    return [month_grid(year, month, status_of, holiday_set) for month in range(1, 13)]
