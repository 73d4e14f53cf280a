"""
Dra-for-å-male i kalenderen.

Tilstandsmaskinen er ren: transition() tar (tilstand, hendelse) og gir ny
tilstand pluss en liste med Paint-effekter. DragPaintController utfører
effektene mot et DayStateStore.

Raske musebevegelser hopper over celler mellom to move-hendelser. Derfor
beregnes alle rutenettceller som linjestykket mellom forrige og nåværende
pekerposisjon krysser, og hver celle behandles nøyaktig én gang per
dragbevegelse.
"""

import calendar
import datetime
import enum
import math
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from fastlonn.core.config import GRID_COLUMNS, GRID_ROWS
from fastlonn.core.day_states import DayStateStore
from fastlonn.core.holidays import is_paintable
from fastlonn.core.logging_config import get_logger
from fastlonn.core.models import DayStatus

logger = get_logger(__name__)

StatusLookup = Callable[[datetime.date], DayStatus | None]
PaintableCheck = Callable[[datetime.date], bool]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PaintAction(str, enum.Enum):
    """Bestemmes én gang, ved starten av bevegelsen, fra første celle."""

    ADD = "add"
    REMOVE = "remove"


class Point(_Frozen):
    x: float
    y: float


class GridGeometry(_Frozen):
    """Månedsrutenettets omsluttende boks i klientpiksler."""

    left: float
    top: float
    width: float
    height: float

    def to_grid(self, point: Point) -> tuple[float, float] | None:
        """Pikselpunkt til (kolonne, rad) i brøkdelte cellekoordinater."""
        if self.width <= 0 or self.height <= 0:
            return None
        col = (point.x - self.left) / (self.width / GRID_COLUMNS)
        row = (point.y - self.top) / (self.height / GRID_ROWS)
        if not (math.isfinite(col) and math.isfinite(row)):
            return None
        return col, row


# ============ Hendelser ============


class PointerDown(_Frozen):
    date: datetime.date
    selection_mode: DayStatus
    point: Point | None = None
    geometry: GridGeometry | None = None


class PointerMove(_Frozen):
    point: Point


class PointerOver(_Frozen):
    date: datetime.date


class PointerUp(_Frozen):
    pass


PointerEvent = PointerDown | PointerMove | PointerOver | PointerUp


# ============ Tilstander og effekter ============


class Idle(_Frozen):
    pass


class Dragging(_Frozen):
    action: PaintAction
    selection_mode: DayStatus
    touched: frozenset[datetime.date]
    year: int
    month: int
    geometry: GridGeometry | None = None
    last_point: Point | None = None

    def target_status(self) -> DayStatus | None:
        return self.selection_mode if self.action == PaintAction.ADD else None


DragState = Idle | Dragging

IDLE = Idle()


class Paint(_Frozen):
    """Sett status for en dato; None betyr fjern."""

    date: datetime.date
    status: DayStatus | None


# ============ Rutenett ============


def leading_blanks(year: int, month: int) -> int:
    """Tomme celler før den første i måneden, med mandag som første kolonne."""
    return datetime.date(year, month, 1).weekday()


def date_for_cell(year: int, month: int, row: int, col: int) -> datetime.date | None:
    """Datoen i en celle, eller None for tomme celler før og etter måneden."""
    if not (0 <= row < GRID_ROWS and 0 <= col < GRID_COLUMNS):
        return None
    day = row * GRID_COLUMNS + col - leading_blanks(year, month) + 1
    if 1 <= day <= calendar.monthrange(year, month)[1]:
        return datetime.date(year, month, day)
    return None


def clip_segment(
    start: tuple[float, float],
    end: tuple[float, float],
    columns: int = GRID_COLUMNS,
    rows: int = GRID_ROWS,
) -> tuple[tuple[float, float], tuple[float, float]] | None:
    """
    Klipper linjestykket til rektangelet [0, columns] x [0, rows].

    Returnerer None når linjestykket ligger helt utenfor (Liang-Barsky).
    """
    x0, y0 = start
    dx, dy = end[0] - x0, end[1] - y0
    t_enter, t_exit = 0.0, 1.0
    for p, q in ((-dx, x0), (dx, columns - x0), (-dy, y0), (dy, rows - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            t_enter = max(t_enter, t)
        else:
            t_exit = min(t_exit, t)
        if t_enter > t_exit:
            return None
    return (x0 + t_enter * dx, y0 + t_enter * dy), (x0 + t_exit * dx, y0 + t_exit * dy)


def cells_on_segment(
    start: tuple[float, float],
    end: tuple[float, float],
    columns: int = GRID_COLUMNS,
    rows: int = GRID_ROWS,
) -> list[tuple[int, int]]:
    """
    Alle celler (rad, kolonne) som linjestykket fra start til slutt krysser.

    Koordinatene er (kolonne, rad) i brøkdelte celleenheter. Linjestykket
    klippes først til rutenettet, så antall steg aldri overstiger
    columns + rows uansett hvor langt unna pekeren er. Traverseringen går
    celle for celle og tar steget langs aksen med nærmest neste
    cellegrense; treffer linjen et hjørne eksakt tas begge stegene samtidig.
    """
    clipped = clip_segment(start, end, columns, rows)
    if clipped is None:
        return []
    (x0, y0), (x1, y1) = clipped
    col, row = math.floor(x0), math.floor(y0)
    end_col, end_row = math.floor(x1), math.floor(y1)
    dx, dy = x1 - x0, y1 - y0

    step_col = 1 if dx > 0 else -1
    step_row = 1 if dy > 0 else -1
    t_delta_col = abs(1 / dx) if dx else math.inf
    t_delta_row = abs(1 / dy) if dy else math.inf
    if dx > 0:
        t_max_col = (col + 1 - x0) * t_delta_col
    elif dx < 0:
        t_max_col = (x0 - col) * t_delta_col
    else:
        t_max_col = math.inf
    if dy > 0:
        t_max_row = (row + 1 - y0) * t_delta_row
    elif dy < 0:
        t_max_row = (y0 - row) * t_delta_row
    else:
        t_max_row = math.inf

    def inside(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < columns

    cells = [(row, col)] if inside(row, col) else []
    steps = abs(end_col - col) + abs(end_row - row)
    for _ in range(steps):
        if (col, row) == (end_col, end_row):
            break
        if t_max_col < t_max_row:
            col += step_col
            t_max_col += t_delta_col
        elif t_max_row < t_max_col:
            row += step_row
            t_max_row += t_delta_row
        else:
            col += step_col
            row += step_row
            t_max_col += t_delta_col
            t_max_row += t_delta_row
        if inside(row, col):
            cells.append((row, col))
    return cells


# ============ Overganger ============


def _touch(
    state: Dragging,
    dates: list[datetime.date],
    paintable: PaintableCheck,
) -> tuple[Dragging, tuple[Paint, ...]]:
    touched = set(state.touched)
    effects = []
    for d in dates:
        if d in touched:
            continue
        touched.add(d)
        if paintable(d):
            effects.append(Paint(date=d, status=state.target_status()))
    if len(touched) == len(state.touched):
        return state, ()
    return state.model_copy(update={"touched": frozenset(touched)}), tuple(effects)


def _start(
    event: PointerDown,
    status_of: StatusLookup,
    paintable: PaintableCheck,
) -> tuple[DragState, tuple[Paint, ...]]:
    if not paintable(event.date):
        return IDLE, ()

    if status_of(event.date) == event.selection_mode:
        action = PaintAction.REMOVE
    else:
        action = PaintAction.ADD

    geometry = event.geometry if event.point is not None else None
    state = Dragging(
        action=action,
        selection_mode=event.selection_mode,
        touched=frozenset({event.date}),
        year=event.date.year,
        month=event.date.month,
        geometry=geometry,
        last_point=event.point if geometry is not None else None,
    )
    return state, (Paint(date=event.date, status=state.target_status()),)


def _move(state: Dragging, event: PointerMove, paintable: PaintableCheck) -> tuple[DragState, tuple[Paint, ...]]:
    if state.geometry is None or state.last_point is None:
        return state, ()

    start = state.geometry.to_grid(state.last_point)
    end = state.geometry.to_grid(event.point)
    if start is None or end is None:
        return state, ()

    dates = []
    for row, col in cells_on_segment(start, end):
        d = date_for_cell(state.year, state.month, row, col)
        if d is not None:
            dates.append(d)

    moved = state.model_copy(update={"last_point": event.point})
    return _touch(moved, dates, paintable)


def transition(
    state: DragState,
    event: PointerEvent,
    status_of: StatusLookup,
    paintable: PaintableCheck = is_paintable,
) -> tuple[DragState, tuple[Paint, ...]]:
    """
    Ren overgangsfunksjon for dra-for-å-male.

    Args:
        state: Nåværende tilstand (Idle eller Dragging)
        event: Pekerhendelse
        status_of: Slår opp nåværende status for en dato
        paintable: Om en dato kan merkes (hverdag og ikke helligdag)

    Returns:
        (ny tilstand, effekter som skal utføres i rekkefølge)
    """
    if isinstance(event, PointerUp):
        return IDLE, ()

    if isinstance(event, PointerDown):
        # Gammel bevegelse som aldri fikk pointer-up avsluttes først.
        return _start(event, status_of, paintable)

    if not isinstance(state, Dragging):
        return state, ()

    if isinstance(event, PointerMove):
        return _move(state, event, paintable)

    if isinstance(event, PointerOver):
        return _touch(state, [event.date], paintable)

    return state, ()


class DragPaintController:
    """Holder dra-tilstanden og skriver effektene til dagstatuslageret."""

    def __init__(self, store: DayStateStore):
        self._store = store
        self.state: DragState = IDLE

    @property
    def is_dragging(self) -> bool:
        return isinstance(self.state, Dragging)

    def handle(self, event: PointerEvent) -> list[Paint]:
        """
        Behandler en hendelse.

        Returns:
            Effektene som faktisk endret en dag
        """
        self.state, effects = transition(self.state, event, self._store.get_date)
        applied = [effect for effect in effects if self._store.set_date(effect.date, effect.status)]
        if applied:
            logger.debug("Painted %d day(s), state=%s", len(applied), type(self.state).__name__)
        return applied

    def cancel(self) -> None:
        self.state = IDLE
