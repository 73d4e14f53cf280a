# fastlonn/routes/calendar_api.py
"""
Calendar endpoints: holidays, month grids, day states and drag painting.
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from pydantic import BaseModel

from fastlonn.core.calendar_export import generate_ical
from fastlonn.core.calendar_grid import year_grid
from fastlonn.core.day_states import day_key, serialize_day_states
from fastlonn.core.drag_paint import (
    GridGeometry,
    Point,
    PointerDown,
    PointerEvent,
    PointerMove,
    PointerOver,
    PointerUp,
)
from fastlonn.core.grunnbelop import grunnbelop_for_year, is_estimated, six_g_for_year
from fastlonn.core.holidays import actual_work_days, holiday_names_for_year, is_paintable
from fastlonn.core.logging_config import get_logger
from fastlonn.core.models import DayStatus
from fastlonn.core.session import CalculatorSession
from fastlonn.core.validators import validate_date_params, validate_year
from fastlonn.routes.shared import get_session

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["calendar"])


# ============ Pydantic schemas ============


class DayStatusUpdate(BaseModel):
    status: DayStatus | None = None


class PointerEventIn(BaseModel):
    """Pekerhendelse fra klienten. Koordinater er klientpiksler."""

    type: Literal["down", "move", "over", "up"]
    month: int | None = None
    day: int | None = None
    selection_mode: DayStatus | None = None
    x: float | None = None
    y: float | None = None
    geometry: GridGeometry | None = None


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _to_event(year: int, payload: PointerEventIn) -> PointerEvent:
    """Oversetter en forespørsel til en hendelse for tilstandsmaskinen."""
    if payload.type == "up":
        return PointerUp()

    point = Point(x=payload.x, y=payload.y) if payload.x is not None and payload.y is not None else None

    if payload.type == "move":
        if point is None:
            raise _bad_request("Pointer move requires x and y")
        return PointerMove(point=point)

    if payload.month is None or payload.day is None:
        raise _bad_request(f"Pointer {payload.type} requires month and day")
    date = validate_date_params(year, payload.month, payload.day)

    if payload.type == "over":
        return PointerOver(date=date)

    if payload.selection_mode is None:
        raise _bad_request("Pointer down requires selection_mode")
    return PointerDown(
        date=date,
        selection_mode=payload.selection_mode,
        point=point,
        geometry=payload.geometry,
    )


def _require_active_year(session: CalculatorSession, year: int) -> None:
    if year != session.year:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Year {year} is not the selected year ({session.year})",
        )


def _counts_json(session: CalculatorSession, year: int) -> dict[str, int]:
    return {s.value: n for s, n in session.days.counts_by_type(year).items()}


# ============ Endpoints ============


@router.get("/year/{year}/holidays")
async def get_holidays(year: int):
    """Helligdager med navn og antall faktiske arbeidsdager."""
    year = validate_year(year)
    return {
        "year": year,
        "holidays": [{"date": d.isoformat(), "name": name} for d, name in holiday_names_for_year(year).items()],
        "actual_work_days": actual_work_days(year),
    }


@router.get("/grunnbelop/{year}")
async def get_grunnbelop(year: int):
    year = validate_year(year)
    return {
        "year": year,
        "grunnbelop": grunnbelop_for_year(year),
        "six_g": six_g_for_year(year),
        "estimated": is_estimated(year),
    }


@router.get("/year/{year}/grid")
async def get_grid(year: int, session: CalculatorSession = Depends(get_session)):
    """Tolv månedsrutenett med status per celle."""
    year = validate_year(year)
    days = session.days.days(year)
    return {"year": year, "months": [m.model_dump(mode="json") for m in year_grid(year, days.get)]}


@router.get("/year/{year}/days")
async def get_days(year: int, session: CalculatorSession = Depends(get_session)):
    year = validate_year(year)
    return {
        "year": year,
        "days": serialize_day_states(session.days.days(year)),
        "counts": _counts_json(session, year),
    }


@router.put("/year/{year}/days/{month}/{day}")
async def put_day(
    year: int,
    month: int,
    day: int,
    update: DayStatusUpdate,
    session: CalculatorSession = Depends(get_session),
):
    """Setter eller fjerner status for én dag."""
    date = validate_date_params(year, month, day)
    if update.status is not None and not is_paintable(date):
        raise _bad_request("Weekends and public holidays cannot be marked")

    changed = session.days.set_date(date, update.status)
    return {
        "key": day_key(date),
        "status": update.status.value if update.status else None,
        "changed": changed,
        "counts": _counts_json(session, year),
    }


@router.post("/year/{year}/pointer")
async def post_pointer_event(
    year: int,
    payload: PointerEventIn,
    session: CalculatorSession = Depends(get_session),
):
    """
    Én pekerhendelse fra dra-for-å-male.

    Pointer-up sendes fra en lytter på hele vinduet, så bevegelsen avsluttes
    også når musen slippes utenfor kalenderen.
    """
    year = validate_year(year)
    event = _to_event(year, payload)
    if not isinstance(event, PointerUp):
        _require_active_year(session, year)

    painted = session.controller.handle(event)
    return {
        "dragging": session.controller.is_dragging,
        "painted": [
            {
                "date": p.date.isoformat(),
                "key": day_key(p.date),
                "status": p.status.value if p.status else None,
            }
            for p in painted
        ],
        "counts": _counts_json(session, session.year),
    }


@router.get("/year/{year}/export.ics")
async def export_ical(year: int, session: CalculatorSession = Depends(get_session)):
    """Merkede perioder som iCal-fil."""
    year = validate_year(year)
    ical = generate_ical(year, session.days.days(year))
    return Response(
        content=ical,
        media_type="text/calendar; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="fravaer-{year}.ics"'},
    )
