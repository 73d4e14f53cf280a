# fastlonn/routes/public.py
"""
HTML page for the calculator.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from fastlonn.core.calendar_grid import year_grid
from fastlonn.core.grunnbelop import is_estimated, six_g_for_year
from fastlonn.core.holidays import actual_work_days
from fastlonn.core.session import CalculatorSession
from fastlonn.routes.shared import get_session, templates

router = APIRouter(tags=["public"])


@router.get("/", response_class=HTMLResponse, name="calculator")
async def calculator_page(request: Request, session: CalculatorSession = Depends(get_session)):
    """Kalkulatoren for valgt år."""
    year = session.year
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "year": year,
            "form": session.state.form(),
            "months": year_grid(year, session.days.get_date),
            "counts": session.days.counts_by_type(year),
            "result": session.result(),
            "actual_work_days": actual_work_days(year),
            "six_g": six_g_for_year(year),
            "six_g_estimated": is_estimated(year),
        },
    )
