# fastlonn/routes/settings_api.py
"""
Form state, year selection, reset and calculation results.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fastlonn.core.logging_config import get_logger
from fastlonn.core.session import CalculatorSession
from fastlonn.core.state import FormUpdate
from fastlonn.core.validators import validate_year
from fastlonn.routes.shared import get_session

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["settings"])


class YearSelection(BaseModel):
    year: int


def _state_response(session: CalculatorSession) -> dict:
    result = session.result()
    return {
        "form": session.state.form().model_dump(mode="json"),
        "year": session.year,
        "result": result.model_dump(mode="json") if result else None,
    }


@router.get("/state")
async def get_state(session: CalculatorSession = Depends(get_session)):
    """Lagret skjema og resultat for valgt år."""
    return _state_response(session)


@router.put("/settings")
async def put_settings(update: FormUpdate, session: CalculatorSession = Depends(get_session)):
    """Oppdaterer skjemafelt. Tall kan skrives med komma og mellomrom."""
    session.state.update_form(update)
    return _state_response(session)


@router.put("/year")
async def put_year(selection: YearSelection, session: CalculatorSession = Depends(get_session)):
    session.select_year(validate_year(selection.year))
    return _state_response(session)


@router.post("/reset")
async def post_reset(session: CalculatorSession = Depends(get_session)):
    """Nullstiller skjemaet og dagene i valgt år."""
    session.reset()
    return _state_response(session)


@router.get("/year/{year}/result")
async def get_result(year: int, session: CalculatorSession = Depends(get_session)):
    """Resultat for et år, eller null når inndata mangler."""
    year = validate_year(year)
    result = session.result(year)
    return {"year": year, "result": result.model_dump(mode="json") if result else None}
