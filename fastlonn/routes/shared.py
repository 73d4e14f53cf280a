# fastlonn/routes/shared.py
"""
Shared utilities and templates for route modules.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from fastlonn.core.formatting import format_decimal, format_nok
from fastlonn.core.models import DAY_STATUS_LABELS, CalculationMethod, DayStatus
from fastlonn.core.session import CalculatorSession

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Shared Jinja2 templates instance
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Number filters – use {{ amount | nok }} and {{ value | decimal }} in templates
templates.env.filters["nok"] = format_nok
templates.env.filters["decimal"] = format_decimal

# Status and method choices so templates don't hardcode them
templates.env.globals["day_statuses"] = list(DayStatus)
templates.env.globals["day_status_labels"] = DAY_STATUS_LABELS
templates.env.globals["calculation_methods"] = list(CalculationMethod)


def get_session(request: Request) -> CalculatorSession:
    """Dependency for the shared calculator session created at startup."""
    return request.app.state.calculator
