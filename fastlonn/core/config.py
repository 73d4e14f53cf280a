# fastlonn/core/config.py

import os
from typing import Final

# ==========================
# Miljø
# ==========================

#: Produksjonsmodus styrer logging, CORS og Sentry.
IS_PRODUCTION: Final[bool] = os.getenv("PRODUCTION", "false").lower() == "true"

#: SQLAlchemy-URL for nøkkel/verdi-lageret. Standard er en lokal SQLite-fil.
DATABASE_URL: Final[str] = os.getenv("DATABASE_URL", "sqlite:///./fastlonn.db")

#: Katalog for loggfiler.
LOG_DIR_NAME: Final[str] = os.getenv("LOG_DIR", "logs")

#: Nivå for konsollen i utvikling; produksjon logger alltid fra INFO.
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "DEBUG").upper()

#: Versjon som vises i /health og sendes til Sentry.
APP_VERSION: Final[str] = "0.3.0"


# ==========================
# Standardverdier for skjemaet
# ==========================

#: Feriepengeprosent for de fleste arbeidstakere (4 uker + 1 dag ferie gir 10,2,
#: avtalefestet ferie gir 12).
DEFAULT_VACATION_PAY_PERCENT: Final[float] = 12.0

#: Normal arbeidsdag i timer (37,5 timer i uken).
DEFAULT_HOURS_PER_DAY: Final[float] = 7.5

#: Beregningsmetoden som brukes når ingenting er valgt.
DEFAULT_CALCULATION_METHOD: Final[str] = "standard"


# ==========================
# Lønnsberegning
# ==========================

#: Nominelt antall arbeidsdager i året (5 dager * 52 uker).
NOMINAL_WORK_DAYS_PER_YEAR: Final[int] = 5 * 52

#: Nav betaler feriepenger av sykepenger for maksimalt 48 dager per år.
NAV_SICK_VACATION_DAY_CAP: Final[int] = 48

#: Nav dekker foreldrepenger og sykepenger opp til 6G.
G_MULTIPLIER_CAP: Final[int] = 6


# ==========================
# Kalender
# ==========================

#: Kolonner (mandag til søndag) i et månedsrutenett.
GRID_COLUMNS: Final[int] = 7

#: Rader i et månedsrutenett; seks uker dekker alle måneder.
GRID_ROWS: Final[int] = 6

#: Gyldig årsintervall for API-et.
MIN_YEAR: Final[int] = 1900
MAX_YEAR: Final[int] = 2200
