from __future__ import annotations

import logging
import os

# --- Página ---
PAGE_TITLE = "Convertidor de Temperatura"
PAGE_ICON = "🌡️"
LAYOUT = "centered"

# --- Claves de st.session_state ---
KEY_CELSIUS = "celsius_txt"  # texto crudo del campo (CelsiusInput)
KEY_PULSO = "_pulso"  # bool
KEY_PULSO_N = "_pulso_n"  # int, generación de la animación

# --- Logging ---
LOG_LEVEL_ENV = "CONVERTIDOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level() -> int:
    """Nivel tomado de CONVERTIDOR_LOG_LEVEL; un nombre desconocido vuelve a WARNING."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    # Streamlit re-ejecuta el script en cada evento: solo la primera vez instala handler
    logger = logging.getLogger("convertidor")
    logger.setLevel(log_level())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
