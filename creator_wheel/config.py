import os

# Ubicación de referencia (Jerusalén); el usuario puede sobreescribirla por entorno
REFERENCE_LATITUDE = float(os.environ.get("WHEEL_LATITUDE", 31.7683))
REFERENCE_LONGITUDE = float(os.environ.get("WHEEL_LONGITUDE", 35.2137))
REFERENCE_TIMEZONE = os.environ.get("WHEEL_TIMEZONE", "Asia/Jerusalem")
REFERENCE_ENOCH_YEAR = 5996  # Año base de Enoj (equivale a 2025)
REFERENCE_GREGORIAN_YEAR = 2025

# Sunrise used when astral cannot resolve one (polar day/night), minutes past midnight
FALLBACK_SUNRISE_MINUTES = 320

DEFAULT_SIZE = float(os.environ.get("WHEEL_SIZE", 800))
FAST_TICK_SECONDS = float(os.environ.get("WHEEL_FAST_TICK", 1.0))
SLOW_TICK_SECONDS = float(os.environ.get("WHEEL_SLOW_TICK", 60.0))

# Weekday of day 1 of the reference year
STARTING_WEEKDAY = int(os.environ.get("WHEEL_STARTING_WEEKDAY", 1))

# "as-derived" keeps day 91 at 9/9; "solstice" puts the longest day on day 91
DAYNIGHT_MODEL = os.environ.get("WHEEL_DAYNIGHT_MODEL", "as-derived").strip().lower()

DEBUG = os.environ.get("WHEEL_DEBUG", "").strip().lower() in ("1", "true", "yes", "on")
