from . import config


def debug_any(anything, label=" Something: ", label2="DEBUG"):
    if config.DEBUG:
        print(f"[{label2}] {label}: {anything}", flush=True)


def debug_coordinate(coordinate, label="Coordinate", label2="DEBUG"):
    """Print a one-line summary of a CalendarCoordinate when WHEEL_DEBUG is on."""
    if not config.DEBUG:
        return
    print(
        f"[{label2}] {label} Día del año: {coordinate.day_of_year} "
        f"Mes: {coordinate.month} Día: {coordinate.day_of_month} "
        f"Semana: {coordinate.week_of_year} Día semana: {coordinate.day_of_week} "
        f"Parte: {coordinate.part_of_day}/{coordinate.minute}",
        flush=True,
    )
