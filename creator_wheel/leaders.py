from typing import Dict

from .model import LeaderQuadrant, CREATOR_YEAR_DAYS, normalize_day_of_year

# Último día de cada cuadrante; el último absorbe los días fuera del tiempo
QUADRANT_END_DAYS = (91, 182, 273)

LEADERS = (
    LeaderQuadrant(0, "Malki'el", "Moses & Aaron", "#fbbf24", "Lion", (1, 2, 3)),
    LeaderQuadrant(1, "Hemel-melek", "Kohath", "#22c55e", "Man", (4, 5, 6)),
    LeaderQuadrant(2, "Mel'eyal", "Gershon", "#f97316", "Ox", (7, 8, 9)),
    LeaderQuadrant(3, "Nar'el", "Moses & Merari", "#3b82f6", "Eagle", (10, 11, 12)),
)

MONTHLY_LEADERS = (
    {"month": 1, "name": "Adnar'el", "tribe": "Yehudah", "season_index": 0},
    {"month": 2, "name": "Yahsu-sa'el", "tribe": "Yissachar", "season_index": 0},
    {"month": 3, "name": "Olam'el", "tribe": "Zevulun", "season_index": 0},
    {"month": 4, "name": "Barak'el", "tribe": "Re'uven", "season_index": 1},
    {"month": 5, "name": "Zelebsa'el", "tribe": "Shimon", "season_index": 1},
    {"month": 6, "name": "Hilah-Yahseph", "tribe": "Gad", "season_index": 1},
    {"month": 7, "name": "Adnar'el", "tribe": "Efrayim", "season_index": 2},
    {"month": 8, "name": "Yahsusa'el", "tribe": "Menasheh", "season_index": 2},
    {"month": 9, "name": "Elomi'el", "tribe": "Binyamin", "season_index": 2},
    {"month": 10, "name": "Barka'el", "tribe": "Dan", "season_index": 3},
    {"month": 11, "name": "Gida'yi'el", "tribe": "Asher", "season_index": 3},
    {"month": 12, "name": "Ki'el", "tribe": "Naftali", "season_index": 3},
)

INFINITY_LEADER = {
    "name": "Asfa'el",
    "role": "Leader of the Days Out of Time",
}


def leader_index(day_of_year) -> int:
    day = normalize_day_of_year(day_of_year)
    for index, end_day in enumerate(QUADRANT_END_DAYS):
        if day <= end_day:
            return index
    return len(QUADRANT_END_DAYS)


def leader_for_day(day_of_year) -> LeaderQuadrant:
    return LEADERS[leader_index(day_of_year)]


def monthly_leader(month) -> Dict:
    month = max(1, min(12, int(month)))
    return dict(MONTHLY_LEADERS[month - 1])


def leader_name_for_day(day_of_year) -> str:
    """Name of whoever leads the given day: Asfa'el for the days out of time."""
    if normalize_day_of_year(day_of_year) > CREATOR_YEAR_DAYS:
        return INFINITY_LEADER["name"]
    return leader_for_day(day_of_year).name
