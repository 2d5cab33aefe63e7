"""City names shown for team abbreviations."""
from __future__ import annotations

UNKNOWN_TEAM = "[unknown]"

CITY_NAMES = {
    "ANA": "Anaheim",
    "ARI": "Arizona",
    "BOS": "Boston",
    "BUF": "Buffalo",
    "CAR": "Carolina",
    "CBJ": "Columbus",
    "CGY": "Calgary",
    "CHI": "Chicago",
    "COL": "Colorado",
    "DAL": "Dallas",
    "DET": "Detroit",
    "EDM": "Edmonton",
    "FLA": "Florida",
    "LAK": "Los Angeles",
    "MIN": "Minnesota",
    "MTL": "Montreal",
    "NJD": "New Jersey",
    "NSH": "Nashville",
    # The two New York teams share a city
    "NYI": "NY Islanders",
    "NYR": "NY Rangers",
    "OTT": "Ottawa",
    "PHI": "Philadelphia",
    "PIT": "Pittsburgh",
    "SEA": "Seattle",
    "SJS": "San Jose",
    "STL": "St. Louis",
    "TBL": "Tampa Bay",
    "TOR": "Toronto",
    "UTA": "Utah",
    "VAN": "Vancouver",
    "VGK": "Vegas",
    "WPG": "Winnipeg",
    "WSH": "Washington",
}


def city_name(abbreviation: str) -> str:
    return CITY_NAMES.get(abbreviation, UNKNOWN_TEAM)
