"""UK postcode validation, formatting and county lookup"""

import re

_POSTCODE_PATTERN = re.compile(r"^[A-Z]{1,2}\d{1,2}[A-Z]?\d[A-Z]{2}$", re.IGNORECASE)
_AREA_PATTERN = re.compile(r"^([A-Z]{1,2})")

# Postcode area -> ceremonial/administrative county, used when imported
# addresses carry no county
POSTCODE_COUNTY_MAP = {
    # Greater London
    "E": "Greater London", "EC": "Greater London", "N": "Greater London", "NW": "Greater London",
    "SE": "Greater London", "SW": "Greater London", "W": "Greater London", "WC": "Greater London",
    # South East
    "BN": "East Sussex", "BR": "Greater London", "CR": "Greater London", "CT": "Kent",
    "DA": "Kent", "EN": "Hertfordshire", "GU": "Surrey", "HA": "Greater London",
    "HP": "Buckinghamshire", "IG": "Greater London", "KT": "Surrey", "LU": "Bedfordshire",
    "ME": "Kent", "MK": "Buckinghamshire", "OX": "Oxfordshire", "PO": "Hampshire",
    "RG": "Berkshire", "RH": "Surrey", "RM": "Greater London", "SG": "Hertfordshire",
    "SL": "Berkshire", "SM": "Greater London", "SO": "Hampshire", "SS": "Essex",
    "TN": "Kent", "TW": "Greater London", "UB": "Greater London", "WD": "Hertfordshire",
    # South West
    "BA": "Somerset", "BH": "Dorset", "BS": "Avon", "DT": "Dorset", "EX": "Devon",
    "GL": "Gloucestershire", "PL": "Devon", "SN": "Wiltshire", "SP": "Wiltshire",
    "TA": "Somerset", "TQ": "Devon", "TR": "Cornwall",
    # West Midlands
    "B": "West Midlands", "CV": "West Midlands", "DY": "West Midlands", "HR": "Herefordshire",
    "ST": "Staffordshire", "TF": "Shropshire", "WR": "Worcestershire", "WS": "West Midlands",
    "WV": "West Midlands",
    # East Midlands
    "DE": "Derbyshire", "DN": "South Yorkshire", "LE": "Leicestershire", "LN": "Lincolnshire",
    "NG": "Nottinghamshire", "NN": "Northamptonshire", "PE": "Cambridgeshire",
    # East of England
    "AL": "Hertfordshire", "CB": "Cambridgeshire", "CM": "Essex", "CO": "Essex",
    "IP": "Suffolk", "NR": "Norfolk",
    # Yorkshire & Humber
    "BD": "West Yorkshire", "HD": "West Yorkshire", "HG": "North Yorkshire", "HU": "East Yorkshire",
    "HX": "West Yorkshire", "LS": "West Yorkshire", "S": "South Yorkshire", "WF": "West Yorkshire",
    "YO": "North Yorkshire",
    # North West
    "BB": "Lancashire", "BL": "Greater Manchester", "CA": "Cumbria", "CH": "Cheshire",
    "CW": "Cheshire", "FY": "Lancashire", "L": "Merseyside", "LA": "Cumbria",
    "M": "Greater Manchester", "OL": "Greater Manchester", "PR": "Lancashire",
    "SK": "Cheshire", "WA": "Cheshire", "WN": "Greater Manchester",
    # North East
    "DH": "County Durham", "DL": "County Durham", "NE": "Tyne and Wear", "SR": "Tyne and Wear",
    "TS": "Cleveland",
    # Wales
    "CF": "South Glamorgan", "LD": "Powys", "LL": "Gwynedd", "NP": "Gwent",
    "SA": "West Glamorgan", "SY": "Powys",
    # Scotland
    "AB": "Aberdeenshire", "DD": "Angus", "DG": "Dumfries and Galloway",
    "EH": "City of Edinburgh", "FK": "Stirling", "G": "City of Glasgow",
    "IV": "Highland", "KA": "Ayrshire", "KW": "Highland", "KY": "Fife",
    "ML": "South Lanarkshire", "PA": "Renfrewshire", "PH": "Perth and Kinross",
    "TD": "Scottish Borders", "ZE": "Shetland Islands",
    # Northern Ireland
    "BT": "County Antrim",
}


def _compact(postcode: str) -> str:
    return "".join(postcode.split()).upper()


def validate_uk_postcode(postcode: str | None) -> bool:
    """Check a postcode against the Royal Mail outward/inward format"""
    if not postcode or not isinstance(postcode, str):
        return False
    return bool(_POSTCODE_PATTERN.match(_compact(postcode)))


def format_uk_postcode(postcode: str | None) -> str:
    """
    Normalise a postcode to upper case with one space before the inward code.

    Invalid input is returned unchanged so the caller can flag it.
    """
    if not postcode:
        return ""
    if not validate_uk_postcode(postcode):
        return postcode

    cleaned = _compact(postcode)
    return f"{cleaned[:-3]} {cleaned[-3:]}"


def county_from_postcode(postcode: str | None) -> str:
    """Look up the county for a postcode area; empty string if unknown"""
    if not postcode:
        return ""

    match = _AREA_PATTERN.match(_compact(postcode))
    if not match:
        return ""

    area = match.group(1)
    if len(area) == 2 and area in POSTCODE_COUNTY_MAP:
        return POSTCODE_COUNTY_MAP[area]
    return POSTCODE_COUNTY_MAP.get(area[0], "")
