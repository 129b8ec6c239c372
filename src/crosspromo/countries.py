from typing import Dict, List, Tuple

# Storefronts queried for cross-market rating aggregation
MAJOR_MARKETS: List[str] = [
    "us", "gb", "ca", "au", "de", "fr", "it", "es", "nl", "se",
    "no", "dk", "fi", "jp", "kr", "cn", "hk", "tw", "sg", "in",
    "br", "mx", "ar", "cl", "co", "pe", "ru", "tr", "il", "za",
]

DEFAULT_COUNTRY = "us"

SUPPORTED_COUNTRIES: Dict[str, str] = {
    # Americas
    "us": "United States",
    "ca": "Canada",
    "mx": "Mexico",
    "br": "Brazil",
    "ar": "Argentina",
    "cl": "Chile",
    "co": "Colombia",
    "pe": "Peru",
    "uy": "Uruguay",
    "py": "Paraguay",
    "bo": "Bolivia",
    "ec": "Ecuador",
    "ve": "Venezuela",
    "cr": "Costa Rica",
    "gt": "Guatemala",
    "hn": "Honduras",
    "ni": "Nicaragua",
    "pa": "Panama",
    "sv": "El Salvador",
    "do": "Dominican Republic",
    "jm": "Jamaica",
    "tt": "Trinidad and Tobago",
    "bb": "Barbados",
    # Europe
    "gb": "United Kingdom",
    "de": "Germany",
    "fr": "France",
    "it": "Italy",
    "es": "Spain",
    "nl": "Netherlands",
    "be": "Belgium",
    "at": "Austria",
    "ch": "Switzerland",
    "se": "Sweden",
    "no": "Norway",
    "dk": "Denmark",
    "fi": "Finland",
    "ie": "Ireland",
    "pt": "Portugal",
    "lu": "Luxembourg",
    "gr": "Greece",
    "cy": "Cyprus",
    "mt": "Malta",
    "pl": "Poland",
    "cz": "Czech Republic",
    "sk": "Slovakia",
    "hu": "Hungary",
    "si": "Slovenia",
    "hr": "Croatia",
    "bg": "Bulgaria",
    "ro": "Romania",
    "ee": "Estonia",
    "lv": "Latvia",
    "lt": "Lithuania",
    "ru": "Russia",
    "ua": "Ukraine",
    "by": "Belarus",
    "md": "Moldova",
    "tr": "Turkey",
    # Asia Pacific
    "jp": "Japan",
    "kr": "South Korea",
    "cn": "China",
    "hk": "Hong Kong",
    "tw": "Taiwan",
    "sg": "Singapore",
    "my": "Malaysia",
    "th": "Thailand",
    "ph": "Philippines",
    "id": "Indonesia",
    "vn": "Vietnam",
    "in": "India",
    "lk": "Sri Lanka",
    "pk": "Pakistan",
    "bd": "Bangladesh",
    "np": "Nepal",
    "au": "Australia",
    "nz": "New Zealand",
    "fj": "Fiji",
    # Middle East & Africa
    "ae": "United Arab Emirates",
    "sa": "Saudi Arabia",
    "kw": "Kuwait",
    "qa": "Qatar",
    "bh": "Bahrain",
    "om": "Oman",
    "jo": "Jordan",
    "lb": "Lebanon",
    "il": "Israel",
    "eg": "Egypt",
    "za": "South Africa",
    "ke": "Kenya",
    "ng": "Nigeria",
    "gh": "Ghana",
    "ug": "Uganda",
    "tz": "Tanzania",
    "ma": "Morocco",
    "tn": "Tunisia",
    "dz": "Algeria",
    "mz": "Mozambique",
    "zm": "Zambia",
    "zw": "Zimbabwe",
    "bw": "Botswana",
    "na": "Namibia",
    "sz": "Eswatini",
    "mw": "Malawi",
    "mg": "Madagascar",
}


def is_supported(country_code: str) -> bool:
    return (country_code or "").lower() in SUPPORTED_COUNTRIES


def country_name(country_code: str) -> str:
    return SUPPORTED_COUNTRIES.get(country_code.lower(), country_code.upper())


def sorted_country_codes() -> List[str]:
    """Supported codes ordered by display name."""
    return sorted(SUPPORTED_COUNTRIES, key=lambda code: SUPPORTED_COUNTRIES[code])


def major_markets_info() -> List[Tuple[str, str]]:
    info = [(code, SUPPORTED_COUNTRIES[code]) for code in MAJOR_MARKETS if code in SUPPORTED_COUNTRIES]
    return sorted(info, key=lambda pair: pair[1])
