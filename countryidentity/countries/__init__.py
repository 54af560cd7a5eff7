"""Country entity resolution and identification."""

# Clean API that wraps the countryresolver implementation
from countryidentity.countries.countryapi import (
    is_code,
    is_country_flag,
    code_to_name,
    code_to_flag,
    flag_to_code,
    name_to_code,
    code,
    name,
    flag,
    country_identifier,
    country_identifiers,
    resolve_country,
    match_country,
    list_countries,
)
from countryidentity.countries.countryindex import (
    CountryRecord,
    load_countries,
    clear_cache,
)

__all__ = [
    "is_code",
    "is_country_flag",
    "code_to_name",
    "code_to_flag",
    "flag_to_code",
    "name_to_code",
    "code",
    "name",
    "flag",
    "country_identifier",
    "country_identifiers",
    "resolve_country",
    "match_country",
    "list_countries",
    "CountryRecord",
    "load_countries",
    "clear_cache",
]
