"""Shared test fixtures and utilities for countryidentity tests."""

import pytest

from countryidentity.countries.countryindex import (
    CountryRecord,
    build_country_index,
    clear_cache,
    load_countries,
)


@pytest.fixture
def countries():
    """The packaged country table."""
    return load_countries()


@pytest.fixture
def small_index():
    """A tiny hand-built index for tests that must not depend on the full table.

    Includes two countries sharing the literal name "Congo" (first wins) and
    comma-reversed official names.
    """
    records = [
        CountryRecord("CD", ("Congo-Kinshasa", "Congo, The Democratic Republic of the", "Congo")),
        CountryRecord("CG", ("Congo-Brazzaville", "Republic of the Congo", "Congo")),
        CountryRecord("ES", ("Spain",)),
        CountryRecord("KP", ("North Korea", "Korea, Democratic People's Republic of")),
        CountryRecord("KR", ("South Korea", "Korea, Republic of")),
        CountryRecord("LC", ("Saint Lucia",)),
        CountryRecord("MD", ("Moldova", "Moldova, Republic of")),
    ]
    return build_country_index(records)


@pytest.fixture
def fresh_cache():
    """Clear memoized tables before and after a test that swaps data paths."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def sample_countries():
    """Fixture providing sample country names and their ISO2 codes."""
    return {
        "USA": "US",
        "United States": "US",
        "United Kingdom": "GB",
        "England": "GB",
        "Australia": "AU",
        "Canada": "CA",
        "Germany": "DE",
        "France": "FR",
    }
