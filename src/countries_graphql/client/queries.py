from __future__ import annotations

# Sent verbatim; parameterized only through `variables`.
GET_ALL_COUNTRIES = "query GetAllCountries { countries { code name capital emoji } }"

GET_COUNTRY_INFO = (
    "query GetCountryInfo($code: ID!) { country(code: $code) { name capital emoji states { name } } }"
)
