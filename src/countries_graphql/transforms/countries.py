from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field, ValidationError

from countries_graphql.client.errors import SchemaError
from countries_graphql.domain.countries import Country, CountryDetail, Subdivision
from countries_graphql.transforms.envelope import format_validation_error, unwrap_data


class CountryIn(BaseModel):
    code: str = Field(min_length=1)
    name: str
    capital: str | None = None
    emoji: str


class StateIn(BaseModel):
    name: str


class CountryInfoIn(BaseModel):
    name: str
    capital: str | None = None
    emoji: str
    states: list[StateIn] | None = None


class CountriesPayloadV1(BaseModel):
    """Shape A: data.countries"""

    version: ClassVar[int] = 1

    countries: list[CountryIn]


class CountryDetailPayloadV1(BaseModel):
    """
    Shape B: data.country
    The key is required; a null value means "no such country".
    """

    version: ClassVar[int] = 1

    country: CountryInfoIn | None


def _validate(schema: type[BaseModel], data: dict[str, Any]) -> Any:
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise SchemaError(f"{schema.__name__}: {format_validation_error(e)}") from e


def decode_countries(raw: bytes) -> list[Country]:
    """
    RAW bytes -> list[Country], server order preserved.
    """
    payload: CountriesPayloadV1 = _validate(CountriesPayloadV1, unwrap_data(raw))
    return [
        Country(code=c.code, name=c.name, capital=c.capital, emoji=c.emoji)
        for c in payload.countries
    ]


def decode_country_detail(raw: bytes) -> CountryDetail | None:
    """
    RAW bytes -> CountryDetail, or None when the server returned `country: null`.
    """
    payload: CountryDetailPayloadV1 = _validate(CountryDetailPayloadV1, unwrap_data(raw))
    info = payload.country
    if info is None:
        return None
    return CountryDetail(
        name=info.name,
        capital=info.capital,
        emoji=info.emoji,
        subdivisions=tuple(Subdivision(name=s.name) for s in info.states or []),
    )
