from __future__ import annotations

from typing import Any

import pytest

import scripts.countries as cli
from countries_graphql.client.errors import HTTPStatusError
from countries_graphql.domain.countries import Country, CountryDetail, Subdivision


class FakeGraphQLClient:
    body: bytes = b""
    error: Exception | None = None

    def __init__(self) -> None:
        self.closed = False

    @classmethod
    def from_config(cls, config, **kwargs: Any) -> "FakeGraphQLClient":
        return cls()

    async def post(self, query: str, variables: dict[str, Any] | None = None) -> bytes:
        if self.error is not None:
            raise self.error
        return self.body

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client(monkeypatch):
    monkeypatch.setattr(cli, "GraphQLClient", FakeGraphQLClient)
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    FakeGraphQLClient.body = b""
    FakeGraphQLClient.error = None
    return FakeGraphQLClient


def test_format_country_line() -> None:
    assert cli.format_country_line(Country(code="AQ", name="Antarctica", capital=None, emoji="🇦🇶")) == "🇦🇶  Antarctica"
    assert (
        cli.format_country_line(Country(code="CA", name="Canada", capital="Ottawa", emoji="🇨🇦"))
        == "🇨🇦  Canada (Ottawa)"
    )


def test_format_detail_variants() -> None:
    assert cli.format_detail("ZZ", None)[-1] == "No additional details available"

    monaco = CountryDetail(name="Monaco", capital="Monaco", emoji="🇲🇨")
    assert cli.format_detail("MC", monaco)[-1] == "No additional details available"

    us = CountryDetail(name="United States", capital=None, emoji="🇺🇸", subdivisions=(Subdivision(name="Texas"),))
    assert cli.format_detail("US", us) == ["🇺🇸  United States", "Code: US", "States/Provinces:", "  - Texas"]


@pytest.mark.asyncio
async def test_main_list(fake_client, capsys) -> None:
    fake_client.body = '{"data":{"countries":[{"code":"CA","name":"Canada","capital":"Ottawa","emoji":"🇨🇦"}]}}'.encode()

    assert await cli.main(["list"]) == 0
    assert "🇨🇦  Canada (Ottawa)" in capsys.readouterr().out.splitlines()


@pytest.mark.asyncio
async def test_main_detail_failure_exits_1(fake_client, capsys) -> None:
    fake_client.error = HTTPStatusError(500)

    assert await cli.main(["detail", "us"]) == 1
    err = capsys.readouterr().err
    assert "Error loading details" in err
    assert "HTTP 500" in err
