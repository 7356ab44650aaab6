from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_DIR))

from countries_graphql.client.api_client import GraphQLClient  # noqa: E402
from countries_graphql.client.errors import CountriesClientError  # noqa: E402
from countries_graphql.client.operations import describe_error, get_country_detail, list_countries  # noqa: E402
from countries_graphql.domain.countries import Country, CountryDetail  # noqa: E402
from countries_graphql.utils.config import load_api_config  # noqa: E402
from countries_graphql.utils.logging import setup_logging  # noqa: E402


def format_country_line(country: Country) -> str:
    if country.capital:
        return f"{country.emoji}  {country.name} ({country.capital})"
    return f"{country.emoji}  {country.name}"


def format_detail(code: str, detail: CountryDetail | None) -> list[str]:
    if detail is None:
        return [f"Code: {code}", "No additional details available"]

    lines = [f"{detail.emoji}  {detail.name}"]
    if detail.capital:
        lines.append(f"Capital: {detail.capital}")
    lines.append(f"Code: {code}")
    if detail.subdivisions:
        lines.append("States/Provinces:")
        lines.extend(f"  - {s.name}" for s in detail.subdivisions)
    else:
        lines.append("No additional details available")
    return lines


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Browse countries from the Countries GraphQL API")
    parser.add_argument("--config", default=None, help="Path to api.yaml (default: config/api.yaml)")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all countries")
    detail_p = sub.add_parser("detail", help="Show one country and its subdivisions")
    detail_p.add_argument("code", help="Country code, e.g. US")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)
    client = GraphQLClient.from_config(load_api_config(args.config))

    try:
        if args.command == "list":
            countries = await list_countries(client)
            for c in countries:
                print(format_country_line(c))
        else:
            code = args.code.upper()
            detail = await get_country_detail(client, code)
            for line in format_detail(code, detail):
                print(line)
    except CountriesClientError as e:
        label = "Failed to load countries" if args.command == "list" else "Error loading details"
        print(f"❌ {label}: {describe_error(e)}", file=sys.stderr)
        return 1
    finally:
        await client.aclose()

    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
