"""Click CLI with Rich output for inspecting saved ipdata.co responses."""

from __future__ import annotations

import json as json_lib
import logging
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .codec import load_json, parse_bulk_response, parse_lookup, to_wire
from .config import DEFAULT_LOG_LEVEL, MAX_BULK_IPS, VERBOSE_LOG_LEVEL
from .exceptions import IpdataError
from .logging_setup import setup_logging
from .models import LookupResult, ThreatInfo
from .normalize import normalize_bulk_response

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)

_THREAT_LABELS = [
    ("is_tor", "tor"),
    ("is_proxy", "proxy"),
    ("is_anonymous", "anonymous"),
    ("is_known_attacker", "attacker"),
    ("is_known_abuser", "abuser"),
    ("is_threat", "threat"),
    ("is_bogon", "bogon"),
]


def _load(path: Path):
    try:
        return load_json(path)
    except (OSError, ValueError) as exc:
        err_console.print(f"[red]Could not read {path}:[/red] {exc}")
        raise SystemExit(1) from exc


def _fail(exc: IpdataError) -> NoReturn:
    err_console.print(f"[red]Invalid response:[/red] {exc}")
    raise SystemExit(1) from exc


def _threat_summary(threat: ThreatInfo | None) -> str:
    if threat is None:
        return "—"
    flags = [label for attr, label in _THREAT_LABELS if getattr(threat, attr)]
    return ", ".join(flags) if flags else "clean"


def _asn_summary(result: LookupResult) -> str:
    return " ".join(part for part in (result.asn.asn, result.asn.name) if part) or "—"


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """ipdata — Inspect saved ipdata.co lookup responses."""
    setup_logging(VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL)


@cli.command()
@click.argument("path", type=_FILE)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def show(path: Path, as_json: bool):
    """Show a saved single-IP lookup response."""
    try:
        result = parse_lookup(_load(path))
    except IpdataError as exc:
        _fail(exc)

    if as_json:
        click.echo(json_lib.dumps(to_wire(result), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Lookup: {result.ip or '—'}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    location = ", ".join(p for p in (result.city, result.region, result.postal) if p)
    if result.region_code:
        location += f" ({result.region_code})"

    table.add_row("IP", result.ip)
    table.add_row("Organisation", result.organization or "—")
    table.add_row("ASN", _asn_summary(result))
    table.add_row("Location", location or "—")
    table.add_row(
        "Country",
        f"{result.country_name} ({result.country_code}) {result.emoji_flag}".strip(),
    )
    table.add_row("Continent", f"{result.continent_name} ({result.continent_code})")
    table.add_row("Coordinates", f"{result.latitude}, {result.longitude}")
    table.add_row("Calling code", result.calling_code or "—")
    table.add_row("EU member", "yes" if result.is_eu else "no")

    if result.languages:
        table.add_row(
            "Languages",
            ", ".join(f"{lang.name} ({lang.native})" for lang in result.languages),
        )
    if result.currency is not None:
        table.add_row(
            "Currency", f"{result.currency.name} ({result.currency.code})"
        )
    if result.time_zone is not None:
        tz = result.time_zone
        value = f"{tz.name} {tz.abbreviation} {tz.offset}"
        if tz.current_time:
            value += f" — {tz.current_time}"
        table.add_row("Time zone", value)
    table.add_row("Threat", _threat_summary(result.threat))

    console.print(table)


@cli.command()
@click.argument("path", type=_FILE)
@click.option(
    "--ip",
    "ips",
    multiple=True,
    help="Requested IPs, in request order. Repeat for each IP.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def bulk(path: Path, ips: tuple[str, ...], as_json: bool):
    """Normalize a saved bulk lookup response."""
    try:
        records = parse_bulk_response(_load(path))
        if len(records) > MAX_BULK_IPS:
            logger.warning(
                "Bulk response has %d records; the API accepts at most %d IPs "
                "per request",
                len(records),
                MAX_BULK_IPS,
            )
        outcome = normalize_bulk_response(records, list(ips) if ips else None)
    except IpdataError as exc:
        _fail(exc)

    if as_json:
        data = {
            "results": {ip: to_wire(r) for ip, r in outcome.results.items()},
            "failures": outcome.failures,
        }
        click.echo(json_lib.dumps(data, indent=2, ensure_ascii=False))
        return

    if outcome.results:
        table = Table(
            title=f"Bulk lookup ({len(outcome.results)} result(s))",
            show_header=True,
            header_style="bold",
        )
        table.add_column("Requested IP")
        table.add_column("Country")
        table.add_column("City")
        table.add_column("ASN")
        table.add_column("Threat")

        for ip, result in outcome.results.items():
            table.add_row(
                ip,
                result.country_code or "—",
                result.city or "—",
                _asn_summary(result),
                _threat_summary(result.threat),
            )
        console.print(table)
    else:
        console.print("[yellow]No successful lookups in this response.[/yellow]")

    if outcome.failures:
        failed = Table(title="Failed lookups", show_header=True, header_style="bold")
        failed.add_column("Requested IP")
        failed.add_column("Message")
        for ip, message in outcome.failures.items():
            failed.add_row(ip, message)
        console.print(failed)
