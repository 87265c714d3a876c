"""Shared fixtures: realistic ipdata.co response payloads."""

import copy

import pytest

_GOOGLE_DNS = {
    "ip": "8.8.8.8",
    "is_eu": False,
    "city": "Mountain View",
    "region": "California",
    "region_code": "CA",
    "country_name": "United States",
    "country_code": "US",
    "continent_name": "North America",
    "continent_code": "NA",
    "latitude": 37.386,
    "longitude": -122.0838,
    "postal": "94035",
    "calling_code": "1",
    "flag": "https://ipdata.co/flags/us.png",
    "emoji_flag": "\U0001f1fa\U0001f1f8",
    "emoji_unicode": "U+1F1FA U+1F1F8",
    "asn": {
        "asn": "AS15169",
        "name": "Google LLC",
        "domain": "google.com",
        "route": "8.8.8.0/24",
        "type": "business",
    },
    "organisation": "Google LLC",
    "language": [{"name": "English", "native": "English"}],
    "currency": {
        "name": "US Dollar",
        "code": "USD",
        "symbol": "$",
        "native": "$",
        "plural": "US dollars",
    },
    "time_zone": {
        "name": "America/Los_Angeles",
        "abbr": "PDT",
        "offset": "-0700",
        "is_dst": True,
        "current_time": "2019-06-12T11:36:50.816075-07:00",
    },
    "threat": {
        "is_tor": False,
        "is_proxy": False,
        "is_anonymous": False,
        "is_known_attacker": False,
        "is_known_abuser": False,
        "is_threat": False,
        "is_bogon": False,
    },
}


@pytest.fixture
def lookup_payload():
    """A single-lookup response for 8.8.8.8."""
    return copy.deepcopy(_GOOGLE_DNS)


@pytest.fixture
def bulk_payload():
    """A bulk response: one good record, one Tor exit, one failure."""
    good = copy.deepcopy(_GOOGLE_DNS)
    del good["region_code"]
    good["message"] = ""

    tor = {
        "ip": "185.220.101.1",
        "is_eu": True,
        "city": "Berlin",
        "region": "Land Berlin",
        "country_name": "Germany",
        "country_code": "DE",
        "continent_name": "Europe",
        "continent_code": "EU",
        "latitude": 52.5167,
        "longitude": 13.4,
        "asn": {
            "asn": "AS205100",
            "name": "F3 Netze e.V.",
            "domain": "f3netze.de",
            "route": "185.220.101.0/24",
            "type": "hosting",
        },
        "language": [],
        "threat": {
            "is_tor": True,
            "is_proxy": False,
            "is_anonymous": True,
            "is_known_attacker": True,
            "is_known_abuser": False,
            "is_threat": True,
            "is_bogon": False,
        },
        "message": "",
    }

    failed = {"message": "10.0.0.1 is a private IP address"}

    return [good, tor, failed]
