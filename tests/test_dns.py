import re

import pytest

from jaegerkit.dns import dns_name

_VALID_LABEL = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("simplest", "simplest"),
        ("instance.with.dots-collector-headless", "instance-with-dots-collector-headless"),
        ("TestQueryDottedServiceName.With.Dots", "testquerydottedservicename-with-dots"),
        ("Service🦄", "service-z"),
        ("📈Stock-Tracker", "a-stock-tracker"),
    ],
)
def test_dns_name(given, expected):
    result = dns_name(given)
    assert result == expected
    assert _VALID_LABEL.match(result), f"{result} is not a valid name"


def test_dns_name_keeps_digits():
    assert dns_name("Node42") == "node42"


def test_dns_name_is_idempotent_on_valid_names():
    once = dns_name("My.Service_Name")
    assert dns_name(once) == once