import os
from dataclasses import dataclass
from typing import List
from urllib.parse import parse_qs, urlparse

from inxpress_rates.config.settings import CarrierConfig
from inxpress_rates.connector import INXPRESS_API_URL
from inxpress_rates.shipping.models import Order, OrderItem, ShippingDestination
from inxpress_rates.shipping.reporting import ErrorReporter, Severity

FIXTURES = os.path.join(os.path.abspath(os.path.dirname(__file__)), 'fixtures')

RATES_URL = INXPRESS_API_URL
CONFIG = CarrierConfig(account_id='ACME1', service_type_label='InXpress Service')


def load_fixture(file: str) -> str:
    with open(os.path.join(FIXTURES, file)) as content:
        return content.read()


def rating_xml(total_charge: str) -> str:
    return f'<?xml version="1.0"?><ratingResponse><totalCharge>{total_charge}</totalCharge></ratingResponse>'


def error_xml(*messages: str) -> str:
    body = ''.join(f'<message>{message}</message>' for message in messages)
    return f'<?xml version="1.0"?><errorResponse>{body}</errorResponse>'


def query_of(request) -> dict:
    """Query parameters of a recorded request, case preserved."""
    return {key: values[0] for key, values in parse_qs(urlparse(request.url).query).items()}


def make_order(postcode='10001', country_code='CA', items=None) -> Order:
    if items is None:
        items = [OrderItem(product_id='SKU-1', weight=2.3, width=10, height=5, length=8)]
    return Order(shipping=ShippingDestination(postcode=postcode, country_code=country_code), items=items)


@dataclass(frozen=True)
class Report:
    message: str
    code: str
    severity: Severity


class RecordingErrorReporter(ErrorReporter):
    """Keeps what was reported so tests can assert on it."""

    def __init__(self):
        self.reports: List[Report] = []

    def report(self, message: str, code: str, severity: Severity):
        self.reports.append(Report(message=message, code=code, severity=severity))
