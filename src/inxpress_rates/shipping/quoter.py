import logging
from decimal import Decimal
from typing import Dict, Optional, Union

from ..config.settings import CarrierConfig
from ..connector import InXpressConnector
from ..error.error import (CarrierRejected, MalformedResponse, NoQuoteApplicable, QuoteError, TransportFailure,
                           VERIFY_ERROR_CODE)
from ..exceptions import InXpressConnectorException
from ..xml.rate_response import RateResponse
from .models import (Order, OrderItem, Package, RateQuoteResult, SLUGNAME, ShippingDestination, ShippingOption,
                     WeightSplit)
from .packager import Packager
from .reporting import ErrorReporter, LoggingErrorReporter, Severity
from .sizing import SizeLimits
from .units import UnitConverter

LOGGER = logging.getLogger(__name__)

QuoteResult = Union[RateQuoteResult, NoQuoteApplicable, QuoteError]

VERIFY_SIZE = 12


def normalize_postcode(postcode: Optional[str]) -> str:
    return (postcode or '').replace(' ', '')


def whole_units(weight) -> int:
    if isinstance(weight, WeightSplit):
        return weight.whole_units
    return int(weight)


class RateQuoter:
    """
    Live InXpress rates for international orders.

    One rate request goes out per package and the charges are summed into a
    single shipping option. Any failing package aborts the whole quote.
    """

    SLUGNAME = SLUGNAME

    dimensions = True   # Uses package dimensions
    postcode = True     # Requires a postal code for rates
    singular = True     # Module can only be used once
    realtime = True     # Provides real-time rates

    def __init__(self,
                 connector: InXpressConnector = None,
                 converter: UnitConverter = None,
                 size_limits: SizeLimits = None,
                 reporter: ErrorReporter = None,
                 packaging: str = 'mass',
                 max_weight: Optional[float] = None):
        self.connector = connector if connector else InXpressConnector()
        self.converter = converter if converter else UnitConverter()
        self.size_limits = size_limits if size_limits else SizeLimits()
        self.reporter = reporter if reporter else LoggingErrorReporter()
        self.packaging = packaging
        self.max_weight = max_weight

    @staticmethod
    def methods() -> str:
        return 'InXpress Service Rates'

    def packager_for(self, order: Order) -> Packager:
        packager = Packager(self.packaging, self.max_weight)
        for item in order.items:
            self.calcitem(packager, item)
        return packager

    @staticmethod
    def calcitem(packager: Packager, item: OrderItem):
        if item.free_shipping:
            return
        packager.add_item(item)

    @staticmethod
    def international(destination: ShippingDestination, base_country: str) -> bool:
        return (destination.country_code or '')[:2].upper() != (base_country or '').upper()

    def quote(self, order: Order, config: CarrierConfig, base_country: str,
              packager: Packager = None) -> QuoteResult:
        destination = order.shipping

        if not self.international(destination, base_country):
            LOGGER.info(f'Destination {destination.country_code} is domestic, no InXpress rate')
            return NoQuoteApplicable(reason='domestic')

        postcode = normalize_postcode(destination.postcode)
        if not postcode:
            LOGGER.info('No postcode on the order, no InXpress rate')
            return NoQuoteApplicable(reason='missing_postcode')

        if packager is None:
            packager = self.packager_for(order)

        total = Decimal('0')
        while packager.packages():
            pkg = packager.package()
            url = self.build(pkg, config, postcode, destination.country_code)
            response = self.send(url)
            if isinstance(response, QuoteError):
                return response

            if response.is_error:
                messages = response.messages
                return CarrierRejected(message=messages[0] if messages else '')

            if not response.is_rating:
                return MalformedResponse()

            charge = response.total_charge
            LOGGER.info(f'InXpress charge for package {pkg}: {charge}')
            total += charge

        return RateQuoteResult(display_name=config.service_type_label, amount=total)

    def calculate(self, options: Dict, order: Order, config: CarrierConfig, base_country: str) -> Dict:
        """Adds the InXpress option to ``options``; errors are reported, never raised."""
        result = self.quote(order, config, base_country)

        if isinstance(result, QuoteError):
            self.report_error(result)
            return options

        if isinstance(result, RateQuoteResult):
            options[self.SLUGNAME] = ShippingOption.from_result(result)

        return options

    def report_error(self, error: QuoteError):
        """Quote failures go to the reporter as transaction errors, with the customer facing text."""
        self.reporter.report(error.error, error.error_code, Severity.TRANSACTION)

    def build(self, pkg: Package, config: CarrierConfig, postcode: str, country_code: str) -> str:
        width = self.size_limits.size(pkg.width, 'width', self.converter)
        height = self.size_limits.size(pkg.height, 'height', self.converter)
        length = self.size_limits.size(pkg.length, 'length', self.converter)
        weight = self.size_limits.size(pkg.weight, 'weight', self.converter)

        return self.connector.build_url(
            config.account_id, postcode, country_code, whole_units(weight), length, width, height)

    def send(self, url: str) -> Union[RateResponse, TransportFailure]:
        try:
            return self.connector.send(url)
        except InXpressConnectorException as ex:
            LOGGER.error(f'InXpress transport failure: {ex}')
            return TransportFailure()

    def verify(self, config: CarrierConfig, destination: ShippingDestination) -> Optional[QuoteError]:
        """
        Checks the account against the carrier with a fixed 12x12x12, 12 unit
        parcel sent to ``destination``. Returns the reported error, or None.
        """
        url = self.connector.build_url(
            config.account_id, normalize_postcode(destination.postcode), destination.country_code,
            VERIFY_SIZE, VERIFY_SIZE, VERIFY_SIZE, VERIFY_SIZE)
        response = self.send(url)

        error = None
        if isinstance(response, QuoteError):
            error = TransportFailure(error_code=VERIFY_ERROR_CODE)
        elif response.is_error:
            error = CarrierRejected(message=' '.join(response.messages), error_code=VERIFY_ERROR_CODE)

        if error:
            self.reporter.report(error.message, error.error_code, Severity.ADDON)
        return error
