import logging
import re
from decimal import Decimal, DecimalException
from typing import List, Optional
from xml.etree import ElementTree

LOGGER = logging.getLogger(__name__)

ERROR_TAG = 'errorResponse'
RATING_TAG = 'ratingResponse'
MESSAGE_TAG = 'message'
TOTAL_CHARGE_TAG = 'totalCharge'

_LEADING_NUMBER = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')

# Charges with this many integer digits or more are treated as unparseable.
MAX_CHARGE_DIGITS = 12


class RateResponse:
    """
    Read-only view over an InXpress XML body.

    Lookups match element tags anywhere in the document with namespaces
    stripped. A body that is not well-formed XML behaves like an empty
    document, so it has neither an error nor a rating tag.
    """

    def __init__(self, body: str):
        self.body = body
        self.root = self._parse(body)

    @staticmethod
    def _parse(body: str) -> Optional[ElementTree.Element]:
        try:
            root = ElementTree.fromstring(body)
        except ElementTree.ParseError as ex:
            LOGGER.warning(f'InXpress response is not valid XML: {ex}')
            return None
        RateResponse.remove_namespaces(root)
        return root

    @staticmethod
    def remove_namespaces(element: ElementTree.Element):
        element.tag = RateResponse.remove_namespace(element.tag)
        for child in element:
            RateResponse.remove_namespaces(child)

    @staticmethod
    def remove_namespace(string):
        return re.sub('{.*}', '', string)

    def _find(self, tag: str) -> List[ElementTree.Element]:
        if self.root is None:
            return []
        return list(self.root.iter(tag))

    def tag(self, name: str) -> bool:
        return bool(self._find(name))

    def content(self, name: str) -> List[str]:
        return [(element.text or '').strip() for element in self._find(name)]

    def first(self, name: str, default: str = '') -> str:
        values = self.content(name)
        return values[0] if values else default

    @property
    def is_error(self) -> bool:
        return self.tag(ERROR_TAG)

    @property
    def is_rating(self) -> bool:
        return self.tag(RATING_TAG)

    @property
    def messages(self) -> List[str]:
        return self.content(MESSAGE_TAG)

    @property
    def total_charge(self) -> Decimal:
        return to_amount(self.first(TOTAL_CHARGE_TAG))


def to_amount(text: Optional[str]) -> Decimal:
    """Numeric prefix of ``text`` as a Decimal; anything unparseable is zero."""
    match = _LEADING_NUMBER.match(text or '')
    if not match:
        return Decimal('0')
    try:
        amount = +Decimal(match.group(0).strip())
    except DecimalException as ex:
        LOGGER.warning(f'Unusable InXpress charge {text!r}: {ex!r}')
        return Decimal('0')
    if amount.adjusted() >= MAX_CHARGE_DIGITS:
        LOGGER.warning(f'InXpress charge {text!r} is out of range')
        return Decimal('0')
    return amount
