import logging
from urllib.parse import urlencode

import requests
from requests import HTTPError, RequestException

from .exceptions import InXpressConnectorException
from .xml.rate_response import RateResponse

LOGGER = logging.getLogger(__name__)

INXPRESS_API_URL = 'http://www.ixpapi.com/ixpapp/rates.php'
DEFAULT_TIMEOUT = 30.0
PRODUCT_CODE = 'P'


class InXpressConnector:

    """
    This class handles interaction with the InXpress rates API
    """

    def __init__(self, url=INXPRESS_API_URL, timeout=DEFAULT_TIMEOUT, session=None):
        self.url = url
        self.timeout = timeout
        self.session = session if session else requests.Session()
        self.headers = {
            'Accept': 'application/xml, text/xml',
            'User-Agent': 'inxpress-rates/1.0'
        }

    def build_url(self, account_id, postcode, country_code, weight, length, width, height):
        """
        The query parameters go out in a fixed order. ``pcs`` describes the
        piece as length|width|height|weight, repeating the weight sent in ``wgt``.
        """
        query = urlencode([
            ('acc', account_id),
            ('dst', country_code),
            ('pst', postcode),
            ('prd', PRODUCT_CODE),
            ('wgt', int(weight)),
            ('pcs', f'{int(length)}|{int(width)}|{int(height)}|{int(weight)}'),
        ])
        return f'{self.url}?{query}'

    def send(self, url) -> RateResponse:
        LOGGER.info('GET %s' % url)
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except RequestException as ex:
            LOGGER.exception('InXpress request failed')
            raise InXpressConnectorException(repr(ex)) from ex

        try:
            response.raise_for_status()
        except HTTPError as ex:
            LOGGER.error('Response: %s; \nException: %s' % (response.text, str(ex)))
            raise InXpressConnectorException(response.text if response.text else repr(ex)) from ex

        if not response.text or not response.text.strip():
            raise InXpressConnectorException(f'Empty response from InXpress for {url}')

        LOGGER.debug(f'InXpress response: {response.text}')
        return RateResponse(response.text)

    def get_rate(self, account_id, postcode, country_code, weight, length, width, height) -> RateResponse:
        url = self.build_url(account_id, postcode, country_code, weight, length, width, height)
        return self.send(url)
