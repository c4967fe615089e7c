from dataclasses import dataclass

RATE_ERROR_CODE = 'inxpress_rate_error'
VERIFY_ERROR_CODE = 'inxpress_verify_auth'


@dataclass(frozen=True)
class Error:
    @property
    def error(self) -> str:
        raise NotImplementedError(f"[{self.__class__.__name__}] error() must be implemented")


@dataclass(frozen=True)
class NoQuoteApplicable:
    """Normal outcome when the order is not eligible for a live rate."""
    reason: str


@dataclass(frozen=True)
class QuoteError(Error):
    message: str
    error_code: str = RATE_ERROR_CODE

    @property
    def error(self) -> str:
        return self.message


@dataclass(frozen=True)
class TransportFailure(QuoteError):
    message: str = 'Shipping options and rates are not available from InXpress. Please try again.'


@dataclass(frozen=True)
class CarrierRejected(QuoteError):
    """The carrier answered with an errorResponse; ``message`` is its text verbatim."""

    @property
    def error(self) -> str:
        return f'InXpress - {self.message}'


@dataclass(frozen=True)
class MalformedResponse(QuoteError):
    message: str = 'Unable to get the shipping cost for InXpress. Please try again.'
