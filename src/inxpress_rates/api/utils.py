import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable

from dacite import Config, from_dict
from flask import request

from ..config.param_store import ParamStore
from ..config.settings import RuntimeSettings
from ..connector import InXpressConnector
from ..shipping.quoter import RateQuoter
from ..shipping.units import UnitConverter

LOGGER = logging.getLogger(__name__)

PARAM_STORE = None
QUOTER = None


def get_runtime_settings() -> RuntimeSettings:
    return RuntimeSettings.from_env()


def get_param_store() -> ParamStore:
    global PARAM_STORE  # pylint: disable=global-statement
    if not PARAM_STORE:
        runtime = get_runtime_settings()
        PARAM_STORE = ParamStore(runtime.tenant, runtime.stage)
    return PARAM_STORE


def get_quoter() -> RateQuoter:
    global QUOTER  # pylint: disable=global-statement
    if not QUOTER:
        runtime = get_runtime_settings()
        QUOTER = RateQuoter(
            connector=InXpressConnector(url=runtime.api_url, timeout=runtime.timeout),
            converter=UnitConverter(runtime.weight_unit, runtime.dimension_unit),
            packaging=runtime.packaging,
            max_weight=runtime.package_max_weight
        )
    return QUOTER


def reset():
    global PARAM_STORE, QUOTER  # pylint: disable=global-statement
    PARAM_STORE = None
    QUOTER = None


def _size_hook(from_value):
    if isinstance(from_value, int) and not isinstance(from_value, bool):
        return float(from_value)
    return from_value


def get_dacite_config() -> Config:
    """Whole numbers in the payload still decode into the float weight and size fields."""
    return Config(type_hooks={float: _size_hook})


# Decorator
def with_flask(data_class: dataclass) -> Callable[..., Any]:
    def decorator(method: Callable[..., Any]) -> Any:
        @wraps(method)
        def wrapper(*args, **kwargs) -> Any:
            payload = request.get_json(force=True, silent=True) or {}
            typed_event = from_dict(data_class=data_class, data=payload, config=get_dacite_config())
            return method(typed_event, *args, **kwargs)

        return wrapper

    return decorator
