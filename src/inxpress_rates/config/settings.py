import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional

from dacite import Config, from_dict

from ..connector import DEFAULT_TIMEOUT, INXPRESS_API_URL
from .param_store import ParamStore

LOGGER = logging.getLogger(__name__)

PARAM_KEY = 'inxpress'
ACCOUNT_FIELD = 'inxpressid'
SERVICE_TYPE_FIELD = 'servicetype'


@dataclass(frozen=True)
class CarrierConfig:
    account_id: str = ''
    service_type_label: str = ''

    @staticmethod
    def from_form(form: Dict) -> 'CarrierConfig':
        return CarrierConfig(
            account_id=str(form.get(ACCOUNT_FIELD) or ''),
            service_type_label=str(form.get(SERVICE_TYPE_FIELD) or '')
        )


@dataclass(frozen=True)
class TextField:
    index: int
    name: str
    value: str
    label: str
    size: int = 16


def settings_fields(config: CarrierConfig) -> List[TextField]:
    return [
        TextField(index=0, name=ACCOUNT_FIELD, value=config.account_id, label='InXpress User ID'),
        TextField(index=1, name=SERVICE_TYPE_FIELD, value=config.service_type_label, label='Service Type'),
    ]


@dataclass(frozen=True)
class RuntimeSettings:
    tenant: str
    stage: str
    api_url: str
    timeout: float
    base_country: str
    weight_unit: str
    dimension_unit: str
    packaging: str
    package_max_weight: Optional[float]
    verify_postcode: str
    verify_country: str

    @staticmethod
    def from_env() -> 'RuntimeSettings':
        max_weight = os.environ.get('PACKAGE_MAX_WEIGHT')
        return RuntimeSettings(
            tenant=os.environ.get('TENANT') or 'default',
            stage=os.environ.get('STAGE') or 'x',
            api_url=os.environ.get('INXPRESS_API_URL') or INXPRESS_API_URL,
            timeout=float(os.environ.get('INXPRESS_TIMEOUT') or DEFAULT_TIMEOUT),
            base_country=(os.environ.get('BASE_COUNTRY') or 'US').upper(),
            weight_unit=os.environ.get('WEIGHT_UNIT') or 'lb',
            dimension_unit=os.environ.get('DIMENSION_UNIT') or 'in',
            packaging=os.environ.get('PACKAGING') or 'mass',
            package_max_weight=float(max_weight) if max_weight else None,
            verify_postcode=os.environ.get('INXPRESS_VERIFY_POSTCODE') or 'M5V 2T6',
            verify_country=(os.environ.get('INXPRESS_VERIFY_COUNTRY') or 'CA').upper(),
        )


def _from_env() -> Optional[CarrierConfig]:
    account_id = os.environ.get('INXPRESS_ACCOUNT_ID')
    if account_id is None:
        return None
    return CarrierConfig(
        account_id=account_id,
        service_type_label=os.environ.get('INXPRESS_SERVICE_TYPE') or ''
    )


def load_carrier_config(param_store_provider: Callable[[], ParamStore] = None) -> CarrierConfig:
    """
    Environment variables win over the parameter store, which is only
    created when needed. A missing parameter yields an empty config, which
    the carrier API will reject.
    """
    config = _from_env()
    if config is not None:
        return config

    if param_store_provider is None:
        runtime = RuntimeSettings.from_env()
        param_store = ParamStore(runtime.tenant, runtime.stage)
    else:
        param_store = param_store_provider()

    raw = param_store.get_param(PARAM_KEY)
    if not raw:
        LOGGER.warning('No InXpress settings stored, using empty configuration')
        return CarrierConfig()

    return from_dict(data_class=CarrierConfig, data=json.loads(raw), config=Config(check_types=False))


def save_carrier_config(param_store: ParamStore, config: CarrierConfig):
    param_store.put_param(PARAM_KEY, json.dumps(asdict(config)))
