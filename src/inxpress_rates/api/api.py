import logging
from dataclasses import asdict

from dacite import DaciteError
from flask import Flask, jsonify, request

from ..config.settings import CarrierConfig, load_carrier_config, save_carrier_config, settings_fields
from ..error.error import NoQuoteApplicable, QuoteError
from ..log import init_root_logger
from ..shipping.models import ShippingDestination
from ..shipping.quoter import RateQuoter
from .models import RatesRequest, VerifyRequest
from .utils import get_param_store, get_quoter, get_runtime_settings, with_flask

init_root_logger(__name__)
LOGGER = logging.getLogger(__name__)

APP = Flask(__name__)


def _error_body(error: QuoteError):
    return {
        'error_code': error.error_code,
        'message': error.error
    }


def _verify_destination(destination: ShippingDestination = None) -> ShippingDestination:
    if destination:
        return destination
    runtime = get_runtime_settings()
    return ShippingDestination(postcode=runtime.verify_postcode, country_code=runtime.verify_country)


@APP.before_request
def log_request_info():
    APP.logger.debug("Headers: %s", request.headers)  # pylint: disable=no-member
    APP.logger.debug("Body: %s", request.get_data())  # pylint: disable=no-member


@APP.errorhandler(DaciteError)
def invalid_payload(error):
    LOGGER.warning(f'Invalid payload: {error}')
    return jsonify({'error_code': 'invalid_payload', 'message': str(error)}), 400


@APP.route("/ping")
def ping():
    return "pong"


@APP.route("/rates", methods=['POST'])
@with_flask(RatesRequest)
def rates(rates_request: RatesRequest):
    base_country = rates_request.base_country or get_runtime_settings().base_country
    config = load_carrier_config(get_param_store)

    result = get_quoter().quote(rates_request.order, config, base_country)

    if isinstance(result, QuoteError):
        get_quoter().report_error(result)
        return jsonify(_error_body(result)), 502

    if isinstance(result, NoQuoteApplicable):
        LOGGER.info(f'No InXpress rate: {result.reason}')
        return jsonify({'options': {}}), 200

    LOGGER.info(f'Response [/rates] {result}')
    return jsonify({'options': {RateQuoter.SLUGNAME: {
        'slug': result.service_slug,
        'name': result.display_name,
        'amount': str(result.amount)
    }}}), 200


@APP.route("/verify", methods=['POST'])
@with_flask(VerifyRequest)
def verify(verify_request: VerifyRequest):
    config = load_carrier_config(get_param_store)
    error = get_quoter().verify(config, _verify_destination(verify_request.destination))
    if error:
        return jsonify(_error_body(error)), 502
    return jsonify({'verified': True}), 200


@APP.route("/settings", methods=['GET'])
def get_settings():
    config = load_carrier_config(get_param_store)
    return jsonify({
        'name': RateQuoter.methods(),
        'fields': [asdict(field) for field in settings_fields(config)]
    }), 200


@APP.route("/settings", methods=['POST'])
def save_settings():
    form = request.get_json(force=True, silent=True) or request.form.to_dict()
    config = CarrierConfig.from_form(form)
    save_carrier_config(get_param_store(), config)
    LOGGER.info(f'Saved InXpress settings for account {config.account_id}')

    error = get_quoter().verify(config, _verify_destination())
    body = {'fields': [asdict(field) for field in settings_fields(config)], 'verified': error is None}
    if error:
        body.update(_error_body(error))
    return jsonify(body), 200
