from decimal import Decimal

from common import load_fixture

from inxpress_rates.xml.rate_response import RateResponse, to_amount


def test_rating_response():
    response = RateResponse(load_fixture('rating_response.xml'))
    assert response.is_rating
    assert not response.is_error
    assert response.total_charge == Decimal('42.10')


def test_error_response_keeps_all_messages():
    response = RateResponse(load_fixture('error_response.xml'))
    assert response.is_error
    assert not response.is_rating
    assert response.messages == ['Invalid account', 'Please contact your InXpress franchise']


def test_namespaces_are_ignored():
    response = RateResponse(load_fixture('namespaced_rating_response.xml'))
    assert response.tag('ratingResponse')
    assert response.total_charge == Decimal('15.50')


def test_unknown_document():
    response = RateResponse(load_fixture('unknown_response.xml'))
    assert not response.is_rating
    assert not response.is_error
    assert response.first('status') == 'down'


def test_not_xml_behaves_as_empty():
    response = RateResponse('<html><body>Bad gateway')
    assert not response.is_rating
    assert not response.is_error
    assert response.messages == []


def test_missing_total_charge_is_zero():
    response = RateResponse('<ratingResponse></ratingResponse>')
    assert response.is_rating
    assert response.total_charge == Decimal('0')


def test_to_amount():
    assert to_amount('10.00') == Decimal('10.00')
    assert to_amount(' 12.5 USD') == Decimal('12.5')
    assert to_amount('n/a') == Decimal('0')
    assert to_amount('') == Decimal('0')
    assert to_amount(None) == Decimal('0')


def test_to_amount_out_of_range():
    assert to_amount('1e999999999') == Decimal('0')
    assert to_amount('1e12') == Decimal('0')
    assert to_amount('999999999999.99') == Decimal('999999999999.99')
    assert to_amount('1e-999999999') == Decimal('0')
