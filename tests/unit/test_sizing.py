import pytest

from inxpress_rates.shipping.models import WeightSplit
from inxpress_rates.shipping.sizing import (DIMENSION_TRANSFORMS, SizeLimit, SizeLimits, clamp_and_ceiling,
                                            split_sub_units)
from inxpress_rates.shipping.units import UnitConverter

INCH = SizeLimit(minimum=1, unit='in')
POUND = SizeLimit(minimum=1, unit='lb', sub_units_per_unit=16)


@pytest.mark.parametrize('value,expected', [
    (0.4, 1),
    (3.2, 4),
    (5, 5),
    (0, 1),
])
def test_clamp_and_ceiling(value, expected):
    assert clamp_and_ceiling(value, INCH) == expected


def test_split_sub_units():
    assert split_sub_units(3.2, POUND) == WeightSplit(whole_units=3, sub_units=4)


def test_split_sub_units_clamps_to_minimum():
    assert split_sub_units(0.3, POUND) == WeightSplit(whole_units=1, sub_units=0)


def test_split_sub_units_whole_value_has_no_remainder():
    assert split_sub_units(2.5, POUND) == WeightSplit(whole_units=2, sub_units=8)
    assert split_sub_units(4.0, POUND) == WeightSplit(whole_units=4, sub_units=0)


def test_split_sub_units_uses_unit_ratio():
    kilos = SizeLimit(minimum=0.5, unit='kg')
    assert kilos.sub_units == 1000
    assert split_sub_units(1.25, kilos) == WeightSplit(whole_units=1, sub_units=250)


def test_transform_table():
    assert DIMENSION_TRANSFORMS['weight'] is split_sub_units
    for key in ('width', 'height', 'length'):
        assert DIMENSION_TRANSFORMS[key] is clamp_and_ceiling


class TestSizeLimits:

    def setup_method(self):
        self.limits = SizeLimits()
        self.converter = UnitConverter('lb', 'in')

    def test_dimensions_in_base_units(self):
        assert self.limits.size(10, 'width', self.converter) == 10
        assert self.limits.size(4.1, 'height', self.converter) == 5
        assert self.limits.size(0.2, 'length', self.converter) == 1

    def test_weight_in_base_units(self):
        assert self.limits.size(2.3, 'weight', self.converter) == WeightSplit(whole_units=2, sub_units=5)

    def test_unknown_key_passes_through(self):
        assert self.limits.size(3.7, 'girth', self.converter) == 3.7

    def test_converts_from_metric_store(self):
        converter = UnitConverter('kg', 'cm')
        assert self.limits.size(25.4, 'width', converter) == 10
        assert self.limits.size(1, 'weight', converter) == WeightSplit(whole_units=2, sub_units=4)

    def test_from_dict_overrides_defaults(self):
        limits = SizeLimits.from_dict({'weight': {'minimum': 0.5, 'unit': 'kg'}})
        assert limits.get('weight') == SizeLimit(minimum=0.5, unit='kg', sub_units_per_unit=None)
        assert limits.get('width') == SizeLimit(minimum=1, unit='in')
        assert limits.size(0.2, 'weight', UnitConverter('kg', 'cm')) == WeightSplit(whole_units=0, sub_units=500)
