import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from .models import WeightSplit
from .units import UnitConverter

LOGGER = logging.getLogger(__name__)

SUB_UNITS_PER_UNIT = {
    'lb': 16,
    'kg': 1000,
    'oz': 1,
    'g': 1,
}


@dataclass(frozen=True)
class SizeLimit:
    minimum: float
    unit: str
    sub_units_per_unit: Optional[int] = None

    @property
    def sub_units(self) -> int:
        if self.sub_units_per_unit:
            return self.sub_units_per_unit
        return SUB_UNITS_PER_UNIT.get(self.unit, 1)


DEFAULT_SIZE_LIMITS = {
    'width': SizeLimit(minimum=1, unit='in'),
    'height': SizeLimit(minimum=1, unit='in'),
    'length': SizeLimit(minimum=1, unit='in'),
    'weight': SizeLimit(minimum=1, unit='lb', sub_units_per_unit=16),
}


def clamp_and_ceiling(value: float, limit: SizeLimit) -> int:
    value = float(value)
    if value < limit.minimum:
        value = float(limit.minimum)
    return math.ceil(value)


def split_sub_units(value: float, limit: SizeLimit) -> WeightSplit:
    value = float(value)
    if value < limit.minimum:
        value = float(limit.minimum)

    whole_units = int(value)
    sub_units = math.ceil(round((value - whole_units) * limit.sub_units, 9))
    return WeightSplit(whole_units=whole_units, sub_units=sub_units)


DIMENSION_TRANSFORMS: Dict[str, Callable[[float, SizeLimit], Union[int, WeightSplit]]] = {
    'width': clamp_and_ceiling,
    'height': clamp_and_ceiling,
    'length': clamp_and_ceiling,
    'weight': split_sub_units,
}


class SizeLimits:
    """
    Per-dimension minimums and carrier units.

    Usage:
        ```
        limits = SizeLimits.from_dict({'weight': {'minimum': 0.5, 'unit': 'kg'}})
        limits.size(2.3, 'weight', UnitConverter('lb', 'in'))
        ```
    """

    def __init__(self, limits: Dict[str, SizeLimit] = None):
        self.limits = dict(DEFAULT_SIZE_LIMITS if limits is None else limits)

    @staticmethod
    def from_dict(data: Dict[str, Dict]) -> 'SizeLimits':
        limits = dict(DEFAULT_SIZE_LIMITS)
        for key, value in (data or {}).items():
            limits[key] = SizeLimit(
                minimum=float(value.get('minimum', 0)),
                unit=value['unit'],
                sub_units_per_unit=value.get('sub_units_per_unit')
            )
        return SizeLimits(limits)

    def get(self, key: str) -> Optional[SizeLimit]:
        return self.limits.get(key)

    def size(self, value, key: str, converter: UnitConverter):
        """
        Convert ``value`` from base units into the carrier unit for ``key`` and
        apply that dimension's transformation. Keys without a limit pass the raw
        value through.
        """
        limit = self.get(key)
        if limit is None:
            return value

        dimension = converter.convert(value, limit.unit)
        transform = DIMENSION_TRANSFORMS.get(key, clamp_and_ceiling)
        return transform(dimension, limit)
