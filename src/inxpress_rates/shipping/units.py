import logging

LOGGER = logging.getLogger(__name__)

PRECISION = 6

# Factors to the smallest unit of each family (grams, millimetres).
WEIGHT_UNITS = {
    'g': 1.0,
    'kg': 1000.0,
    'oz': 28.349523125,
    'lb': 453.59237,
}

DIMENSION_UNITS = {
    'mm': 1.0,
    'cm': 10.0,
    'm': 1000.0,
    'in': 25.4,
    'ft': 304.8,
}


class UnitConverter:
    """Converts values from the store's base weight/dimension units into a target unit."""

    def __init__(self, weight_unit: str = 'lb', dimension_unit: str = 'in'):
        if weight_unit not in WEIGHT_UNITS:
            raise ValueError(f'Unknown weight unit {weight_unit}')
        if dimension_unit not in DIMENSION_UNITS:
            raise ValueError(f'Unknown dimension unit {dimension_unit}')
        self.weight_unit = weight_unit
        self.dimension_unit = dimension_unit

    def convert(self, value, target_unit: str) -> float:
        value = float(value or 0)
        if target_unit in (self.weight_unit, self.dimension_unit):
            return value
        # rounded so that float noise never pushes a ceiling up a whole unit
        if target_unit in WEIGHT_UNITS:
            return round(value * WEIGHT_UNITS[self.weight_unit] / WEIGHT_UNITS[target_unit], PRECISION)
        if target_unit in DIMENSION_UNITS:
            return round(value * DIMENSION_UNITS[self.dimension_unit] / DIMENSION_UNITS[target_unit], PRECISION)
        LOGGER.warning(f'No conversion known for unit {target_unit}, value left as is')
        return value
