import logging
from collections import OrderedDict, deque
from typing import Deque, List, Optional

from .models import OrderItem, Package

LOGGER = logging.getLogger(__name__)

PACKAGING_MODES = ('each', 'like', 'mass', 'all')


class Packager:
    """
    Aggregates order items into packages.

    Modes:
        each: every unit of every item ships in its own package
        like: units of the same product share packages
        mass: all items share packages, a new one is started when max_weight would be exceeded
        all:  one package for the whole order, limits ignored

    Packages are handed out destructively:
        ```
        while packager.packages():
            pkg = packager.package()
        ```
    """

    def __init__(self, mode: str = 'mass', max_weight: Optional[float] = None):
        if mode not in PACKAGING_MODES:
            raise ValueError(f'Unknown packaging mode {mode}, expected one of {PACKAGING_MODES}')
        self.mode = mode
        self.max_weight = max_weight
        self._items: List[OrderItem] = []
        self._packages: Optional[Deque[Package]] = None

    def add_item(self, item: OrderItem):
        if self._packages is not None:
            raise RuntimeError('Cannot add items once packages have been taken')
        self._items.append(item)

    def packages(self) -> bool:
        return bool(self._pack())

    def package(self) -> Package:
        pending = self._pack()
        if not pending:
            raise IndexError('No packages left')
        return pending.popleft()

    def _pack(self) -> Deque[Package]:
        if self._packages is None:
            self._packages = deque(self._build())
            LOGGER.info(f'Packed {len(self._items)} items into {len(self._packages)} packages ({self.mode})')
        return self._packages

    def _build(self) -> List[Package]:
        if self.mode == 'each':
            return [self._single(item) for item in self._items for _ in range(max(item.quantity, 0))]
        if self.mode == 'all':
            package = Package()
            for item in self._items:
                package.add(item, max(item.quantity, 0))
            return [package] if package.items else []
        if self.mode == 'like':
            groups = OrderedDict()
            for item in self._items:
                groups.setdefault(item.product_id, []).append(item)
            return [package for group in groups.values() for package in self._fill(group)]
        return self._fill(self._items)

    def _fill(self, items: List[OrderItem]) -> List[Package]:
        packages = []
        current = Package()
        for item in items:
            for _ in range(max(item.quantity, 0)):
                if not current.fits(item, self.max_weight):
                    packages.append(current)
                    current = Package()
                current.add(item)
        if current.items:
            packages.append(current)
        return packages

    @staticmethod
    def _single(item: OrderItem) -> Package:
        package = Package()
        package.add(item)
        return package
