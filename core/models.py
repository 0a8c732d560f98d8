"""
Data classes для расчета раскладки изделий на листе
"""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class SheetSpec:
    width: float
    height: float
    margin: float = 0.0

    @property
    def printable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def printable_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class ItemSpec:
    width: float
    height: float

    def rotated(self) -> 'ItemSpec':
        return ItemSpec(self.height, self.width)

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class GapSpec:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class GridStats:
    rows: int = 0
    columns: int = 0
    total: int = 0
    used_width: float = 0.0
    used_height: float = 0.0


@dataclass(frozen=True)
class Segment:
    """Однородная сетка внутри раскладки.

    offset отсчитывается от левого верхнего угла печатной области.
    """
    rows: int
    columns: int
    cell: ItemSpec
    offset: Tuple[float, float]
    gap: GapSpec
    total: int
    label: str

    @property
    def used_area(self) -> float:
        return self.total * self.cell.area

    def describe(self) -> str:
        return f"{self.rows} × {self.columns}"


@dataclass(frozen=True)
class Layout:
    total: int
    rows: int
    columns: int
    usage: float
    summary: str
    sheet: SheetSpec
    cell: ItemSpec
    gap: GapSpec
    rotated: bool = False
    segments: Tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def used_area(self) -> float:
        return sum(segment.used_area for segment in self.segments)

    @property
    def waste(self) -> float:
        return 100 - self.usage

    @property
    def is_hybrid(self) -> bool:
        return len(self.segments) > 1


@dataclass(frozen=True)
class OptimizationResult:
    strict: Layout
    optimized: Layout

    @property
    def gain(self) -> int:
        return max(0, self.optimized.total - self.strict.total)

    @property
    def improved(self) -> bool:
        return self.gain > 0
