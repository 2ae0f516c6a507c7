import math
from dataclasses import dataclass, replace
from typing import Tuple

import palette_codec
from color_resolvers import APPLE_DIRECT, APPLE_ARTIFACT, C64_BITPLANE, EGA_NIBBLE, resolver_kinds

TILE_ORDER = 'tile'
STRIPE_INTERLEAVED = 'stripe_interleaved'
SHEET_INTERLEAVED = 'sheet_interleaved'

scan_orders = [TILE_ORDER, STRIPE_INTERLEAVED, SHEET_INTERLEAVED]

platform_for_resolver = {
    APPLE_DIRECT: 'apple2',
    APPLE_ARTIFACT: 'apple2',
    C64_BITPLANE: 'c64',
    EGA_NIBBLE: 'ega'
}

pixels_per_byte = {
    APPLE_DIRECT: 7,
    APPLE_ARTIFACT: 7,
    C64_BITPLANE: 8,
    EGA_NIBBLE: 2
}


@dataclass(frozen=True)
class SheetFormat:
    """Geometry and pixel encoding of one tile or glyph sheet."""

    name: str
    tile_width: int
    tile_height: int
    tile_count: int
    tiles_per_row: int
    bytes_per_row: int
    resolver: str
    scan_order: str = TILE_ORDER
    source_count: int = 1
    odd_first: bool = False
    palette: Tuple[Tuple[int, int, int], ...] = None
    fill_index: int = None

    def __post_init__(self):
        assert self.resolver in resolver_kinds
        assert self.scan_order in scan_orders
        assert self.tile_count > 0 and self.tiles_per_row > 0
        assert self.bytes_per_row % self.source_count == 0
        assert self.tile_width == self.bytes_per_row * pixels_per_byte[self.resolver]

        platform = platform_for_resolver[self.resolver]

        # frozen, so defaults are filled in through object.__setattr__
        if self.palette is None:
            object.__setattr__(self, 'palette', palette_codec.palette_table[platform])
        if self.fill_index is None:
            object.__setattr__(self, 'fill_index', palette_codec.background_table[platform])

    @property
    def tiles_per_column(self):
        return math.ceil(self.tile_count / self.tiles_per_row)

    @property
    def sheet_width(self):
        return self.tile_width * self.tiles_per_row

    @property
    def sheet_height(self):
        return self.tile_height * self.tiles_per_column

    @property
    def row_count(self):
        return self.tile_count * self.tile_height

    @property
    def byte_count(self):
        return self.row_count * self.bytes_per_row

    @property
    def bytes_per_source(self):
        return self.byte_count // self.source_count

    def with_options(self, **changes):
        return replace(self, **changes)
