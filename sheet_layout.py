from PIL import Image

from decode_errors import LayoutOverflow
from row_decoder import check_row
from sheet_format import TILE_ORDER, STRIPE_INTERLEAVED, SHEET_INTERLEAVED


class PixelBuffer:
    width = 0
    height = 0

    palette = ()
    pixels = []

    def __init__(self, width, height, palette):
        self.width = width
        self.height = height
        self.palette = palette

        self.pixels = [None] * (width * height)

    def within_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def write_color(self, x, y, color):
        self.pixels[y * self.width + x] = color

    def read_color(self, x, y):
        return self.pixels[y * self.width + x]

    def fill_rect(self, x, y, width, height, color):
        for yy in range(y, y + height):
            for xx in range(x, x + width):
                self.write_color(xx, yy, color)

    def is_complete(self):
        return None not in self.pixels

    def rows(self):
        return [self.pixels[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def to_image(self):
        image = Image.new(mode="RGB", size=(self.width, self.height))

        for y in range(self.height):
            for x in range(self.width):
                image.putpixel((x, y), self.palette[self.read_color(x, y)])

        return image


AT_ROW_START = 0
IN_ROW = 1
AT_TILE_BOUNDARY = 2
AT_SHEET_END = 3

class SheetLayoutEngine:
    """
    Walks the tile cells of a sheet in the order the encoded rows arrive.

    `tile` and `row` point at the next tile row to be written. Cells past the
    last tile of a partial stripe are filled with the format's fill index once
    the final row lands, so a finished buffer has every pixel written.
    """

    tile = 0
    row = 0
    rows_written = 0

    state = AT_ROW_START

    def __init__(self, sheet_format):
        self.sheet_format = sheet_format
        self.buffer = PixelBuffer(sheet_format.sheet_width, sheet_format.sheet_height, sheet_format.palette)

        self.tile = 0
        self.row = 0
        self.rows_written = 0
        self.state = AT_ROW_START

    def cell_origin(self, tile):
        tiles_per_row = self.sheet_format.tiles_per_row

        x = (tile % tiles_per_row) * self.sheet_format.tile_width
        y = (tile // tiles_per_row) * self.sheet_format.tile_height

        return (x, y)

    def write_row(self, colors, offset=0):
        if self.state == AT_SHEET_END:
            raise LayoutOverflow("Row written after the sheet was complete", offset)

        self.state = IN_ROW

        (x, y) = self.cell_origin(self.tile)
        y += self.row

        for color in colors[:self.sheet_format.tile_width]:
            if not self.buffer.within_bounds(x, y):
                raise LayoutOverflow(f"Pixel ({x}, {y}) outside the sheet", offset)

            self.buffer.write_color(x, y, color)
            x += 1

        self.advance(offset)

    def advance(self, offset=0):
        tile_count = self.sheet_format.tile_count
        tile_height = self.sheet_format.tile_height
        scan_order = self.sheet_format.scan_order

        self.rows_written += 1
        self.state = AT_ROW_START

        if scan_order == TILE_ORDER:
            self.row += 1

            if self.row >= tile_height:
                self.row = 0
                self.tile += 1
                self.state = AT_TILE_BOUNDARY

        elif scan_order == STRIPE_INTERLEAVED:
            tiles_per_row = self.sheet_format.tiles_per_row
            stripe_start = (self.tile // tiles_per_row) * tiles_per_row
            stripe_end = min(stripe_start + tiles_per_row, tile_count)

            self.tile += 1

            if self.tile >= stripe_end:
                # back to the first tile of the stripe, on its next unread line
                self.tile = stripe_start
                self.row += 1

                if self.row >= tile_height:
                    self.row = 0
                    self.tile = stripe_end
                    self.state = AT_TILE_BOUNDARY

        elif scan_order == SHEET_INTERLEAVED:
            self.tile += 1

            if self.tile >= tile_count:
                self.tile = 0
                self.row += 1
                self.state = AT_TILE_BOUNDARY

        if self.rows_written >= self.sheet_format.row_count:
            self.state = AT_SHEET_END
            self.pad_unused_cells(offset)

    def pad_unused_cells(self, offset=0):
        sheet_format = self.sheet_format
        cell_count = sheet_format.tiles_per_row * sheet_format.tiles_per_column

        if cell_count > sheet_format.tile_count:
            check_row([sheet_format.fill_index], sheet_format.palette, offset)

        for tile in range(sheet_format.tile_count, cell_count):
            (x, y) = self.cell_origin(tile)
            self.buffer.fill_rect(x, y, sheet_format.tile_width, sheet_format.tile_height, sheet_format.fill_index)

    def current_tile(self):
        return self.tile

    def finished(self):
        return self.state == AT_SHEET_END


def relayout(buffer, sheet_format, tiles_per_row):
    """Copy every tile of a decoded sheet into a grid `tiles_per_row` wide."""
    target_format = sheet_format.with_options(tiles_per_row=tiles_per_row, scan_order=TILE_ORDER, palette=buffer.palette)
    source = SheetLayoutEngine(sheet_format)
    target = SheetLayoutEngine(target_format)

    for tile in range(sheet_format.tile_count):
        (source_x, source_y) = source.cell_origin(tile)

        for row in range(sheet_format.tile_height):
            y = source_y + row
            target.write_row(buffer.pixels[y * buffer.width + source_x:y * buffer.width + source_x + sheet_format.tile_width])

    return target.buffer
