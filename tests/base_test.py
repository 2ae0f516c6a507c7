import tempfile
import unittest
from pathlib import Path

from binary_functions import ByteCursor
from color_resolvers import EGA_NIBBLE
from image_codec import decode_sheet
from sheet_format import SheetFormat, TILE_ORDER

class BaseDecodeTest(unittest.TestCase):

    def make_format(self, tile_count=2, tiles_per_row=2, scan_order=TILE_ORDER, **changes):
        # 2x2 EGA tiles, one byte per row
        fields = dict(name='test sheet', tile_width=2, tile_height=2, tile_count=tile_count,
                      tiles_per_row=tiles_per_row, bytes_per_row=1, resolver=EGA_NIBBLE,
                      scan_order=scan_order)
        fields.update(changes)
        return SheetFormat(**fields)

    def decode(self, data, sheet_format, color_table=None):
        return decode_sheet([ByteCursor(data)], sheet_format, color_table)

    def make_temp_dir(self):
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        return Path(temp_dir.name)

    def write_file(self, folder_path, file_name, data):
        file_path = Path(folder_path, file_name)
        file_path.write_bytes(bytes(data))
        return file_path

    def assertAllEqual(self, values, expected):
        self.assertEqual([expected] * len(values), list(values))
