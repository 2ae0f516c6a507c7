import unittest
import palette_codec
from sheet_format import SheetFormat, SHEET_INTERLEAVED
from color_resolvers import EGA_NIBBLE
from title_formats import title_table, get_asset
from title_formats import u1_apple_tiles, u2_apple_tiles, u2_apple_text, u3_apple_tiles, u4_apple_tiles
from title_formats import u3_c64_tiles, u4_ega_tiles, u4_ega_charset
from tests.base_test import BaseDecodeTest

class TestTitleFormats(unittest.TestCase):
    def test_byte_counts(self):
        self.assertEqual(512, u1_apple_tiles.byte_count)
        self.assertEqual(2048, u2_apple_tiles.byte_count)
        self.assertEqual(2048, u2_apple_text.byte_count)
        self.assertEqual(2048, u3_apple_tiles.byte_count)
        self.assertEqual(4096, u4_apple_tiles.bytes_per_source)
        self.assertEqual(2048, u3_c64_tiles.byte_count)
        self.assertEqual(32768, u4_ega_tiles.byte_count)
        self.assertEqual(4096, u4_ega_charset.byte_count)

    def test_sheet_sizes(self):
        self.assertEqual((14, 256), (u1_apple_tiles.sheet_width, u1_apple_tiles.sheet_height))
        self.assertEqual((896, 16), (u3_apple_tiles.sheet_width, u3_apple_tiles.sheet_height))
        self.assertEqual((224, 256), (u4_apple_tiles.sheet_width, u4_apple_tiles.sheet_height))
        self.assertEqual((1024, 16), (u3_c64_tiles.sheet_width, u3_c64_tiles.sheet_height))
        self.assertEqual((16, 4096), (u4_ega_tiles.sheet_width, u4_ega_tiles.sheet_height))

    def test_u4_apple_is_sheet_interleaved(self):
        self.assertEqual(SHEET_INTERLEAVED, u4_apple_tiles.scan_order)

    def test_platform_defaults(self):
        self.assertIs(palette_codec.apple2_palette, u2_apple_tiles.palette)
        self.assertEqual(palette_codec.BLACK, u2_apple_tiles.fill_index)
        self.assertIs(palette_codec.c64_palette, u3_c64_tiles.palette)
        self.assertIs(palette_codec.ega_palette, u4_ega_tiles.palette)

    def test_every_asset_names_its_files(self):
        for title in title_table.values():
            self.assertIn(title['platform'], palette_codec.palette_table)

            for asset in title['assets'].values():
                self.assertIn(asset['kind'], ['sheet', 'rle'])
                self.assertTrue(len(asset['files']) > 0)

                if asset['kind'] == 'sheet':
                    self.assertEqual(asset['format'].source_count, asset.get('split', len(asset['files'])))

    def test_lookup_is_case_insensitive_on_title(self):
        self.assertIs(get_asset('u4_pc', 'shapes'), get_asset('U4_PC', 'shapes'))

    def test_unknown_title(self):
        with self.assertRaises(AssertionError):
            get_asset('U9_AMIGA', 'tiles')

class TestSheetFormat(BaseDecodeTest):
    def test_width_must_match_encoding(self):
        with self.assertRaises(AssertionError):
            SheetFormat(name='bad', tile_width=3, tile_height=1, tile_count=1, tiles_per_row=1,
                        bytes_per_row=1, resolver=EGA_NIBBLE)

    def test_unknown_resolver(self):
        with self.assertRaises(AssertionError):
            self.make_format(resolver='cga')

    def test_with_options_keeps_original(self):
        sheet_format = self.make_format()
        changed = sheet_format.with_options(tiles_per_row=1)

        self.assertEqual(2, sheet_format.tiles_per_row)
        self.assertEqual(1, changed.tiles_per_row)
        self.assertEqual(4, changed.sheet_height)

if __name__ == '__main__':
    unittest.main()
