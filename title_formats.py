from color_resolvers import APPLE_DIRECT, C64_BITPLANE, EGA_NIBBLE
from sheet_format import SheetFormat, TILE_ORDER, STRIPE_INTERLEAVED, SHEET_INTERLEAVED

# Apple II tiles are 14 dots wide: two bytes, seven dots each.
u1_apple_tiles = SheetFormat(
    name='U1_APPLE tiles',
    tile_width=14, tile_height=16, tile_count=16, tiles_per_row=1,
    bytes_per_row=2, source_count=2,
    resolver=APPLE_DIRECT, scan_order=TILE_ORDER)

u2_apple_tiles = SheetFormat(
    name='U2_APPLE tiles',
    tile_width=14, tile_height=16, tile_count=64, tiles_per_row=64,
    bytes_per_row=2,
    resolver=APPLE_DIRECT, scan_order=STRIPE_INTERLEAVED)

u2_apple_text = SheetFormat(
    name='U2_APPLE text',
    tile_width=7, tile_height=8, tile_count=256, tiles_per_row=1,
    bytes_per_row=1,
    resolver=APPLE_DIRECT, scan_order=TILE_ORDER)

u3_apple_tiles = SheetFormat(
    name='U3_APPLE tiles',
    tile_width=14, tile_height=16, tile_count=64, tiles_per_row=64,
    bytes_per_row=2,
    resolver=APPLE_DIRECT, scan_order=STRIPE_INTERLEAVED)

u4_apple_tiles = SheetFormat(
    name='U4_APPLE tiles',
    tile_width=14, tile_height=16, tile_count=256, tiles_per_row=16,
    bytes_per_row=2, source_count=2,
    resolver=APPLE_DIRECT, scan_order=SHEET_INTERLEAVED)

u3_c64_tiles = SheetFormat(
    name='U3_C64 tiles',
    tile_width=16, tile_height=16, tile_count=64, tiles_per_row=64,
    bytes_per_row=2,
    resolver=C64_BITPLANE, scan_order=STRIPE_INTERLEAVED)

u4_ega_tiles = SheetFormat(
    name='U4_PC tiles',
    tile_width=16, tile_height=16, tile_count=256, tiles_per_row=1,
    bytes_per_row=8,
    resolver=EGA_NIBBLE, scan_order=TILE_ORDER)

u4_ega_charset = SheetFormat(
    name='U4_PC charset',
    tile_width=8, tile_height=8, tile_count=128, tiles_per_row=1,
    bytes_per_row=4,
    resolver=EGA_NIBBLE, scan_order=TILE_ORDER)

border = {'kind': 'rle', 'width': 320, 'height': 200}

title_table = {
    'U1_APPLE': {
        'platform': 'apple2',
        'assets': {
            # every left half first, then every right half; the dots of the
            # second block come first on screen
            'tiles': {'kind': 'sheet', 'format': u1_apple_tiles, 'files': ['ULTSHAPES'], 'split': 2, 'source_order': [1, 0]}
        }
    },
    'U2_APPLE': {
        'platform': 'apple2',
        'assets': {
            'tiles': {'kind': 'sheet', 'format': u2_apple_tiles, 'files': ['SHAPES']},
            'text': {'kind': 'sheet', 'format': u2_apple_text, 'files': ['HTXT']}
        }
    },
    'U3_APPLE': {
        'platform': 'apple2',
        'assets': {
            'tiles': {'kind': 'sheet', 'format': u3_apple_tiles, 'files': ['ultima31.dsk'], 'offset': 0x5b00}
        }
    },
    'U4_APPLE': {
        'platform': 'apple2',
        'assets': {
            'tiles': {'kind': 'sheet', 'format': u4_apple_tiles, 'files': ['SHP0', 'SHP1']}
        }
    },
    'U3_C64': {
        'platform': 'c64',
        'assets': {
            'tiles': {'kind': 'sheet', 'format': u3_c64_tiles, 'files': ['ultima3a.d64'], 'offset': 0x8800, 'color_offset': 0xdd61}
        }
    },
    'U4_PC': {
        'platform': 'ega',
        'assets': {
            'shapes': {'kind': 'sheet', 'format': u4_ega_tiles, 'files': ['SHAPES.EGA']},
            'charset': {'kind': 'sheet', 'format': u4_ega_charset, 'files': ['CHARSET.EGA']},
            'start': dict(border, files=['START.EGA']),
            'key7': dict(border, files=['KEY7.EGA'])
        }
    },
    'U4GRAPH': {
        'platform': 'ega',
        'assets': {
            'shapes': {'kind': 'sheet', 'format': u4_ega_tiles.with_options(name='U4GRAPH tiles'), 'files': ['SHAPES.OLD']},
            'charset': {'kind': 'sheet', 'format': u4_ega_charset.with_options(name='U4GRAPH charset'), 'files': ['CHARSET.OLD']},
            'start': dict(border, files=['START.OLD']),
            'key7': dict(border, files=['KEY7.OLD'])
        }
    }
}

supported_titles = list(title_table.keys())

def get_asset(title_id, asset_name):
    title_id = title_id.upper()
    assert title_id in supported_titles

    return title_table[title_id]['assets'][asset_name]
