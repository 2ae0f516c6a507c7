from binary_functions import bit_at, bits_msb_first, color_group, join_seven_bit_bytes
from color_resolvers import APPLE_DIRECT, APPLE_ARTIFACT, C64_BITPLANE, EGA_NIBBLE
from color_resolvers import resolve_adjacent_bits, resolve_bitplane, resolve_direct_pair, resolve_nibble_pair
from decode_errors import PaletteIndexOutOfRange


def read_row_bytes(sources, sheet_format):
    per_source = sheet_format.bytes_per_row // len(sources)

    row_bytes = b''
    for source in sources:
        row_bytes += source.read_bytes(per_source)

    return row_bytes

def decode_row_apple_direct(row_bytes, sheet_format):
    word = join_seven_bit_bytes(row_bytes)
    colors = []

    for x in range(sheet_format.tile_width):
        use_green_violet = color_group(row_bytes[x // 7]) == 0

        # two-bit window: this dot and the one to its right
        colors.append(resolve_direct_pair((word >> x) & 0x3, use_green_violet))

    return colors

def decode_row_apple_artifact(row_bytes, sheet_format):
    word = join_seven_bit_bytes(row_bytes)
    colors = []

    parity_seed = 1 if sheet_format.odd_first else 0

    for x in range(sheet_format.tile_width):
        use_green_violet = color_group(row_bytes[x // 7]) == 0
        odd = (x + parity_seed) % 2 == 1

        color = resolve_adjacent_bits(
            bit_at(word, x) == 1,
            bit_at(word, x - 1) == 1,
            bit_at(word, x + 1) == 1,
            use_green_violet,
            odd)

        colors.append(color)

    return colors

def decode_row_c64_bitplane(row_bytes, color_byte):
    colors = []

    for byte in row_bytes:
        for bit in bits_msb_first(byte):
            colors.append(resolve_bitplane(bit, color_byte))

    return colors

def decode_row_ega_nibble(row_bytes):
    colors = []

    for byte in row_bytes:
        colors += resolve_nibble_pair(byte)

    return colors

def check_row(colors, palette, offset):
    for color in colors:
        if color < 0 or color >= len(palette):
            raise PaletteIndexOutOfRange(f"Palette index {color} outside a {len(palette)} colour palette", offset)

def decode_row(sources, sheet_format, color_byte=0):
    offset = sources[0].offset()
    row_bytes = read_row_bytes(sources, sheet_format)

    if sheet_format.resolver == APPLE_DIRECT:
        colors = decode_row_apple_direct(row_bytes, sheet_format)
    elif sheet_format.resolver == APPLE_ARTIFACT:
        colors = decode_row_apple_artifact(row_bytes, sheet_format)
    elif sheet_format.resolver == C64_BITPLANE:
        colors = decode_row_c64_bitplane(row_bytes, color_byte)
    elif sheet_format.resolver == EGA_NIBBLE:
        colors = decode_row_ega_nibble(row_bytes)
    else:
        raise ValueError(f"Unknown resolver {sheet_format.resolver}")

    check_row(colors, sheet_format.palette, offset)

    return colors
