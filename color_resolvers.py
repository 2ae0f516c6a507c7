from binary_functions import high_nibble, low_nibble
from palette_codec import GREEN, ORANGE, VIOLET, BLUE, WHITE, BLACK

APPLE_DIRECT = 'apple_direct'
APPLE_ARTIFACT = 'apple_artifact'
C64_BITPLANE = 'c64_bitplane'
EGA_NIBBLE = 'ega_nibble'

resolver_kinds = [APPLE_DIRECT, APPLE_ARTIFACT, C64_BITPLANE, EGA_NIBBLE]


def resolve_direct_pair(code, use_green_violet):
    code &= 0x3

    if code == 0x0:
        return BLACK
    elif code == 0x1:
        return GREEN if use_green_violet else ORANGE
    elif code == 0x2:
        return VIOLET if use_green_violet else BLUE
    else:
        return WHITE


def green_or_orange(use_green_violet):
    return GREEN if use_green_violet else ORANGE

def violet_or_blue(use_green_violet):
    return VIOLET if use_green_violet else BLUE

def resolve_adjacent_bits(bit_on, left_bit_on, next_bit_on, use_green_violet, odd):
    """
    Artifact colour of one hi-res dot, after Gil Megidish's algorithm.

    A lit dot next to another lit dot is white. An isolated lit dot takes the
    colour of its column parity. An unlit dot squeezed between two lit dots
    shows the opposite parity colour, any other unlit dot is black.
    """
    if bit_on:
        if left_bit_on or next_bit_on:
            return WHITE

        if odd:
            return green_or_orange(use_green_violet)
        return violet_or_blue(use_green_violet)

    if left_bit_on and next_bit_on:
        if odd:
            return violet_or_blue(use_green_violet)
        return green_or_orange(use_green_violet)

    return BLACK


def resolve_nibble_pair(byte):
    return (high_nibble(byte), low_nibble(byte))


def resolve_bitplane(bit_on, color_byte):
    if bit_on:
        return high_nibble(color_byte)
    return low_nibble(color_byte)
