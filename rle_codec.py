from color_resolvers import resolve_nibble_pair
from decode_errors import InvalidSentinelRun, TruncatedStream
from row_decoder import check_row
from sheet_layout import PixelBuffer

RUN_SENTINEL = 0x02

S_LITERAL = 0
S_RUN_LENGTH = 1


class RowWriter:
    x = 0
    y = 0

    def __init__(self, buffer):
        self.buffer = buffer
        self.x = 0
        self.y = 0

    def write_color(self, color):
        self.buffer.write_color(self.x, self.y, color)

        self.x += 1
        if self.x >= self.buffer.width:
            self.x = 0
            self.y += 1

    def pixels_left(self):
        return (self.buffer.height - self.y) * self.buffer.width - self.x

    def within_bounds(self):
        return self.y < self.buffer.height


def expand_rle(cursor, width, height, palette):
    """
    Expand a bordered intro/endgame image.

    Every byte is a literal nibble pair unless it is the sentinel, which is
    followed by a repeat count and the nibble pair to repeat.
    """
    buffer = PixelBuffer(width, height, palette)
    writer = RowWriter(buffer)

    state = S_LITERAL

    while writer.within_bounds():
        if not cursor.within_bounds():
            raise TruncatedStream(f"Stream ended with {writer.pixels_left()} pixels left to fill", cursor.offset())

        if state == S_LITERAL:
            byte = cursor.read_byte()

            if byte == RUN_SENTINEL:
                state = S_RUN_LENGTH
                continue

            if writer.pixels_left() < 2:
                raise InvalidSentinelRun("Literal pair overflows the image", cursor.offset() - 1)

            colors = resolve_nibble_pair(byte)
            check_row(colors, palette, cursor.offset() - 1)

            for color in colors:
                writer.write_color(color)

        elif state == S_RUN_LENGTH:
            run_offset = cursor.offset() - 1

            repeat = cursor.read_byte()
            colors = resolve_nibble_pair(cursor.read_byte())
            check_row(colors, palette, cursor.offset() - 1)

            if repeat * 2 > writer.pixels_left():
                raise InvalidSentinelRun(f"Run of {repeat} pairs overflows the image", run_offset)

            for i in range(repeat):
                for color in colors:
                    writer.write_color(color)

            state = S_LITERAL

    return buffer
