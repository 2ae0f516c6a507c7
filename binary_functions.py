from decode_errors import TruncatedStream


class ByteCursor:
    data = b''

    base_offset = 0
    p = 0

    def __init__(self, data, base_offset=0):
        self.data = bytes(data)
        self.base_offset = base_offset
        self.p = 0

    def read_byte(self):
        if self.p >= len(self.data):
            raise TruncatedStream("Stream ended while reading a byte", self.offset())

        byte = self.data[self.p]
        self.p += 1

        return byte

    def read_bytes(self, count):
        if self.p + count > len(self.data):
            raise TruncatedStream(f"Stream ended while reading {count} bytes", self.base_offset + len(self.data))

        chunk = self.data[self.p:self.p + count]
        self.p += count

        return chunk

    def offset(self):
        return self.base_offset + self.p

    def remaining(self):
        return len(self.data) - self.p

    def within_bounds(self):
        return self.p < len(self.data)

    def split(self, count):
        """Cut the stream into `count` equal consecutive cursors, used by
        formats that store every left half before every right half."""
        size = len(self.data) // count

        return [ByteCursor(self.data[i * size:(i + 1) * size], self.base_offset + i * size) for i in range(count)]


def high_nibble(byte):
    return (byte >> 4) & 0x0F

def low_nibble(byte):
    return byte & 0x0F

def bit_at(value, index):
    if index < 0:
        return 0

    return (value >> index) & 1

def color_group(byte):
    return (byte >> 7) & 1

def join_seven_bit_bytes(source_bytes):
    word = 0

    for i, byte in enumerate(source_bytes):
        word |= (byte & 0x7f) << (7 * i)

    return word

def bits_msb_first(byte):
    i = 7
    while i >= 0:
        yield (byte >> i) & 1
        i -= 1
