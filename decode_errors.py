class DecodeError(Exception):
    def __init__(self, message, offset):
        super().__init__(f"{message} (offset 0x{offset:x})")
        self.offset = offset

class TruncatedStream(DecodeError):
    pass

class InvalidSentinelRun(DecodeError):
    pass

# Unreachable while every code is masked before lookup.
class PaletteIndexOutOfRange(DecodeError):
    pass

class LayoutOverflow(DecodeError):
    pass
