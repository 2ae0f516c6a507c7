from pathlib import Path

import palette_codec
from binary_functions import ByteCursor
from color_resolvers import C64_BITPLANE
from decode_errors import TruncatedStream
from rle_codec import expand_rle
from row_decoder import decode_row
from sheet_layout import SheetLayoutEngine, relayout

BORDER_WIDTH = 320
BORDER_HEIGHT = 200


def as_cursor(source):
    if isinstance(source, ByteCursor):
        return source
    return ByteCursor(source)

def check_sources(sources, sheet_format):
    assert len(sources) == sheet_format.source_count

    for source in sources:
        if source.remaining() < sheet_format.bytes_per_source:
            raise TruncatedStream(f"{sheet_format.name} needs {sheet_format.bytes_per_source} bytes per source, found {source.remaining()}", source.base_offset + len(source.data))

def check_color_table(color_table, sheet_format):
    if sheet_format.resolver != C64_BITPLANE:
        return

    if color_table is None:
        raise TruncatedStream(f"{sheet_format.name} needs a table of {sheet_format.tile_count} tile colours", 0)

    if color_table.remaining() < sheet_format.tile_count:
        raise TruncatedStream(f"{sheet_format.name} needs {sheet_format.tile_count} tile colours, found {color_table.remaining()}", color_table.base_offset + len(color_table.data))

def decode_sheet(sources, sheet_format, color_table=None):
    sources = [as_cursor(source) for source in sources]
    if color_table is not None:
        color_table = as_cursor(color_table)

    check_sources(sources, sheet_format)
    check_color_table(color_table, sheet_format)

    engine = SheetLayoutEngine(sheet_format)

    while not engine.finished():
        color_byte = 0
        if sheet_format.resolver == C64_BITPLANE:
            color_byte = color_table.data[engine.current_tile()]

        offset = sources[0].offset()
        colors = decode_row(sources, sheet_format, color_byte)
        engine.write_row(colors, offset)

    return engine.buffer

def decode_border(source, width=BORDER_WIDTH, height=BORDER_HEIGHT, palette=palette_codec.ega_palette):
    return expand_rle(as_cursor(source), width, height, palette)


def read_file_slice(file_path, offset, length):
    encoded_file = open(file_path, 'rb')
    encoded_data = encoded_file.read()
    encoded_file.close()

    end = len(encoded_data) if length is None else offset + length

    return ByteCursor(encoded_data[offset:end], offset)

def load_sheet_sources(asset, sheet_format, input_paths):
    offset = asset.get('offset', 0)

    if asset.get('split', 1) > 1:
        cursor = read_file_slice(input_paths[0], offset, sheet_format.byte_count)
        if cursor.remaining() < sheet_format.byte_count:
            raise TruncatedStream(f"{input_paths[0]} is too short for {sheet_format.name}", cursor.offset() + cursor.remaining())

        sources = cursor.split(asset['split'])
    else:
        sources = [read_file_slice(path, offset, sheet_format.bytes_per_source) for path in input_paths]

    order = asset.get('source_order')
    if order is not None:
        sources = [sources[i] for i in order]

    color_table = None
    if 'color_offset' in asset:
        color_table = read_file_slice(input_paths[0], asset['color_offset'], sheet_format.tile_count)

    return (sources, color_table)

def decode_asset(asset, input_paths, sheet_format=None, palette=None):
    if asset['kind'] == 'rle':
        if palette is None:
            palette = palette_codec.ega_palette

        cursor = read_file_slice(input_paths[0], asset.get('offset', 0), None)
        return decode_border(cursor, asset['width'], asset['height'], palette)

    if sheet_format is None:
        sheet_format = asset['format']
    if palette is not None:
        sheet_format = sheet_format.with_options(palette=palette)

    (sources, color_table) = load_sheet_sources(asset, sheet_format, input_paths)

    return decode_sheet(sources, sheet_format, color_table)

def decode(input_paths, asset, output_path, sheet_format=None, palette=None, strip=False):
    print(f"Decoding {', '.join(str(path) for path in input_paths)}")

    buffer = decode_asset(asset, input_paths, sheet_format, palette)

    if strip and asset['kind'] == 'sheet':
        buffer = relayout(buffer, sheet_format or asset['format'], 1)

    image = buffer.to_image()
    image.save(Path(output_path))

    return buffer
