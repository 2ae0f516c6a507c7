import sys, time, math
from pathlib import Path
import image_codec, palette_codec
from color_resolvers import APPLE_DIRECT, APPLE_ARTIFACT
from decode_errors import DecodeError
from title_formats import title_table, supported_titles, get_asset


def parse_flags(flags):
    options = {}

    for flag in flags:
        if '=' in flag:
            (key, value) = flag.split('=', 1)
            options[key] = value
        else:
            options[flag] = True

    return options

def apply_flags(asset, options):
    if asset['kind'] != 'sheet':
        return None

    sheet_format = asset['format']

    if 'artifact' in options and sheet_format.resolver == APPLE_DIRECT:
        sheet_format = sheet_format.with_options(resolver=APPLE_ARTIFACT)

    if 'odd_first' in options:
        sheet_format = sheet_format.with_options(odd_first=True)

    return sheet_format

def load_palette(options):
    if 'palette' in options:
        return palette_codec.get_palette_from_png(Path(options['palette']))
    return None

def find_file(folder_path, file_name):
    for entry in folder_path.iterdir():
        if entry.is_file() and entry.name.lower() == file_name.lower():
            return entry

    return None

def extract(title_id, asset_name, paths, flags):
    asset = get_asset(title_id, asset_name)
    options = parse_flags(flags)

    input_paths = [Path(path).resolve() for path in paths[:-1]]
    output_path = Path(paths[-1]).resolve()

    assert len(input_paths) == len(asset['files'])

    image_codec.decode(input_paths, asset, output_path, apply_flags(asset, options), load_palette(options), 'strip' in options)

def extract_title(title_id, source_path, output_path, flags):
    title_id = title_id.upper()
    assert title_id in supported_titles

    options = parse_flags(flags)
    palette = load_palette(options)

    start_time = time.time()

    source_path = Path(source_path).resolve()
    output_path = Path(output_path).resolve()
    output_path.mkdir(parents=True, exist_ok=True)

    extracted = 0
    failed = 0

    for (asset_name, asset) in title_table[title_id]['assets'].items():
        input_paths = [find_file(source_path, file_name) for file_name in asset['files']]

        if None in input_paths:
            print(f"Skipping {asset_name}: {', '.join(asset['files'])} not found in {source_path}")
            continue

        image_path = Path(output_path, f"{title_id.lower()}_{asset_name}.png")

        try:
            image_codec.decode(input_paths, asset, image_path, apply_flags(asset, options), palette, 'strip' in options)
        except DecodeError as error:
            print(f"Error: {asset_name} could not be decoded: {error}")
            failed += 1
            continue

        extracted += 1

    end_time = time.time()
    total_time = end_time - start_time

    print(f"{title_id}: {extracted} assets extracted, {failed} failed in {math.floor(total_time)} seconds")

    return (extracted, failed)

def save_palette(platform, png_path):
    palette = palette_codec.palette_table[platform]
    palette_codec.save_to_png(palette, Path(png_path).resolve())

def list_titles():
    for title_id in supported_titles:
        title = title_table[title_id]
        print(f"{title_id} ({title['platform']})")

        for (asset_name, asset) in title['assets'].items():
            print(f"    {asset_name}: {', '.join(asset['files'])}")


if __name__ == "__main__":
    if sys.argv[1] == "extract":
        title_id = sys.argv[2]
        asset = get_asset(title_id, sys.argv[3])
        path_count = len(asset['files']) + 1

        extract(title_id, sys.argv[3], sys.argv[4:4 + path_count], sys.argv[4 + path_count:])

    elif sys.argv[1] == "extract_title":
        extract_title(sys.argv[2], sys.argv[3], sys.argv[4], sys.argv[5:])

    elif sys.argv[1] == "palette":
        save_palette(sys.argv[2], sys.argv[3])

    elif sys.argv[1] == "list":
        list_titles()
