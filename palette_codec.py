from PIL import Image

# Apple II hi-res colours, in the order the artifact resolvers index them.
GREEN = 0
ORANGE = 1
VIOLET = 2
BLUE = 3
WHITE = 4
BLACK = 5

apple2_palette = (
    (0x25, 0xbe, 0x00),
    (0xe5, 0x50, 0x00),
    (0x9e, 0x00, 0xff),
    (0x00, 0x7e, 0xff),
    (0xff, 0xff, 0xff),
    (0x00, 0x00, 0x00),
)

ega_palette = (
    (0x00, 0x00, 0x00), (0x00, 0x00, 0xaa),
    (0x00, 0xaa, 0x00), (0x00, 0xaa, 0xaa),
    (0xaa, 0x00, 0x00), (0xaa, 0x00, 0xaa),
    (0xaa, 0x55, 0x00), (0xaa, 0xaa, 0xaa),
    (0x55, 0x55, 0x55), (0x55, 0x55, 0xff),
    (0x55, 0xff, 0x55), (0x55, 0xff, 0xff),
    (0xff, 0x55, 0x55), (0xff, 0x55, 0xff),
    (0xff, 0xff, 0x55), (0xff, 0xff, 0xff),
)

# Dark gray and gray share a value in the extracted colour table.
c64_palette = (
    (0x00, 0x00, 0x00), (0xff, 0xff, 0xff),
    (0x93, 0x3a, 0x4c), (0xb6, 0xfa, 0xfa),
    (0xd2, 0x7d, 0xed), (0x6a, 0xcf, 0x6f),
    (0x4f, 0x44, 0xd8), (0xfb, 0xfb, 0x8b),
    (0xd8, 0x9c, 0x5b), (0x7f, 0x53, 0x07),
    (0xef, 0x83, 0x9f), (0x57, 0x57, 0x53),
    (0x57, 0x57, 0x53), (0xb7, 0xfb, 0xbf),
    (0xa3, 0x97, 0xff), (0xa3, 0xa7, 0xa7),
)

palette_table = {
    'apple2': apple2_palette,
    'c64': c64_palette,
    'ega': ega_palette
}

# Index written into sheet cells that hold no tile.
background_table = {
    'apple2': BLACK,
    'c64': 0,
    'ega': 0
}

def save_to_png(palette, png_path, swatch_size=16):
    palette_image = Image.new(mode="RGB", size=(len(palette) * swatch_size, swatch_size))

    for i in range(len(palette)):
        color = palette[i]

        for y in range(swatch_size):
            for x in range(swatch_size):
                palette_image.putpixel((i * swatch_size + x, y), color)

    palette_image.save(png_path)

def get_palette_from_png(png_file_path, swatch_size=16):
    palette = []

    image_file = Image.open(png_file_path).convert("RGB")
    palette_image = image_file.load()

    for i in range(int(image_file.width / swatch_size)):
        palette.append(palette_image[i * swatch_size, 0])

    return tuple(palette)
