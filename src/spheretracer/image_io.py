# image_io.py
import os

import numpy as np
from PIL import Image

PPM_EXTENSIONS = (".ppm",)

def write_ppm(path: str, pixels: np.ndarray) -> None:
    """
    Write an 8-bit (height, width, 3) image as plain-text PPM (P3):
    a header of format tag, size and max value 255, then one line per
    row of space separated r g b triples.
    """
    height, width, _ = pixels.shape
    with open(path, "w") as out:
        out.write("P3\n")
        out.write(f"{width} {height}\n")
        out.write("255\n")
        for row in pixels:
            out.write("".join(f"{r} {g} {b} " for r, g, b in row.tolist()))
            out.write("\n")

def read_ppm(path: str) -> np.ndarray:
    """
    Read a plain-text PPM (P3) file into a (height, width, 3) uint8 array.
    """
    with open(path, "r") as f:
        tokens = []
        for line in f:
            tokens.extend(line.split("#", 1)[0].split())
    if not tokens or tokens[0] != "P3":
        raise ValueError(f"{path} is not a plain-text PPM (P3) file")
    width, height, max_value = int(tokens[1]), int(tokens[2]), int(tokens[3])
    values = np.array(tokens[4:], dtype=np.int64)
    if values.size != width * height * 3:
        raise ValueError(
            f"{path}: expected {width * height * 3} values, found {values.size}")
    if max_value != 255:
        values = values * 255 // max_value
    return values.reshape((height, width, 3)).astype(np.uint8)

def save_image(path: str, pixels: np.ndarray) -> str:
    """
    Save an 8-bit image. ``.ppm`` is written as plain text, every other
    extension goes through Pillow. Returns the path written.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if os.path.splitext(path)[1].lower() in PPM_EXTENSIONS:
        write_ppm(path, pixels)
    else:
        Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path)
    return path
