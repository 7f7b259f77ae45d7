"""Gray-level histograms, histogram equalisation, value plots and image I/O.

Colour images are ``(rows, cols, 3)`` arrays of ``uint8`` in BGR order;
grayscale images are ``(rows, cols)`` arrays of ``uint8``.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image, ImageDraw

from graylab.filters import to_gray

PathLike = Union[str, Path]

_LEVELS = 256
_PLOT_MARGIN = 20
_PLOT_COLOUR_RGB = (255, 0, 0)
_BACKGROUND_RGB = (255, 255, 255)


def _require_gray(image: np.ndarray) -> np.ndarray:
    array = np.asarray(image)
    if array.size == 0:
        raise ValueError("image is empty")
    if array.dtype != np.uint8 or array.ndim != 2:
        raise ValueError("expected a single-channel uint8 image")
    return array


def _counts(array: np.ndarray) -> np.ndarray:
    return np.bincount(array.ravel(), minlength=_LEVELS).astype(np.float32)


def histogram(image: np.ndarray) -> np.ndarray:
    """Return the normalised 256-bin histogram of a grayscale image (float32)."""
    array = _require_gray(image)
    return (_counts(array) / np.float32(array.size)).astype(np.float32)


def equalize(image: np.ndarray) -> np.ndarray:
    """Spread the gray levels of an image over the full 0..255 range."""
    array = _require_gray(image)
    total = np.float32(array.size)
    cdf = np.cumsum(_counts(array), dtype=np.float32)
    cdf_min = cdf[cdf > 0].min()

    denominator = total - cdf_min
    if denominator == 0:
        # A single gray level: the mapping degenerates and saturates to white.
        lut = np.where(cdf > 0, 255, 0).astype(np.uint8)
    else:
        scaled = (cdf - cdf_min) / denominator * np.float32(255.0) + np.float32(0.5)
        clipped = np.minimum(np.float32(255.0), scaled)
        lut = np.where(cdf > 0, np.trunc(clipped), 0).astype(np.uint8)
    return lut[array]


def plot_values(
    data: Sequence[float],
    line: bool = True,
    height: int = 400,
    width: int = 800,
) -> np.ndarray:
    """Draw the values as a red line or bar chart on a white BGR canvas."""
    values = [float(v) for v in data]
    if not values:
        raise ValueError("no data to plot")
    if height <= 0 or width <= 0:
        raise ValueError("plot size must be positive")

    peak = max(0.0, max(values)) or 1.0
    bin_width = width / len(values)
    usable = height - _PLOT_MARGIN

    def bar_height(value: float) -> int:
        return int(value / peak * usable)

    canvas = Image.new("RGB", (width, height), _BACKGROUND_RGB)
    draw = ImageDraw.Draw(canvas)
    if line:
        points = [
            (int(i * bin_width), height - bar_height(value))
            for i, value in enumerate(values)
        ]
        for start, end in zip(points, points[1:]):
            draw.line([start, end], fill=_PLOT_COLOUR_RGB, width=1)
    else:
        for i, value in enumerate(values):
            left = int(i * bin_width)
            right = int((i + 1) * bin_width)
            top = height - bar_height(value)
            draw.rectangle(
                [min(left, right), min(top, height), max(left, right), max(top, height)],
                fill=_PLOT_COLOUR_RGB,
            )
    return np.asarray(canvas, dtype=np.uint8)[..., ::-1].copy()


def load_image(path: PathLike) -> np.ndarray:
    """Read an image file as a BGR colour array."""
    with Image.open(path) as picture:
        rgb = np.asarray(picture.convert("RGB"), dtype=np.uint8)
    return rgb[..., ::-1].copy()


def _save_image(path: PathLike, image: np.ndarray) -> None:
    array = np.asarray(image, dtype=np.uint8)
    if array.ndim == 3:
        array = array[..., ::-1]
    Image.fromarray(np.ascontiguousarray(array)).save(path)


class ImageProcessor:
    """Holds a grayscale image loaded from a file."""

    def __init__(self, path: PathLike) -> None:
        with Image.open(path) as picture:
            self.image = np.asarray(picture.convert("L"), dtype=np.uint8)

    def average_brightness(self) -> float:
        """Mean gray level of the image."""
        return float(self.image.mean())


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="graylab-histogram",
        description="Equalise an image and plot its gray-level histogram.",
    )
    parser.add_argument("image", type=Path, help="input image")
    parser.add_argument("--equalized", type=Path, help="where to write the equalised image")
    parser.add_argument("--line-plot", type=Path, help="where to write the line plot")
    parser.add_argument("--bar-plot", type=Path, help="where to write the bar plot")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Equalise an image and write it together with line and bar histogram plots."""
    args = _parse_args(argv)
    source: Path = args.image

    def sibling(suffix: str) -> Path:
        return source.with_name(f"{source.stem}{suffix}.png")

    equalized_path = args.equalized or sibling("_Hist")
    line_path = args.line_plot or sibling("_Hist_l")
    bar_path = args.bar_plot or sibling("_Hist_b")

    try:
        image = load_image(source)
    except OSError:
        print("Error: Could not load the image!")
        return 1

    gray = to_gray(image)
    hist = histogram(gray)
    _save_image(equalized_path, equalize(gray))
    _save_image(line_path, plot_values(hist, line=True))
    _save_image(bar_path, plot_values(hist, line=False))
    return 0