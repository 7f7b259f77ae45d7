"""Grayscale conversion, gamma correction, Gaussian blur and edge detection.

Colour images are ``(rows, cols, 3)`` arrays of ``uint8`` in BGR order;
grayscale images are ``(rows, cols)`` arrays of ``uint8``.
"""

from __future__ import annotations

import math
from collections import deque

import numpy as np

_BLUE_WEIGHT = 0.114
_GREEN_WEIGHT = 0.587
_RED_WEIGHT = 0.299

_STRONG = 255
_WEAK = 128

_NEIGHBOURS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def _require_gray(image: np.ndarray) -> np.ndarray:
    array = np.asarray(image)
    if array.size == 0:
        raise ValueError("image is empty")
    if array.dtype != np.uint8 or array.ndim != 2:
        raise ValueError("expected a single-channel uint8 image")
    return array


def _to_uint8(values: np.ndarray) -> np.ndarray:
    """Round float32 values half up and saturate to the 0..255 range."""
    rounded = np.trunc(values.astype(np.float32) + np.float32(0.5))
    return np.clip(rounded, 0, 255).astype(np.uint8)


def to_gray(image: np.ndarray) -> np.ndarray:
    """Convert a BGR colour image to grayscale with the BT.601 weights."""
    array = np.asarray(image)
    if array.size == 0:
        raise ValueError("image is empty")
    if array.dtype != np.uint8 or array.ndim != 3 or array.shape[2] != 3:
        raise ValueError("expected a three-channel uint8 image")
    channels = array.astype(np.float64)
    blue, green, red = channels[..., 0], channels[..., 1], channels[..., 2]
    weighted = _RED_WEIGHT * red + _GREEN_WEIGHT * green + _BLUE_WEIGHT * blue
    return _to_uint8(weighted)


def gamma_transform(image: np.ndarray, gamma: float) -> np.ndarray:
    """Apply ``out = 255 * (in / 255) ** gamma`` to a grayscale image."""
    array = _require_gray(image)
    if gamma <= 0:
        raise ValueError("gamma must be positive")
    normalised = (array / 255.0).astype(np.float32)
    transformed = np.power(normalised, np.float32(gamma), dtype=np.float32)
    return _to_uint8(transformed * np.float32(255.0))


def gaussian_kernel(size: int, sigma: float) -> np.ndarray:
    """Return a normalised ``size`` x ``size`` Gaussian kernel as float32."""
    if size <= 0 or size % 2 == 0:
        raise ValueError("kernel size must be a positive odd number")
    if sigma <= 0:
        raise ValueError("sigma must be positive")
    half = size // 2
    offsets = np.arange(-half, half + 1, dtype=np.float64)
    squared = offsets[:, None] ** 2 + offsets[None, :] ** 2
    sigma32 = np.float32(sigma)
    denominator = np.float32(2) * sigma32 * sigma32
    kernel = np.exp(-squared.astype(np.float32) / denominator).astype(np.float32)
    return (kernel / kernel.sum(dtype=np.float32)).astype(np.float32)


def gaussian_blur(image: np.ndarray, ksize: int = 5, sigma: float = 1.0) -> np.ndarray:
    """Blur a grayscale image; pixels outside the image count as zero."""
    array = _require_gray(image)
    if ksize % 2 == 0:
        raise ValueError("kernel size must be odd")
    if sigma <= 0:
        raise ValueError("sigma must be positive")
    kernel = gaussian_kernel(ksize, sigma)
    half = ksize // 2
    rows, cols = array.shape
    padded = np.pad(array.astype(np.float32), half, mode="constant")
    total = np.zeros((rows, cols), dtype=np.float32)
    for (m, n), weight in np.ndenumerate(kernel):
        total += weight * padded[m:m + rows, n:n + cols]
    return _to_uint8(total)


def _sobel(array: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    rows, cols = array.shape
    magnitude = np.zeros((rows, cols), dtype=np.float32)
    direction = np.zeros((rows, cols), dtype=np.float32)
    if rows < 3 or cols < 3:
        return magnitude, direction
    a = array.astype(np.int64)
    top, mid, bot = a[:-2], a[1:-1], a[2:]
    gx = (-top[:, :-2] + top[:, 2:]
          - 2 * mid[:, :-2] + 2 * mid[:, 2:]
          - bot[:, :-2] + bot[:, 2:])
    gy = (-top[:, :-2] + bot[:, :-2]
          - 2 * top[:, 1:-1] + 2 * bot[:, 1:-1]
          - top[:, 2:] + bot[:, 2:])
    magnitude[1:-1, 1:-1] = np.sqrt((gx * gx + gy * gy).astype(np.float64))
    direction[1:-1, 1:-1] = np.arctan2(gy.astype(np.float64), gx.astype(np.float64))
    return magnitude, direction


def _suppress(magnitude: np.ndarray, direction: np.ndarray) -> np.ndarray:
    rows, cols = magnitude.shape
    suppressed = np.zeros((rows, cols), dtype=np.uint8)
    if rows < 3 or cols < 3:
        return suppressed
    mag = magnitude[1:-1, 1:-1]
    angle = (direction[1:-1, 1:-1].astype(np.float64) * 180.0 / math.pi).astype(np.float32)

    horizontal = ((angle >= -22.5) & (angle < 22.5)) | (angle >= 157.5) | (angle < -157.5)
    diagonal = ~horizontal & (
        ((angle >= 22.5) & (angle < 67.5)) | (angle >= -157.5) | (angle < -112.5)
    )
    vertical = ~horizontal & ~diagonal & (
        ((angle >= -67.5) & (angle < 112.5)) | (angle >= -112.5) | (angle < -67.5)
    )
    anti_diagonal = ~horizontal & ~diagonal & ~vertical

    first = np.select(
        [horizontal, diagonal, vertical, anti_diagonal],
        [magnitude[1:-1, :-2], magnitude[:-2, 2:], magnitude[:-2, 1:-1], magnitude[:-2, :-2]],
    )
    second = np.select(
        [horizontal, diagonal, vertical, anti_diagonal],
        [magnitude[1:-1, 2:], magnitude[2:, :-2], magnitude[2:, 1:-1], magnitude[2:, 2:]],
    )
    keep = (mag >= first) & (mag >= second)
    values = np.minimum(mag, np.float32(255.0)).astype(np.uint8)
    suppressed[1:-1, 1:-1] = np.where(keep, values, 0)
    return suppressed


def _track(suppressed: np.ndarray, low: int, high: int) -> np.ndarray:
    rows, cols = suppressed.shape
    edges = np.zeros((rows, cols), dtype=np.uint8)
    edges[suppressed > low] = _WEAK
    strong = suppressed > high
    edges[strong] = _STRONG
    pending = deque(zip(*np.nonzero(strong)))
    while pending:
        i, j = pending.popleft()
        for di, dj in _NEIGHBOURS:
            ni, nj = i + di, j + dj
            if 0 <= ni < rows and 0 <= nj < cols and edges[ni, nj] == _WEAK:
                edges[ni, nj] = _STRONG
                pending.append((ni, nj))
    edges[edges != _STRONG] = 0
    return edges


def detect_edges(image: np.ndarray, low: int = 50, high: int = 150) -> np.ndarray:
    """Canny-style edge map of a grayscale image; edges are 255, the rest 0."""
    array = _require_gray(image)
    if low < 0 or high < low:
        raise ValueError("thresholds must satisfy 0 <= low <= high")
    magnitude, direction = _sobel(array)
    suppressed = _suppress(magnitude, direction)
    return _track(suppressed, low, high)