# graylab

A small grayscale image processing toolkit built on NumPy arrays, with Pillow
for reading and writing image files.

Colour images are `uint8` arrays of shape `(rows, cols, 3)` in **BGR** channel
order. Grayscale images are `uint8` arrays of shape `(rows, cols)`.

## What it does

### `graylab.filters`

- `to_gray(image)`: converts a BGR colour image to grayscale using
  `0.299 R + 0.587 G + 0.114 B`, rounded half up.
- `gamma_transform(image, gamma)`: maps each pixel to
  `255 * (p / 255) ** gamma`, rounded and saturated to `0..255`.
- `gaussian_kernel(size, sigma)`: a normalised `size` x `size` Gaussian kernel
  as a `float32` array. `size` must be a positive odd number.
- `gaussian_blur(image, ksize=5, sigma=1.0)`: Gaussian smoothing of a
  grayscale image. Pixels outside the image count as zero.
- `detect_edges(image, low=50, high=150)`: Canny-style edge detection with
  Sobel gradients, non-maximum suppression, double thresholding and
  hysteresis tracking. Edge pixels are 255 and all others are 0. The outer
  one-pixel border never holds an edge.

### `graylab.histogram`

- `histogram(image)`: the normalised 256-bin histogram of a grayscale image,
  as `float32` fractions that sum to 1.
- `equalize(image)`: histogram equalization through a CDF lookup table. An
  image with a single gray level comes out white.
- `plot_values(data, line=True, height=400, width=800)`: draws a sequence of
  values as a red line chart (or bar chart with `line=False`) on a white
  canvas, returned as a BGR array of shape `(height, width, 3)`.
- `load_image(path)`: reads an image file as a BGR colour array.
- `ImageProcessor(path)`: loads an image file as grayscale into its `image`
  attribute; `average_brightness()` returns the mean gray level.

### `graylab.basics`

Small general-purpose helpers:

- `TreeNode` and `inorder_traversal(root)`, which returns the values of a
  binary tree in left-node-right order; `build_demo_tree()` builds the tree
  `1 -> right 2 -> left 3`.
- `swap(a, b)` returns `(b, a)`; `reverse_list(values)` returns a reversed
  copy; `sort_by_magnitude(values)` sorts by absolute value;
  `sum_and_max(values)` returns the sum and the largest value (`None` when
  empty).
- `Point(x, y)`: an immutable 2-D point supporting `+`, `distance()` from
  the origin, and `str()` as `"x y"`.
- `Shape` with `Circle(radius)` and `Rectangle(width, height)`, each with an
  `area()`. The circle area uses 3.14 for pi.

## Errors

Invalid input raises `ValueError`: an empty image, an image of the wrong
dtype or number of channels, an even or non-positive kernel size, a
non-positive gamma or sigma, thresholds that do not satisfy
`0 <= low <= high`, empty plot data or a non-positive plot size.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
import numpy as np
from graylab.filters import gaussian_blur, detect_edges
from graylab.histogram import histogram, equalize

image = np.zeros((32, 32), dtype=np.uint8)
image[8:24, 8:24] = 200

smoothed = gaussian_blur(image, 5, 1.0)
edges = detect_edges(smoothed, 50, 150)
flat = equalize(image)
bins = histogram(image)   # 256 fractions that sum to 1
```

## Commands

```
graylab-basics
```

Builds the demonstration tree and prints its in-order traversal (`1 3 2`).

```
graylab-histogram IMAGE [--equalized PATH] [--line-plot PATH] [--bar-plot PATH]
```

Loads `IMAGE`, converts it to grayscale, and writes the equalized image and
line and bar plots of its histogram. Without the options the outputs go next
to the input as `<stem>_Hist.png`, `<stem>_Hist_l.png` and `<stem>_Hist_b.png`.
If the image cannot be read it prints `Error: Could not load the image!` and
exits with status 1.

## What it does not do

There is no command for blurring, gamma correction or edge detection; those
are available only as functions. Nothing is shown on screen: results are
returned as arrays or written to files.