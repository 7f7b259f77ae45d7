import numpy as np
import pytest

from graylab.filters import (
    detect_edges,
    gamma_transform,
    gaussian_blur,
    gaussian_kernel,
    to_gray,
)


def _step_image(rows=10, cols=10, split=5):
    image = np.zeros((rows, cols), dtype=np.uint8)
    image[:, split:] = 255
    return image


# to_gray

@pytest.mark.parametrize("value", [0, 1, 77, 128, 200, 255])
def test_to_gray_neutral_colour_keeps_value(value):
    image = np.full((3, 4, 3), value, dtype=np.uint8)
    gray = to_gray(image)
    assert gray.shape == (3, 4)
    assert gray.dtype == np.uint8
    assert np.all(gray == value)


def test_to_gray_black_and_white():
    image = np.zeros((1, 2, 3), dtype=np.uint8)
    image[0, 1] = 255
    assert to_gray(image).tolist() == [[0, 255]]


def test_to_gray_blue_is_darker_than_green():
    image = np.zeros((1, 3, 3), dtype=np.uint8)
    image[0, 0, 0] = 255  # blue
    image[0, 1, 1] = 255  # green
    image[0, 2, 2] = 255  # red
    blue, green, red = to_gray(image)[0].tolist()
    assert blue < red < green


@pytest.mark.parametrize(
    "bad",
    [
        np.zeros((2, 2), dtype=np.uint8),
        np.zeros((2, 2, 4), dtype=np.uint8),
        np.zeros((2, 2, 3), dtype=np.float32),
        np.zeros((0, 0, 3), dtype=np.uint8),
    ],
)
def test_to_gray_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        to_gray(bad)


# gamma_transform

def test_gamma_one_is_identity():
    image = np.arange(256, dtype=np.uint8).reshape(16, 16)
    assert np.array_equal(gamma_transform(image, 1.0), image)


@pytest.mark.parametrize("gamma", [0.4, 1.0, 2.2])
def test_gamma_fixes_black_and_white(gamma):
    image = np.array([[0, 255]], dtype=np.uint8)
    assert gamma_transform(image, gamma).tolist() == [[0, 255]]


def test_gamma_above_one_darkens_and_is_monotonic():
    image = np.arange(256, dtype=np.uint8).reshape(1, 256)
    result = gamma_transform(image, 2.0)
    assert result.shape == (1, 256)
    values = result[0].tolist()
    assert values[0] == 0
    assert values[255] == 255
    assert values[128] < 128
    assert all(out <= original for out, original in zip(values, range(256)))
    assert values == sorted(values)


def test_gamma_below_one_brightens():
    image = np.arange(256, dtype=np.uint8).reshape(1, 256)
    result = gamma_transform(image, 0.5)
    values = result[0].tolist()
    assert values[0] == 0
    assert values[255] == 255
    assert values[128] > 128
    assert all(out >= original for out, original in zip(values, range(256)))


@pytest.mark.parametrize("gamma", [0.0, -1.0])
def test_gamma_rejects_non_positive(gamma):
    with pytest.raises(ValueError):
        gamma_transform(np.zeros((2, 2), dtype=np.uint8), gamma)


def test_gamma_rejects_colour_image():
    with pytest.raises(ValueError):
        gamma_transform(np.zeros((2, 2, 3), dtype=np.uint8), 1.0)


# gaussian_kernel

@pytest.mark.parametrize("size,sigma", [(1, 1.0), (3, 0.8), (5, 1.0), (7, 2.5)])
def test_kernel_is_normalised_and_symmetric(size, sigma):
    kernel = gaussian_kernel(size, sigma)
    assert kernel.shape == (size, size)
    assert kernel.sum() == pytest.approx(1.0, abs=1e-5)
    assert np.allclose(kernel, kernel.T)
    assert np.allclose(kernel, kernel[::-1, ::-1])


def test_kernel_peaks_at_centre():
    kernel = gaussian_kernel(5, 1.0)
    assert kernel.argmax() == 12
    assert kernel[2, 2] > kernel[2, 3] > kernel[2, 4]


def test_single_cell_kernel_is_one():
    assert gaussian_kernel(1, 1.0).tolist() == [[1.0]]


@pytest.mark.parametrize("size,sigma", [(4, 1.0), (0, 1.0), (3, 0.0), (3, -2.0)])
def test_kernel_rejects_bad_arguments(size, sigma):
    with pytest.raises(ValueError):
        gaussian_kernel(size, sigma)


# gaussian_blur

def test_blur_keeps_constant_interior():
    image = np.full((12, 12), 100, dtype=np.uint8)
    blurred = gaussian_blur(image, 5, 1.0)
    assert blurred.shape == image.shape
    assert np.all(blurred[2:-2, 2:-2] == 100)


def test_blur_darkens_borders_because_outside_is_zero():
    image = np.full((12, 12), 200, dtype=np.uint8)
    blurred = gaussian_blur(image, 5, 1.0)
    assert blurred[0, 0] < 200
    assert blurred[0, 0] < blurred[0, 6]


def test_blur_of_zeros_is_zeros():
    image = np.zeros((6, 7), dtype=np.uint8)
    assert np.array_equal(gaussian_blur(image), image)


def test_blur_spreads_single_point_symmetrically():
    image = np.zeros((9, 9), dtype=np.uint8)
    image[4, 4] = 255
    blurred = gaussian_blur(image, 3, 1.0)
    assert blurred[4, 4] < 255
    assert blurred[4, 3] > 0
    assert np.array_equal(blurred, blurred.T)
    assert np.array_equal(blurred, blurred[::-1, ::-1])


def test_blur_size_one_is_identity():
    image = np.arange(30, dtype=np.uint8).reshape(5, 6)
    assert np.array_equal(gaussian_blur(image, 1, 1.0), image)


@pytest.mark.parametrize("ksize,sigma", [(4, 1.0), (3, 0.0)])
def test_blur_rejects_bad_parameters(ksize, sigma):
    with pytest.raises(ValueError):
        gaussian_blur(np.zeros((4, 4), dtype=np.uint8), ksize, sigma)


def test_blur_rejects_colour_image():
    with pytest.raises(ValueError):
        gaussian_blur(np.zeros((4, 4, 3), dtype=np.uint8))


# detect_edges

def test_uniform_image_has_no_edges():
    image = np.full((8, 8), 90, dtype=np.uint8)
    assert not detect_edges(image).any()


def test_vertical_step_gives_two_edge_columns():
    edges = detect_edges(_step_image())
    assert np.all(edges[1:-1, 4] == 255)
    assert np.all(edges[1:-1, 5] == 255)
    expected = np.zeros_like(edges)
    expected[1:-1, 4:6] = 255
    assert np.array_equal(edges, expected)


def test_edge_map_is_binary_with_clear_border():
    rng = np.random.default_rng(7)
    image = rng.integers(0, 256, size=(15, 17), dtype=np.uint8)
    edges = detect_edges(image, 30, 90)
    assert set(np.unique(edges).tolist()) <= {0, 255}
    assert not edges[0].any() and not edges[-1].any()
    assert not edges[:, 0].any() and not edges[:, -1].any()


def test_high_threshold_at_saturation_finds_nothing():
    assert not detect_edges(_step_image(), 50, 255).any()


def test_lower_thresholds_never_lose_edges():
    rng = np.random.default_rng(3)
    image = rng.integers(0, 256, size=(12, 12), dtype=np.uint8)
    strict = detect_edges(image, 100, 200)
    loose = detect_edges(image, 20, 60)
    strict_points = set(zip(*np.nonzero(strict == 255)))
    loose_points = set(zip(*np.nonzero(loose == 255)))
    assert strict_points <= loose_points
    assert np.count_nonzero(loose) >= np.count_nonzero(strict)


def test_tiny_image_has_no_edges():
    image = np.array([[0, 255], [255, 0]], dtype=np.uint8)
    assert not detect_edges(image).any()


@pytest.mark.parametrize("low,high", [(-1, 10), (100, 50)])
def test_edges_reject_bad_thresholds(low, high):
    with pytest.raises(ValueError):
        detect_edges(np.zeros((5, 5), dtype=np.uint8), low, high)


def test_edges_reject_float_image():
    with pytest.raises(ValueError):
        detect_edges(np.zeros((5, 5), dtype=np.float64))