#!/usr/bin/env python3
"""Pixel serializer: filtered stream layout, validation policy, NumPy input."""

import numpy as np
import pytest

from micropng import SerializedImage, ValidationError, filtered_length, serialize
from tests._png_reader import reference_filtered


def test_two_pixel_scanline():
    img = serialize([[[255, 0, 0], [0, 255, 0]]])
    assert img == SerializedImage(2, 1, 3, bytes([0, 255, 0, 0, 0, 255, 0]))


def test_every_scanline_gets_filter_byte(rgb_image):
    img = serialize(rgb_image)
    assert (img.width, img.height, img.channels) == (3, 2, 3)
    assert len(img.data) == filtered_length(3, 2, 3) == 2 * (1 + 3 * 3)
    row_len = 1 + img.width * img.channels
    assert img.data[0] == 0 and img.data[row_len] == 0
    assert img.data == reference_filtered(rgb_image)


def test_rgba(rgba_image):
    img = serialize(rgba_image)
    assert img.channels == 4
    assert img.data == reference_filtered(rgba_image)


def test_tuples_and_bytes_pixels():
    img = serialize(((b"\x01\x02\x03", (4, 5, 6)),))
    assert img.data == bytes([0, 1, 2, 3, 4, 5, 6])


def test_input_not_mutated(rgb_image):
    before = [[list(p) for p in row] for row in rgb_image]
    serialize(rgb_image)
    assert rgb_image == before


def test_deterministic(rgba_image):
    assert serialize(rgba_image) == serialize(rgba_image)


@pytest.mark.parametrize(
    "image",
    [
        [],
        [[]],
        [[[1, 2, 3], [4, 5, 6]], [[7, 8, 9]]],
        [[[1, 2]]],
        [[[1, 2, 3, 4, 5]]],
        [[[1, 2, 3], [4, 5, 6, 7]]],
        [[[1, 2, 3, 4]], [[5, 6, 7]]],
    ],
    ids=["empty", "empty-row", "ragged", "two-channels", "five-channels", "mixed-in-row", "mixed-rows"],
)
def test_malformed_images_fail_fast(image):
    with pytest.raises(ValidationError):
        serialize(image)


def test_ragged_error_names_row():
    with pytest.raises(ValidationError, match="scanline 1"):
        serialize([[[0, 0, 0], [0, 0, 0]], [[0, 0, 0]]])


@pytest.mark.parametrize("value", [-1, 256, 1.5, "7", None, True])
def test_out_of_range_or_non_integer_values(value):
    with pytest.raises(ValidationError):
        serialize([[[0, value, 0]]])


def test_unchecked_values_still_must_fit_a_byte():
    assert serialize([[[1, 2, 3]]], check_values=False).data == bytes([0, 1, 2, 3])
    with pytest.raises(ValidationError):
        serialize([[[0, 300, 0]]], check_values=False)


def test_not_a_sequence():
    with pytest.raises(ValidationError):
        serialize(42)
    with pytest.raises(ValidationError):
        serialize([42])


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        serialize([])


def test_numpy_matches_nested_lists(rgba_image):
    arr = np.array(rgba_image, dtype=np.uint8)
    assert serialize(arr) == serialize(rgba_image)


def test_numpy_wider_integer_dtype(rgb_image):
    arr = np.array(rgb_image, dtype=np.int64)
    assert serialize(arr).data == reference_filtered(rgb_image)


def test_numpy_non_contiguous():
    arr = np.arange(4 * 6 * 3, dtype=np.uint8).reshape(4, 6, 3)[:, ::2]
    img = serialize(arr)
    assert (img.width, img.height) == (3, 4)
    assert img.data == reference_filtered(arr.tolist())


def test_numpy_list_rows():
    rows = [np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8)]
    assert serialize(rows).data == bytes([0, 1, 2, 3, 4, 5, 6])


@pytest.mark.parametrize(
    "arr",
    [
        np.zeros((2, 2), dtype=np.uint8),
        np.zeros((0, 2, 3), dtype=np.uint8),
        np.zeros((2, 0, 3), dtype=np.uint8),
        np.zeros((2, 2, 2), dtype=np.uint8),
        np.zeros((2, 2, 5), dtype=np.uint8),
        np.zeros((2, 2, 3), dtype=np.float32),
        np.full((2, 2, 3), 256, dtype=np.int32),
        np.full((2, 2, 3), -1, dtype=np.int16),
    ],
)
def test_numpy_rejected(arr):
    with pytest.raises(ValidationError):
        serialize(arr)
