"""Tests for the pixel buffer."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from content_aware_resize.errors import InvalidArgumentError
from content_aware_resize.image import Coordinate, ImageSize, PixelBuffer


class TestPixelBuffer:
    def test_defaults_to_full_width(self):
        image = PixelBuffer(torch.zeros(3, 7, 4, dtype=torch.uint8))
        assert image.width == 7
        assert image.height == 3
        assert image.capacity == 7
        assert image.size == ImageSize(7, 3)

    def test_rejects_bad_shape(self):
        with pytest.raises(InvalidArgumentError):
            PixelBuffer(torch.zeros(3, 7, 3, dtype=torch.uint8))
        with pytest.raises(InvalidArgumentError):
            PixelBuffer(torch.zeros(3, 7, dtype=torch.uint8))

    def test_rejects_non_uint8(self):
        with pytest.raises(InvalidArgumentError):
            PixelBuffer(torch.zeros(3, 7, 4))

    def test_rejects_width_beyond_storage(self):
        with pytest.raises(InvalidArgumentError):
            PixelBuffer(torch.zeros(3, 7, 4, dtype=torch.uint8), width=8)

    def test_view_is_logical_region(self):
        """view() covers only the logical width and shares storage."""
        image = PixelBuffer(torch.zeros(2, 5, 4, dtype=torch.uint8), width=3)
        view = image.view()
        assert view.shape == (2, 3, 4)
        view[0, 0, 0] = 9
        assert image.data[0, 0, 0] == 9

    def test_pixel_bounds(self):
        image = PixelBuffer(torch.zeros(2, 5, 4, dtype=torch.uint8), width=3)
        assert image.pixel(Coordinate(2, 1)).shape == (4,)
        with pytest.raises(InvalidArgumentError):
            image.pixel(Coordinate(3, 0))


class TestConversions:
    def test_from_tensor_adds_alpha(self):
        """RGB input gets an opaque alpha channel."""
        rgb = torch.full((2, 3, 3), 7, dtype=torch.uint8)
        image = PixelBuffer.from_tensor(rgb)
        assert image.data.shape == (2, 3, 4)
        assert (image.data[..., 3] == 255).all()
        assert (image.data[..., :3] == 7).all()

    def test_from_tensor_rejects_float(self):
        """Float images are not silently truncated to black."""
        with pytest.raises(InvalidArgumentError):
            PixelBuffer.from_tensor(torch.rand(4, 6, 3))

    @pytest.mark.parametrize("value", [300, -1])
    def test_from_tensor_rejects_out_of_range(self, value):
        """Integer channels outside [0, 255] are not wrapped."""
        image = torch.full((2, 3, 4), value, dtype=torch.int32)
        with pytest.raises(InvalidArgumentError):
            PixelBuffer.from_tensor(image)

    def test_from_tensor_accepts_wide_int_in_range(self):
        image = torch.full((2, 3, 3), 200, dtype=torch.int64)
        buffer = PixelBuffer.from_tensor(image)
        assert (buffer.data[..., :3] == 200).all()

    def test_from_tensor_copies(self):
        rgba = torch.zeros(2, 3, 4, dtype=torch.uint8)
        image = PixelBuffer.from_tensor(rgba)
        image.data[0, 0, 0] = 1
        assert rgba[0, 0, 0] == 0

    def test_flat_row_major_rgba(self):
        """Flat data is read as consecutive RGBA pixels, row by row."""
        flat = bytes(range(2 * 3 * 4))
        image = PixelBuffer.from_flat(flat, width=3, height=2)
        assert image.pixel(Coordinate(0, 0)).tolist() == [0, 1, 2, 3]
        assert image.pixel(Coordinate(2, 0)).tolist() == [8, 9, 10, 11]
        assert image.pixel(Coordinate(0, 1)).tolist() == [12, 13, 14, 15]
        assert image.to_flat() == flat

    def test_to_flat_omits_stale_columns(self):
        image = PixelBuffer.from_flat(bytes(range(2 * 3 * 4)), width=3, height=2)
        image.width = 2
        assert image.to_flat() == bytes([0, 1, 2, 3, 4, 5, 6, 7,
                                         12, 13, 14, 15, 16, 17, 18, 19])

    def test_from_flat_wrong_length(self):
        with pytest.raises(InvalidArgumentError):
            PixelBuffer.from_flat([0] * 10, width=2, height=2)

    @pytest.mark.parametrize("data", [[300, 0, 0, 255], [0, -4, 0, 255], [0.5, 0, 0, 255]])
    def test_from_flat_rejects_non_byte_values(self, data):
        """Values that are not 8-bit integers raise the package error."""
        with pytest.raises(InvalidArgumentError):
            PixelBuffer.from_flat(data, width=1, height=1)

    def test_from_flat_empty(self):
        image = PixelBuffer.from_flat(b"", width=0, height=3)
        assert image.size == ImageSize(0, 3)
        assert image.to_flat() == b""
