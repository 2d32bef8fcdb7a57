"""Shared test fixtures for content-aware-resize test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from content_aware_resize.image import PixelBuffer


@pytest.fixture
def random_image():
    """Seeded 12x20 RGBA image with random colors."""
    torch.manual_seed(42)
    return PixelBuffer(torch.randint(0, 256, (12, 20, 4), dtype=torch.uint8))


def make_solid_image(H, W, color=(120, 80, 200, 255)):
    """Every pixel the same RGBA color."""
    data = torch.tensor(color, dtype=torch.uint8).expand(H, W, 4).clone()
    return PixelBuffer(data)


def make_edge_image(H, W, edge_col):
    """Black left of edge_col, white from edge_col on. Opaque."""
    data = torch.zeros(H, W, 4, dtype=torch.uint8)
    data[:, edge_col:, :3] = 255
    data[..., 3] = 255
    return PixelBuffer(data)


def make_column_index_image(H, W):
    """Red channel holds the column index, alpha the row index."""
    data = torch.zeros(H, W, 4, dtype=torch.uint8)
    data[..., 0] = torch.arange(W).to(torch.uint8).unsqueeze(0)
    data[..., 3] = torch.arange(H).to(torch.uint8).unsqueeze(1)
    return PixelBuffer(data)
