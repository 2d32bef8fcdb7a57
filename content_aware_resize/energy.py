"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

A pixel's energy is the local horizontal color variation: the Euclidean
distance in RGB between the pixel and its left neighbour, combined with
the distance to its right neighbour. Alpha does not contribute.
"""

import math
from typing import Optional, Sequence

import torch

from .image import ImageSize, PixelBuffer


def pixel_energy(left: Optional[Sequence[int]], middle: Sequence[int],
                 right: Optional[Sequence[int]]) -> float:
    """
    Energy of a single pixel given its horizontal neighbours.

    E = sqrt(|left - middle|^2 + |right - middle|^2) over the RGB channels,
    where a missing neighbour (None) contributes 0.

    Args:
        left: RGBA (or RGB) of the left neighbour, or None at x=0
        middle: RGBA (or RGB) of the pixel itself
        right: RGBA (or RGB) of the right neighbour, or None at the last column

    Returns:
        Non-negative energy
    """
    m_r, m_g, m_b = (int(c) for c in middle[:3])

    l_energy = 0
    if left is not None:
        l_r, l_g, l_b = (int(c) for c in left[:3])
        l_energy = (l_r - m_r) ** 2 + (l_g - m_g) ** 2 + (l_b - m_b) ** 2

    r_energy = 0
    if right is not None:
        r_r, r_g, r_b = (int(c) for c in right[:3])
        r_energy = (r_r - m_r) ** 2 + (r_g - m_g) ** 2 + (r_b - m_b) ** 2

    return math.sqrt(l_energy + r_energy)


def calculate_energy_map(image: PixelBuffer, size: ImageSize) -> torch.Tensor:
    """
    Compute the energy of every pixel in the logical region of an image.

    Same formula as pixel_energy, evaluated for all pixels at once. The
    first column only sees its right neighbour and the last column only
    its left one; there is no padding or wrap-around.

    Args:
        image: Pixel buffer to read (not modified)
        size: Current logical size; columns >= size.width are ignored

    Returns:
        Energy map (H, W), float64
    """
    W, H = size.width, size.height
    if W == 0 or H == 0:
        return torch.zeros(H, W, dtype=torch.float64, device=image.device)

    rgb = image.data[:H, :W, :3].to(torch.float64)

    # Squared RGB distance between each pixel and the one to its right: (H, W-1)
    neighbour_dist = ((rgb[:, 1:] - rgb[:, :-1]) ** 2).sum(dim=2)

    squared = torch.zeros(H, W, dtype=torch.float64, device=image.device)
    squared[:, 1:] += neighbour_dist   # left neighbour contribution
    squared[:, :-1] += neighbour_dist  # right neighbour contribution

    return torch.sqrt(squared)
