"""
Seam computation and removal.

Seams are found with bottom-up dynamic programming over the energy map:
each pixel stores the lowest total energy of any seam ending at it and the
column it came from in the row above. The table is kept as two flat
(H, W) tensors rather than per-pixel records.
"""

from typing import NamedTuple

import torch

from .errors import InvalidArgumentError
from .image import CHANNELS, Coordinate, ImageSize, PixelBuffer, Seam

NO_PREVIOUS = -1


class SeamEnergies(NamedTuple):
    """
    Dynamic programming table for vertical seams.

    cumulative[y, x]: minimum energy of a seam from row 0 ending at (x, y)
    previous[y, x]: column in row y-1 that achieves it (NO_PREVIOUS on row 0)
    """
    cumulative: torch.Tensor
    previous: torch.Tensor


def compute_seam_energies(energy: torch.Tensor) -> SeamEnergies:
    """
    Fill the seam energy table for an energy map.

    Rows are processed top to bottom; within a row every column is updated
    at once from the three candidates above it (x-1, x, x+1), clamped to
    the image. On ties the leftmost candidate wins.

    Args:
        energy: Energy map (H, W)

    Returns:
        SeamEnergies with both tables shaped (H, W)
    """
    H, W = energy.shape
    device = energy.device

    cumulative = torch.zeros(H, W, dtype=torch.float64, device=device)
    previous = torch.full((H, W), NO_PREVIOUS, dtype=torch.long, device=device)
    if H == 0 or W == 0:
        return SeamEnergies(cumulative, previous)

    cumulative[0] = energy[0]

    cols = torch.arange(W, device=device)
    inf = torch.full((1,), float('inf'), dtype=torch.float64, device=device)

    for y in range(1, H):
        M_prev = cumulative[y - 1]
        # Candidates in increasing column order so argmin ties resolve leftmost
        candidates = torch.stack([
            torch.cat([inf, M_prev[:-1]]),   # from above-left
            M_prev,                          # from above
            torch.cat([M_prev[1:], inf]),    # from above-right
        ])
        min_prev, offset = torch.min(candidates, dim=0)

        cumulative[y] = energy[y] + min_prev
        previous[y] = cols + offset - 1

    return SeamEnergies(cumulative, previous)


def find_low_energy_seam(energy: torch.Tensor, size: ImageSize) -> Seam:
    """
    Find the vertical seam with the lowest total energy.

    Args:
        energy: Energy map, at least (size.height, size.width)
        size: Current logical size

    Returns:
        Seam ordered from row 0 to row H-1, or [] for an empty image
    """
    W, H = size.width, size.height
    if W == 0 or H == 0:
        return []

    seam_energies = compute_seam_energies(energy[:H, :W])

    # Leftmost minimum on the last row
    x = torch.argmin(seam_energies.cumulative[H - 1]).item()

    previous = seam_energies.previous.tolist()
    seam = []
    for y in range(H - 1, -1, -1):
        seam.append(Coordinate(x, y))
        x = previous[y][x]

    seam.reverse()
    return seam


def seam_energy(energy: torch.Tensor, seam: Seam) -> float:
    """Total energy of the pixels along a seam."""
    if not seam:
        return 0.0
    xs = torch.tensor([c.x for c in seam], dtype=torch.long, device=energy.device)
    ys = torch.tensor([c.y for c in seam], dtype=torch.long, device=energy.device)
    return energy[ys, xs].sum().item()


def _validate_seam(seam: Seam, size: ImageSize):
    if len(seam) != size.height:
        raise InvalidArgumentError(
            f"Seam has {len(seam)} pixels, image has {size.height} rows")

    for row, (x, y) in enumerate(seam):
        if y != row:
            raise InvalidArgumentError(f"Seam entry {row} is on row {y}")
        if not 0 <= x < size.width:
            raise InvalidArgumentError(
                f"Seam column {x} on row {row} outside width {size.width}")


def delete_seam(image: PixelBuffer, seam: Seam, size: ImageSize):
    """
    Remove a vertical seam from an image in place.

    In every row the pixels right of the seam move one column left, so
    columns [x+1, W) land on [x, W-1). Whole RGBA pixels are moved. The
    old last column is left stale; image.width is not changed here.

    Args:
        image: Pixel buffer to modify
        seam: One coordinate per row, top to bottom
        size: Current logical size
    """
    _validate_seam(seam, size)

    W, H = size.width, size.height
    if H == 0 or W <= 1:
        return

    device = image.device
    seam_cols = torch.tensor([c.x for c in seam], dtype=torch.long, device=device)

    # Source column for each destination column: skip over the seam pixel
    dst_cols = torch.arange(W - 1, device=device).unsqueeze(0)
    src_cols = dst_cols + (dst_cols >= seam_cols.unsqueeze(1)).long()
    index = src_cols.unsqueeze(2).expand(H, W - 1, CHANNELS)

    shifted = torch.gather(image.data[:H, :W], 1, index)
    image.data[:H, :W - 1] = shifted
