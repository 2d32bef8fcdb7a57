"""
Pixel buffer and the small value types shared by the carving stages.

The buffer keeps its RGBA pixels in a (H, capacity, 4) uint8 tensor and a
separate logical width. Removing a seam shifts pixels left inside each row
instead of reallocating, so after k removals the last k columns of every
row are stale and must not be read.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence

import torch

from .errors import InvalidArgumentError

CHANNELS = 4  # RGBA


class Coordinate(NamedTuple):
    """Pixel position, 0-indexed."""
    x: int
    y: int


@dataclass
class ImageSize:
    """Logical image size."""
    width: int
    height: int


# Top-to-bottom path, one coordinate per row.
Seam = List[Coordinate]


def _to_uint8(tensor: torch.Tensor) -> torch.Tensor:
    """Convert integer pixel data to uint8, rejecting anything that would wrap."""
    if tensor.dtype == torch.bool or tensor.dtype.is_floating_point or tensor.is_complex():
        raise InvalidArgumentError(
            f"Expected integer 8-bit channel values, got {tensor.dtype}")
    if tensor.numel() > 0:
        lo, hi = tensor.min().item(), tensor.max().item()
        if lo < 0 or hi > 255:
            raise InvalidArgumentError(
                f"Channel values must be in [0, 255], got range [{lo}, {hi}]")
    return tensor.to(torch.uint8)


class PixelBuffer:
    """
    Mutable RGBA image with a logical width decoupled from storage.

    Args:
        data: uint8 tensor (H, W, 4). Owned by the buffer, not copied.
        width: Logical width (defaults to the full storage width)
    """

    def __init__(self, data: torch.Tensor, width: Optional[int] = None):
        if data.dim() != 3 or data.shape[2] != CHANNELS:
            raise InvalidArgumentError(
                f"Expected a (H, W, {CHANNELS}) tensor, got shape {tuple(data.shape)}")
        if data.dtype != torch.uint8:
            raise InvalidArgumentError(f"Expected uint8 pixels, got {data.dtype}")

        capacity = data.shape[1]
        if width is None:
            width = capacity
        if not 0 <= width <= capacity:
            raise InvalidArgumentError(
                f"Logical width {width} outside storage width {capacity}")

        self.data = data
        self.width = width

    @classmethod
    def from_tensor(cls, image) -> 'PixelBuffer':
        """
        Build a buffer from an (H, W, 3) or (H, W, 4) image.

        Accepts tensors or anything torch.as_tensor understands (e.g. a
        numpy array) holding integer channel values in [0, 255]. Float
        images are rejected rather than rescaled. The pixels are copied. A
        missing alpha channel is filled with 255.
        """
        tensor = torch.as_tensor(image)
        if tensor.dim() != 3 or tensor.shape[2] not in (3, CHANNELS):
            raise InvalidArgumentError(
                f"Expected an (H, W, 3) or (H, W, 4) image, got shape {tuple(tensor.shape)}")

        tensor = _to_uint8(tensor)
        if tensor.shape[2] == 3:
            H, W, _ = tensor.shape
            alpha = torch.full((H, W, 1), 255, dtype=torch.uint8, device=tensor.device)
            tensor = torch.cat([tensor, alpha], dim=2)
        else:
            tensor = tensor.clone()

        return cls(tensor.contiguous())

    @classmethod
    def from_flat(cls, data: Sequence[int], width: int, height: int,
                  device='cpu') -> 'PixelBuffer':
        """
        Build a buffer from flat row-major RGBA bytes.

        Every 4 consecutive values form one pixel:
        [r0, g0, b0, a0, r1, g1, b1, a1, ...]
        """
        if width < 0 or height < 0:
            raise InvalidArgumentError(f"Negative image size {width}x{height}")

        expected = width * height * CHANNELS
        if len(data) != expected:
            raise InvalidArgumentError(
                f"Expected {expected} values for a {width}x{height} RGBA image, got {len(data)}")

        if isinstance(data, (bytes, bytearray)):
            data = list(data)
        if expected == 0:
            flat = torch.zeros(0, dtype=torch.uint8, device=device)
        else:
            flat = _to_uint8(torch.tensor(data, device=device))
        return cls(flat.reshape(height, width, CHANNELS))

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def capacity(self) -> int:
        """Storage width, fixed for the lifetime of the buffer."""
        return self.data.shape[1]

    @property
    def device(self) -> torch.device:
        return self.data.device

    @property
    def size(self) -> ImageSize:
        return ImageSize(self.width, self.height)

    def pixel(self, coord: Coordinate) -> torch.Tensor:
        """RGBA channels of one pixel (a view into the buffer)."""
        x, y = coord
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidArgumentError(
                f"Pixel {tuple(coord)} outside {self.width}x{self.height} image")
        return self.data[y, x]

    def view(self) -> torch.Tensor:
        """Logical region (H, width, 4) without copying."""
        return self.data[:, :self.width]

    def to_tensor(self) -> torch.Tensor:
        """Compact copy of the logical region."""
        return self.view().clone()

    def to_flat(self) -> bytes:
        """Logical region as flat row-major RGBA bytes."""
        return bytes(self.view().contiguous().reshape(-1).cpu().tolist())

    def __repr__(self):
        return (f"PixelBuffer(width={self.width}, height={self.height}, "
                f"capacity={self.capacity})")
