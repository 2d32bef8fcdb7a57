"""
High-level carving functions that orchestrate the energy -> seam -> removal loop.
"""

import logging
from typing import NamedTuple

import torch

from .energy import calculate_energy_map
from .errors import InvalidArgumentError, UnsupportedOperationError
from .image import ImageSize, PixelBuffer
from .seam import delete_seam, find_low_energy_seam, seam_energy

logger = logging.getLogger(__name__)


class ResizeResult(NamedTuple):
    """Carved image (same buffer as the input) and its new logical size."""
    image: PixelBuffer
    size: ImageSize


def resize_image_width(image: PixelBuffer, to_width: int) -> ResizeResult:
    """
    Content-aware width reduction by seam carving.

    Removes (image.width - to_width) vertical seams one at a time. Each
    iteration recomputes the energy map on the current pixels, since a
    removal changes the neighbours of every pixel right of the seam.

    Args:
        image: Pixel buffer, modified in place
        to_width: Target width, 0 <= to_width <= image.width

    Returns:
        ResizeResult with the same buffer and ImageSize(to_width, height)

    Raises:
        InvalidArgumentError: to_width is not a non-negative int, or the
            image has no rows to carve
        UnsupportedOperationError: to_width is larger than the image
    """
    if isinstance(to_width, bool) or not isinstance(to_width, int):
        raise InvalidArgumentError(f"Target width must be an int, got {to_width!r}")
    if to_width < 0:
        raise InvalidArgumentError(f"Target width must be >= 0, got {to_width}")

    size = ImageSize(image.width, image.height)

    px_to_remove = size.width - to_width
    if px_to_remove < 0:
        raise UnsupportedOperationError("upsizing not supported")
    if px_to_remove == 0:
        return ResizeResult(image, size)
    if size.height == 0:
        raise InvalidArgumentError(
            f"Cannot remove {px_to_remove} seams from an image with no rows")

    logger.info(f"Removing {px_to_remove} vertical seams: "
                f"{size.width}x{size.height} -> {to_width}x{size.height}")

    for i in range(px_to_remove):
        energy_map = calculate_energy_map(image, size)
        seam = find_low_energy_seam(energy_map, size)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Seam {i + 1}/{px_to_remove}: starts at x={seam[0].x}, "
                         f"energy={seam_energy(energy_map, seam):.3f}")

        delete_seam(image, seam, size)

        size.width -= 1
        image.width = size.width

    logger.info(f"Resized to {size.width}x{size.height}")
    return ResizeResult(image, size)


def carve_width(image: torch.Tensor, to_width: int) -> torch.Tensor:
    """
    Seam-carve an (H, W, C) image tensor to a smaller width.

    Convenience wrapper around resize_image_width for callers that hold a
    plain tensor. The input is not modified.

    Args:
        image: RGB or RGBA image (H, W, 3) / (H, W, 4)
        to_width: Target width

    Returns:
        Carved image (H, to_width, C), uint8
    """
    image = torch.as_tensor(image)
    channels = image.shape[-1]
    buffer = PixelBuffer.from_tensor(image)
    result = resize_image_width(buffer, to_width)
    return result.image.to_tensor()[..., :channels]
