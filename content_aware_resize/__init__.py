"""
Content-aware image width reduction (seam carving).

Repeatedly removes the vertical path of pixels with the lowest total
energy, as described by Avidan & Shamir 2007.
"""

__version__ = "0.1.0"

from .errors import ResizeError, InvalidArgumentError, UnsupportedOperationError
from .image import Coordinate, ImageSize, PixelBuffer, Seam
from .energy import pixel_energy, calculate_energy_map
from .seam import (SeamEnergies, compute_seam_energies, find_low_energy_seam,
                   seam_energy, delete_seam)
from .carving import ResizeResult, resize_image_width, carve_width

__all__ = [
    'ResizeError',
    'InvalidArgumentError',
    'UnsupportedOperationError',
    'Coordinate',
    'ImageSize',
    'PixelBuffer',
    'Seam',
    'pixel_energy',
    'calculate_energy_map',
    'SeamEnergies',
    'compute_seam_energies',
    'find_low_energy_seam',
    'seam_energy',
    'delete_seam',
    'ResizeResult',
    'resize_image_width',
    'carve_width',
]
