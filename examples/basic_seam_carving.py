"""
Basic seam carving example.

Loads an image, narrows it by a quarter with content-aware resizing and
saves the result next to a uniformly scaled version for comparison.

    python examples/basic_seam_carving.py photo.jpg output/
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import torch
import numpy as np
from PIL import Image

from content_aware_resize import PixelBuffer, resize_image_width


def load_image(path: str, device='cpu') -> PixelBuffer:
    """Load image into an RGBA pixel buffer."""
    img = Image.open(path).convert('RGBA')
    img_array = np.array(img, dtype=np.uint8)
    return PixelBuffer(torch.from_numpy(img_array).to(device))


def save_image(tensor: torch.Tensor, path: Path):
    """Save an (H, W, 4) uint8 tensor as image."""
    img = Image.fromarray(tensor.cpu().numpy())
    img.save(path)
    print(f"Saved: {path}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    src_path, out_dir = sys.argv[1], Path(sys.argv[2])
    out_dir.mkdir(parents=True, exist_ok=True)

    device = 'cuda' if torch.cuda.is_available() else 'cpu'
    print(f"Using device: {device}")

    image = load_image(src_path, device=device)
    H, W = image.height, image.width
    to_width = W * 3 // 4
    print(f"Image size: {W} x {H}, carving to {to_width}")

    original = Image.fromarray(image.to_tensor().cpu().numpy())
    scaled = original.resize((to_width, H), Image.BILINEAR)
    scaled.save(out_dir / 'scaled.png')
    print(f"Saved: {out_dir / 'scaled.png'}")

    result = resize_image_width(image, to_width)
    save_image(result.image.to_tensor(), out_dir / 'carved.png')

    print(f"\nDone! Final size: {result.size.width} x {result.size.height}")


if __name__ == '__main__':
    main()
