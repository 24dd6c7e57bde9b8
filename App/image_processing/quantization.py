"""Colour matching and palette extraction.

AIDEV-NOTE: nearest_palette_ids is the grid conversion step: plain Euclidean
distance in RGB with ties going to the lower palette id. suggest_palette is
the opposite direction, pulling representative colours out of a photo with
K-means or PIL's built-in quantizers so the user can add them to the palette.
"""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from errors import InvalidPalette
from models import GridSize, Placement
from pattern.grid import Grid, validate_size
from pattern.palette import palette_rgb, rgb_to_hex

from .utils import rasterize


def nearest_palette_ids(
    pixels: np.ndarray, palette: "list[tuple[int, int, int]]"
) -> np.ndarray:
    """Index of the closest palette colour for every pixel.

    Args:
        pixels: Array of shape (..., 3) or (..., 4); alpha is ignored
        palette: RGB triples in id order

    Returns:
        Integer array with the leading shape of `pixels`
    """
    if not palette:
        raise InvalidPalette("Palette must contain at least one colour")

    rgb = pixels[..., :3].astype(np.int64)
    colors = np.asarray(palette, dtype=np.int64)

    # Squared distance keeps the same ordering as the Euclidean distance
    diff = rgb[..., np.newaxis, :] - colors
    distances = np.einsum("...k,...k->...", diff, diff)

    # argmin returns the first minimum, so ties go to the lower id
    return np.argmin(distances, axis=-1)


def quantize_to_grid(
    image: Image.Image,
    size: GridSize,
    palette: "list[str] | tuple[str, ...]",
    placement: Placement | None = None,
) -> Grid:
    """Convert an image into a grid of palette ids.

    Args:
        image: Decoded source image (any mode)
        size: Target grid size
        palette: Hex colours in id order
        placement: Scale/offset of the image within the grid

    Returns:
        New grid of `size`

    Raises:
        InvalidPalette: Empty palette or malformed colour
        InvalidGridSize: Non-positive grid size
        InvalidImage: Image without pixels
    """
    colors = palette_rgb(palette)
    validate_size(size)

    canvas = rasterize(image, size, placement or Placement())
    ids = nearest_palette_ids(np.asarray(canvas), colors)

    return tuple(tuple(int(cell) for cell in row) for row in ids)


def suggest_palette(
    image: Image.Image,
    num_colors: int,
    method: str = "kmeans",
) -> "list[str]":
    """Representative colours of an image as hex strings.

    Args:
        image: Input image (RGBA or RGB)
        num_colors: Number of colours to extract (2-32)
        method: 'kmeans', 'median_cut' or 'octree'

    Returns:
        Hex colours, most common first for the PIL methods
    """
    # Convert to RGB (drop alpha for color clustering)
    rgb_image = image.convert("RGB")

    if method == "median_cut":
        colors = quantize_pillow(rgb_image, num_colors, Image.Quantize.MEDIANCUT)
    elif method == "octree":
        colors = quantize_pillow(rgb_image, num_colors, Image.Quantize.FASTOCTREE)
    else:
        # Default to kmeans
        colors = quantize_kmeans(rgb_image, num_colors)

    return [rgb_to_hex(color) for color in colors]


def quantize_kmeans(
    image: Image.Image,
    num_colors: int,
) -> "list[tuple[int, int, int]]":
    """K-means cluster centres of the image's pixels.

    AIDEV-NOTE: Fixed random_state keeps suggestions stable between runs.
    Never asks for more clusters than there are distinct colours.
    """
    pixels = np.asarray(image).reshape(-1, 3).astype(np.float64)
    distinct = len(np.unique(pixels, axis=0))
    clusters = max(1, min(num_colors, distinct))

    kmeans = KMeans(n_clusters=clusters, random_state=42, n_init=10)
    kmeans.fit(pixels)

    # Largest clusters first
    counts = np.bincount(kmeans.labels_, minlength=clusters)
    order = np.argsort(-counts, kind="stable")
    centers = np.clip(np.rint(kmeans.cluster_centers_[order]), 0, 255).astype(np.uint8)
    return [tuple(int(c) for c in color) for color in centers]


def quantize_pillow(
    image: Image.Image,
    num_colors: int,
    method: Image.Quantize,
) -> "list[tuple[int, int, int]]":
    """Pillow-based palette extraction."""
    quantized = image.quantize(colors=num_colors, method=method)

    palette_data = quantized.getpalette()
    if palette_data is None:
        return [(128, 128, 128)]  # Fallback gray

    # Only report palette slots that pixels actually use, most used first
    used = sorted(quantized.getcolors() or [], reverse=True)
    return [
        (palette_data[i * 3], palette_data[i * 3 + 1], palette_data[i * 3 + 2])
        for _, i in used
    ]
