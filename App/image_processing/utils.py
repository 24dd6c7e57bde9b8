"""Placement and rasterization helpers for image-to-grid conversion.

AIDEV-NOTE: The grid is treated as a col x row pixel canvas. The image is
fitted inside it keeping its aspect ratio, then scaled about its centre and
shifted by the user's placement before being drawn onto a white background.
"""

from dataclasses import dataclass

from PIL import Image

from errors import InvalidImage
from models import GridSize, Placement
from pattern.paint import round_half_up

BACKGROUND = (255, 255, 255)


@dataclass(frozen=True)
class PlacedRect:
    """Where the image lands on the grid canvas, in cells."""

    x: float
    y: float
    width: float
    height: float


def fit_rect(image_width: int, image_height: int, size: GridSize) -> PlacedRect:
    """Aspect-preserving fit of an image inside a col x row canvas.

    Args:
        image_width: Source width in pixels
        image_height: Source height in pixels
        size: Target grid size

    Returns:
        Rectangle in cell units, centred on the axis with spare room

    Raises:
        InvalidImage: If either image dimension is not positive
    """
    if image_width <= 0 or image_height <= 0:
        raise InvalidImage(f"Image has no pixels ({image_width}x{image_height})")

    # Limiting dimension decides the scale (maintain aspect ratio)
    scale = min(size.col / image_width, size.row / image_height)
    width = image_width * scale
    height = image_height * scale

    return PlacedRect(
        x=(size.col - width) / 2,
        y=(size.row - height) / 2,
        width=width,
        height=height,
    )


def apply_placement(rect: PlacedRect, placement: Placement) -> PlacedRect:
    """Scale `rect` about its centre, then translate by the placement offsets."""
    if placement.scale <= 0:
        raise ValueError(f"Placement scale must be positive, got {placement.scale}")

    center_x = rect.x + rect.width / 2
    center_y = rect.y + rect.height / 2
    width = rect.width * placement.scale
    height = rect.height * placement.scale

    return PlacedRect(
        x=center_x - width / 2 + placement.offset_x,
        y=center_y - height / 2 + placement.offset_y,
        width=width,
        height=height,
    )


def rasterize(image: Image.Image, size: GridSize, placement: Placement) -> Image.Image:
    """Draw `image` onto a white col x row RGB canvas.

    Transparent pixels blend with the white background; anything outside the
    placed rectangle stays white.
    """
    rect = apply_placement(fit_rect(image.width, image.height, size), placement)

    canvas = Image.new("RGB", (size.col, size.row), BACKGROUND)

    # AIDEV-NOTE: Pillow pastes on whole pixels, so the rectangle is snapped
    # to the grid; at least one pixel is always drawn.
    left = round_half_up(rect.x)
    top = round_half_up(rect.y)
    width = max(1, round_half_up(rect.x + rect.width) - left)
    height = max(1, round_half_up(rect.y + rect.height) - top)

    rgba = image.convert("RGBA")
    resized = rgba.resize((width, height), Image.Resampling.LANCZOS)
    canvas.paste(resized, (left, top), resized)

    return canvas
