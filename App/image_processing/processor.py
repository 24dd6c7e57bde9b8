"""Image processor turning reference pictures into pattern grids.

AIDEV-NOTE: The processor keeps the last loaded original so the editor can
re-run the conversion whenever the palette or placement changes. Conversion
is a pure function of (image, size, palette, placement), so re-running it
with unchanged inputs gives the same grid.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from errors import InvalidImage
from models import GridSize, Placement
from pattern.grid import Grid

from .quantization import quantize_to_grid, suggest_palette


class ImageProcessor:
    """Loads reference images and converts them into grids."""

    def __init__(self, placement: Placement | None = None):
        self.placement = placement or Placement()
        self.image: Image.Image | None = None
        self.image_path: Path | None = None

    @property
    def has_image(self) -> bool:
        return self.image is not None

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load and validate an image file, keeping it as the current original.

        Args:
            file_path: Path to image file (PNG, JPG, etc.)

        Returns:
            PIL Image in RGBA mode

        Raises:
            InvalidImage: If file cannot be loaded or has no pixels
        """
        try:
            with Image.open(file_path) as opened:
                # AIDEV-NOTE: Always convert to RGBA for consistent processing
                image = opened.convert("RGBA")
        except Image.DecompressionBombError as e:
            raise InvalidImage(f"Image is too large to load safely: {e}") from e
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise InvalidImage(f"Failed to load image: {e}") from e

        if image.width <= 0 or image.height <= 0:
            raise InvalidImage(f"Image has no pixels: {file_path}")

        self.image = image
        self.image_path = Path(file_path)
        print(f"Loaded image {self.image_path.name} ({image.width}x{image.height} pixels).")
        return image

    def set_image(self, image: Image.Image) -> None:
        """Use an already decoded image as the current original."""
        if image.width <= 0 or image.height <= 0:
            raise InvalidImage("Image has no pixels")
        self.image = image.convert("RGBA")
        self.image_path = None

    def clear_image(self) -> None:
        self.image = None
        self.image_path = None

    def convert(
        self,
        size: GridSize,
        palette: "list[str] | tuple[str, ...]",
        placement: Placement | None = None,
    ) -> Grid:
        """Quantize the current original onto a grid.

        Args:
            size: Target grid size
            palette: Hex colours in id order
            placement: Overrides the processor's placement when given

        Returns:
            New grid of `size`

        Raises:
            InvalidImage: If no image is loaded
        """
        if self.image is None:
            raise InvalidImage("No image loaded")

        if placement is not None:
            self.placement = placement

        grid = quantize_to_grid(self.image, size, palette, self.placement)
        print(
            f"Converted image to {size.row}x{size.col} grid "
            f"with {len(palette)} colours."
        )
        return grid

    def suggest_palette(self, num_colors: int = 8, method: str = "kmeans") -> "list[str]":
        """Colours extracted from the current original."""
        if self.image is None:
            raise InvalidImage("No image loaded")
        return suggest_palette(self.image, num_colors, method)
