"""Image processing pipeline for picture-to-pattern conversion.

AIDEV-NOTE: Organized into modular components:
- processor: ImageProcessor holding the original image between conversions
- quantization: Nearest palette colour matching and palette suggestions
- utils: Fit, placement and rasterization onto the grid canvas
"""

from .processor import ImageProcessor
from .quantization import quantize_to_grid, suggest_palette

__all__ = ["ImageProcessor", "quantize_to_grid", "suggest_palette"]
