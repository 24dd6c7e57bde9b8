"""
Tests for the image processor wrapper.
"""

import pytest
from PIL import Image

from errors import InvalidImage
from image_processing import ImageProcessor
from models import GridSize, Placement


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "heart.png"
    image = Image.new("RGB", (8, 8), (255, 255, 255))
    image.paste((0, 0, 0), (2, 2, 6, 6))
    image.save(path)
    return path


class TestImageProcessor:
    """Tests for loading, converting and suggesting colours."""

    def test_load_image(self, image_file) -> None:
        """Test that loaded images are kept as RGBA originals."""
        processor = ImageProcessor()
        image = processor.load_image(image_file)
        assert image.mode == "RGBA"
        assert processor.has_image
        assert processor.image_path == image_file

    def test_load_missing_file(self, tmp_path) -> None:
        """Test that a missing file raises InvalidImage."""
        with pytest.raises(InvalidImage):
            ImageProcessor().load_image(tmp_path / "missing.png")

    def test_load_garbage(self, tmp_path) -> None:
        """Test that undecodable data raises InvalidImage."""
        path = tmp_path / "not-an-image.png"
        path.write_bytes(b"definitely not a png")
        with pytest.raises(InvalidImage):
            ImageProcessor().load_image(path)

    def test_load_oversized_image(self, image_file, monkeypatch) -> None:
        """Test that Pillow's size guard surfaces as InvalidImage."""
        # 8x8 = 64 pixels, more than twice the limit
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 16)
        processor = ImageProcessor()
        with pytest.raises(InvalidImage):
            processor.load_image(image_file)
        assert not processor.has_image

    def test_convert(self, image_file) -> None:
        """Test converting the loaded original."""
        processor = ImageProcessor()
        processor.load_image(image_file)
        grid = processor.convert(GridSize(4, 4), ["#FFFFFF", "#000000"])
        assert grid == (
            (0, 0, 0, 0),
            (0, 1, 1, 0),
            (0, 1, 1, 0),
            (0, 0, 0, 0),
        )

    def test_convert_remembers_placement(self, image_file) -> None:
        """Test that a given placement is reused by later conversions."""
        processor = ImageProcessor()
        processor.load_image(image_file)
        placement = Placement(scale=0.5)
        first = processor.convert(GridSize(8, 8), ["#FFFFFF", "#000000"], placement)
        assert processor.placement == placement
        assert processor.convert(GridSize(8, 8), ["#FFFFFF", "#000000"]) == first

    def test_convert_without_image(self) -> None:
        """Test converting before anything was loaded."""
        with pytest.raises(InvalidImage):
            ImageProcessor().convert(GridSize(4, 4), ["#FFFFFF"])

    def test_clear_image(self, image_file) -> None:
        """Test forgetting the original."""
        processor = ImageProcessor()
        processor.load_image(image_file)
        processor.clear_image()
        assert not processor.has_image
        with pytest.raises(InvalidImage):
            processor.suggest_palette()

    def test_set_image(self) -> None:
        """Test handing over an already decoded image."""
        processor = ImageProcessor()
        processor.set_image(Image.new("L", (3, 3), 0))
        assert processor.image.mode == "RGBA"
        assert processor.image_path is None
