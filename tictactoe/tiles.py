"""
Tile images for the graphical board.
Draws one square of the board with Pillow, so ui.py only has to show it.
"""

from typing import Dict, Tuple

from PIL import Image, ImageDraw, ImageFont

from .config import GameConfig, UIConfig


class TileRenderer:
    """
    Renders and caches square images.

    Markers "x" and "o" are drawn as strokes; any other marker is drawn
    as text. Squares of the winning line use the highlight color.
    """

    def __init__(
        self,
        size: int = UIConfig.TILE_SIZE,
        user_marker: str = GameConfig.USER_MARKER,
        computer_marker: str = GameConfig.COMPUTER_MARKER,
        empty_marker: str = GameConfig.EMPTY_MARKER,
    ):
        self.size = size
        self.user_marker = user_marker
        self.computer_marker = computer_marker
        self.empty_marker = empty_marker
        self._cache: Dict[Tuple[str, bool], Image.Image] = {}

    def render(self, marker: str, highlighted: bool = False) -> Image.Image:
        """
        Get the image for a square.

        Args:
            marker: Marker shown on the square (the empty marker for none).
            highlighted: True if the square is part of the winning line.

        Returns:
            A square RGB image of ``size`` pixels.
        """
        key = (marker, highlighted)
        image = self._cache.get(key)
        if image is None:
            image = self._draw(marker, highlighted)
            self._cache[key] = image
        return image

    def _draw(self, marker: str, highlighted: bool) -> Image.Image:
        image = Image.new("RGB", (self.size, self.size), UIConfig.TILE_COLOR)
        if marker == self.empty_marker:
            return image

        draw = ImageDraw.Draw(image)
        color = self._color_for(marker, highlighted)
        pad = self.size // 6
        low, high = pad, self.size - pad
        width = max(1, self.size * UIConfig.STROKE_WIDTH // UIConfig.TILE_SIZE)

        if marker.lower() == "x":
            draw.line([(low, low), (high, high)], fill=color, width=width)
            draw.line([(low, high), (high, low)], fill=color, width=width)
        elif marker.lower() == "o":
            draw.ellipse([low, low, high, high], outline=color, width=width)
        else:
            font = self._load_font()
            box = draw.textbbox((0, 0), marker, font=font)
            x = (self.size - (box[2] - box[0])) // 2 - box[0]
            y = (self.size - (box[3] - box[1])) // 2 - box[1]
            draw.text((x, y), marker, fill=color, font=font)

        return image

    def _color_for(self, marker: str, highlighted: bool) -> str:
        if highlighted:
            return UIConfig.HIGHLIGHT_COLOR
        if marker == self.computer_marker:
            return UIConfig.COMPUTER_COLOR
        return UIConfig.USER_COLOR

    def _load_font(self) -> ImageFont.FreeTypeFont:
        return ImageFont.load_default(size=self.size // 2)

    def clear(self):
        """Drop cached images (after changing markers)."""
        self._cache.clear()
