"""A pygame window that shows the board as a grid of pixels."""

from __future__ import annotations

import pygame

_CHANNELS = 4
_ON = 0xFF


class Window:
    """A window whose pixels are toggled as cells flip."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        pygame.init()
        self._screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("GOL GUI")
        pygame.event.set_blocked(None)
        pygame.event.set_allowed([pygame.KEYDOWN, pygame.QUIT])
        self.pixels = bytearray(width * height * _CHANNELS)

    def destroy(self) -> None:
        """Close the window and shut pygame down."""
        pygame.display.quit()
        pygame.quit()

    def render_frame(self) -> None:
        """Draw the current pixels to the screen."""
        image = pygame.image.frombuffer(self.pixels, (self.width, self.height), "RGBA")
        self._screen.fill((0, 0, 0))
        self._screen.blit(image, (0, 0))
        pygame.display.flip()

    def poll_event(self) -> pygame.event.Event | None:
        """Return the next pending key or quit event, or None if there is none."""
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return None
        return event

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"CellFlipped event at ({x}, {y}) is outside the bounds of the window."
            )
        return _CHANNELS * (y * self.width + x)

    def set_pixel(self, x: int, y: int) -> None:
        """Turn the pixel at (x, y) on."""
        offset = self._offset(x, y)
        self.pixels[offset:offset + _CHANNELS] = bytes([_ON]) * _CHANNELS

    def flip_pixel(self, x: int, y: int) -> None:
        """Invert the pixel at (x, y)."""
        offset = self._offset(x, y)
        current = self.pixels[offset:offset + _CHANNELS]
        self.pixels[offset:offset + _CHANNELS] = bytes(b ^ _ON for b in current)

    def count_pixels(self) -> int:
        """Number of pixels that are on."""
        return self.pixels[::_CHANNELS].count(_ON)

    def clear_pixels(self) -> None:
        """Turn every pixel off."""
        self.pixels[:] = bytes(len(self.pixels))