#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the machine display onto an SDL window surface via PyGame.  The surface
is allocated at the native 64x32 size, and then the contents are stretched
(using 'Nearest Neighbour' translation) to fit the window itself.  This means
we don't have to draw the same pixel multiple times.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME

COLOUR_OFF = 0x222222
COLOUR_ON = 0xDDDDDD


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied

        if scale < 2:
            raise RendererError("Window width must be at least 2 pixels.")

        pygame.display.init()
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [bytes((c >> 16, (c >> 8) & 0xFF, c & 0xFF)) for c in (COLOUR_OFF, COLOUR_ON)]

        super().__init__(scale)
        self.set_title(APP_NAME)

    def set_resolution(self, width, height):
        # Offscreen 24-bit buffer, filled later from the machine display
        self.rgb_buffer = memoryview(bytearray(width * height * 3))
        super().set_resolution(width, height)

    def draw(self, pixels):
        if not self.rgb_buffer:
            return

        rgb_buffer = self.rgb_buffer
        rgb_map = self.rgb_map

        # Update RGB buffer in-place to minimise allocations and PyGame calls
        for location, pixel in enumerate(pixels):
            rgb_location = location * 3
            rgb_buffer[rgb_location:rgb_location + 3] = rgb_map[pixel]

        # Blit the bytearray straight to the surface, then scale it up to the window
        render_surface = pygame.image.frombuffer(rgb_buffer, (self.width, self.height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()
        super().draw(pixels)

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def shutdown(self):
        pygame.display.quit()
        super().shutdown()
