#!/usr/bin/env python3

"""
Framebuffer Emulator

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen by XORing their pixels against the display,
and clears wipe it entirely.  The pixels live in a RAM bank of their own, one
byte per pixel (0 or 1), laid out row-major so pixel (x, y) is at
x + width * y.

Coordinates always wrap around both edges.  Collisions (where a lit pixel was
turned off by an XOR) are reported back to the caller so the CPU can set its
flag register.

The host never gets write access: it polls a read-only view whenever it wants
to present a frame.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .ram import RAM


class FramebufferError(Exception):
    pass


class Framebuffer:
    def __init__(self, vid_width, vid_height):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.vram = RAM(self.vid_size)

    def clear(self):
        self.vram.clear()

    def xor_pixel(self, x, y):
        # Returns True if a lit pixel was switched off
        vram_loc = (y % self.vid_height) * self.vid_width + (x % self.vid_width)
        pixel = self.vram.read(vram_loc)
        self.vram.write(vram_loc, pixel ^ 1)
        return pixel != 0

    def get_pixel(self, x, y):
        if not (0 <= x < self.vid_width and 0 <= y < self.vid_height):
            raise FramebufferError("Pixel ({}, {}) is outside the display".format(x, y))

        return self.vram.read(y * self.vid_width + x) != 0

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def view(self):
        return self.vram.mem.toreadonly()
