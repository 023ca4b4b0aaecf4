#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Chip8Core"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Machine layout
RAM_SIZE = 0x1000    # 4K, addresses 0x000 - 0xFFF
NUM_REGISTERS = 0x10
STACK_SIZE = 16
NUM_KEYS = 0x10
START_ADDR = 0x200   # Programs are always loaded and started here
FONT_ADDR = 0x000
FONT_GLYPH_SIZE = 5  # Bytes (rows) per hex digit glyph

VID_WIDTH = 64
VID_HEIGHT = 32

# Host timings
TIMER_FREQ = 60.0    # 60Hz emulated system timer refresh
DISPLAY_FREQ = 60.0  # 60Hz host display refresh
DEFAULT_CLOCK_SPEED = 700

# Default mappings for keys 0-F, later populated into a dictionary.  These are PyGame keyscans for the usual layout:
#   1 2 3 4      1 2 3 C
#   Q W E R  ->  4 5 6 D
#   A S D F      7 8 9 E
#   Z X C V      A 0 B F
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Hex digit glyphs 0-F, 5 rows each, 4 pixels wide (high nibble)
FONT_8 = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
