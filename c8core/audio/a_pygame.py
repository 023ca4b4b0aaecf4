#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the machine buzzer within PyGame / SDL.  The buzzer only has an 'on' or
'off' status, so a single cycle of an 8-bit square wave is built once and
looped while the sound timer is running.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
TONE_FREQUENCY = 440.0
DEFAULT_VOLUME = 0.1


class Audio(AudioBase):
    def __init__(self):
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, buffer=512, allowedchanges=0)
        pygame.mixer.init()

        # One full square wave cycle: high for the first half, low for the second
        half_cycle = int(PLAYBACK_FREQUENCY / TONE_FREQUENCY / 2)
        self.sound = pygame.mixer.Sound(buffer=bytes((0xFF,) * half_cycle + (0x00,) * half_cycle))
        self.sound.set_volume(DEFAULT_VOLUME)
        super().__init__()

    def enable_buzzer(self, enabled):
        # If there is already a sound being played, it won't be restarted
        if enabled:
            if not self.buzzer_enabled:
                self.sound.play(-1)
        elif self.buzzer_enabled:
            self.sound.stop()

        super().enable_buzzer(enabled)

    def is_null(self):
        return False

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
