#!/usr/bin/env python3

"""
Host Scheduler

Drives a Machine in real time.  Instructions are stepped at the requested
clock speed, while timers, inputs and the display are serviced at 60Hz against
the host clock.  If the host gets lagged, timer ticks are caught up rather
than dropped, so the program sees the right amount of time pass.

Busy-waiting is used between instructions, as sleeping is far too coarse on
most hosts for clock speeds in the hundreds of Hz and above.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DISPLAY_FREQ, TIMER_FREQ

DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ
TIMER_INTERVAL = 1.0 / TIMER_FREQ


class Scheduler:
    def __init__(self, machine, renderer, inputs, audio, clock_speed=0, max_cycles=0, clock=perf_counter):
        self.machine = machine
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.core_interval = None if clock_speed <= 0 else 1.0 / clock_speed  # 0 = uncapped
        self.max_cycles = max_cycles  # 0 = run forever
        self.clock = clock
        self.renderer.set_resolution(*machine.framebuffer.get_vid_size())

        # Audio-related vars
        self.audio_null = self.audio.is_null()

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.report_perf()

    def run(self):
        # Returns the number of instructions executed before stopping
        clock = self.clock
        machine = self.machine
        max_cycles = self.max_cycles
        core_interval = self.core_interval
        cycles = 0
        next_display_update_time = 0
        next_perf_report_time = 0
        next_timer_time = clock()

        while not max_cycles or cycles < max_cycles:
            this_time = clock()  # Do this first for maximum precision

            if this_time >= next_perf_report_time:
                next_perf_report_time = int(this_time) + 1.0
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            # Prevent unnecessary display rendering in excess of host frame rate
            if this_time >= next_display_update_time:
                if self.inputs.process_messages(machine):  # Process inputs at 60Hz too, to avoid slowdown
                    return cycles

                next_display_update_time = this_time + DISPLAY_INTERVAL
                self.refresh_display()

            while this_time >= next_timer_time:
                tone_active = machine.tick_timers()

                if not self.audio_null:
                    self.audio.enable_buzzer(tone_active)

                next_timer_time += TIMER_INTERVAL

            machine.step()
            cycles += 1
            self.perf_counter_ops += 1

            if core_interval is not None:
                # Wait for next instruction.  Do this last, so time spent on this instruction is accounted for.
                next_time = this_time + core_interval

                while clock() < next_time:
                    pass

        # Show the final state, as the last frame may not have been drawn yet
        self.refresh_display()
        return cycles

    def refresh_display(self):
        self.renderer.draw(self.machine.display())
        self.perf_counter_fps += 1

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
