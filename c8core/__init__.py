#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP
from .debugger import Debugger
from .hostio import Loader
from .machine import Machine
from .scheduler import Scheduler


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    opt_renderer = args["renderer"]
    mute_audio = args["mute"]

    # flake8: noqa: F401
    if opt_renderer is None or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if opt_renderer is None:
                opt_renderer = "null"
                print("PyGame does not appear to be installed.  Running headless.")
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            opt_renderer = "pygame"
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

    # Read ROM binary before opening any windows, in case it is missing
    rom = Loader().load_binary(args["filename"])

    renderer = Renderer(scale=args["scale"])
    inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)
    audio = Audio()

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    # Create a new machine and boot it up at the default address
    machine = Machine(debugger, skip_unknown_opcodes=bool(args["skip_unknown"]))
    machine.load(rom)

    clock_speed = args["clock_speed"]
    scheduler = Scheduler(
        machine, renderer, inputs, audio,
        clock_speed=DEFAULT_CLOCK_SPEED if clock_speed is None else clock_speed,
        max_cycles=args["cycles"] or 0
    )

    try:
        return scheduler.run()
    finally:
        # The machine has stopped, so shut down the host plugins.  __del__ cannot be relied upon when using PyPy
        audio.shutdown()
        inputs.shutdown()
        renderer.shutdown()
