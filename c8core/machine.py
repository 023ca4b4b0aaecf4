#!/usr/bin/env python3

"""
Machine Emulator (CHIP-8)

This owns the whole machine state (RAM, registers, stack, timers, keypad and
framebuffer) and executes exactly one instruction per call to step().  Timing
is not handled here: the host decides how often to step and is expected to
call tick_timers() at 60Hz.

Nothing here blocks.  The key-wait instruction rewinds the program counter so
that it runs again on the next step, which lets the host carry on refreshing
the display and ticking timers while the program waits.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import randint
from .constants import (
    APP_INTRO, RAM_SIZE, NUM_REGISTERS, STACK_SIZE, NUM_KEYS, START_ADDR, FONT_ADDR, FONT_GLYPH_SIZE, FONT_8,
    VID_WIDTH, VID_HEIGHT
)
from .debugger import Debugger
from .framebuffer import Framebuffer
from .ram import RAM
from .stack import Stack

CPU_ENDIAN = "big"  # CHIP-8 is big-endian

# Bitmask applied to an opcode before lookup, chosen by its first nibble.  Opcodes not listed only need the first
# nibble to identify them.
OPCODE_MASKS = {
    0x0: 0xFFFF,  # Exact match
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}
DEFAULT_MASK = 0xF000


class MachineError(Exception):
    pass


class Machine:
    def __init__(self, debugger=None, skip_unknown_opcodes=False):
        self.debugger = Debugger() if debugger is None else debugger
        self.live_debug = self.debugger.is_live()
        self.skip_unknown_opcodes = skip_unknown_opcodes

        # Define instruction pointers, keyed by masked opcode.
        # n = Nibble
        # kk = Byte
        # nnn = address
        # x/y = register (0-15)
        self.instructions = {
            0x0000: self._0000,
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            0x1000: self._1nnn,
            0x2000: self._2nnn,
            0x3000: self._3xkk,
            0x4000: self._4xkk,
            0x5000: self._5xy0,
            0x6000: self._6xkk,
            0x7000: self._7xkk,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            0xA000: self._Annn,
            0xB000: self._Bnnn,
            0xC000: self._Cxkk,
            0xD000: self._Dxyn,
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        self.ram = RAM(RAM_SIZE)
        self.stack = Stack(STACK_SIZE)
        self.framebuffer = Framebuffer(VID_WIDTH, VID_HEIGHT)
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Bytearrays are mutable, so register updates stay cheap
        self.keys = [False] * NUM_KEYS
        self.reset()

    def reset(self):
        self.ram.clear()
        self.ram.write_block(FONT_ADDR, FONT_8)
        self.framebuffer.clear()
        self.stack.clear()
        self.v[:] = bytes(NUM_REGISTERS)
        self.i = 0  # Index register
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer
        self.pc = START_ADDR
        self.debug_pc = START_ADDR
        self.opcode = 0

        for key in range(NUM_KEYS):
            self.keys[key] = False

    def load(self, image):
        # Registers and display are left alone.  Call reset() first for a clean boot.
        self.ram.write_block(START_ADDR, image)

    def step(self):
        # Keep track of the program counter before altering it in any way, in case there is a crash
        self.debug_pc = self.pc
        self.opcode = self.fetch()
        self.inc_pc()  # Program counter updates after fetch, but before execute
        self.decode_exec()

    def tick_timers(self):
        # Returns True if the tone should be sounding for this tick
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1
            return True

        return False

    def set_key(self, index, pressed):
        if not 0 <= index < NUM_KEYS:
            raise MachineError("Key 0x{:x} does not exist on the keypad".format(index))

        self.keys[index] = bool(pressed)

    def display(self):
        return self.framebuffer.view()

    def get_pixel(self, x, y):
        return self.framebuffer.get_pixel(x, y)

    def is_tone_active(self):
        return self.st > 0

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def decode_exec(self):
        opcode = self.opcode
        instruction = self.instructions.get(opcode & OPCODE_MASKS.get(opcode >> 12, DEFAULT_MASK))

        if instruction is None:
            self._opcode_unsupported()
        else:
            instruction()

    def inc_pc(self):
        self.pc += 2

    def dec_pc(self):
        # Only used to re-run instructions (i.e. keypress wait)
        self.pc -= 2

    # References to Vx, Vy, byte and addr are always in the same opcode position throughout all instructions, so avoid
    # excessive code duplication.  Don't reference these more than necessary as they are recalculated each time.
    @property
    def vx(self):
        return (self.opcode & 0xF00) >> 8

    @property
    def vy(self):
        return (self.opcode & 0xF0) >> 4

    @property
    def addr(self):
        return self.opcode & 0xFFF

    @property
    def byte(self):
        return self.opcode & 0xFF

    @property
    def nibble(self):
        return self.opcode & 0xF

    def _opcode_unsupported(self):
        if self.skip_unknown_opcodes:
            self.debugger.output(self, "??? (skipped)")
            return

        raise MachineError(
            (
                "Emulation halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\nOpcode 0x{:04x} at address 0x{:03x} is not part of the instruction set."
            ).format(
                APP_INTRO, self.debugger.debug(self, "???", verbose=True), self.opcode, self.debug_pc
            )
        )

    def debug(self, instruction):
        self.debugger.output(self, instruction)

    def _0000(self):  # NOP
        if self.live_debug:
            self.debug("NOP")

    def _00E0(self):  # CLS
        if self.live_debug:
            self.debug("CLS")

        self.framebuffer.clear()

    def _00EE(self):  # RET
        if self.live_debug:
            self.debug("RET")

        self.pc = self.stack.pop()

    def _1nnn(self):  # JP addr
        if self.live_debug:
            self.debug("JP 0x{:03x}".format(self.addr))

        self.pc = self.addr

    def _2nnn(self):  # CALL addr
        if self.live_debug:
            self.debug("CALL 0x{:03x}".format(self.addr))

        self.stack.push(self.pc)
        self.pc = self.addr

    def _3xkk(self):  # SE Vx, byte
        if self.live_debug:
            self.debug("SE V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        if self.v[self.vx] == self.byte:
            self.inc_pc()

    def _4xkk(self):  # SNE Vx, byte
        if self.live_debug:
            self.debug("SNE V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        if self.v[self.vx] != self.byte:
            self.inc_pc()

    def _5xy0(self):  # SE Vx, Vy
        if self.live_debug:
            self.debug("SE V{:01x}, V{:01x}".format(self.vx, self.vy))

        if self.v[self.vx] == self.v[self.vy]:
            self.inc_pc()

    def _6xkk(self):  # LD Vx, byte
        if self.live_debug:
            self.debug("LD V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        self.v[self.vx] = self.byte

    def _7xkk(self):  # ADD Vx, byte
        vx = self.vx
        byte = self.byte

        if self.live_debug:
            self.debug("ADD V{:01x}, 0x{:02x}".format(vx, byte))

        # No carry flag for this one
        self.v[vx] = (self.v[vx] + byte) & 0xFF

    def _8xy0(self):  # LD Vx, Vy
        if self.live_debug:
            self.debug("LD V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] = self.v[self.vy]

    def _8xy1(self):  # OR Vx, Vy
        if self.live_debug:
            self.debug("OR V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] |= self.v[self.vy]

    def _8xy2(self):  # AND Vx, Vy
        if self.live_debug:
            self.debug("AND V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] &= self.v[self.vy]

    def _8xy3(self):  # XOR Vx, Vy
        if self.live_debug:
            self.debug("XOR V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] ^= self.v[self.vy]

    # Flag-setting instructions write Vf AFTER Vx, as Vf may itself be specified in the parameters

    def _8xy4(self):  # ADD Vx, Vy
        vx = self.vx
        vy = self.vy

        if self.live_debug:
            self.debug("ADD V{:01x}, V{:01x}".format(vx, vy))

        val = self.v[vx] + self.v[vy]
        self.v[vx] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, val):  # Post-SUB/SUBN
        self.v[self.vx] = val & 0xFF
        self.v[0xF] = int(val >= 0)  # Vf is set when NOT borrowing

    def _8xy5(self):  # SUB Vx, Vy
        if self.live_debug:
            self.debug("SUB V{:01x}, V{:01x}".format(self.vx, self.vy))

        self._post_8xy5_8xy7(self.v[self.vx] - self.v[self.vy])

    def _8xy6(self):  # SHR Vx
        if self.live_debug:
            self.debug("SHR V{:01x}".format(self.vx))

        val = self.v[self.vx]
        self.v[self.vx] = val >> 1
        self.v[0xF] = val & 1  # Bit shifted out

    def _8xy7(self):  # SUBN Vx, Vy
        if self.live_debug:
            self.debug("SUBN V{:01x}, V{:01x}".format(self.vx, self.vy))

        self._post_8xy5_8xy7(self.v[self.vy] - self.v[self.vx])

    def _8xyE(self):  # SHL Vx
        if self.live_debug:
            self.debug("SHL V{:01x}".format(self.vx))

        val = self.v[self.vx]
        self.v[self.vx] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7  # Bit shifted out

    def _9xy0(self):  # SNE Vx, Vy
        if self.live_debug:
            self.debug("SNE V{:01x}, V{:01x}".format(self.vx, self.vy))

        if self.v[self.vx] != self.v[self.vy]:
            self.inc_pc()

    def _Annn(self):  # LD I, addr
        if self.live_debug:
            self.debug("LD I, 0x{:03x}".format(self.addr))

        self.i = self.addr

    def _Bnnn(self):  # JP V0, addr
        if self.live_debug:
            self.debug("JP V0, 0x{:03x}".format(self.addr))

        # May point past the top of RAM, which is only caught on the next fetch
        self.pc = self.v[0] + self.addr

    def _Cxkk(self):  # RND Vx, byte
        if self.live_debug:
            self.debug("RND V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[self.vx] = randint(0, 0xFF) & self.byte

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        height = self.nibble

        if self.live_debug:
            self.debug("DRW V{:01x}, V{:01x}, 0x{:01x}".format(self.vx, self.vy, height))

        vx_pos = self.v[self.vx]
        vy_pos = self.v[self.vy]
        collided = False
        i = self.i

        for y in range(height):
            spr_data = self.ram.read(i + y)

            for x in range(8):
                if spr_data & (0x80 >> x):
                    # Wrapping is handled per pixel by the framebuffer.  Don't stop drawing on a collision.
                    if self.framebuffer.xor_pixel(vx_pos + x, vy_pos + y):
                        collided = True

        self.v[0xF] = int(collided)

    def _Ex9E(self):  # SKP Vx
        if self.live_debug:
            self.debug("SKP V{:01x}".format(self.vx))

        if self.keys[self.v[self.vx] & 0xF]:
            self.inc_pc()

    def _ExA1(self):  # SKNP Vx
        if self.live_debug:
            self.debug("SKNP V{:01x}".format(self.vx))

        if not self.keys[self.v[self.vx] & 0xF]:
            self.inc_pc()

    def _Fx07(self):  # LD Vx, DT
        if self.live_debug:
            self.debug("LD V{:01x}, DT".format(self.vx))

        self.v[self.vx] = self.dt

    def _Fx0A(self):  # LD Vx, K
        if self.live_debug:
            self.debug("LD V{:01x}, K".format(self.vx))

        for key, pressed in enumerate(self.keys):
            if pressed:
                self.v[self.vx] = key
                return

        # No key is down, so come back here on the next step
        self.dec_pc()

    def _Fx15(self):  # LD DT, Vx
        if self.live_debug:
            self.debug("LD DT, V{:01x}".format(self.vx))

        self.dt = self.v[self.vx]

    def _Fx18(self):  # LD ST, Vx
        if self.live_debug:
            self.debug("LD ST, V{:01x}".format(self.vx))

        self.st = self.v[self.vx]

    def _Fx1E(self):  # ADD I, Vx
        if self.live_debug:
            self.debug("ADD I, V{:01x}".format(self.vx))

        self.i = (self.i + self.v[self.vx]) & 0xFFFF

    def _Fx29(self):  # LD F, Vx
        if self.live_debug:
            self.debug("LD F, V{:01x}".format(self.vx))

        self.i = FONT_ADDR + FONT_GLYPH_SIZE * (self.v[self.vx] & 0xF)

    def _Fx33(self):  # LD B, Vx
        if self.live_debug:
            self.debug("LD B, V{:01x}".format(self.vx))

        val = self.v[self.vx]
        i = self.i
        self.ram.write(i, val // 100)             # Most-significant digit
        self.ram.write(i + 1, (val // 10) % 10)   # Middle digit
        self.ram.write(i + 2, val % 10)           # Least-significant digit

    def _Fx55(self):  # LD [I], Vx
        if self.live_debug:
            self.debug("LD [I], V{:01x}".format(self.vx))

        # Ensure with +1 that the final register is copied.  I is left untouched.
        self.ram.write_block(self.i, self.v[:self.vx + 1])

    def _Fx65(self):  # LD Vx, [I]
        if self.live_debug:
            self.debug("LD V{:01x}, [I]".format(self.vx))

        vx = self.vx
        self.v[:vx + 1] = self.ram.read_block(self.i, vx + 1)
