"""The 6502 CPU: registers, program loading and the fetch-decode-execute loop."""

from __future__ import annotations

from typing import Callable, Dict, Iterable

from nesemu.memory import Memory
from nesemu.opcodes import AddressingMode, OpCodeName, lookup_opcode
from nesemu.processor_status import ProcessorStatus, is_flag_set

PRG_ROM_START = 0x8000
RESET_VECTOR = 0xFFFC

_CARRY = ProcessorStatus.CARRY.value
_ZERO = ProcessorStatus.ZERO.value
_OVERFLOW = ProcessorStatus.OVERFLOW.value
_NEGATIVE = ProcessorStatus.NEGATIVE.value


class IllegalInstructionError(Exception):
    """Raised when the CPU fetches a byte that is not a documented opcode."""

    def __init__(self, opcode: int, address: int) -> None:
        super().__init__(f"Illegal instruction {opcode} reached at address {address:#x}")
        self.opcode = opcode
        self.address = address


class UnsupportedInstructionError(NotImplementedError):
    """Raised when the CPU reaches a documented instruction it does not execute yet."""

    def __init__(self, mnemonic: OpCodeName, address: int) -> None:
        super().__init__(f"Instruction {mnemonic.value} at address {address:#x} is not supported")
        self.mnemonic = mnemonic
        self.address = address


class CPU:
    """A 6502 CPU with its registers and 64 KiB address space."""

    def __init__(self) -> None:
        self.register_a = 0
        self.register_x = 0
        self.register_y = 0
        self.stack_pointer = 0
        self.status = 0
        self.program_counter = 0
        self.memory = Memory()
        self._handlers: Dict[OpCodeName, Callable[[AddressingMode], None]] = {
            OpCodeName.ADC: self._adc,
            OpCodeName.AND: self._and,
            OpCodeName.ASL: self._asl,
            OpCodeName.INX: lambda mode: self._inx(),
            OpCodeName.LDA: self._lda,
            OpCodeName.NOP: lambda mode: None,
            OpCodeName.TAX: lambda mode: self._tax(),
        }

    # memory access

    def mem_read(self, addr: int) -> int:
        """Return the byte at the address."""
        return self.memory.mem_read(addr)

    def mem_write(self, addr: int, data: int) -> None:
        """Store a byte at the address."""
        self.memory.mem_write(addr, data)

    # lifecycle

    def reset(self) -> None:
        """Clear registers and status and jump to the address held in the reset vector."""
        self.register_a = 0
        self.register_x = 0
        self.register_y = 0
        self.status = 0
        self.program_counter = self.memory.mem_read_u16(RESET_VECTOR)

    def load(self, program: Iterable[int]) -> None:
        """Copy a program into PRG ROM at 0x8000 and point the reset vector there."""
        data = bytes(program)
        if PRG_ROM_START + len(data) > len(self.memory):
            raise ValueError(f"program of {len(data)} bytes does not fit in PRG ROM")
        for offset, byte in enumerate(data):
            self.memory.mem_write(PRG_ROM_START + offset, byte)
        self.memory.mem_write_u16(RESET_VECTOR, PRG_ROM_START)

    def load_and_run(self, program: Iterable[int]) -> None:
        """Load a program, reset the CPU and run until BRK."""
        self.load(program)
        self.reset()
        self.run()

    def run(self) -> None:
        """Fetch, decode and execute instructions until BRK."""
        while True:
            code = self.mem_read(self.program_counter)
            self.program_counter = (self.program_counter + 1) & 0xFFFF

            opcode = lookup_opcode(code)
            if opcode is None:
                raise IllegalInstructionError(code, self.program_counter)
            if opcode.mnemonic is OpCodeName.BRK:
                return
            handler = self._handlers.get(opcode.mnemonic)
            if handler is None:
                raise UnsupportedInstructionError(opcode.mnemonic, self.program_counter - 1)
            handler(opcode.mode)
            self.program_counter = (self.program_counter + opcode.length - 1) & 0xFFFF

    # addressing

    def operand_address(self, mode: AddressingMode) -> int:
        """Return the address of the operand for an instruction using the given mode.

        The program counter is expected to point at the operand bytes.
        """
        pc = self.program_counter
        mem = self.memory
        if mode in (AddressingMode.IMPLICIT, AddressingMode.ACCUMULATOR):
            raise ValueError(f"{mode.name} addressing has no operand address")
        if mode is AddressingMode.IMMEDIATE:
            return pc
        if mode is AddressingMode.ZERO_PAGE:
            return mem.mem_read(pc)
        if mode is AddressingMode.ZERO_PAGE_X:
            return (mem.mem_read(pc) + self.register_x) & 0xFF
        if mode is AddressingMode.ZERO_PAGE_Y:
            return (mem.mem_read(pc) + self.register_y) & 0xFF
        if mode is AddressingMode.RELATIVE:
            return (pc + mem.mem_read(pc)) & 0xFFFF
        if mode is AddressingMode.ABSOLUTE:
            return mem.mem_read_u16(pc)
        if mode is AddressingMode.ABSOLUTE_X:
            return (mem.mem_read(pc) + self.register_x) & 0xFFFF
        if mode is AddressingMode.ABSOLUTE_Y:
            return (mem.mem_read(pc) + self.register_y) & 0xFFFF
        if mode is AddressingMode.INDIRECT:
            return mem.mem_read_u16(mem.mem_read_u16(pc))
        if mode is AddressingMode.INDIRECT_X:
            ptr = (mem.mem_read(pc) + self.register_x) & 0xFF
            return mem.mem_read_u16(ptr)
        if mode is AddressingMode.INDIRECT_Y:
            base = mem.mem_read_u16(mem.mem_read(pc))
            return (base + self.register_y) & 0xFFFF
        raise ValueError(f"unknown addressing mode {mode!r}")

    def is_status_flag_set(self, flag: ProcessorStatus) -> bool:
        """Return whether the flag is set in the status register."""
        return is_flag_set(self.status, flag)

    # instructions

    def _adc(self, mode: AddressingMode) -> None:
        value = self.mem_read(self.operand_address(mode))
        carry_in = self.status & _CARRY
        self.register_a = (self.register_a + value + carry_in) & 0xFF
        carry_out = self.register_a <= value
        self._set_flag(_OVERFLOW, bool(carry_in) != carry_out)
        self._set_flag(_CARRY, carry_out)
        self._update_zero_and_negative(self.register_a)

    def _and(self, mode: AddressingMode) -> None:
        self.register_a &= self.mem_read(self.operand_address(mode))
        self._update_zero_and_negative(self.register_a)

    def _asl(self, mode: AddressingMode) -> None:
        if mode is AddressingMode.ACCUMULATOR:
            old = self.register_a
            self.register_a = (old << 1) & 0xFF
            self._update_zero_and_negative(self.register_a)
        else:
            addr = self.operand_address(mode)
            old = self.mem_read(addr)
            new = (old << 1) & 0xFF
            self.mem_write(addr, new)
            self._update_zero_and_negative(new)
        self._set_flag(_CARRY, bool(old & 0x80))

    def _inx(self) -> None:
        self.register_x = (self.register_x + 1) & 0xFF
        self._update_zero_and_negative(self.register_x)

    def _lda(self, mode: AddressingMode) -> None:
        self.register_a = self.mem_read(self.operand_address(mode))
        self._update_zero_and_negative(self.register_a)

    def _tax(self) -> None:
        self.register_x = self.register_a
        self._update_zero_and_negative(self.register_x)

    # flag helpers

    def _set_flag(self, mask: int, on: bool) -> None:
        if on:
            self.status |= mask
        else:
            self.status &= ~mask & 0xFF

    def _update_zero_and_negative(self, result: int) -> None:
        self._set_flag(_ZERO, result == 0)
        self._set_flag(_NEGATIVE, bool(result & 0x80))