"""6502 addressing modes, instruction mnemonics and the opcode table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional


class AddressingMode(Enum):
    """How an instruction locates its operand."""

    IMPLICIT = auto()
    ACCUMULATOR = auto()
    IMMEDIATE = auto()
    ZERO_PAGE = auto()
    ZERO_PAGE_X = auto()
    ZERO_PAGE_Y = auto()
    RELATIVE = auto()
    ABSOLUTE = auto()
    ABSOLUTE_X = auto()
    ABSOLUTE_Y = auto()
    INDIRECT = auto()
    INDIRECT_X = auto()  # indexed indirect
    INDIRECT_Y = auto()  # indirect indexed


class OpCodeName(Enum):
    """The 56 documented 6502 instruction mnemonics."""

    ADC = "ADC"
    AND = "AND"
    ASL = "ASL"
    BCC = "BCC"
    BCS = "BCS"
    BEQ = "BEQ"
    BIT = "BIT"
    BMI = "BMI"
    BNE = "BNE"
    BPL = "BPL"
    BRK = "BRK"
    BVC = "BVC"
    BVS = "BVS"
    CLC = "CLC"
    CLD = "CLD"
    CLI = "CLI"
    CLV = "CLV"
    CMP = "CMP"
    CPX = "CPX"
    CPY = "CPY"
    DEC = "DEC"
    DEX = "DEX"
    DEY = "DEY"
    EOR = "EOR"
    INC = "INC"
    INX = "INX"
    INY = "INY"
    JMP = "JMP"
    JSR = "JSR"
    LDA = "LDA"
    LDX = "LDX"
    LDY = "LDY"
    LSR = "LSR"
    NOP = "NOP"
    ORA = "ORA"
    PHA = "PHA"
    PHP = "PHP"
    PLA = "PLA"
    PLP = "PLP"
    ROL = "ROL"
    ROR = "ROR"
    RTI = "RTI"
    RTS = "RTS"
    SBC = "SBC"
    SEC = "SEC"
    SED = "SED"
    SEI = "SEI"
    STA = "STA"
    STX = "STX"
    STY = "STY"
    TAX = "TAX"
    TAY = "TAY"
    TSX = "TSX"
    TXA = "TXA"
    TXS = "TXS"
    TYA = "TYA"


@dataclass(frozen=True)
class OpCode:
    """One opcode: its byte value, mnemonic, size in bytes, base cycles and mode."""

    code: int
    mnemonic: OpCodeName
    length: int
    cycles: int
    mode: AddressingMode


_IMP = AddressingMode.IMPLICIT
_ACC = AddressingMode.ACCUMULATOR
_IMM = AddressingMode.IMMEDIATE
_ZP = AddressingMode.ZERO_PAGE
_ZPX = AddressingMode.ZERO_PAGE_X
_ZPY = AddressingMode.ZERO_PAGE_Y
_REL = AddressingMode.RELATIVE
_ABS = AddressingMode.ABSOLUTE
_ABX = AddressingMode.ABSOLUTE_X
_ABY = AddressingMode.ABSOLUTE_Y
_IND = AddressingMode.INDIRECT
_IZX = AddressingMode.INDIRECT_X
_IZY = AddressingMode.INDIRECT_Y

# (code, mnemonic, length, cycles, mode); cycle counts exclude page-cross
# and branch-taken penalties.
_TABLE = (
    (0x69, "ADC", 2, 2, _IMM),
    (0x65, "ADC", 2, 3, _ZP),
    (0x75, "ADC", 2, 4, _ZPX),
    (0x6D, "ADC", 3, 4, _ABS),
    (0x7D, "ADC", 3, 4, _ABX),
    (0x79, "ADC", 3, 4, _ABY),
    (0x61, "ADC", 2, 6, _IZX),
    (0x71, "ADC", 2, 5, _IZY),
    (0x29, "AND", 2, 2, _IMM),
    (0x25, "AND", 2, 3, _ZP),
    (0x35, "AND", 2, 4, _ZPX),
    (0x2D, "AND", 3, 4, _ABS),
    (0x3D, "AND", 3, 4, _ABX),
    (0x39, "AND", 3, 4, _ABY),
    (0x21, "AND", 2, 6, _IZX),
    (0x31, "AND", 2, 5, _IZY),
    (0x0A, "ASL", 1, 2, _ACC),
    (0x06, "ASL", 2, 5, _ZP),
    (0x16, "ASL", 2, 6, _ZPX),
    (0x0E, "ASL", 3, 6, _ABS),
    (0x1E, "ASL", 3, 7, _ABX),
    (0x90, "BCC", 2, 2, _REL),
    (0xB0, "BCS", 2, 2, _REL),
    (0xF0, "BEQ", 2, 2, _REL),
    (0x24, "BIT", 2, 3, _ZP),
    (0x2C, "BIT", 3, 4, _ABS),
    (0x30, "BMI", 2, 2, _REL),
    (0xD0, "BNE", 2, 2, _REL),
    (0x10, "BPL", 2, 2, _REL),
    (0x00, "BRK", 1, 7, _IMP),
    (0x50, "BVC", 2, 2, _REL),
    (0x70, "BVS", 2, 2, _REL),
    (0x18, "CLC", 1, 2, _IMP),
    (0xD8, "CLD", 1, 2, _IMP),
    (0x58, "CLI", 1, 2, _IMP),
    (0xB8, "CLV", 1, 2, _IMP),
    (0xC9, "CMP", 2, 2, _IMM),
    (0xC5, "CMP", 2, 3, _ZP),
    (0xD5, "CMP", 2, 4, _ZPX),
    (0xCD, "CMP", 3, 4, _ABS),
    (0xDD, "CMP", 3, 4, _ABX),
    (0xD9, "CMP", 3, 4, _ABY),
    (0xC1, "CMP", 2, 6, _IZX),
    (0xD1, "CMP", 2, 5, _IZY),
    (0xE0, "CPX", 2, 2, _IMM),
    (0xE4, "CPX", 2, 3, _ZP),
    (0xEC, "CPX", 3, 4, _ABS),
    (0xC0, "CPY", 2, 2, _IMM),
    (0xC4, "CPY", 2, 3, _ZP),
    (0xCC, "CPY", 3, 4, _ABS),
    (0xC6, "DEC", 2, 5, _ZP),
    (0xD6, "DEC", 2, 6, _ZPX),
    (0xCE, "DEC", 3, 6, _ABS),
    (0xDE, "DEC", 3, 7, _ABX),
    (0xCA, "DEX", 1, 2, _IMP),
    (0x88, "DEY", 1, 2, _IMP),
    (0x49, "EOR", 2, 2, _IMM),
    (0x45, "EOR", 2, 3, _ZP),
    (0x55, "EOR", 2, 4, _ZPX),
    (0x4D, "EOR", 3, 4, _ABS),
    (0x5D, "EOR", 3, 4, _ABX),
    (0x59, "EOR", 3, 4, _ABY),
    (0x41, "EOR", 2, 6, _IZX),
    (0x51, "EOR", 2, 5, _IZY),
    (0xE6, "INC", 2, 5, _ZP),
    (0xF6, "INC", 2, 6, _ZPX),
    (0xEE, "INC", 3, 6, _ABS),
    (0xFE, "INC", 3, 7, _ABX),
    (0xE8, "INX", 1, 2, _IMP),
    (0xC8, "INY", 1, 2, _IMP),
    (0x4C, "JMP", 3, 3, _ABS),
    (0x6C, "JMP", 3, 5, _IND),
    (0x20, "JSR", 3, 6, _ABS),
    (0xA9, "LDA", 2, 2, _IMM),
    (0xA5, "LDA", 2, 3, _ZP),
    (0xB5, "LDA", 2, 4, _ZPX),
    (0xAD, "LDA", 3, 4, _ABS),
    (0xBD, "LDA", 3, 4, _ABX),
    (0xB9, "LDA", 3, 4, _ABY),
    (0xA1, "LDA", 2, 6, _IZX),
    (0xB1, "LDA", 2, 5, _IZY),
    (0xA2, "LDX", 2, 2, _IMM),
    (0xA6, "LDX", 2, 3, _ZP),
    (0xB6, "LDX", 2, 4, _ZPY),
    (0xAE, "LDX", 3, 4, _ABS),
    (0xBE, "LDX", 3, 4, _ABY),
    (0xA0, "LDY", 2, 2, _IMM),
    (0xA4, "LDY", 2, 3, _ZP),
    (0xB4, "LDY", 2, 4, _ZPX),
    (0xAC, "LDY", 3, 4, _ABS),
    (0xBC, "LDY", 3, 4, _ABX),
    (0x4A, "LSR", 1, 2, _ACC),
    (0x46, "LSR", 2, 5, _ZP),
    (0x56, "LSR", 2, 6, _ZPX),
    (0x4E, "LSR", 3, 6, _ABS),
    (0x5E, "LSR", 3, 7, _ABX),
    (0xEA, "NOP", 1, 2, _IMP),
    (0x09, "ORA", 2, 2, _IMM),
    (0x05, "ORA", 2, 3, _ZP),
    (0x15, "ORA", 2, 4, _ZPX),
    (0x0D, "ORA", 3, 4, _ABS),
    (0x1D, "ORA", 3, 4, _ABX),
    (0x19, "ORA", 3, 4, _ABY),
    (0x01, "ORA", 2, 6, _IZX),
    (0x11, "ORA", 2, 5, _IZY),
    (0x48, "PHA", 1, 3, _IMP),
    (0x08, "PHP", 1, 3, _IMP),
    (0x68, "PLA", 1, 4, _IMP),
    (0x28, "PLP", 1, 4, _IMP),
    (0x2A, "ROL", 1, 2, _ACC),
    (0x26, "ROL", 2, 5, _ZP),
    (0x36, "ROL", 2, 6, _ZPX),
    (0x2E, "ROL", 3, 6, _ABS),
    (0x3E, "ROL", 3, 7, _ABX),
    (0x6A, "ROR", 1, 2, _ACC),
    (0x66, "ROR", 2, 5, _ZP),
    (0x76, "ROR", 2, 6, _ZPX),
    (0x6E, "ROR", 3, 6, _ABS),
    (0x7E, "ROR", 3, 7, _ABX),
    (0x40, "RTI", 1, 6, _IMP),
    (0x60, "RTS", 1, 6, _IMP),
    (0xE9, "SBC", 2, 2, _IMM),
    (0xE5, "SBC", 2, 3, _ZP),
    (0xF5, "SBC", 2, 4, _ZPX),
    (0xED, "SBC", 3, 4, _ABS),
    (0xFD, "SBC", 3, 4, _ABX),
    (0xF9, "SBC", 3, 4, _ABY),
    (0xE1, "SBC", 2, 6, _IZX),
    (0xF1, "SBC", 2, 5, _IZY),
    (0x38, "SEC", 1, 2, _IMP),
    (0xF8, "SED", 1, 2, _IMP),
    (0x78, "SEI", 1, 2, _IMP),
    (0x85, "STA", 2, 3, _ZP),
    (0x95, "STA", 2, 4, _ZPX),
    (0x8D, "STA", 3, 4, _ABS),
    (0x9D, "STA", 3, 5, _ABX),
    (0x99, "STA", 3, 5, _ABY),
    (0x81, "STA", 2, 6, _IZX),
    (0x91, "STA", 2, 6, _IZY),
    (0x86, "STX", 2, 3, _ZP),
    (0x96, "STX", 2, 4, _ZPY),
    (0x8E, "STX", 3, 4, _ABS),
    (0x84, "STY", 2, 3, _ZP),
    (0x94, "STY", 2, 4, _ZPX),
    (0x8C, "STY", 3, 4, _ABS),
    (0xAA, "TAX", 1, 2, _IMP),
    (0xA8, "TAY", 1, 2, _IMP),
    (0xBA, "TSX", 1, 2, _IMP),
    (0x8A, "TXA", 1, 2, _IMP),
    (0x9A, "TXS", 1, 2, _IMP),
    (0x98, "TYA", 1, 2, _IMP),
)

OPCODES: Mapping[int, OpCode] = MappingProxyType(
    {
        code: OpCode(code, OpCodeName[name], length, cycles, mode)
        for code, name, length, cycles, mode in _TABLE
    }
)


def lookup_opcode(code: int) -> Optional[OpCode]:
    """Return the opcode for the given byte, or None if it is not a documented one."""
    return OPCODES.get(code)