# nesemu

A small emulator core for the 6502 processor used in the NES. It provides:

- the 6502 opcode table (`nesemu.opcodes`). It gives the mnemonic, byte length,
  base cycle count and addressing mode of every documented opcode. It also has
  the `AddressingMode` and `OpCodeName` enums and `lookup_opcode(code)`, which
  returns `None` for bytes that are not documented opcodes.
- byte-addressable memory with little-endian 16-bit reads and writes
  (`nesemu.memory.Memory`). The default size is `0xFFFF` bytes, so the last
  address, `0xFFFF`, is outside it. Reading or writing outside memory raises
  `IndexError`. Writing a value that does not fit raises `ValueError`.
- processor status flags (`nesemu.processor_status`). `ProcessorStatus` holds
  each flag's bit mask. `is_flag_set(status, flag)` tests one flag. Asking
  about `B_FLAG` or `UNUSED` raises `ValueError`.
- a CPU (`nesemu.cpu.CPU`). It loads a program into PRG ROM at `0x8000`,
  resets through the vector at `0xFFFC` and runs until `BRK`.

## What the CPU executes

The CPU executes these instructions: `LDA`, `ADC`, `AND`, `ASL`, `INX`, `TAX`, `NOP` and
`BRK`, in every addressing mode the opcode table lists for them.

- Any other opcode in the table raises `UnsupportedInstructionError`, which is
  a subclass of `NotImplementedError`. It names the mnemonic and the address of
  the instruction.
- A byte that is not a documented opcode raises `IllegalInstructionError`.
- `CPU.load` raises `ValueError` if the program does not fit above `0x8000`.

`CPU.operand_address(mode)` resolves the operand address for an addressing
mode from the current program counter. It raises `ValueError` for `IMPLICIT`
and `ACCUMULATOR`.

## What it does not do

This package is only a CPU core. It does not do any of the following:

- read cartridge or ROM files;
- emulate the picture or audio hardware;
- track cycles while running;
- provide a command-line program.

Programs are given to the CPU as bytes.

## Installation

```
pip install .
```

## Usage

```python
from nesemu.cpu import CPU
from nesemu.processor_status import ProcessorStatus

cpu = CPU()
cpu.load_and_run(bytes([0xA9, 0xC0, 0xAA, 0xE8, 0x00]))  # LDA #$C0; TAX; INX; BRK
print(hex(cpu.register_x))                               # 0xc1
print(cpu.is_status_flag_set(ProcessorStatus.NEGATIVE))  # True
```

To set registers before execution starts, call each step yourself:

```python
cpu = CPU()
cpu.load(bytes([0x69, 0x10, 0x00]))  # ADC #$10; BRK
cpu.reset()
cpu.register_a = 0x50
cpu.run()
assert cpu.register_a == 0x60
```

Memory can be prepared before running:

```python
cpu = CPU()
cpu.mem_write(0x10, 0x55)
cpu.load_and_run(bytes([0x06, 0x10, 0x00]))  # ASL $10; BRK
assert cpu.mem_read(0x10) == 0xAA
```

You can also look up opcode details without running anything:

```python
from nesemu.opcodes import lookup_opcode

op = lookup_opcode(0x6D)
print(op.mnemonic, op.length, op.cycles, op.mode)
# OpCodeName.ADC 3 4 AddressingMode.ABSOLUTE
```

## Running the tests

```
pip install .[test]
pytest
```