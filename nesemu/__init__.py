"""A 6502 CPU core for a NES emulator: opcode table, memory, status flags and CPU."""

__version__ = "0.1.0"
__all__ = ["cpu", "memory", "opcodes", "processor_status"]