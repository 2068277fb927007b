"""Byte-addressable memory with little-endian 16-bit access."""

from __future__ import annotations

DEFAULT_SIZE = 0xFFFF
_ADDRESS_MASK = 0xFFFF


class Memory:
    """A flat block of bytes addressed by 16-bit addresses.

    The default size is 0xFFFF bytes, so the very last address 0xFFFF
    lies outside it; reading or writing there raises IndexError.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if not 0 <= size <= _ADDRESS_MASK + 1:
            raise ValueError(f"memory size {size} is not addressable with 16 bits")
        self._data = bytearray(size)

    def __len__(self) -> int:
        return len(self._data)

    def _check_address(self, addr: int) -> None:
        if not 0 <= addr <= _ADDRESS_MASK:
            raise IndexError(f"address {addr:#x} is not a 16-bit address")
        if addr >= len(self._data):
            raise IndexError(f"address {addr:#x} is outside memory of size {len(self._data):#x}")

    def mem_read(self, addr: int) -> int:
        """Return the byte stored at the address."""
        self._check_address(addr)
        return self._data[addr]

    def mem_write(self, addr: int, data: int) -> None:
        """Store one byte at the address."""
        self._check_address(addr)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"value {data} does not fit in a byte")
        self._data[addr] = data

    def mem_read_u16(self, pos: int) -> int:
        """Read a little-endian 16-bit value: low byte at pos, high byte at pos + 1."""
        lo = self.mem_read(pos)
        hi = self.mem_read((pos + 1) & _ADDRESS_MASK)
        return (hi << 8) | lo

    def mem_write_u16(self, pos: int, data: int) -> None:
        """Write a 16-bit value little-endian: low byte at pos, high byte at pos + 1."""
        if not 0 <= data <= 0xFFFF:
            raise ValueError(f"value {data} does not fit in 16 bits")
        self.mem_write(pos, data & 0xFF)
        self.mem_write((pos + 1) & _ADDRESS_MASK, data >> 8)