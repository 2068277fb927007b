import pytest

from nesemu.cpu import CPU, IllegalInstructionError, UnsupportedInstructionError
from nesemu.opcodes import AddressingMode, OpCodeName
from nesemu.processor_status import ProcessorStatus


def _prepared(program, **registers):
    cpu = CPU()
    cpu.load(program)
    cpu.reset()
    for name, value in registers.items():
        setattr(cpu, name, value)
    return cpu


# LDA


def test_0xa9_lda_immediate_load_data():
    cpu = _prepared([0xA9, 0x05, 0x00])
    cpu.run()
    assert cpu.register_a == 0x05
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_0xa9_lda_zero_flag():
    cpu = _prepared([0xA9, 0x00, 0x00])
    cpu.run()
    assert cpu.is_status_flag_set(ProcessorStatus.ZERO)


def test_lda_from_memory():
    cpu = CPU()
    cpu.mem_write(0x10, 0x55)
    cpu.load_and_run([0xA5, 0x10, 0x00])
    assert cpu.register_a == 0x55


def test_lda_zero_page_x_wraps():
    cpu = CPU()
    cpu.mem_write(0x0F, 0x42)
    cpu.load([0xB5, 0x10, 0x00])
    cpu.reset()
    cpu.register_x = 0xFF
    cpu.run()
    assert cpu.register_a == 0x42


# LDA, TAX, INX


def test_5_ops_working_together():
    cpu = _prepared([0xA9, 0xC0, 0xAA, 0xE8, 0x00])
    cpu.run()
    assert cpu.register_x == 0xC1


def test_inx_overflow():
    cpu = _prepared([0xE8, 0xE8, 0x00], register_x=0xFF)
    cpu.run()
    assert cpu.register_x == 1


# ADC


def test_adc_no_carry_out_and_no_overflow():
    cpu = _prepared([0x69, 0x10, 0x00], register_a=0x50)
    cpu.run()
    assert cpu.register_a == 0x60
    assert not cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert not cpu.is_status_flag_set(ProcessorStatus.OVERFLOW)
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_adc_carry_out_and_overflow():
    cpu = _prepared([0x69, 0x90, 0x00], register_a=0xD0)
    cpu.run()
    assert cpu.register_a == 0x60
    assert cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert cpu.is_status_flag_set(ProcessorStatus.OVERFLOW)
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_adc_carry_out_and_no_overflow():
    cpu = _prepared([0x69, 0xD0, 0x00], register_a=0x50)
    cpu.status |= 0b1
    cpu.run()
    assert cpu.register_a == 0x21
    assert cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert not cpu.is_status_flag_set(ProcessorStatus.OVERFLOW)
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_adc_no_carry_out_and_overflow():
    cpu = _prepared([0x69, 0x50, 0x00], register_a=0x50)
    cpu.status |= 0b1
    cpu.run()
    assert cpu.register_a == 0xA1
    assert not cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert cpu.is_status_flag_set(ProcessorStatus.OVERFLOW)
    assert cpu.status & 0b0000_0010 == 0
    assert cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_adc_carry_in_sets_carry_out():
    cpu = _prepared([0x69, 0x9F, 0x00], register_a=0x60)
    cpu.status |= 0b1
    cpu.run()
    assert cpu.register_a == 0x0
    assert cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert not cpu.is_status_flag_set(ProcessorStatus.OVERFLOW)
    assert cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_adc_carry_in_sets_carry_out_2():
    cpu = _prepared([0x69, 0x00, 0x00], register_a=0xFF)
    cpu.status |= 0b1
    cpu.run()
    assert cpu.register_a == 0x0
    assert cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert not cpu.is_status_flag_set(ProcessorStatus.OVERFLOW)
    assert cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_adc_carry_in_sets_overflow():
    cpu = _prepared([0x69, 0x39, 0x00], register_a=0x46)
    cpu.status |= 0b1
    cpu.run()
    assert cpu.register_a == 0x80
    assert not cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert cpu.is_status_flag_set(ProcessorStatus.OVERFLOW)
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


# AND


def test_and_non_zero_res():
    cpu = _prepared([0x29, 0x11, 0x00], register_a=0x01)
    cpu.run()
    assert cpu.register_a == 0x01
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_and_zero_res():
    cpu = _prepared([0x29, 0x1F, 0x00], register_a=0x00)
    cpu.run()
    assert cpu.register_a == 0x00
    assert cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


# ASL


def test_asl_1():
    cpu = _prepared([0x0A, 0x00], register_a=0x05)
    cpu.run()
    assert cpu.register_a == 0x0A
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert not cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_asl_from_mem():
    cpu = CPU()
    cpu.mem_write(0x10, 0x55)
    cpu.load_and_run([0x06, 0x10, 0x00])
    assert cpu.mem_read(0x10) == 0xAA
    assert not cpu.is_status_flag_set(ProcessorStatus.ZERO)
    assert cpu.is_status_flag_set(ProcessorStatus.NEGATIVE)


def test_asl_sets_carry_from_bit_seven():
    cpu = _prepared([0x0A, 0x00], register_a=0x80)
    cpu.run()
    assert cpu.register_a == 0x00
    assert cpu.is_status_flag_set(ProcessorStatus.CARRY)
    assert cpu.is_status_flag_set(ProcessorStatus.ZERO)


# CPU lifecycle and errors


def test_load_sets_reset_vector_and_reset_jumps_there():
    cpu = CPU()
    cpu.register_a = 7
    cpu.status = 0xFF
    cpu.load([0xEA, 0x00])
    cpu.reset()
    assert cpu.program_counter == 0x8000
    assert cpu.register_a == 0
    assert cpu.status == 0
    assert cpu.mem_read(0x8000) == 0xEA


def test_nop_then_brk_leaves_registers():
    cpu = _prepared([0xEA, 0xEA, 0x00], register_a=0x33)
    cpu.run()
    assert cpu.register_a == 0x33
    assert cpu.program_counter == 0x8003


def test_illegal_instruction_raises():
    cpu = _prepared([0x02, 0x00])
    with pytest.raises(IllegalInstructionError) as info:
        cpu.run()
    assert info.value.opcode == 0x02
    assert info.value.address == 0x8001


def test_unsupported_instruction_raises():
    cpu = _prepared([0x18, 0x00])
    with pytest.raises(UnsupportedInstructionError) as info:
        cpu.run()
    assert info.value.mnemonic is OpCodeName.CLC


def test_program_too_large_rejected():
    cpu = CPU()
    with pytest.raises(ValueError):
        cpu.load(bytes(0x8000))


# operand addresses


@pytest.mark.parametrize("mode", [AddressingMode.IMPLICIT, AddressingMode.ACCUMULATOR])
def test_operand_address_undefined_for_modes_without_operand(mode):
    cpu = CPU()
    with pytest.raises(ValueError):
        cpu.operand_address(mode)


def test_operand_address_immediate_is_program_counter():
    cpu = CPU()
    cpu.program_counter = 0x8001
    assert cpu.operand_address(AddressingMode.IMMEDIATE) == 0x8001


def test_operand_address_absolute_reads_little_endian():
    cpu = CPU()
    cpu.program_counter = 0x8001
    cpu.mem_write(0x8001, 0x34)
    cpu.mem_write(0x8002, 0x12)
    assert cpu.operand_address(AddressingMode.ABSOLUTE) == 0x1234


def test_operand_address_indirect_follows_pointer():
    cpu = CPU()
    cpu.program_counter = 0x8001
    cpu.mem_write(0x8001, 0x20)
    cpu.mem_write(0x8002, 0x01)
    cpu.mem_write(0x0120, 0xCD)
    cpu.mem_write(0x0121, 0xAB)
    assert cpu.operand_address(AddressingMode.INDIRECT) == 0xABCD


def test_operand_address_indirect_x_and_y():
    cpu = CPU()
    cpu.program_counter = 0x8001
    cpu.mem_write(0x8001, 0x10)
    cpu.mem_write(0x0014, 0x00)
    cpu.mem_write(0x0015, 0x30)
    cpu.mem_write(0x0010, 0x00)
    cpu.mem_write(0x0011, 0x20)
    cpu.register_x = 0x04
    cpu.register_y = 0x05
    assert cpu.operand_address(AddressingMode.INDIRECT_X) == 0x3000
    assert cpu.operand_address(AddressingMode.INDIRECT_Y) == 0x2005


def test_operand_address_zero_page_y_wraps():
    cpu = CPU()
    cpu.program_counter = 0x8001
    cpu.mem_write(0x8001, 0xF0)
    cpu.register_y = 0x20
    assert cpu.operand_address(AddressingMode.ZERO_PAGE_Y) == 0x10