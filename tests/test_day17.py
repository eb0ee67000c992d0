import pytest

from advent24.day17 import part1, part2, run_program

EXAMPLE = """\
Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

QUINE_PROGRAM = [2, 4, 1, 5, 7, 5, 1, 6, 0, 3, 4, 6, 5, 5, 3, 0]
QUINE_TEXT = (
    "Register A: 1\nRegister B: 0\nRegister C: 0\n\nProgram: "
    + ",".join(str(code) for code in QUINE_PROGRAM)
    + "\n"
)


def test_part1_example():
    assert part1(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_outputs_literal_sequence():
    assert run_program([10, 0, 0], [5, 0, 5, 1, 5, 4]) == [0, 1, 2]


def test_bst_reads_register_c():
    assert run_program([0, 0, 9], [2, 6, 5, 5]) == [1]


@pytest.mark.parametrize("value", [1, 0o7, 0o1234, 0o70651, 123456789])
def test_octal_digit_loop(value):
    output = run_program([value, 0, 0], [5, 4, 0, 3, 3, 0])
    assert output == [int(digit) for digit in reversed(oct(value)[2:])]


def test_registers_are_not_mutated():
    registers = [729, 0, 0]
    run_program(registers, [0, 1, 5, 4, 3, 0])
    assert registers == [729, 0, 0]


def test_invalid_combo_operand():
    with pytest.raises(ValueError):
        run_program([1, 0, 0], [5, 7])


def test_missing_operand():
    with pytest.raises(ValueError):
        run_program([1, 0, 0], [5])


def test_part2_reproduces_program():
    value = part2(QUINE_TEXT)
    assert run_program([value, 0, 0], QUINE_PROGRAM) == QUINE_PROGRAM


def test_part2_is_lowest_quine_of_its_length():
    value = part2(QUINE_TEXT)
    assert value.bit_length() <= 3 * len(QUINE_PROGRAM)
    assert run_program([value - 1, 0, 0], QUINE_PROGRAM) != QUINE_PROGRAM


def test_missing_program_raises():
    with pytest.raises(ValueError):
        part1("Register A: 1\nRegister B: 0\nRegister C: 0\n")