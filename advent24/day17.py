"""Day 17: the three-bit chronospatial computer."""

import re


def _combo(operand, registers):
    if 0 <= operand <= 3:
        return operand
    if 4 <= operand <= 6:
        return registers[operand - 4]
    raise ValueError(f"invalid combo operand {operand}")


def run_program(registers, codes):
    """Run a program from registers (A, B, C) and return its output values."""
    regs = list(registers)
    if len(regs) != 3:
        raise ValueError("exactly three registers are required")
    codes = list(codes)
    output = []
    pointer = 0
    while pointer < len(codes):
        if pointer + 1 >= len(codes):
            raise ValueError(f"opcode at {pointer} has no operand")
        opcode, operand = codes[pointer], codes[pointer + 1]
        pointer += 2
        if opcode == 0:
            regs[0] >>= _combo(operand, regs)
        elif opcode == 1:
            regs[1] ^= operand
        elif opcode == 2:
            regs[1] = _combo(operand, regs) % 8
        elif opcode == 3:
            if regs[0] != 0:
                pointer = operand
        elif opcode == 4:
            regs[1] ^= regs[2]
        elif opcode == 5:
            output.append(_combo(operand, regs) % 8)
        elif opcode == 6:
            regs[1] = regs[0] >> _combo(operand, regs)
        elif opcode == 7:
            regs[2] = regs[0] >> _combo(operand, regs)
    return output


def _parse(text):
    head, _, tail = text.replace("\r\n", "\n").partition("\n\n")
    registers = []
    for line in head.splitlines():
        match = re.search(r"\d+", line)
        if match:
            registers.append(int(match.group()))
    if len(registers) > 3:
        raise ValueError("more than three registers given")
    registers += [0] * (3 - len(registers))
    codes = [int(token) for token in re.findall(r"\d+", tail)]
    if not codes:
        raise ValueError("no program found")
    return registers, codes


def part1(text):
    """Comma-separated output of the program."""
    registers, codes = _parse(text)
    return ",".join(str(value) for value in run_program(registers, codes))


def _digit(value):
    """Output of one loop iteration of the puzzle's program for register A."""
    shift = (value & 7) ^ 5
    return ((shift ^ (value >> shift)) ^ 6) & 7


def _search(codes, index, current):
    if index < 0:
        return current
    for low in range(8):
        candidate = (current << 3) | low
        if _digit(candidate) == codes[index]:
            found = _search(codes, index - 1, candidate)
            if found is not None:
                return found
    return None


def part2(text):
    """Lowest register A for which the program prints itself."""
    _, codes = _parse(text)
    found = _search(codes, len(codes) - 1, 0)
    if found is None:
        raise ValueError("no register value reproduces the program")
    return found