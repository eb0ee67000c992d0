"""Day 24: a circuit of boolean gates that is meant to add two numbers."""

from dataclasses import dataclass, field
from operator import and_, or_, xor

_OPERATIONS = {"AND": and_, "OR": or_, "XOR": xor}


@dataclass(frozen=True)
class _Gate:
    left: str
    op: str
    right: str


@dataclass
class Circuit:
    """Initial wire values and the gates that drive every other wire."""

    values: dict = field(default_factory=dict)
    gates: dict = field(default_factory=dict)
    _cache: dict = field(default_factory=dict, init=False, repr=False)
    _active: set = field(default_factory=set, init=False, repr=False)

    @classmethod
    def parse(cls, text):
        """Build a circuit from 'wire: bit' lines, a blank line, then gate lines."""
        lines = iter(line.rstrip("\r") for line in text.splitlines())
        values = {}
        for line in lines:
            if len(line) <= 1:
                break
            wire, sep, bit = line.partition(":")
            if not sep or not wire.strip():
                raise ValueError(f"expected 'wire: bit' in {line!r}")
            values[wire.strip()] = int(bit.strip())
        gates = {}
        for line in lines:
            if not line.strip():
                continue
            tokens = line.split()
            if len(tokens) != 5 or tokens[3] != "->":
                raise ValueError(f"expected 'a OP b -> out' in {line!r}")
            left, op, right, _, output = tokens
            if op not in _OPERATIONS:
                raise ValueError(f"unknown gate operation {op!r}")
            gates[output] = _Gate(left, op, right)
        return cls(values, gates)

    def evaluate(self, wire):
        """The bit carried by the wire once the circuit settles."""
        if wire in self.values:
            return self.values[wire]
        if wire in self._cache:
            return self._cache[wire]
        gate = self.gates.get(wire)
        if gate is None:
            raise ValueError(f"wire {wire!r} has no value and no gate")
        if wire in self._active:
            raise ValueError(f"wire {wire!r} depends on itself")
        self._active.add(wire)
        try:
            result = _OPERATIONS[gate.op](
                self.evaluate(gate.left), self.evaluate(gate.right)
            )
        finally:
            self._active.discard(wire)
        self._cache[wire] = result
        return result


def _output_wires(circuit):
    wires = set(circuit.gates) | set(circuit.values)
    return sorted(wire for wire in wires if wire.startswith("z"))


def part1(text):
    """The number formed by the z wires, z00 being the lowest bit."""
    circuit = Circuit.parse(text)
    return sum(
        circuit.evaluate(wire) << index
        for index, wire in enumerate(_output_wires(circuit))
    )


def _is_input(wire):
    return wire.startswith(("x", "y"))


def part2(text):
    """Sorted, comma separated wires whose gates break the ripple-carry adder."""
    circuit = Circuit.parse(text)
    outputs = [wire for wire in circuit.gates if wire.startswith("z")]
    highest = max(outputs, default=None)
    consumers = {}
    for gate in circuit.gates.values():
        for wire in (gate.left, gate.right):
            consumers.setdefault(wire, set()).add(gate.op)
    faulty = set()
    for output, gate in circuit.gates.items():
        from_inputs = _is_input(gate.left) and _is_input(gate.right)
        first_bit = bool({"x00", "y00"} & {gate.left, gate.right})
        feeds = consumers.get(output, set())
        if output.startswith("z") and gate.op != "XOR" and output != highest:
            faulty.add(output)
        if gate.op == "XOR" and not output.startswith("z") and not from_inputs:
            faulty.add(output)
        if gate.op == "XOR" and from_inputs and not first_bit and "XOR" not in feeds:
            faulty.add(output)
        if gate.op == "AND" and not first_bit and "OR" not in feeds:
            faulty.add(output)
    return ",".join(sorted(faulty))