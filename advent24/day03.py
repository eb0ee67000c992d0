"""Day 3: scanning corrupted memory for mul instructions."""

_DIGITS = frozenset("0123456789")


class _KeywordMatcher:
    """Follows a fixed keyword one character at a time, restarting on a mismatch."""

    def __init__(self, keyword):
        self._keyword = keyword
        self._position = 0

    def feed(self, char):
        """Consume one character; True when the keyword has just been completed."""
        if char != self._keyword[self._position]:
            self._position = 0
            return False
        self._position += 1
        if self._position == len(self._keyword):
            self._position = 0
            return True
        return False


class _MulScanner:
    """Recognises mul(X,Y) with operands of one to three digits."""

    _PREFIX = "mul("
    _SEPARATORS = ",)"

    def __init__(self):
        self._reset()

    def _reset(self):
        self._state = 0
        self._operands = [0, 0]
        self._digits = 0

    def feed(self, char):
        """Consume one character; the product when an instruction completes."""
        if self._state < len(self._PREFIX):
            if char == self._PREFIX[self._state]:
                self._state += 1
            else:
                self._reset()
            return None
        slot = self._state - len(self._PREFIX)
        if char in _DIGITS and self._digits < 3:
            self._operands[slot] = self._operands[slot] * 10 + int(char)
            self._digits += 1
            return None
        if char != self._SEPARATORS[slot]:
            self._reset()
            return None
        if self._digits == 0:
            return None
        self._digits = 0
        if slot == 0:
            self._state += 1
            return None
        left, right = self._operands
        self._reset()
        return left * right


def part1(text):
    """Sum of the products of every mul instruction."""
    scanner = _MulScanner()
    return sum(
        product for product in map(scanner.feed, text) if product is not None
    )


def part2(text):
    """Sum of products, honouring do() and don't() switches."""
    scanner = _MulScanner()
    disable = _KeywordMatcher("don't()")
    enable = _KeywordMatcher("do()")
    enabled = True
    total = 0
    for char in text:
        product = scanner.feed(char)
        if disable.feed(char):
            enabled = False
        if enable.feed(char):
            enabled = True
        if product is not None and enabled:
            total += product
    return total