from advent24.day25 import part1

LOCK = "#####\n#####\n.....\n.....\n.....\n.....\n....."
FITTING_KEY = ".....\n.....\n.....\n.....\n.....\n#####\n#####"
CLASHING_KEY = ".....\n#####\n#####\n#####\n#####\n#####\n#####"


def test_fitting_pair_counts():
    assert part1(f"{LOCK}\n\n{FITTING_KEY}\n") == 1


def test_clashing_pair_does_not_count():
    assert part1(f"{LOCK}\n\n{CLASHING_KEY}\n") == 0


def test_only_fitting_keys_count():
    text = "\n\n".join([LOCK, FITTING_KEY, CLASHING_KEY])
    assert part1(text) == 1


def test_order_of_blocks_is_irrelevant():
    forward = "\n\n".join([LOCK, FITTING_KEY, CLASHING_KEY])
    backward = "\n\n".join([CLASHING_KEY, FITTING_KEY, LOCK])
    assert part1(forward) == part1(backward)


def test_locks_alone_make_no_pairs():
    assert part1("\n\n".join([LOCK, LOCK])) == 0


def test_count_scales_with_locks():
    single = part1("\n\n".join([LOCK, FITTING_KEY]))
    double = part1("\n\n".join([LOCK, LOCK, FITTING_KEY]))
    assert double == 2 * single


def test_carriage_returns_are_ignored():
    text = f"{LOCK}\n\n{FITTING_KEY}\n"
    assert part1(text.replace("\n", "\r\n")) == part1(text)


def test_empty_input_has_no_pairs():
    assert part1("") == 0