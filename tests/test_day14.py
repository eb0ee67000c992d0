from advent24.day14 import frames, part1

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_part1_example():
    assert part1(EXAMPLE, 11, 7, 100) == 12


def test_part1_is_periodic():
    assert part1(EXAMPLE, 11, 7, 11 * 7 + 100) == part1(EXAMPLE, 11, 7, 100)


def test_part1_one_robot_per_quadrant():
    text = "p=0,0 v=0,0\np=10,0 v=0,0\np=0,6 v=0,0\np=10,6 v=0,0\n"
    assert part1(text, 11, 7, 50) == 1


def test_part1_middle_lines_do_not_count():
    text = "p=5,0 v=0,0\np=0,3 v=0,0\np=10,0 v=0,0\n"
    assert part1(text, 11, 7, 3) == 0


def test_frames_count_and_indices():
    produced = [step for step, _ in frames("p=0,0 v=1,0\n", 3, 3, 4)]
    assert produced == [0, 1, 2, 3]


def test_frame_layout_is_column_per_line():
    _, picture = next(frames("p=0,0 v=1,0\n", 3, 4, 1))
    lines = picture.split("\n")
    assert len(lines) == 3
    assert all(len(line) == 4 for line in lines)
    assert lines[1][0] == "#"
    assert picture.count("#") == 1


def test_frame_wraps_negative_velocity():
    _, picture = next(frames("p=0,0 v=-1,-1\n", 3, 3, 1))
    assert picture.split("\n")[2][2] == "#"


def test_frames_match_positions_after_steps():
    pictures = [picture for _, picture in frames(EXAMPLE, 11, 7, 5)]
    occupied = {
        (x, y)
        for x, line in enumerate(pictures[-1].split("\n"))
        for y, char in enumerate(line)
        if char == "#"
    }
    start = {(0, 4)}
    assert len(occupied) <= 12
    assert occupied - start == occupied or (0, 4) in occupied