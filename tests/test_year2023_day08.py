import math

import pytest

from aocsolutions.year2023_day08 import (
    Location,
    solve_one_path,
    solve_part_1,
    solve_part_2,
    text_to_desert_map,
)

EXAMPLE_1 = """RL

AAA = (BBB, CCC)
BBB = (DDD, EEE)
CCC = (ZZZ, GGG)
DDD = (DDD, DDD)
EEE = (EEE, EEE)
GGG = (GGG, GGG)
ZZZ = (ZZZ, ZZZ)"""

EXAMPLE_2 = """LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)"""

EXAMPLE_3 = """LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)"""


def test_location_parse_too_short():
    with pytest.raises(ValueError):
        Location.parse("AB")


def test_location_ends_with():
    location = Location.parse("11Z")
    assert location.ends_with("Z")
    assert not location.ends_with("A")


def test_parse_network():
    instructions, network = text_to_desert_map(EXAMPLE_2)
    assert instructions == "LLR"
    assert network[Location("BBB")] == (Location("AAA"), Location("ZZZ"))
    assert len(network) == 3


def test_parse_missing_blank_line():
    with pytest.raises(ValueError):
        text_to_desert_map("LR")


def test_parse_bad_node_line():
    with pytest.raises(ValueError):
        text_to_desert_map("LR\n\nnot a node")


def test_example_part_1():
    assert solve_part_1(*text_to_desert_map(EXAMPLE_1)) == 2


def test_example_part_1_repeating_instructions():
    assert solve_part_1(*text_to_desert_map(EXAMPLE_2)) == 6


def test_repeated_instruction_string_gives_same_answer():
    instructions, network = text_to_desert_map(EXAMPLE_2)
    assert solve_part_1(instructions * 2, network) == solve_part_1(instructions, network)


def test_unexpected_direction():
    _, network = text_to_desert_map(EXAMPLE_2)
    with pytest.raises(ValueError, match="Unexpected direction"):
        solve_part_1("X", network)


def test_missing_location():
    with pytest.raises(ValueError, match="Missing location"):
        solve_part_1("L", {})


def test_empty_instructions():
    _, network = text_to_desert_map(EXAMPLE_2)
    with pytest.raises(ValueError):
        solve_part_1("", network)


def test_example_part_2():
    assert solve_part_2(*text_to_desert_map(EXAMPLE_3)) == 6


def test_part_2_is_lcm_of_paths():
    instructions, network = text_to_desert_map(EXAMPLE_3)
    first = solve_one_path(Location("11A"), instructions, network)
    second = solve_one_path(Location("22A"), instructions, network)
    assert solve_part_2(instructions, network) == math.lcm(first, second)