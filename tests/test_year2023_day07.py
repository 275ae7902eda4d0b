import pytest

from aocsolutions.year2023_day07 import (
    Card,
    Hand,
    Play,
    line_to_play,
    parse_card,
    play_to_hand_part_1,
    play_to_hand_part_2,
    solve_part_1,
    solve_part_2,
    text_to_plays,
)

EXAMPLE = "32T3K 765\nT55J5 684\nKK677 28\nKTJJT 220\nQQQJA 483"


def test_parse_card_ten():
    assert parse_card("T") is Card.C10


def test_parse_card_rejects_unknown():
    with pytest.raises(ValueError, match="Not a card X"):
        parse_card("X")


def test_line_to_play():
    play = line_to_play("32T3K 765")
    assert play == Play((Card.C3, Card.C2, Card.C10, Card.C3, Card.KING), 765)


def test_line_to_play_missing_bet():
    with pytest.raises(ValueError):
        line_to_play("32T3K")


def test_line_to_play_too_few_cards():
    with pytest.raises(ValueError):
        line_to_play("32T 765")


def test_five_of_a_kind():
    assert play_to_hand_part_1(line_to_play("AAAAA 1")) is Hand.FIVE_OF_A_KIND


@pytest.mark.parametrize("cards", ["32T3K", "KK677", "AAKKQ", "23456", "99992"])
def test_hands_without_jacks_agree(cards):
    play = line_to_play(f"{cards} 1")
    assert play_to_hand_part_1(play) is play_to_hand_part_2(play)


@pytest.mark.parametrize("cards", ["JJ234", "KTJJT", "T55J5", "J2345", "JJJ22", "JJJJJ"])
def test_jokers_never_weaken(cards):
    play = line_to_play(f"{cards} 1")
    assert play_to_hand_part_2(play).value <= play_to_hand_part_1(play).value


def test_example_part_1():
    assert solve_part_1(text_to_plays(EXAMPLE)) == 6440


def test_example_part_2():
    assert solve_part_2(text_to_plays(EXAMPLE)) == 5905


def test_single_play_wins_its_bet():
    plays = text_to_plays("32T3K 765")
    assert solve_part_1(plays) == 765
    assert solve_part_2(plays) == 765


def test_order_of_plays_does_not_matter():
    plays = text_to_plays(EXAMPLE)
    assert solve_part_1(list(reversed(plays))) == solve_part_1(plays)
    assert solve_part_2(list(reversed(plays))) == solve_part_2(plays)