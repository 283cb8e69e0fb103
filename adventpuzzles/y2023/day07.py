"""Camel cards: ranking poker-like hands."""

import enum
from collections import Counter
from dataclasses import dataclass

_CARD_ORDER = "23456789TJQKA"
_STRENGTHS = {card: strength for strength, card in enumerate(_CARD_ORDER, start=1)}
_JOKER_STRENGTH = 0
_JOKER_REPLACEMENTS = "23456789TQKA"


class HandType(enum.IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


@dataclass(frozen=True)
class _Hand:
    cards: str
    bid: int
    hand_type: HandType
    strengths: tuple[int, ...]

    @property
    def sort_key(self) -> tuple[HandType, tuple[int, ...]]:
        return self.hand_type, self.strengths


def _card_strength(card: str, jokers: bool) -> int:
    if jokers and card == "J":
        return _JOKER_STRENGTH
    try:
        return _STRENGTHS[card]
    except KeyError:
        raise ValueError(f"invalid card {card!r}") from None


def _hand_type(cards: str, jokers: bool) -> HandType:
    if jokers and "J" in cards:
        return max(_hand_type(cards.replace("J", card), False) for card in _JOKER_REPLACEMENTS)
    counts = Counter(cards)
    distinct = len(counts)
    if distinct == 5:
        return HandType.HIGH_CARD
    if distinct == 4:
        return HandType.ONE_PAIR
    if distinct == 3:
        return HandType.THREE_OF_A_KIND if 3 in counts.values() else HandType.TWO_PAIRS
    if distinct == 2:
        return HandType.FOUR_OF_A_KIND if 4 in counts.values() else HandType.FULL_HOUSE
    if distinct == 1:
        return HandType.FIVE_OF_A_KIND
    raise ValueError(f"invalid hand {cards!r}")


def _parse(text: str, jokers: bool) -> list[_Hand]:
    hands = []
    for line in text.splitlines():
        cards, separator, bid = line.partition(" ")
        if not separator:
            raise ValueError(f"malformed hand: {line!r}")
        strengths = tuple(_card_strength(card, jokers) for card in cards)
        hands.append(_Hand(cards, int(bid), _hand_type(cards, jokers), strengths))
    return hands


def _solve(text: str, jokers: bool) -> int:
    ranked = sorted(_parse(text, jokers), key=lambda hand: hand.sort_key)
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))


def part_one(text: str) -> int:
    """Return the total winnings: each bid times the rank of its hand."""
    return _solve(text, jokers=False)


def part_two(text: str) -> int:
    """Return the total winnings when J is a joker that takes the best role."""
    return _solve(text, jokers=True)