"""
Heuristic hand-strength evaluation.

This module maps hole cards plus community cards to a single strength in
[0, 1]. It is an approximation, not an exact 7-card ranker: categories are
read off rank and suit counts, and straights are detected with a loose
window check over distinct ranks.

Strength bands (first match wins):
- 0.95: Four of a Kind
- 0.90: Full House
- 0.85: Flush
- 0.80: Straight
- 0.70: Three of a Kind
- 0.60: Two Pair
- 0.55 / 0.45: One Pair (ten or higher / lower)
- 0.40 / 0.30: High Card (queen or higher / lower)

Bonuses on top of the category: flush draw (+0.15), straight draw (+0.10).
The result is capped at 1.0.
"""

from __future__ import annotations
from typing import Dict, List, Sequence, Tuple
from enum import IntEnum
from collections import Counter

from pokeragent.core.card import Card, Rank, visible_cards
from pokeragent.core.rules import (
    MIN_VISIBLE_CARDS, DEFAULT_STRENGTH, MAX_STRENGTH,
    FOUR_OF_A_KIND_STRENGTH, FULL_HOUSE_STRENGTH, FLUSH_STRENGTH,
    STRAIGHT_STRENGTH, THREE_OF_A_KIND_STRENGTH, TWO_PAIR_STRENGTH,
    HIGH_PAIR_STRENGTH, LOW_PAIR_STRENGTH,
    STRONG_HIGH_CARD_STRENGTH, WEAK_HIGH_CARD_STRENGTH,
    FLUSH_DRAW_BONUS, STRAIGHT_DRAW_BONUS,
)


class HandCategory(IntEnum):
    """Made-hand categories recognised by the heuristic, best is highest."""
    UNKNOWN = 0
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8


HAND_CATEGORY_NAMES = {
    HandCategory.UNKNOWN: "Unknown",
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
}

STRAIGHT_WINDOW = 4   # max spread between high and low rank of a run
MIN_DRAW_RANKS = 4
FLUSH_SUIT_COUNT = 5
FLUSH_DRAW_SUIT_COUNT = 4


class HandEvaluator:
    """
    Stateless hand-strength heuristic.

    Usage:
        evaluator = HandEvaluator()
        strength = evaluator.evaluate(hole_cards, community_cards)
    """

    def evaluate(self, hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> float:
        """
        Evaluate hand strength on a 0.0 to 1.0 scale.

        Hidden cards are ignored. With fewer than two visible cards the
        default strength 0.3 is returned instead of an error.

        Args:
            hole_cards: This agent's two private cards
            community_cards: Zero to five shared cards

        Returns:
            Strength in [0.3, 1.0]
        """
        cards = visible_cards(list(hole_cards) + list(community_cards))
        if len(cards) < MIN_VISIBLE_CARDS:
            return DEFAULT_STRENGTH

        has_run = has_straight_draw(_distinct_ranks(cards))
        _, strength = _categorize(cards, has_run)
        strength += _draw_bonus(cards, has_run)

        return min(strength, MAX_STRENGTH)

    def describe(self, hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> str:
        """Name of the matched category, for log lines."""
        cards = visible_cards(list(hole_cards) + list(community_cards))
        if len(cards) < MIN_VISIBLE_CARDS:
            return HAND_CATEGORY_NAMES[HandCategory.UNKNOWN]
        category, _ = _categorize(cards, has_straight_draw(_distinct_ranks(cards)))
        return HAND_CATEGORY_NAMES[category]


def evaluate_strength(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> float:
    """Functional shortcut for HandEvaluator().evaluate()."""
    return HandEvaluator().evaluate(hole_cards, community_cards)


def _categorize(cards: List[Card], has_run: bool) -> Tuple[HandCategory, float]:
    """Pick the first matching category and its base strength."""
    ranks = [c.rank for c in cards]
    rank_counts = Counter(ranks)
    counts = sorted(rank_counts.values(), reverse=True)
    max_suit = _max_suit_count(cards)

    # Full house needs the second count to be exactly a pair,
    # two sets of trips fall through to three of a kind.
    second = counts[1] if len(counts) > 1 else 0

    if counts[0] == 4:
        return HandCategory.FOUR_OF_A_KIND, FOUR_OF_A_KIND_STRENGTH
    if counts[0] == 3 and second == 2:
        return HandCategory.FULL_HOUSE, FULL_HOUSE_STRENGTH
    if max_suit >= FLUSH_SUIT_COUNT:
        return HandCategory.FLUSH, FLUSH_STRENGTH
    if has_run and len(rank_counts) >= 5:
        return HandCategory.STRAIGHT, STRAIGHT_STRENGTH
    if counts[0] == 3:
        return HandCategory.THREE_OF_A_KIND, THREE_OF_A_KIND_STRENGTH
    if counts[0] == 2 and second == 2:
        return HandCategory.TWO_PAIR, TWO_PAIR_STRENGTH
    if counts[0] == 2:
        pair_rank = _lowest_rank_with_count(rank_counts, 2)
        if pair_rank >= Rank.TEN:
            return HandCategory.ONE_PAIR, HIGH_PAIR_STRENGTH
        return HandCategory.ONE_PAIR, LOW_PAIR_STRENGTH

    if max(ranks) >= Rank.QUEEN:
        return HandCategory.HIGH_CARD, STRONG_HIGH_CARD_STRENGTH
    return HandCategory.HIGH_CARD, WEAK_HIGH_CARD_STRENGTH


def _draw_bonus(cards: List[Card], has_run: bool) -> float:
    """Flush and straight draw bonuses, applied even over made hands."""
    bonus = 0.0
    if _max_suit_count(cards) == FLUSH_DRAW_SUIT_COUNT:
        bonus += FLUSH_DRAW_BONUS
    if has_run:
        bonus += STRAIGHT_DRAW_BONUS
    return bonus


def has_straight_draw(distinct_ranks: Sequence[Rank]) -> bool:
    """
    Loose run check over distinct ranks sorted high to low.

    Slides a window of up to five ranks starting at each of the first
    ``n - 3`` positions and reports a run if the window spans at most four
    ranks. Any hand holding both an Ace and a Two also counts (wheel).
    Needs at least four distinct ranks.
    """
    if len(distinct_ranks) < MIN_DRAW_RANKS:
        return False

    for i in range(len(distinct_ranks) - MIN_DRAW_RANKS + 1):
        window = distinct_ranks[i:i + 5]
        if window[0] - window[-1] <= STRAIGHT_WINDOW:
            return True

    return Rank.ACE in distinct_ranks and Rank.TWO in distinct_ranks


def _max_suit_count(cards: List[Card]) -> int:
    return max(Counter(c.suit for c in cards).values())


def _lowest_rank_with_count(rank_counts: Dict[Rank, int], count: int) -> Rank:
    """Lowest rank that appears exactly ``count`` times."""
    return min(rank for rank, c in rank_counts.items() if c == count)


def _distinct_ranks(cards: List[Card]) -> List[Rank]:
    return sorted({c.rank for c in cards}, reverse=True)
