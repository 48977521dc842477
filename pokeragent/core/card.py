"""
Card representation for the poker agent.

Cards arrive from the game service as short strings such as ``"As"``,
``"10h"`` or ``"K♥"``. Cards this agent is not allowed to see arrive as the
hidden sentinel ``"??"``, which is modelled as a Card with no rank and no
suit so it can travel through the same lists as real cards.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
from enum import IntEnum


HIDDEN_CARD = "??"


class Suit(IntEnum):
    """Card suits with integer values for fast comparison."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks by face value, 2 (lowest) to Ace (14)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

# The game service writes ten as "10"
RANK_CHARS = {rank: str(rank.value) for rank in Rank if rank <= Rank.TEN}
RANK_CHARS.update({
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
})

CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["T"] = Rank.TEN
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class Card:
    """
    A playing card as (rank, suit), or the hidden sentinel.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("10♥")
    - The sentinel: Card.hidden() or Card.from_string("??")

    A hidden card has ``rank`` and ``suit`` set to None.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Rank, suit: Suit):
        self._rank: Optional[Rank] = Rank(rank)
        self._suit: Optional[Suit] = Suit(suit)

    @classmethod
    def hidden(cls) -> Card:
        """Create the sentinel for a card this agent cannot see."""
        card = cls.__new__(cls)
        card._rank = None
        card._suit = None
        return card

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "10d", "Td", "2c" (rank + suit char)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)
        - "??" (hidden sentinel)

        Raises:
            ValueError: If the rank or suit is not recognised.
        """
        s = s.strip()
        if s == HIDDEN_CARD:
            return cls.hidden()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(CHAR_TO_RANK[rank_part], suit)

    @property
    def rank(self) -> Optional[Rank]:
        return self._rank

    @property
    def suit(self) -> Optional[Suit]:
        return self._suit

    @property
    def is_hidden(self) -> bool:
        """True for the "??" sentinel."""
        return self._rank is None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return False

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        if self.is_hidden:
            return HIDDEN_CARD
        return f"{RANK_CHARS[self._rank]}{SUIT_SYMBOLS[self._suit]}"

    @property
    def short_str(self) -> str:
        """Wire form like 'As', '10h' or '??'."""
        if self.is_hidden:
            return HIDDEN_CARD
        return f"{RANK_CHARS[self._rank]}{SUIT_CHARS[self._suit]}"


def parse_cards(cards: Iterable[str]) -> List[Card]:
    """
    Parse a sequence of card strings as sent by the game service.

    Example:
        parse_cards(["As", "10h", "??"])
    """
    return [Card.from_string(c) for c in cards]


def visible_cards(cards: Iterable[Card]) -> List[Card]:
    """Drop hidden sentinels, keeping card order."""
    return [c for c in cards if not c.is_hidden]


def format_cards(cards: Iterable[Card]) -> str:
    """Space-separated display form for log lines."""
    return " ".join(str(c) for c in cards)
