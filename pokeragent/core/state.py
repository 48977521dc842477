"""
Snapshot of the shared game state as published by the game service.

The game authority owns all of this data. The agent pulls a full snapshot
every poll, reads it, and drops it; nothing here is mutated locally.

Wire format (camelCase JSON):
    {
        "status": "FLOP",
        "players": {"0xabc": {"account": "0xabc", "chips": 980, "bet": 20,
                              "totalBet": 40, "holeCards": ["As", "10h"],
                              "folded": false, "allIn": false, "role": "BB",
                              "active": true, "disconnected": false,
                              "ready": true}},
        "seats": ["0xabc", "0xdef"],
        "dealerIndex": 1,
        "currentTurn": 0,
        "pot": 120,
        "communityCards": ["Kd", "7c", "2s"],
        "currentBet": 20,
        "minRaise": 20,
        "actionLog": [],
        "winnerInfo": null,
        "myAccount": "0xabc"
    }
"""

from __future__ import annotations
from typing import Dict, List, Optional, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pokeragent.core.card import Card, parse_cards
from pokeragent.core.rules import GamePhase, SeatRole


def _parse_card_list(value: Any) -> Any:
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return parse_cards(value)
    return value


class Participant(BaseModel):
    """
    One seated player as seen by this agent.

    Attributes:
        account: Player identifier
        chips: Remaining stack
        bet: Amount bet on the current street
        total_bet: Amount bet over the whole hand
        hole_cards: Two cards, hidden sentinels for other players' cards
        folded: Folded this hand
        all_in: Committed the whole stack
        role: Blind or dealer marker
        active: Dealt into the current hand
        disconnected: Connection lost
        ready: Ready for the next hand
    """
    account: str
    chips: int = Field(default=0, ge=0)
    bet: int = Field(default=0, ge=0)
    total_bet: int = Field(default=0, ge=0, alias="totalBet")
    hole_cards: List[Card] = Field(default_factory=list, alias="holeCards")
    folded: bool = False
    all_in: bool = Field(default=False, alias="allIn")
    role: SeatRole = SeatRole.NONE
    active: bool = False
    disconnected: bool = False
    ready: bool = False

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    @field_validator("hole_cards", mode="before")
    @classmethod
    def parse_hole_cards(cls, value: Any) -> Any:
        return _parse_card_list(value)

    @property
    def can_act(self) -> bool:
        """False once folded or all-in."""
        return not (self.folded or self.all_in)

    @property
    def has_hidden_cards(self) -> bool:
        return any(c.is_hidden for c in self.hole_cards)


class SharedState(BaseModel):
    """
    Full table snapshot for one poll tick.

    Attributes:
        status: Current phase
        players: account -> Participant
        seats: Seating order by account
        dealer_index: Seat index of the dealer
        current_turn: Seat index of the player to act
        pot: Chips in the pot
        community_cards: Board cards revealed so far
        current_bet: Highest bet on this street
        min_raise: Minimum legal raise increment
        action_log: Recent actions, as text
        winner_info: Winner description at showdown
        my_account: The account this snapshot was produced for
    """
    status: GamePhase
    players: Dict[str, Participant] = Field(default_factory=dict)
    seats: List[str] = Field(default_factory=list)
    dealer_index: int = Field(default=0, alias="dealerIndex")
    current_turn: int = Field(default=0, alias="currentTurn")
    pot: int = Field(default=0, ge=0)
    community_cards: List[Card] = Field(default_factory=list, alias="communityCards")
    current_bet: int = Field(default=0, ge=0, alias="currentBet")
    min_raise: int = Field(default=0, ge=0, alias="minRaise")
    action_log: List[str] = Field(default_factory=list, alias="actionLog")
    winner_info: Optional[str] = Field(default=None, alias="winnerInfo")
    my_account: str = Field(alias="myAccount")

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    @field_validator("community_cards", mode="before")
    @classmethod
    def parse_community_cards(cls, value: Any) -> Any:
        return _parse_card_list(value)

    @property
    def turn_account(self) -> Optional[str]:
        """Account in the seat whose turn it is, None if out of range."""
        if 0 <= self.current_turn < len(self.seats):
            return self.seats[self.current_turn]
        return None

    @property
    def me(self) -> Optional[Participant]:
        """This agent's participant record, if seated."""
        return self.players.get(self.my_account)

    @property
    def is_my_turn(self) -> bool:
        return self.turn_account == self.my_account

    def call_amount_for(self, participant: Participant) -> int:
        """Chips the participant owes to match the current bet."""
        return self.current_bet - participant.bet

    @property
    def i_won(self) -> bool:
        """Whether this agent's account appears in the winner info."""
        return bool(self.winner_info) and self.my_account in self.winner_info

    def summary(self) -> Dict[str, Any]:
        """Compact view for the status API."""
        me = self.me
        return {
            "phase": self.status.value,
            "pot": self.pot,
            "current_bet": self.current_bet,
            "min_raise": self.min_raise,
            "community_cards": [c.short_str for c in self.community_cards],
            "seats": list(self.seats),
            "turn": self.turn_account,
            "my_account": self.my_account,
            "my_chips": me.chips if me else None,
            "my_cards": [c.short_str for c in me.hole_cards] if me else [],
            "winner_info": self.winner_info,
        }
