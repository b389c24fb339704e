"""Player-facing alert text for each rejection reason."""

from __future__ import annotations

from typing import Dict, NamedTuple

from packages.engine import RejectReason


class Alert(NamedTuple):
    title: str
    message: str


ALERTS: Dict[RejectReason, Alert] = {
    RejectReason.ALREADY_USED: Alert("Already Used", "You've already used that word."),
    RejectReason.IS_ROOT_WORD: Alert("Root Word!", "You can't use the root word."),
    RejectReason.NOT_CONSTRUCTIBLE: Alert(
        "Not Possible", "You can't construct that word with the letters available."),
    RejectReason.NOT_A_WORD: Alert("Not Real", "I'm sorry, that is not a real word."),
}


def alert_for(reason: RejectReason) -> Alert:
    return ALERTS[reason]
