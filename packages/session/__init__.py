from .state import RoundState
from .round import RoundSession, Submission, apply_submission, start_round
from .messages import Alert, ALERTS, alert_for

__all__ = [
    "RoundState", "RoundSession", "Submission", "apply_submission", "start_round",
    "Alert", "ALERTS", "alert_for",
]
