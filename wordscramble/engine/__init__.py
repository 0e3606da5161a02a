from .letters import normalize, is_possible
from .validation import (
    Rejection, AcceptedWord, Verdict, MESSAGES, rejection_message, is_real, validate,
)

__all__ = ["normalize", "is_possible", "Rejection", "AcceptedWord", "Verdict", "MESSAGES",
           "rejection_message", "is_real", "validate"]
