"""Sync operations between a key directory and a secret store."""

from core.sync.confirm import ConfirmationGate, Console
from core.sync.exceptions import UserDecline
from core.sync.operations import KeySync

__all__ = ["ConfirmationGate", "Console", "KeySync", "UserDecline"]
