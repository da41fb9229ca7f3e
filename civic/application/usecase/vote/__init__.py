"""Vote use cases."""

from .remove_vote import RemoveVoteRequest, RemoveVoteResponse, RemoveVoteUseCase
from .toggle_vote import ToggleVoteRequest, ToggleVoteResponse, ToggleVoteUseCase

__all__ = [
    "ToggleVoteRequest",
    "ToggleVoteResponse",
    "ToggleVoteUseCase",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
]
