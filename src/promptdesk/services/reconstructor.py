"""Rebuilds a completion request from stored conversation history."""

from typing import List, Sequence

from ..models import ChatTurn, Message


def pair_history(history: Sequence[Message]) -> List[ChatTurn]:
    """
    Walk id-ordered history and emit user turns with their direct replies.

    A user message is emitted, followed by the next stored message only when
    that one is assistant-authored. Assistant messages not directly preceded
    by a user message (leading replies, consecutive replies) are dropped.
    """
    turns: List[ChatTurn] = []
    i = 0
    while i < len(history):
        message = history[i]
        if message.is_user:
            turns.append(ChatTurn(role="user", content=message.content))
            following = history[i + 1] if i + 1 < len(history) else None
            if following is not None and not following.is_user:
                turns.append(ChatTurn(role="assistant", content=following.content))
                i += 1
        i += 1
    return turns


def build_turns(
    system_prompt: str,
    history: Sequence[Message],
    pending: str,
) -> List[ChatTurn]:
    """
    Turn sequence for a completion call: system instruction, paired history,
    then the pending user message.

    ``pending`` is always appended explicitly, so ``history`` must not
    already contain it.
    """
    ordered = sorted(history, key=lambda m: m.id)
    turns = [ChatTurn(role="system", content=system_prompt)]
    turns.extend(pair_history(ordered))
    turns.append(ChatTurn(role="user", content=pending))
    return turns


def build_opening_turns(system_prompt: str) -> List[ChatTurn]:
    """Turn sequence used to seed a conversation: the system instruction only."""
    return [ChatTurn(role="system", content=system_prompt)]
