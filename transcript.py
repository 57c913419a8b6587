# transcript.py
from typing import Iterator, List, Optional, Tuple, Union

from errors import ValidationError
from models import Role, Turn


class Transcript:
    """Ordered, append-only history of turns for one chat session.

    Turns are never edited or dropped. ``outbound`` builds the list that is
    actually sent to the relay: blank turns are filtered out and, when a window
    is requested, only the most recent turns are kept.
    """

    def __init__(self) -> None:
        self._turns: List[Turn] = []

    def append(self, role: Union[Role, str], text: str) -> Turn:
        try:
            turn = Turn(role=role, text=text)
        except ValueError as e:
            raise ValidationError(f"Invalid turn: {e}") from e
        self._turns.append(turn)
        return turn

    def add_user(self, text: str) -> Turn:
        return self.append(Role.USER, text)

    def add_model(self, text: str) -> Turn:
        return self.append(Role.MODEL, text)

    @property
    def turns(self) -> Tuple[Turn, ...]:
        return tuple(self._turns)

    def outbound(self, max_turns: Optional[int] = None) -> List[Turn]:
        sendable = [t for t in self._turns if t.is_sendable()]
        if max_turns:
            sendable = sendable[-max_turns:]
        return sendable

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))
