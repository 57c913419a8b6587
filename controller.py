# controller.py
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Optional

from errors import ChatBusyError, RelayError
from formatter import format_text_to_html
from models import Turn
from transcript import Transcript

logger = logging.getLogger(__name__)

EMPTY_REPLY_NOTICE = "Sorry, no response received."
FAILURE_NOTICE = "Failed to get response from server."


class ChatState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"
    RENDERED = "rendered"
    FAILED = "failed"


class ChatView:
    """Display surface driven by the controller. Subclasses override what they need."""

    def set_busy(self, busy: bool) -> None:
        pass

    def show_user(self, text: str) -> None:
        pass

    def show_typing(self) -> None:
        pass

    def show_reply(self, raw: str, html: str) -> None:
        pass

    def show_notice(self, text: str) -> None:
        pass


class ChatSender(ABC):
    @abstractmethod
    def send(self, turns: Iterable[Turn]) -> str:
        """Deliver the outbound turns and return the reply text."""


def should_submit(key: str, shift: bool = False) -> bool:
    """Enter submits; Shift+Enter inserts a line break."""
    return key == "Enter" and not shift


class ChatController:
    """Sequences one submission at a time: idle -> sending -> rendered | failed.

    The typing placeholder shown on ``sending`` is replaced either by the
    formatted reply or by a literal notice. Input is re-enabled on every path,
    and the outcome state is kept until the next submission.
    """

    def __init__(
        self,
        sender: ChatSender,
        view: Optional[ChatView] = None,
        transcript: Optional[Transcript] = None,
    ):
        self.sender = sender
        self.view = view or ChatView()
        self.transcript = transcript if transcript is not None else Transcript()
        self.state = ChatState.IDLE

    @property
    def busy(self) -> bool:
        return self.state == ChatState.SENDING

    def submit(self, text: str) -> Optional[str]:
        user_text = (text or "").strip()
        if not user_text:
            return None
        if self.busy:
            raise ChatBusyError("A message is already being sent")

        self.view.show_user(user_text)
        self.transcript.add_user(user_text)
        self.state = ChatState.SENDING
        self.view.set_busy(True)
        self.view.show_typing()

        outcome = ChatState.FAILED
        try:
            reply = (self.sender.send(self.transcript.outbound()) or "").strip()
            if not reply:
                self.view.show_notice(EMPTY_REPLY_NOTICE)
                return None
            self.view.show_reply(reply, format_text_to_html(reply))
            self.transcript.add_model(reply)
            outcome = ChatState.RENDERED
            return reply
        except RelayError as e:
            logger.error("Chat request failed: %s", e)
            self.view.show_notice(FAILURE_NOTICE)
            return None
        except Exception:
            logger.exception("Chat request crashed")
            self.view.show_notice(FAILURE_NOTICE)
            raise
        finally:
            self.state = outcome
            self.view.set_busy(False)
