from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..domain.errors import (
    CredentialMissingError,
    InvalidFieldError,
    MediatorBusyError,
    SessionUnavailableError,
)
from ..infra.generation import GenerationBackend
from ..observability.logging_utils import log_event, log_failure, summarize_text
from ..schemas.models import ConversationMessage


CONNECTION_FAILURE_MESSAGE = (
    "Sorry, I'm having trouble connecting to the AI service right now."
)


@dataclass(frozen=True)
class AssistantContext:
    """Fixed instruction context a conversation is anchored to."""

    name: str
    title: str
    system_instruction: str
    greeting: str
    failure_placeholder: str
    unavailable_message: str


class ConversationStatus(str, Enum):
    READY = "ready"
    PENDING = "pending"
    UNAVAILABLE = "unavailable"


class ConversationMediator:
    """
    Multi-turn assistant session with an append-only transcript.

    The transcript starts with the assistant greeting and then grows by exactly
    two entries per ``send``: the user message and either the reply or the
    context's failure placeholder. Only successful exchanges are replayed to
    the model as conversation history.
    """

    def __init__(
        self,
        context: AssistantContext,
        backend: Optional[GenerationBackend],
        *,
        unavailable_message: Optional[str] = None,
    ) -> None:
        self.context = context
        self._backend = backend
        self._transcript: List[ConversationMessage] = []
        self._history: List[ConversationMessage] = []
        if backend is None:
            self._status = ConversationStatus.UNAVAILABLE
            self._append("assistant", unavailable_message or context.unavailable_message)
        else:
            self._status = ConversationStatus.READY
            self._append("assistant", context.greeting)

    @classmethod
    def initialize(
        cls,
        context: AssistantContext,
        backend_factory: Callable[[], GenerationBackend],
    ) -> "ConversationMediator":
        try:
            backend = backend_factory()
        except CredentialMissingError as exc:
            log_failure("conversation_unavailable", assistant=context.name, error=str(exc))
            return cls(context, None)
        except Exception as exc:
            log_failure(
                "conversation_unavailable",
                assistant=context.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return cls(context, None, unavailable_message=CONNECTION_FAILURE_MESSAGE)
        log_event("conversation_initialized", assistant=context.name)
        return cls(context, backend)

    @property
    def status(self) -> ConversationStatus:
        return self._status

    @property
    def available(self) -> bool:
        return self._status is not ConversationStatus.UNAVAILABLE

    @property
    def messages(self) -> Tuple[ConversationMessage, ...]:
        return tuple(self._transcript)

    def _append(self, role: str, text: str) -> ConversationMessage:
        message = ConversationMessage(role=role, text=text)
        self._transcript.append(message)
        return message

    async def send(self, message: str) -> "ConversationMediator":
        if self._status is ConversationStatus.UNAVAILABLE:
            raise SessionUnavailableError(f"{self.context.name} is unavailable")
        if self._status is ConversationStatus.PENDING:
            raise MediatorBusyError(f"{self.context.name} is still answering")
        text = (message or "").strip()
        if not text:
            raise InvalidFieldError("Message must not be empty.", field="message")

        user_message = self._append("user", text)
        self._status = ConversationStatus.PENDING
        log_event(
            "conversation_send",
            assistant=self.context.name,
            turn=len(self._history) // 2 + 1,
            message_summary=summarize_text(text, 160),
        )
        try:
            reply = await self._backend.continue_chat(
                system_instruction=self.context.system_instruction,
                history=tuple(self._history),
                message=text,
            )
        except asyncio.CancelledError:
            self._append("assistant", self.context.failure_placeholder)
            raise
        except Exception as exc:
            log_failure(
                "conversation_failed",
                assistant=self.context.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            self._append("assistant", self.context.failure_placeholder)
        else:
            reply_message = self._append("assistant", str(reply).strip())
            self._history.extend((user_message, reply_message))
        finally:
            self._status = ConversationStatus.READY
        return self
