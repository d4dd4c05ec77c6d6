import asyncio
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from farm_connect.application.assistants import (
    EXPERT_GUIDANCE,
    SCHEME_ASSISTANT,
    get_assistant_context,
)
from farm_connect.domain.errors import (
    CredentialMissingError,
    InvalidFieldError,
    MediatorBusyError,
    SessionUnavailableError,
)
from farm_connect.mediators import ConversationMediator, ConversationStatus
from farm_connect.mediators.conversation import CONNECTION_FAILURE_MESSAGE


class ScriptedChatBackend:
    """Replies from a script; an Exception entry is raised instead of returned."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    async def continue_chat(self, *, system_instruction, history, message):
        self.calls.append(
            {
                "system_instruction": system_instruction,
                "history": list(history),
                "message": message,
            }
        )
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class GatedChatBackend:
    def __init__(self):
        self.release = asyncio.Event()
        self.calls = 0

    async def continue_chat(self, *, system_instruction, history, message):
        self.calls += 1
        await self.release.wait()
        return "Sow after the first monsoon rains."


def _open(backend, assistant=EXPERT_GUIDANCE):
    return ConversationMediator.initialize(get_assistant_context(assistant), lambda: backend)


def _missing_credential():
    raise CredentialMissingError("OPENAI_API_KEY is not configured")


class ConversationMediatorTests(unittest.IsolatedAsyncioTestCase):
    async def test_session_starts_with_greeting(self) -> None:
        session = _open(ScriptedChatBackend())
        context = get_assistant_context(EXPERT_GUIDANCE)
        self.assertEqual(session.status, ConversationStatus.READY)
        self.assertEqual(len(session.messages), 1)
        self.assertEqual(session.messages[0].role, "assistant")
        self.assertEqual(session.messages[0].text, context.greeting)

    async def test_reply_then_failure_transcript(self) -> None:
        backend = ScriptedChatBackend("Use drip irrigation.", RuntimeError("timeout"))
        session = _open(backend)
        context = session.context

        await session.send("How do I save water?")
        await session.send("And for paddy?")

        transcript = [(m.role, m.text) for m in session.messages]
        self.assertEqual(
            transcript,
            [
                ("assistant", context.greeting),
                ("user", "How do I save water?"),
                ("assistant", "Use drip irrigation."),
                ("user", "And for paddy?"),
                ("assistant", context.failure_placeholder),
            ],
        )
        self.assertEqual(session.status, ConversationStatus.READY)

    async def test_transcript_grows_by_two_per_send(self) -> None:
        backend = ScriptedChatBackend("a", RuntimeError("x"), "c")
        session = _open(backend)
        for turn in range(1, 4):
            await session.send(f"question {turn}")
            self.assertEqual(len(session.messages), 1 + 2 * turn)

    async def test_history_replays_only_successful_exchanges(self) -> None:
        backend = ScriptedChatBackend("first answer", RuntimeError("down"), "third answer")
        session = _open(backend)
        await session.send("first")
        await session.send("second")
        await session.send("third")

        self.assertEqual(backend.calls[0]["history"], [])
        self.assertEqual(
            [(m.role, m.text) for m in backend.calls[2]["history"]],
            [("user", "first"), ("assistant", "first answer")],
        )
        self.assertEqual(backend.calls[2]["message"], "third")

    async def test_system_instruction_is_carried(self) -> None:
        backend = ScriptedChatBackend("PM-KISAN pays 6000 a year.")
        session = _open(backend, SCHEME_ASSISTANT)
        await session.send("What does PM-KISAN give?")
        instruction = backend.calls[0]["system_instruction"]
        self.assertIn("PM-KISAN (Pradhan Mantri Kisan Samman Nidhi)", instruction)
        self.assertIn("YSR Rythu Bharosa (AP)", instruction)

    async def test_blank_message_is_rejected(self) -> None:
        backend = ScriptedChatBackend()
        session = _open(backend)
        with self.assertRaises(InvalidFieldError):
            await session.send("   ")
        self.assertEqual(len(session.messages), 1)
        self.assertEqual(backend.calls, [])

    async def test_send_while_pending_is_rejected(self) -> None:
        backend = GatedChatBackend()
        session = _open(backend)
        first = asyncio.create_task(session.send("When should I sow groundnut?"))
        await asyncio.sleep(0)
        self.assertEqual(session.status, ConversationStatus.PENDING)
        self.assertEqual(session.messages[-1].role, "user")

        with self.assertRaises(MediatorBusyError):
            await session.send("Hello?")
        self.assertEqual(backend.calls, 1)

        backend.release.set()
        await first
        self.assertEqual(len(session.messages), 3)
        self.assertEqual(session.status, ConversationStatus.READY)

    async def test_missing_credential_makes_session_unavailable(self) -> None:
        context = get_assistant_context(EXPERT_GUIDANCE)
        session = ConversationMediator.initialize(context, _missing_credential)
        self.assertFalse(session.available)
        self.assertEqual(
            [m.text for m in session.messages],
            ["API Key is not configured. The chat feature is unavailable."],
        )
        with self.assertRaises(SessionUnavailableError):
            await session.send("Anyone there?")
        self.assertEqual(len(session.messages), 1)

    async def test_backend_creation_failure_uses_connection_message(self) -> None:
        def broken():
            raise RuntimeError("model not found")

        session = ConversationMediator.initialize(
            get_assistant_context(SCHEME_ASSISTANT), broken
        )
        self.assertEqual(session.status, ConversationStatus.UNAVAILABLE)
        self.assertEqual(session.messages[0].text, CONNECTION_FAILURE_MESSAGE)


if __name__ == "__main__":
    unittest.main()
