"""Per-client state container holding one mediator per panel and open chats."""

from __future__ import annotations

import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..domain.errors import CredentialMissingError
from ..infra.generation import GenerationBackend, LangChainGenerationBackend
from ..mediators.conversation import ConversationMediator
from ..mediators.request import MediatorStatus, RequestMediator
from ..observability.logging_utils import log_event, log_failure
from ..schemas.models import MediatorSnapshot, SessionView
from .assistants import get_assistant_context
from .panels import list_panel_specs


BackendFactory = Callable[[], GenerationBackend]

MAX_SESSIONS = 16


class UnknownPanelError(LookupError):
    pass


class UnknownAssistantError(LookupError):
    pass


class UnknownSessionError(LookupError):
    pass


class Dashboard:
    def __init__(
        self,
        dashboard_id: str,
        backend_factory: BackendFactory = LangChainGenerationBackend.from_config,
        *,
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        self.dashboard_id = dashboard_id
        self._max_sessions = max(1, int(max_sessions))
        self._backend_factory = backend_factory
        try:
            backend: Optional[GenerationBackend] = backend_factory()
        except (CredentialMissingError, ValueError) as exc:
            # Missing key or unsupported provider: every panel stays unavailable.
            log_failure(
                "dashboard_unavailable",
                dashboard=dashboard_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            backend = None
        self._mediators: Dict[str, RequestMediator] = {
            spec.name: RequestMediator(spec, backend) for spec in list_panel_specs()
        }
        self._sessions: Dict[str, Tuple[str, ConversationMediator]] = {}

    @property
    def available(self) -> bool:
        return any(m.status is not MediatorStatus.UNAVAILABLE for m in self._mediators.values())

    def mediator(self, panel: str) -> RequestMediator:
        try:
            return self._mediators[panel]
        except KeyError:
            raise UnknownPanelError(panel) from None

    def snapshot(self, panel: str) -> MediatorSnapshot:
        return self.mediator(panel).snapshot()

    async def submit(self, panel: str, fields: Mapping[str, Any]) -> MediatorSnapshot:
        mediator = self.mediator(panel)
        await mediator.submit(fields)
        return mediator.snapshot()

    def open_session(self, assistant: str) -> Tuple[str, ConversationMediator]:
        context = get_assistant_context(assistant)
        if context is None:
            raise UnknownAssistantError(assistant)
        session = ConversationMediator.initialize(context, self._backend_factory)
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = (assistant, session)
        while len(self._sessions) > self._max_sessions:
            evicted = next(iter(self._sessions))
            self._sessions.pop(evicted)
            log_event("session_evicted", dashboard=self.dashboard_id, session_id=evicted)
        log_event(
            "session_opened",
            dashboard=self.dashboard_id,
            session_id=session_id,
            assistant=assistant,
            available=session.available,
        )
        return session_id, session

    def session(self, session_id: str) -> ConversationMediator:
        try:
            return self._sessions[session_id][1]
        except KeyError:
            raise UnknownSessionError(session_id) from None

    async def send(self, session_id: str, message: str) -> SessionView:
        await self.session(session_id).send(message)
        return self.session_view(session_id)

    def close_session(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise UnknownSessionError(session_id)
        log_event("session_closed", dashboard=self.dashboard_id, session_id=session_id)

    def session_ids(self) -> List[str]:
        return list(self._sessions)

    def session_view(self, session_id: str) -> SessionView:
        try:
            assistant, session = self._sessions[session_id]
        except KeyError:
            raise UnknownSessionError(session_id) from None
        return SessionView(
            session_id=session_id,
            assistant=assistant,
            status=session.status.value,
            messages=list(session.messages),
        )
