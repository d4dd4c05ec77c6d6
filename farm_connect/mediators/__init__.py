from .conversation import AssistantContext, ConversationMediator, ConversationStatus
from .request import MediatorStatus, PanelSpec, Prompt, RequestMediator

__all__ = [
    "AssistantContext",
    "ConversationMediator",
    "ConversationStatus",
    "MediatorStatus",
    "PanelSpec",
    "Prompt",
    "RequestMediator",
]
