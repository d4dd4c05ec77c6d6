from __future__ import annotations

from typing import Dict, List, Optional

from ..data.schemes import ALL_SCHEMES
from ..mediators.conversation import AssistantContext
from ..prompts import assistants as prompts


EXPERT_GUIDANCE = "expert_guidance"
SCHEME_ASSISTANT = "scheme_assistant"

_ASSISTANTS = (
    AssistantContext(
        name=EXPERT_GUIDANCE,
        title="Expert Guidance AI",
        system_instruction=prompts.EXPERT_GUIDANCE_INSTRUCTION,
        greeting=prompts.EXPERT_GUIDANCE_GREETING,
        failure_placeholder=prompts.EXPERT_GUIDANCE_PLACEHOLDER,
        unavailable_message=prompts.EXPERT_GUIDANCE_UNAVAILABLE,
    ),
    AssistantContext(
        name=SCHEME_ASSISTANT,
        title="Scheme AI Assistant",
        system_instruction=prompts.build_scheme_assistant_instruction(ALL_SCHEMES),
        greeting=prompts.SCHEME_ASSISTANT_GREETING,
        failure_placeholder=prompts.SCHEME_ASSISTANT_PLACEHOLDER,
        unavailable_message=prompts.SCHEME_ASSISTANT_UNAVAILABLE,
    ),
)
_ASSISTANT_INDEX: Dict[str, AssistantContext] = {ctx.name: ctx for ctx in _ASSISTANTS}


def list_assistant_contexts() -> List[AssistantContext]:
    return list(_ASSISTANTS)


def get_assistant_context(name: str) -> Optional[AssistantContext]:
    return _ASSISTANT_INDEX.get(name)
