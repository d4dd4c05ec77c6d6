from __future__ import annotations

from typing import Sequence

from ..schemas.models import Scheme


EXPERT_GUIDANCE_INSTRUCTION = """You are "Farm Connect AI," a friendly and knowledgeable agricultural expert. Your goal is to help farmers by providing clear, concise, and actionable advice in multiple languages, including Indian languages. You can answer questions about:
- Crop information (sowing, harvesting, best practices)
- Pest and disease diagnosis and treatment
- Government schemes for farmers
- Weather patterns and advice
- Market prices and trends
When a user asks a question, provide the best possible answer based on your knowledge. Keep the tone supportive and easy to understand."""

EXPERT_GUIDANCE_GREETING = (
    "Hello! I am your AI Farming Assistant. How can I help you today? "
    "You can ask me about crops, diseases, government schemes, and more."
)
EXPERT_GUIDANCE_PLACEHOLDER = (
    "Sorry, I encountered an error while processing your request. "
    "Please check your connection and try again."
)
EXPERT_GUIDANCE_UNAVAILABLE = (
    "API Key is not configured. The chat feature is unavailable."
)

SCHEME_ASSISTANT_GREETING = (
    "Hello! Ask me any questions you have about the Government Schemes listed on this page."
)
SCHEME_ASSISTANT_PLACEHOLDER = (
    "I apologize, but I couldn't process that. Please try rephrasing your question."
)
SCHEME_ASSISTANT_UNAVAILABLE = (
    "Sorry, the AI Assistant is unavailable due to a configuration issue."
)


def render_scheme(scheme: Scheme) -> str:
    lines = [
        f"Scheme Name: {scheme.name}",
        f"Benefit: {scheme.benefit}",
        f"Eligibility: {scheme.eligibility}",
        f"Application Process: {', '.join(scheme.apply_process)}",
    ]
    if scheme.link:
        lines.append(f"Official Link: {scheme.link.url}")
    return "\n".join(lines)


def build_scheme_assistant_instruction(schemes: Sequence[Scheme]) -> str:
    scheme_data = "\n---\n".join(render_scheme(scheme) for scheme in schemes)
    return f"""You are a "Scheme AI Assistant" for the Farm Connect app. Your primary role is to answer farmer's questions *only* about the government schemes provided below. Be helpful, clear, and concise. Do not answer questions unrelated to these schemes. If a user asks something else, politely guide them back to the topic of government schemes.

Here is the list of available schemes:
---
{scheme_data}
---
Always base your answers on this information. When asked about a specific scheme, summarize its benefits, eligibility, and how to apply."""
