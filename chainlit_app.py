import logging
import os
import uuid

import chainlit as cl
import httpx

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
ASSISTANT = os.getenv("CHAINLIT_ASSISTANT", "expert_guidance")
logger = logging.getLogger(__name__)


def _client(client_id: str) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=BACKEND_URL,
        timeout=60,
        headers={"X-Session-Id": client_id},
    )


def _last_reply(view: dict) -> str:
    messages = view.get("messages") or []
    for message in reversed(messages):
        if message.get("role") == "assistant":
            return message.get("text", "")
    return ""


def _error_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"Request failed with status {response.status_code}"
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, dict):
        detail = detail.get("error")
    return str(detail or response.text)


@cl.on_chat_start
async def start():
    client_id = uuid.uuid4().hex
    cl.user_session.set("client_id", client_id)
    try:
        async with _client(client_id) as client:
            response = await client.post(f"/api/v1/assistants/{ASSISTANT}/sessions")
            response.raise_for_status()
            view = response.json()
    except httpx.HTTPError as exc:
        await cl.Message(content=f"Could not reach the backend: {exc}").send()
        return
    cl.user_session.set("session_id", view["session_id"])
    await cl.Message(content=_last_reply(view)).send()


@cl.on_message
async def on_message(message: cl.Message):
    prompt = message.content.strip()
    if not prompt:
        await cl.Message(content="Please enter a question.").send()
        return
    session_id = cl.user_session.get("session_id")
    if not session_id:
        await cl.Message(content="The chat session is not available.").send()
        return

    try:
        async with _client(cl.user_session.get("client_id")) as client:
            response = await client.post(
                f"/api/v1/sessions/{session_id}/messages", json={"message": prompt}
            )
    except httpx.HTTPError as exc:
        await cl.Message(content=f"Request failed: {exc}").send()
        return

    if response.status_code == 409:
        await cl.Message(content="Still answering your previous question, please wait.").send()
        return
    if response.status_code >= 400:
        await cl.Message(content=_error_text(response)).send()
        return
    await cl.Message(content=_last_reply(response.json())).send()


@cl.on_chat_end
async def end():
    session_id = cl.user_session.get("session_id")
    if not session_id:
        return
    try:
        async with _client(cl.user_session.get("client_id")) as client:
            await client.delete(f"/api/v1/sessions/{session_id}")
    except httpx.HTTPError as exc:
        logger.warning("Could not close chat session %s: %s", session_id, exc)
