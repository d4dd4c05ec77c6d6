from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from ..domain.errors import CredentialMissingError
from .config import get_config


SUPPORTED_PROVIDERS = ("openai", "google")
DEFAULT_MODELS = {
    "openai": "gpt-4.1-mini",
    "google": "gemini-2.5-flash",
}


def ensure_credentials() -> str:
    """Return the configured provider, or raise when it cannot be used."""
    cfg = get_config()
    if cfg.llm_provider not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported LLM_PROVIDER {cfg.llm_provider!r}; "
            f"choose one of {', '.join(SUPPORTED_PROVIDERS)}"
        )
    if not cfg.api_key:
        key_name = "GOOGLE_API_KEY" if cfg.llm_provider == "google" else "OPENAI_API_KEY"
        raise CredentialMissingError(f"{key_name} is not configured")
    return cfg.llm_provider


def get_chat_model(*, temperature: Optional[float] = None) -> BaseChatModel:
    provider = ensure_credentials()
    cfg = get_config()
    model = cfg.llm_model or DEFAULT_MODELS[provider]
    temperature = cfg.llm_temperature if temperature is None else temperature
    if provider == "google":
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=cfg.google_api_key,
            temperature=temperature,
        )
    kwargs = {
        "api_key": cfg.openai_api_key,
        "temperature": temperature,
        "model": model,
    }
    if cfg.openai_api_base:
        kwargs["base_url"] = cfg.openai_api_base
    return ChatOpenAI(**kwargs)
