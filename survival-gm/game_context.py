"""
Central place for process-wide configuration: API key, model, logging,
and the scene requester built from them.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from openai import OpenAI

from ai.scene_requester import DEFAULT_MODEL, DEFAULT_TEMPERATURE, SceneRequester

logger = logging.getLogger(__name__)

API_KEY_PATH = Path(__file__).resolve().parent / "apiKey"


class ConfigError(RuntimeError):
    """Raised when the game cannot be configured (e.g. no API key)."""


@dataclass
class Settings:
    api_key: str
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE


def configure_logging(level: Optional[str] = None) -> None:
    level = level or os.environ.get("SURVIVAL_GM_LOG", "INFO")
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_api_key(key_path: Path = API_KEY_PATH) -> Optional[str]:
    # Environment first
    key = os.environ.get("OPENAI_API_KEY")
    if key:
        return key
    # fallback to the apiKey file next to the app
    if key_path.exists():
        val = key_path.read_text(encoding="utf-8").strip()
        if val:
            return val
    return None


def load_settings(model: Optional[str] = None, key_path: Path = API_KEY_PATH) -> Settings:
    api_key = load_api_key(key_path)
    if not api_key:
        raise ConfigError("No API key found: set OPENAI_API_KEY or create an apiKey file.")
    logger.info("Using OpenAI key source=%s", "env" if os.environ.get("OPENAI_API_KEY") else "file")
    return Settings(
        api_key=api_key,
        model=model or os.environ.get("SURVIVAL_GM_MODEL") or DEFAULT_MODEL,
    )


def build_requester(settings: Optional[Settings] = None) -> SceneRequester:
    settings = settings or load_settings()
    client = OpenAI(api_key=settings.api_key)
    logger.info("Scene requester initialized (model=%s).", settings.model)
    return SceneRequester(client, model=settings.model, temperature=settings.temperature)
