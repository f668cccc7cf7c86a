"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from personal_assistant.l1_entities.config import AppConfig
from personal_assistant.l2_use_cases.ports.llm_client import LLMClient
from personal_assistant.l2_use_cases.utils.fallback import FallbackSelector, random_fallback
from personal_assistant.l3_interface_adapters.controllers.chat_controller import ChatController
from personal_assistant.l3_interface_adapters.controllers.client_controller import ClientController
from personal_assistant.l3_interface_adapters.gateways.file_theme_store import FileThemeStore
from personal_assistant.l3_interface_adapters.gateways.http_api_client import DEFAULT_API_URL, HttpAssistantApi
from personal_assistant.l3_interface_adapters.gateways.openai_llm_client import OpenAICompatLLMClient
from personal_assistant.l3_interface_adapters.gateways.paths import THEME_PATH
from personal_assistant.l4_frameworks_and_drivers.api import create_app
from personal_assistant.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires the server side. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        llm_client: LLMClient | None = None,
        select_fallback: FallbackSelector = random_fallback,
    ) -> None:
        self.config = config

        _infra = infra or InfraConfig()
        self.llm_client: LLMClient = llm_client or OpenAICompatLLMClient(
            api_key=_infra.openai.api_key,
            base_url=_infra.openai.base_url,
            timeout=_infra.openai.timeout,
        )
        self.controller = ChatController(config, self.llm_client, select_fallback=select_fallback)

    def create_app(self) -> FastAPI:
        return create_app(self.controller, cors_origins=self.config.server.cors_origins)


def build_client_controller(api_url: str = DEFAULT_API_URL, theme_path: Path = THEME_PATH) -> ClientController:
    """Wire the presentation client: httpx API gateway + file-backed theme preference."""
    return ClientController(HttpAssistantApi(base_url=api_url), FileThemeStore(theme_path))
