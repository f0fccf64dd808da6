"""Conversation-aware chat completion backed by PydanticAI agents."""

import logging
from typing import Protocol

from pydantic import BaseModel
from pydantic_ai import Agent
from pydantic_ai.messages import ModelMessage
from pydantic_ai.models import Model

from .config import DEFAULT_MODEL

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Raised when a completion request fails after all retries."""


class ChatOptions(BaseModel):
    """Per-request settings for a completion call."""

    model: str = DEFAULT_MODEL
    system_prompt: str | None = None
    restart: bool = True


class CompletionClient(Protocol):
    """Black-box summarization capability used by the pipeline."""

    async def complete(
        self, conversation_id: str, prompt: str, options: ChatOptions
    ) -> str: ...

    def forget(self, conversation_id: str) -> None: ...


class AgentCompletionClient:
    """Completion client that keeps message history per conversation id.

    With ``restart`` set, the stored history for the conversation is dropped
    before the request, so each call starts a fresh context.
    """

    def __init__(self, max_retries: int = 3, model: Model | None = None) -> None:
        """Initialize the client.

        Args:
            max_retries: Extra attempts after a failed request
            model: Model instance used instead of ``ChatOptions.model``
                (e.g. a PydanticAI FunctionModel)
        """
        self.max_retries = max_retries
        self._model_override = model
        self._agents: dict[tuple[str, str | None], Agent[None, str]] = {}
        self._histories: dict[str, list[ModelMessage]] = {}

    def _get_agent(self, options: ChatOptions) -> Agent[None, str]:
        """Lazy-loaded agent per (model, system prompt) pair."""
        key = (options.model, options.system_prompt)
        agent = self._agents.get(key)
        if agent is None:
            agent = Agent(
                self._model_override or options.model,
                output_type=str,
                instructions=options.system_prompt,
            )
            self._agents[key] = agent
        return agent

    async def complete(
        self, conversation_id: str, prompt: str, options: ChatOptions
    ) -> str:
        """Send one prompt within a conversation and return the reply text.

        Raises:
            CompletionError: If every attempt fails
        """
        if options.restart:
            self._histories.pop(conversation_id, None)

        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            try:
                agent = self._get_agent(options)
                result = await agent.run(
                    prompt, message_history=self._histories.get(conversation_id)
                )
            except Exception as e:
                last_error = e
                logger.warning(
                    f"Completion attempt {attempt + 1}/{self.max_retries + 1} "
                    f"for {conversation_id} failed: {type(e).__name__}: {e}"
                )
                continue

            self._histories[conversation_id] = result.all_messages()
            return result.output

        raise CompletionError(
            f"Completion for {conversation_id} failed after "
            f"{self.max_retries + 1} attempt(s): {last_error}"
        ) from last_error

    def forget(self, conversation_id: str) -> None:
        """Drop any stored context for a conversation."""
        self._histories.pop(conversation_id, None)
