"""
Chat Client - asks the tutor model about a single concept.

Endpoint: POST /chat/concept. Plain request/response: no retry, no backoff.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

from config.constants import CHAT_CONCEPT_ENDPOINT, ChatRole
from config.settings import settings
from mindscape.errors import ServerError
from mindscape.http.palace_client import validate_base_url
from mindscape.http.transport import HttpTransport, HttpxTransport, TransportRequest
from mindscape.models import ChatReply, Concept

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    """One message of a concept conversation."""
    text: str
    role: ChatRole
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.role is ChatRole.USER

    def to_dict(self) -> dict:
        """Wire form used in chat_history."""
        return {"role": self.role.value, "content": self.text}


class ChatClient:
    """Async client for the concept chat endpoint."""

    CHAT_ENDPOINT = CHAT_CONCEPT_ENDPOINT

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[HttpTransport] = None,
        history_limit: Optional[int] = None
    ):
        """
        Args:
            base_url: Service base URL (settings by default)
            timeout: Request/response timeout in seconds
            transport: HTTP transport (httpx by default)
            history_limit: Most recent messages sent as chat_history (>= 1)

        Raises:
            InvalidEndpointError: base_url is misconfigured
            ValueError: history_limit is below 1
        """
        self.base_url = validate_base_url(
            base_url if base_url is not None else settings.api.MINDSCAPE_BASE_URL
        )
        self.timeout = timeout if timeout is not None else settings.api.MINDSCAPE_CHAT_TIMEOUT
        self.transport = transport or HttpxTransport()
        if history_limit is None:
            history_limit = settings.chat.CHAT_HISTORY_LIMIT
        if history_limit < 1:
            raise ValueError(f"history_limit must be >= 1, got {history_limit}")
        self.history_limit = history_limit

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}{self.CHAT_ENDPOINT}"

    def build_payload(
        self,
        concept: Concept,
        message: str,
        history: Sequence[ChatMessage] = ()
    ) -> dict:
        """
        Build the request body.

        Format expected by the API:
        {
            "concept_name": string,
            "concept_description": string,
            "concept_facts": [string],
            "message": string,
            "chat_history": [{"role": "user" | "model", "content": string}]
        }

        ``history`` is expected to already end with the user message being sent.
        """
        recent = list(history)[-self.history_limit:]
        return {
            "concept_name": concept.name,
            "concept_description": concept.description,
            "concept_facts": list(concept.key_facts),
            "message": message,
            "chat_history": [m.to_dict() for m in recent],
        }

    async def ask(
        self,
        concept: Concept,
        message: str,
        history: Sequence[ChatMessage] = ()
    ) -> str:
        """
        Send a message about a concept and return the model reply.

        Raises:
            TransportError: connection failed or timed out
            ServerError: non-2xx status
            DecodingError: body is not {"response": string}
        """
        payload = self.build_payload(concept, message, history)

        logger.info(f"Chat about '{concept.name}': {message[:50]}")

        response = await self.transport.send(
            TransportRequest(
                method="POST",
                url=self.chat_url,
                body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        )

        if not response.is_success:
            logger.error(f"Chat request failed with status {response.status_code}")
            raise ServerError(response.status_code, response.text or None)

        return ChatReply.from_json(response.body).response


class ChatSession:
    """
    Conversation about one concept.

    Keeps the ordered message list; each send() includes the most recent
    messages as chat_history.
    """

    def __init__(self, client: ChatClient, concept: Concept):
        self.client = client
        self.concept = concept
        self.messages: List[ChatMessage] = []

    async def send(self, text: str) -> ChatMessage:
        """
        Send a user message and record the reply.

        The user message stays in the history when the request fails.
        """
        self.messages.append(ChatMessage(text=text, role=ChatRole.USER))
        reply = await self.client.ask(self.concept, text, self.messages)
        message = ChatMessage(text=reply, role=ChatRole.MODEL)
        self.messages.append(message)
        return message
