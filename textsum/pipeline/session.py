"""
Conversation Session

A chat with window memory: every request carries the system prompt, the
last `window_k` user/assistant pairs and the new message. The session is
an ordinary object owned by whoever created it.
"""

from typing import List

from ..errors import InputValidationError, LLMResponseError, SessionClosedError
from .base import Message

DEFAULT_SYSTEM_PROMPT = "You are an excellent assistant. Please reply in {language}."


class ConversationSession:
    """
    Usage:
        session = ConversationSession(client, window_k=2)
        print(session.send("Hello"))
        session.reset()
        session.close()
    """

    def __init__(
        self,
        llm_client,
        system_prompt: str = "",
        window_k: int = 2,
        model: str = "gpt-4o-mini",
        temperature: float = 1.0,
        language: str = "English",
    ):
        if not isinstance(window_k, int) or window_k < 1:
            raise InputValidationError("window_k must be a positive integer")
        self.llm = llm_client
        self.system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT.format(language=language)
        self.window_k = window_k
        self.model = model
        self.temperature = temperature
        self.dialog: List[Message] = []
        self.closed = False

    def _window(self) -> List[Message]:
        return self.dialog[-2 * self.window_k:] if self.dialog else []

    def send(self, message: str) -> str:
        """Send a user message and return the assistant's reply."""
        if self.closed:
            raise SessionClosedError("Session is closed")
        if not isinstance(message, str) or not message.strip():
            raise InputValidationError("message must be a non-empty string")

        messages = [Message("system", self.system_prompt)]
        messages += self._window()
        messages.append(Message("user", message))

        reply = self.llm.complete(
            [m.to_dict() for m in messages],
            model=self.model,
            temperature=self.temperature,
        )
        if not reply or not reply.strip():
            raise LLMResponseError("Invalid or empty response from the chat endpoint")

        self.dialog.append(Message("user", message))
        self.dialog.append(Message("assistant", reply))
        # Only the window is ever sent, so older turns can go
        self.dialog = self._window()
        return reply

    def transcript(self) -> str:
        lines = [f"System: {self.system_prompt}"]
        for m in self.dialog:
            label = "Human" if m.role == "user" else "Assistant"
            lines.append(f"{label}: {m.content}")
        return "\n".join(lines)

    def reset(self) -> None:
        self.dialog = []

    def close(self) -> None:
        self.dialog = []
        self.closed = True

    @property
    def turns(self) -> int:
        return len(self.dialog) // 2

    def __enter__(self) -> "ConversationSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

