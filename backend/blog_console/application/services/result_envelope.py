"""Result envelope builder: shapes every console response.

The console picks a ``MessageKey``; the text is resolved through the
localizer so the same key can be rendered in any configured language.
"""

from typing import Any, TypeVar

from blog_console.application.interfaces import Localizer
from blog_console.application.messages import MessageKey
from blog_console.application.schemas import ResultEnvelope
from blog_console.domain.exceptions import (
    AuthorizationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)

E = TypeVar("E", bound=ResultEnvelope)


class EnvelopeBuilder:
    def __init__(self, localizer: Localizer):
        self._localizer = localizer

    def _build(
        self,
        success: bool,
        key: MessageKey | str,
        envelope: type[E],
        payload: dict[str, Any],
    ) -> E:
        key = key.value if isinstance(key, MessageKey) else key
        return envelope(
            success=success,
            message_key=key,
            message=self._localizer.message(key),
            **payload,
        )

    def success(
        self,
        key: MessageKey | str,
        envelope: type[E] = ResultEnvelope,
        **payload: Any,
    ) -> E:
        return self._build(True, key, envelope, payload)

    def failure(
        self,
        key: MessageKey | str,
        envelope: type[E] = ResultEnvelope,
        **payload: Any,
    ) -> E:
        return self._build(False, key, envelope, payload)

    def from_error(
        self,
        error: Exception,
        fallback: MessageKey,
        envelope: type[E] = ResultEnvelope,
    ) -> E:
        """Map a business or collaborator error onto a failure envelope.

        Error details never reach the message; only the key is chosen here.
        """
        return self.failure(self.message_key_for(error, fallback), envelope)

    @staticmethod
    def message_key_for(error: Exception, fallback: MessageKey) -> str:
        if isinstance(error, AuthorizationError):
            return MessageKey.FORBIDDEN.value
        if isinstance(error, EntityNotFoundError):
            return MessageKey.NOT_FOUND.value
        if isinstance(error, InvalidArgumentError):
            return error.message_key
        if isinstance(error, DuplicateEntityError):
            return MessageKey.DUPLICATED_PERMALINK.value
        return fallback.value
