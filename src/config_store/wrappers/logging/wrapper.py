import json
import logging
from collections.abc import Mapping
from typing import Any, Literal

from typing_extensions import override

from config_store.protocols.config import ConfigContract
from config_store.wrappers.base import BaseWrapper

LogStatus = Literal["start", "finish"]


class LoggingWrapper(BaseWrapper):
    """Wrapper that logs the start and finish of every operation on the underlying store.

    Example:
        >>> logged = LoggingWrapper(config=MemoryConfigStore(), log_level=logging.INFO)
        >>> logged.set("foo", "bar")
        # Start SET key='foo' value='bar'
        # Finish SET key='foo' value='bar'
    """

    def __init__(
        self,
        config: ConfigContract,
        *,
        logger: logging.Logger | None = None,
        log_level: int = logging.DEBUG,
        structured_logs: bool = False,
    ) -> None:
        """Initialize the logging wrapper.

        Args:
            config: The configuration store to wrap.
            logger: The logger to write to. Defaults to this module's logger.
            log_level: The level every message is logged at.
            structured_logs: Whether to emit each message as a JSON object instead of plain text.
        """
        self.logger: logging.Logger = logger or logging.getLogger(__name__)
        self.log_level: int = log_level
        self.structured_logs: bool = structured_logs

        super().__init__(config=config)

    def _format_message(
        self,
        status: LogStatus,
        action: str,
        key: str | None = None,
        value: Any = None,
        extra: dict[str, Any] | None = None,
    ) -> str:
        if self.structured_logs:
            payload: dict[str, Any] = {"status": status, "action": action}
            if key is not None:
                payload["key"] = key
            if value is not None:
                payload["value"] = value
            if extra:
                payload["extra"] = extra
            return json.dumps(payload)

        parts: list[str] = [f"{status.capitalize()} {action}"]
        if key is not None:
            parts.append(f"key='{key}'")
        if value is not None:
            parts.append(f"value={value!r}")
        if extra:
            parts.append(f"({extra})")
        return " ".join(parts)

    def _log(
        self,
        status: LogStatus,
        action: str,
        key: str | None = None,
        value: Any = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.logger.log(self.log_level, self._format_message(status=status, action=action, key=key, value=value, extra=extra))

    @override
    def has(self, key: str) -> bool:
        self._log(status="start", action="HAS", key=key)

        found: bool = self.config.has(key=key)

        self._log(status="finish", action="HAS", key=key, extra={"hit": found})

        return found

    @override
    def get(self, key: str) -> str | None:
        self._log(status="start", action="GET", key=key)

        value: str | None = self.config.get(key=key)

        self._log(status="finish", action="GET", key=key, value=value, extra={"hit": value is not None})

        return value

    @override
    def set(self, key: str, value: str) -> None:
        self._log(status="start", action="SET", key=key, value=value)

        self.config.set(key=key, value=value)

        self._log(status="finish", action="SET", key=key, value=value)

    @override
    def all(self) -> Mapping[str, str]:
        self._log(status="start", action="ALL")

        items: Mapping[str, str] = self.config.all()

        self._log(status="finish", action="ALL", extra={"count": len(items)})

        return items
