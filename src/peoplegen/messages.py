"""Message handlers for progress output."""

from abc import ABC, abstractmethod

import click


class MessageHandler(ABC):
    """Receives progress messages during a write."""

    @abstractmethod
    def verbose(self, msg: str) -> None:
        """Handle one progress message."""


class VerboseMessageHandler(MessageHandler):
    """Emits messages on stderr, leaving stdout free for records."""

    def verbose(self, msg: str) -> None:
        click.echo(msg, err=True)


class EmptyMessageHandler(MessageHandler):
    """Suppresses messages."""

    def verbose(self, msg: str) -> None:
        pass


def message_handler(verbose: bool) -> MessageHandler:
    return VerboseMessageHandler() if verbose else EmptyMessageHandler()


__all__ = [
    "EmptyMessageHandler",
    "MessageHandler",
    "VerboseMessageHandler",
    "message_handler",
]
