"""
Toast notifications

Components report outcomes to the visitor through a Notifier. How a toast
is shown is up to the host: the CLI prints it, tests collect it.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Literal, Optional, TextIO


@dataclass(frozen=True)
class Toast:
    """A short, non-blocking message."""
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"

    @classmethod
    def success(cls, description: str) -> "Toast":
        return cls(title="Success!", description=description)

    @classmethod
    def error(cls, description: str) -> "Toast":
        return cls(title="Error", description=description, variant="destructive")


class Notifier(ABC):
    """Where components send toasts."""

    @abstractmethod
    def notify(self, toast: Toast) -> None:
        pass


@dataclass
class ToastLog(Notifier):
    """Keeps every toast in order. Useful for tests and headless runs."""
    toasts: list[Toast] = field(default_factory=list)

    def notify(self, toast: Toast) -> None:
        self.toasts.append(toast)

    @property
    def last(self) -> Optional[Toast]:
        return self.toasts[-1] if self.toasts else None

    def clear(self):
        self.toasts.clear()


class ConsoleNotifier(Notifier):
    """Prints toasts to a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        # None means whatever sys.stdout is at print time
        self.stream = stream
        self.color = color

    def format(self, toast: Toast) -> str:
        """Format a toast for terminal output."""
        if toast.is_error:
            symbol, color = "✗", "\033[91m"  # Red
        else:
            symbol, color = "✓", "\033[92m"  # Green

        line = f"{symbol} {toast.title} {toast.description}"
        if self.color:
            return f"{color}{line}\033[0m"
        return line

    def notify(self, toast: Toast) -> None:
        print(self.format(toast), file=self.stream or sys.stdout)
