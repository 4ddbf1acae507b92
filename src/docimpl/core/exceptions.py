"""Exception hierarchy for fragment loading and configuration."""

from __future__ import annotations


class DocImplError(RuntimeError):
    """Base exception for docimpl failures."""


class FragmentFormatError(DocImplError):
    """Raised when an implementors fragment cannot be decoded."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class FragmentNotFoundError(DocImplError):
    """Raised when a fragment path does not exist."""


class ConfigError(DocImplError):
    """Raised when a registry configuration file is invalid."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "ConfigError",
    "DocImplError",
    "FragmentFormatError",
    "FragmentNotFoundError",
    "exception_messages",
]
