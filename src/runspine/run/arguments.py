"""Argument lists for container ``cmd`` and ``entrypoint``.

An argument list is a tagged union: either a single shell-style string that
is tokenized on demand (``ArgumentsForm.SHELL``) or an explicit, ordered
token sequence (``ArgumentsForm.EXEC``). Exactly one form is populated in a
valid instance; ``validate()`` is the structural check the capability
resolver runs before reporting an API requirement.

Example::

    >>> Arguments.of_shell("java -jar 'my app.jar'").tokenize()
    ['java', '-jar', 'my app.jar']
    >>> Arguments.of_exec(["/bin/sh", "-c", "echo hi"]).form
    <ArgumentsForm.EXEC: 'exec'>
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from runspine.core.errors import MalformedArgumentListError


class ArgumentsForm(str, Enum):
    """Which representation an argument list carries."""

    SHELL = "shell"  # One string, tokenized shell-style
    EXEC = "exec"  # Explicit token sequence


@dataclass(frozen=True)
class Arguments:
    """Immutable argument list for ``cmd`` or ``entrypoint``."""

    shell: str | None = None
    """Shell-form command line, tokenized by ``tokenize()``."""

    exec: tuple[str | None, ...] | None = None
    """Exec-form tokens, passed through verbatim."""

    @classmethod
    def of_shell(cls, text: str) -> Arguments:
        return cls(shell=text)

    @classmethod
    def of_exec(cls, tokens: Sequence[str | None]) -> Arguments:
        return cls(exec=tuple(tokens))

    @property
    def form(self) -> ArgumentsForm | None:
        """The populated form, or ``None`` when neither or both are set."""
        if self.shell is not None and self.exec is None:
            return ArgumentsForm.SHELL
        if self.exec is not None and self.shell is None:
            return ArgumentsForm.EXEC
        return None

    def tokenize(self) -> list[str]:
        """Return the argument list as tokens.

        The shell form is split with POSIX shell rules (quotes and
        backslash escapes honored). Raises ``MalformedArgumentListError``
        for unbalanced quotes or when no form is populated.
        """
        if self.exec is not None:
            return [token for token in self.exec if token is not None]
        if self.shell is None:
            raise MalformedArgumentListError("Argument list has neither shell nor exec form")
        try:
            return shlex.split(self.shell)
        except ValueError as exc:
            raise MalformedArgumentListError(
                f"Cannot tokenize shell-form arguments {self.shell!r}: {exc}",
                value=self.shell,
                cause=exc,
            ) from exc

    def validate(self, field: str | None = None) -> None:
        """Check the structural invariant; raise ``MalformedArgumentListError``.

        ``field`` names the owning parameter (``cmd``/``entrypoint``) in the
        error context.
        """
        label = field or "arguments"
        if self.shell is None and self.exec is None:
            raise MalformedArgumentListError(
                f"{label}: either a shell or an exec form must be given", field=field
            )
        if self.shell is not None and self.exec is not None:
            raise MalformedArgumentListError(
                f"{label}: shell and exec forms are mutually exclusive", field=field
            )

        if self.exec is not None:
            if not self.exec:
                raise MalformedArgumentListError(f"{label}: exec form is empty", field=field)
            for index, token in enumerate(self.exec):
                if token is None or token == "":
                    raise MalformedArgumentListError(
                        f"{label}: exec token #{index} is empty",
                        field=field,
                        value=list(self.exec),
                    )
            return

        try:
            tokens = self.tokenize()
        except MalformedArgumentListError as exc:
            raise exc.with_context(field=field)
        if not tokens:
            raise MalformedArgumentListError(
                f"{label}: shell form {self.shell!r} contains no tokens",
                field=field,
                value=self.shell,
            )
        # Quoted empty arguments are fine; an empty program token is not.
        if tokens[0] == "":
            raise MalformedArgumentListError(
                f"{label}: shell form {self.shell!r} starts with an empty token",
                field=field,
                value=self.shell,
            )

    def to_json(self) -> str | list[str | None]:
        """Plain JSON value: the shell string or the exec token list."""
        if self.exec is not None:
            return list(self.exec)
        return self.shell or ""

    def __str__(self) -> str:
        if self.exec is not None:
            return shlex.join(token or "" for token in self.exec)
        return self.shell or ""


__all__ = ["Arguments", "ArgumentsForm"]
