"""Page templates: ``{{name}}`` substitution over literal text.

A template source compiles once into an ordered tuple of tokens.  The
compiled ``Template`` is a frozen value, shared by every worker thread
without locking.

Compile rules:

- ``{{ name }}`` becomes ``Variable("name")`` (surrounding whitespace
  is stripped from the name).
- A lone ``{`` is literal text.
- An unterminated ``{{`` turns the rest of the source into literal text.
- Adjacent literal text is merged; empty literals are never emitted.

Render rules: literals are copied verbatim, variables are replaced by
the first matching context value, or by nothing when absent.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from inkwell.errors import ConfigurationError, RenderError

_OPEN = "{{"
_CLOSE = "}}"


@dataclass(frozen=True, slots=True)
class Literal:
    """Text copied into the output verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Variable:
    """A placeholder replaced by the context value of the same name."""

    name: str


Token: TypeAlias = Literal | Variable

# Either a mapping or ordered (name, value) pairs, first match wins
RenderContext: TypeAlias = Mapping[str, str] | Iterable[tuple[str, str]]


def tokenize(source: str) -> tuple[Token, ...]:
    """Split *source* into literal and variable tokens, in source order.

    Examples::

        "Hello {{name}}!" -> (Literal("Hello "), Variable("name"), Literal("!"))
        "a { b"           -> (Literal("a { b"),)
        "x {{y"           -> (Literal("x {{y"),)
    """
    tokens: list[Token] = []
    pending: list[str] = []
    i = 0
    n = len(source)

    while i < n:
        if not source.startswith(_OPEN, i):
            pending.append(source[i])
            i += 1
            continue

        end = source.find(_CLOSE, i + len(_OPEN))
        if end == -1:
            # Unterminated: keep the remainder as literal text
            pending.append(source[i:])
            break

        if pending:
            tokens.append(Literal("".join(pending)))
            pending = []
        tokens.append(Variable(source[i + len(_OPEN) : end].strip()))
        i = end + len(_CLOSE)

    if pending:
        tokens.append(Literal("".join(pending)))
    return tuple(tokens)


@dataclass(frozen=True, slots=True)
class Template:
    """A compiled template.

    Build once at startup with :meth:`compile` or :meth:`from_path`;
    render per request with :meth:`render`.
    """

    tokens: tuple[Token, ...]

    @classmethod
    def compile(cls, source: str) -> Template:
        """Compile template *source*. Identical sources give equal templates."""
        return cls(tokens=tokenize(source))

    @classmethod
    def from_path(cls, path: str | Path) -> Template:
        """Read and compile a UTF-8 template file.

        Raises:
            ConfigurationError: The file is missing or unreadable.
        """
        try:
            source = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot load template {str(path)!r}: {exc}"
            raise ConfigurationError(msg) from exc
        return cls.compile(source)

    @property
    def variables(self) -> tuple[str, ...]:
        """Names of every variable in the template, in source order."""
        return tuple(t.name for t in self.tokens if isinstance(t, Variable))

    def render(self, context: RenderContext) -> str:
        """Substitute *context* values into the template.

        Unknown variables render as the empty string.

        Raises:
            RenderError: A context value used by the template is not a string.
        """
        values = _lookup_table(context)
        parts: list[str] = []
        for token in self.tokens:
            if isinstance(token, Literal):
                parts.append(token.text)
                continue
            value = values.get(token.name, "")
            if not isinstance(value, str):
                msg = (
                    f"Context value for {token.name!r} must be str, "
                    f"got {type(value).__name__}"
                )
                raise RenderError(msg)
            parts.append(value)
        return "".join(parts)


def _lookup_table(context: RenderContext) -> Mapping[str, str]:
    """Normalise *context* to a mapping, keeping the first value per name."""
    if isinstance(context, Mapping):
        return context
    table: dict[str, str] = {}
    for name, value in context:
        table.setdefault(name, value)
    return table
