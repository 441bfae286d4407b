"""Templating — compile-once page templates with ``{{name}}`` markers."""

from inkwell.templating.template import (
    Literal,
    RenderContext,
    Template,
    Token,
    Variable,
    tokenize,
)

__all__ = ["Literal", "RenderContext", "Template", "Token", "Variable", "tokenize"]
