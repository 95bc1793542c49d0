# parser/grammar.py
# This file is part of Fiberprops - Component prop extraction
#
# LALR(1) grammar and parser for rendered prop strings using SLY

"""Prop string grammar implementation using SLY parser generator.

This module defines the grammar of extractor output and rebuilds the leaf
entries from a token stream provided by the lexer.

Grammar:
    start   : entries
    entries : entries entry | entry
    entry   : "[" path "=" value "]" ";"
    path    : one or more TEXT or ";" tokens
    value   : zero or more TEXT, "=" or ";" tokens

A path ends at the first ``=``; the value runs up to the closing ``]`` and
may itself contain ``=`` and ``;``. Values come back as strings, since the
rendered form does not record the original type.
"""

from typing import List

from sly import Parser
from .lexer import PropLexer
from .exceptions import ParseError
from model.leaf import LeafEntry
from utils.logger import get_logger


class _PropStringParser(Parser):
    """SLY-based LALR(1) parser for rendered prop strings.

    Attributes:
        tokens: Token types from PropLexer
    """

    tokens = PropLexer.tokens

    @_("entries")
    def start(self, p) -> List[LeafEntry]:
        """Start rule: a prop string is a sequence of entries."""
        return p.entries

    @_("entries entry")
    def entries(self, p) -> List[LeafEntry]:
        p.entries.append(p.entry)
        return p.entries

    @_("entry")
    def entries(self, p) -> List[LeafEntry]:
        return [p.entry]

    @_("LBRACKET path EQUALS value RBRACKET SEMI")
    def entry(self, p) -> LeafEntry:
        """One ``[path=value];`` segment."""
        return LeafEntry(p.path, p.value)

    @_("path TEXT", "path SEMI")
    def path(self, p) -> str:
        return p.path + p[1]

    @_("TEXT", "SEMI")
    def path(self, p) -> str:
        return p[0]

    @_("value TEXT", "value EQUALS", "value SEMI")
    def value(self, p) -> str:
        return p.value + p[1]

    @_("")
    def value(self, p) -> str:
        """Empty value, as rendered for an empty string."""
        return ""

    def parse(self, text: str) -> List[LeafEntry]:
        """Parse a prop string into its leaf entries.

        Args:
            text: Output of the extractor

        Returns:
            Leaf entries in string order; empty for the empty string

        Raises:
            ParseError: If the text does not follow the prop string grammar
        """
        logger = get_logger()
        logger.debug(f"Parsing prop string: {text}")

        if text == "":
            return []

        try:
            result = super().parse(PropLexer().tokenize(text))

            if result is None:
                raise ParseError("Failed to parse prop string (syntax error).")

            logger.debug(f"Parsed {len(result)} prop entries")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with position information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of prop string"

        raise ParseError(error_msg)
