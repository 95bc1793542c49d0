# parser/lexer.py
# This file is part of Fiberprops - Component prop extraction
#
# Lexical analyzer for rendered prop strings using SLY

"""Lexical analyzer for rendered prop strings.

This module breaks an extractor output string such as
``[a.0=3];[c=true];`` into tokens for the prop string parser. Brackets,
``=`` and ``;`` are punctuation; every other run of characters is text.
Whitespace is significant and belongs to the surrounding text, since values
are rendered verbatim.

Supported Tokens:
- Punctuation: [, ], =, ;
- Text: any run of characters other than the punctuation above
"""

from sly import Lexer


class PropLexer(Lexer):
    """SLY-based lexer for rendered prop strings.

    Attributes:
        tokens: Set of valid token types
        TEXT: Maximal run of non-punctuation characters
    """

    tokens = {
        "LBRACKET",
        "RBRACKET",
        "EQUALS",
        "SEMI",
        "TEXT",
    }

    LBRACKET = r"\["
    RBRACKET = r"\]"
    EQUALS = r"="
    SEMI = r";"

    TEXT = r"[^\[\]=;]+"
