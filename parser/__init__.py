# parser/__init__.py
# This file is part of Fiberprops - Component prop extraction
#
# Decoding of rendered prop strings back into leaf entries

"""Prop string decoding.

The extractor renders selected props as ``[path=value];`` segments. This
module reads such strings back, for consumers that need the individual
entries rather than the compact form (log processors, tests, the command
line tool's ``--decode`` mode).

Core Functions:
    parse_props: Converts a prop string into a list of leaf entries
    props_to_dict: Converts a prop string into a path -> value mapping

Example:
    >>> from parser import parse_props
    >>> [str(leaf) for leaf in parse_props("[a.0=3];[c=true];")]
    ['a.0=3', 'c=true']
"""

from typing import Dict, List

from .exceptions import ParseError
from .grammar import _PropStringParser
from model.leaf import LeafEntry
from utils.logger import get_logger


def parse_props(source: str) -> List[LeafEntry]:
    """Parse a rendered prop string into leaf entries.

    Uses a fresh parser instance for each invocation so that calls share no
    state.

    Paths are rendered verbatim, so extractor output decodes back to its
    leaves only when no path contains ``[``, ``]`` or ``=``. A key such as
    ``style[0]`` makes the string undecodable; a key such as ``x=y`` splits
    at its own ``=``.

    Args:
        source: Prop string as produced by the extractor

    Returns:
        Leaf entries in string order, with string values

    Raises:
        ParseError: The string does not follow the prop string grammar
    """
    logger = get_logger()
    parser = _PropStringParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during prop string parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def props_to_dict(source: str) -> Dict[str, str]:
    """Parse a prop string into a mapping of path to value.

    A path that occurs more than once keeps its last value.

    Raises:
        ParseError: The string does not follow the prop string grammar
    """
    return {leaf.path: leaf.value for leaf in parse_props(source)}


__all__ = ["parse_props", "props_to_dict", "ParseError"]
