"""Custom property extraction from stylesheet text."""

from __future__ import annotations

import logging
import re

from themevars.core.models import PropertyTable

logger = logging.getLogger(__name__)

# A selector starts the text or follows a closing brace or semicolon, with
# optional whitespace and comments in between. Bodies end at the first closing
# brace; nested blocks truncate the body.
_ROOT_BLOCK_RE = re.compile(
    r"(?:^|(?<=[};]))(?:\s|/\*(?:[^*]|\*(?!/))*\*/)*:root\s*\{([^}]*)\}",
    re.DOTALL,
)
_DECLARATION_RE = re.compile(r"--([^:]+):\s*([^;]+);")


def extract_root_variables(css_text: str) -> PropertyTable:
    """Return the custom properties declared in top-level ``:root`` blocks.

    Names are stored without their ``--`` prefix. Later declarations
    overwrite earlier ones, across blocks as well as within one block.
    """
    variables: PropertyTable = {}
    blocks = 0
    for root_match in _ROOT_BLOCK_RE.finditer(css_text):
        blocks += 1
        for decl in _DECLARATION_RE.finditer(root_match.group(1)):
            name = decl.group(1).strip()
            variables[name] = decl.group(2).strip()
    logger.debug("Extracted %d variables from %d :root blocks", len(variables), blocks)
    return variables
