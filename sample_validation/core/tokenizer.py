#!/usr/bin/env python3
"""
Tokenizer - Source Code Token Extraction

Splits source text into the tokens the classifier learns from. Literal
values (strings, numbers) and comment bodies carry little language signal
and are dropped; identifiers, keywords, punctuation runs, SGML tag names and
shebang interpreters are kept.
"""

import re
from typing import List

# Only the head of large files is tokenized
BYTE_LIMIT = 100_000

SHEBANG_RE = re.compile(r"\A#!\s*(?:\S*/)?(?:env\s+(?:-\S+\s+)*)?([^\s/]+)")
INTERPRETER_VERSION_RE = re.compile(r"[\d.]+$")

COMMENT_RES = [
    re.compile(r"/\*.*?\*/", re.DOTALL),          # C block
    re.compile(r"<!--.*?-->", re.DOTALL),         # SGML
    re.compile(r"\{-.*?-\}", re.DOTALL),          # Haskell block
    re.compile(r"\(\*.*?\*\)", re.DOTALL),        # ML/Pascal block
    re.compile(r'""".*?"""|\'\'\'.*?\'\'\'', re.DOTALL),
]
# "#include" and friends are kept; "# text" is a comment
LINE_COMMENT_RE = re.compile(r"(?m)//.*$|^[ \t]*#[ \t].*$")
STRING_RE = re.compile(r'"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\'')
NUMBER_RE = re.compile(r"\b(?:0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)\b")

SGML_TAG_RE = re.compile(r"<(/?[A-Za-z][\w:.-]*)")
TOKEN_RE = re.compile(
    r"[A-Za-z_$@][\w$]*"          # identifiers, sigils, decorators
    r"|[!#%&*+\-./:<=>?\\^|~]+"   # operator runs
    r"|[()\[\]{};,`]"             # single punctuation
)


def _shebang_token(content: str) -> List[str]:
    match = SHEBANG_RE.match(content)
    if not match:
        return []
    interpreter = INTERPRETER_VERSION_RE.sub("", match.group(1)) or match.group(1)
    return [f"SHEBANG#!{interpreter}"]


def _strip_noise(content: str) -> str:
    for regex in COMMENT_RES:
        content = regex.sub(" ", content)
    content = STRING_RE.sub(" ", content)
    content = LINE_COMMENT_RE.sub(" ", content)
    return NUMBER_RE.sub(" ", content)


def extract_tokens(content: str) -> List[str]:
    """
    Extract classifier tokens from source text.

    Args:
        content: Raw file content

    Returns:
        Tokens in source order
    """
    if not content:
        return []

    content = content[:BYTE_LIMIT]
    tokens = _shebang_token(content)
    if tokens:
        content = content.split("\n", 1)[1] if "\n" in content else ""

    tokens.extend(f"<{name}>" for name in SGML_TAG_RE.findall(content))
    tokens.extend(TOKEN_RE.findall(_strip_noise(SGML_TAG_RE.sub(" ", content))))
    return tokens
