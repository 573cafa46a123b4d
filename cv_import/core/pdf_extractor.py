"""
Text recovery straight from PDF bytes, without a structural PDF parser.

The byte stream is decoded leniently (Latin-1, one char per byte) and mined
by a ranked list of strategies. Each strategy has the same shape,
``(content) -> text``; a later one only runs while every earlier one produced
fewer than MIN_TIER_CHARS characters, and the longest output wins.

Tiers:
1. text_operators  - string operands of Tj / TJ inside BT ... ET objects
2. string_literals - every ``(...)`` literal in the file that looks like words
3. stream_runs     - printable runs between ``stream`` and ``endstream``

Compressed (FlateDecode) content streams are not inflated; such files usually
end up in tier 2 or 3, or fail the quality gate.
"""

import logging
import re
from typing import Callable, List, Tuple

from cv_import.core.text_quality import validate_text

logger = logging.getLogger(__name__)

MIN_TIER_CHARS = 50
KERNING_SPACE_THRESHOLD = -200  # TJ adjustment (thousandths of an em) read as a word gap

# One level of balanced parentheses is allowed inside a literal without escaping
_LITERAL = r"\((?:\\.|[^\\()]|\((?:\\.|[^\\()])*\))*\)"
_HEX = r"<[0-9A-Fa-f\s]*>"
_STRING = rf"(?:{_LITERAL}|{_HEX})"
_NUMBER = r"(?<![\d.])[-+]?(?:\d+\.?\d*|\.\d+)"

# Strings are consumed whole, so an "ET" inside a literal never closes the object
_BT_ET_RE = re.compile(
    rf"(?<![A-Za-z])BT(?![A-Za-z])((?:{_STRING}|[^()<>])*?)(?<![A-Za-z])ET(?![A-Za-z])", re.S
)
_TEXT_OP_RE = re.compile(
    rf"(?P<show>{_STRING})\s*Tj(?![A-Za-z])"
    rf"|\[(?P<array>(?:{_STRING}|[^\[\]()<>])*)\]\s*TJ(?![A-Za-z])"
    rf"|(?P<tx>{_NUMBER})\s+(?P<ty>{_NUMBER})\s+T[dD](?![A-Za-z])"
    r"|(?P<next_line>T\*)",
    re.S,
)
_ARRAY_ITEM_RE = re.compile(rf"(?P<string>{_STRING})|(?P<number>{_NUMBER})", re.S)

_BARE_LITERAL_RE = re.compile(r"\(((?:\\.|[^\\()])*)\)", re.S)
_STRUCTURAL_KEYWORDS = ("endobj", "stream", "FlateDecode")

_STREAM_RE = re.compile(r"(?<![A-Za-z])stream(.*?)endstream", re.S)
_PRINTABLE_RUN_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9\s@.,\-_]{3,}")

_ESCAPE_RE = re.compile(r"\\([0-7]{1,3}|\r\n|[\r\n]|.)", re.S)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "(": "(",
    ")": ")",
    "\\": "\\",
}

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def _unescape_literal(body: str) -> str:
    """Decode the escape sequences of a PDF string literal body."""

    def _replace(match: re.Match) -> str:
        token = match.group(1)
        if token[0] in "01234567":
            return chr(int(token, 8) & 0xFF)
        if token in ("\r\n", "\r", "\n"):
            # Backslash at end of line continues the literal
            return ""
        # Unknown escapes drop the backslash
        return _SIMPLE_ESCAPES.get(token, token)

    return _ESCAPE_RE.sub(_replace, body)


def _decode_hex_string(body: str) -> str:
    digits = re.sub(r"\s+", "", body)
    if len(digits) % 2:
        digits += "0"
    raw = bytes.fromhex(digits)
    if raw.startswith(b"\xfe\xff"):
        return raw[2:].decode("utf-16-be", errors="ignore")
    return raw.decode("latin-1")


def _decode_string(token: str) -> str:
    """Decode a ``(literal)`` or ``<hex>`` string operand."""
    if token.startswith("("):
        return _unescape_literal(token[1:-1])
    return _decode_hex_string(token[1:-1])


def _decode_text_array(array_body: str) -> str:
    """
    Join the strings of a TJ array.

    Pieces are glued together; a large negative kerning adjustment between two
    pieces is the producer's way of drawing a word space.
    """
    out: List[str] = []
    for item in _ARRAY_ITEM_RE.finditer(array_body):
        if item.group("string") is not None:
            out.append(_decode_string(item.group("string")))
        elif out and float(item.group("number")) <= KERNING_SPACE_THRESHOLD:
            out.append(" ")
    return "".join(out)


def _extract_text_operators(content: str) -> str:
    """Tier 1: show-text operands scoped to BT ... ET text objects."""
    lines: List[str] = []
    for block in _BT_ET_RE.finditer(content):
        current: List[str] = []
        for op in _TEXT_OP_RE.finditer(block.group(1)):
            if op.group("show") is not None:
                piece = _decode_string(op.group("show"))
            elif op.group("array") is not None:
                piece = _decode_text_array(op.group("array"))
            else:
                # T* or a Td/TD with vertical movement ends the current line
                moves_down = op.group("next_line") is not None or float(op.group("ty")) != 0
                if moves_down and current:
                    lines.append(" ".join(current))
                    current = []
                continue
            if piece.strip():
                current.append(piece)
        if current:
            lines.append(" ".join(current))
    return "\n".join(lines)


def _extract_string_literals(content: str) -> str:
    """Tier 2: any parenthesised literal that reads like text."""
    kept: List[str] = []
    for match in _BARE_LITERAL_RE.finditer(content):
        text = _unescape_literal(match.group(1)).strip()
        if len(text) <= 2:
            continue
        if not re.search(r"[A-Za-z]", text) or re.fullmatch(r"[\d\s]+", text):
            continue
        if any(keyword in text for keyword in _STRUCTURAL_KEYWORDS):
            continue
        kept.append(text)
    return " ".join(kept)


def _extract_stream_runs(content: str) -> str:
    """Tier 3: printable character runs inside stream bodies."""
    kept: List[str] = []
    for stream in _STREAM_RE.finditer(content):
        for run in _PRINTABLE_RUN_RE.finditer(stream.group(1)):
            text = run.group(0)
            if "obj" in text:  # also covers endobj
                continue
            kept.append(text.strip())
    return " ".join(kept)


PDF_STRATEGIES: Tuple[Tuple[str, Callable[[str], str]], ...] = (
    ("text_operators", _extract_text_operators),
    ("string_literals", _extract_string_literals),
    ("stream_runs", _extract_stream_runs),
)


def clean_extracted_text(text: str) -> str:
    """
    Normalize recovered text.

    Control characters other than tab/newline are removed, horizontal
    whitespace runs become one space and line-break runs become one newline.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _CONTROL_CHARS_RE.sub("", text)
    text = re.sub(r"[^\S\n]+", " ", text)
    text = re.sub(r"\s*\n\s*", "\n", text)
    return text.strip()


def select_pdf_text(content: str) -> Tuple[str, str]:
    """
    Run the ranked strategies over decoded PDF content.

    Returns (strategy_name, raw_text) for the longest trimmed output.
    """
    best_name, best_text = PDF_STRATEGIES[0][0], ""
    for name, strategy in PDF_STRATEGIES:
        text = strategy(content).strip()
        logger.debug("PDF tier %s recovered %d chars", name, len(text))
        if len(text) > len(best_text):
            best_name, best_text = name, text
        if len(text) >= MIN_TIER_CHARS:
            break
    return best_name, best_text


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Recover plain text from raw PDF bytes.

    Raises InsufficientTextError when the winning strategy's cleaned output
    does not pass the PDF quality gate.
    """
    content = pdf_bytes.decode("latin-1")
    name, text = select_pdf_text(content)
    cleaned = clean_extracted_text(text)
    logger.debug("PDF text selected from tier %s (%d chars after cleanup)", name, len(cleaned))
    return validate_text(cleaned, kind="pdf")
