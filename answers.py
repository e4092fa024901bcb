from __future__ import annotations

import math
import re
from typing import Any, Optional

from sympy import Pow, nan, oo, postorder_traversal, zoo
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from config import ANSWER_LEN_LIMIT, ANSWER_TOLERANCE

# --- Validation --------------------------------------------------------------------
_REQUIRED_MSG = "Please enter an answer"
_TOO_LONG_MSG = f"Answer too long (> {ANSWER_LEN_LIMIT})."
_INVALID_CHARS_MSG = (
    "Only numbers using digits, spaces, + - * / ^ . , and parentheses are allowed."
)
_NON_FINITE_MSG = "Answer is not a finite number (e.g., division by zero)."
_TOO_COMPLEX_MSG = "Answer is too complex."
_ALLOWED_RE = re.compile(r"^[0-9+\-*/^().,\s]+$")
_PLAIN_NUMBER_RE = re.compile(r"^\s*[+-]?\d+(\.\d+)?\s*$")

TRANSFORMS = standard_transformations + (
    convert_xor,
    implicit_multiplication_application,
)

# Hard stops that never bite a real answer
_MAX_OPS = 200
_MAX_INT_DIGITS = 200
_MAX_EXPONENT_ABS = 2000


class AnswerError(ValueError):
    """Raw answer text that cannot be turned into a number."""


def validate_answer_text(s: Any) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return _REQUIRED_MSG
    if len(s) > ANSWER_LEN_LIMIT:
        return _TOO_LONG_MSG
    if _ALLOWED_RE.fullmatch(s) is None:
        return _INVALID_CHARS_MSG
    return None


def _normalize(s: str) -> str:
    s = s.strip()
    # "2,5" is how a Swedish keypad types 2.5
    if "," in s and "." not in s:
        s = s.replace(",", ".")
    return s


def _assert_not_too_complex(expr: Any) -> None:
    """
    Reject answers whose exact evaluation would blow up, like "9^9^9".
    Works on the unevaluated tree, children before parents, so an exponent is
    known to be small before anything raised to it is looked at.
    """
    if expr.count_ops() > _MAX_OPS:
        raise AnswerError(_TOO_COMPLEX_MSG)
    for node in postorder_traversal(expr):
        if node.is_Integer and len(str(abs(int(node)))) > _MAX_INT_DIGITS:
            raise AnswerError(_TOO_COMPLEX_MSG)
        if not isinstance(node, Pow):
            continue
        try:
            exp = abs(float(node.exp))
            base = abs(float(node.base))
        except (TypeError, ValueError, OverflowError) as e:
            raise AnswerError(_TOO_COMPLEX_MSG) from e
        if not math.isfinite(exp) or exp > _MAX_EXPONENT_ABS:
            raise AnswerError(_TOO_COMPLEX_MSG)
        # digits of the result, roughly
        if base > 1 and (not math.isfinite(base) or exp * math.log10(base) > _MAX_INT_DIGITS):
            raise AnswerError(_TOO_COMPLEX_MSG)


def parse_answer(text: str) -> float:
    """
    Turn the typed answer into a float. Plain numbers skip SymPy; anything
    else ("7/2", "-(3)") goes through the parser.
    Raises AnswerError with a user-facing message.
    """
    msg = validate_answer_text(text)
    if msg:
        raise AnswerError(msg)

    s = _normalize(text)
    if _PLAIN_NUMBER_RE.fullmatch(s):
        return float(s)

    try:
        raw = parse_expr(s, transformations=TRANSFORMS, evaluate=False)
    except Exception as e:
        raise AnswerError(_INVALID_CHARS_MSG) from e
    if isinstance(raw, tuple):
        raise AnswerError(_INVALID_CHARS_MSG)
    _assert_not_too_complex(raw)

    sym = parse_expr(s, transformations=TRANSFORMS, evaluate=True)

    if isinstance(sym, tuple):
        raise AnswerError(_INVALID_CHARS_MSG)
    if sym in (oo, -oo, zoo, nan) or getattr(sym, "is_finite", None) is False:
        raise AnswerError(_NON_FINITE_MSG)
    try:
        val = float(sym.evalf())
    except (AttributeError, TypeError, ValueError) as e:
        raise AnswerError(_INVALID_CHARS_MSG) from e
    if not math.isfinite(val):
        raise AnswerError(_NON_FINITE_MSG)
    return val


def is_correct(expected: float, given: float, tol: float = ANSWER_TOLERANCE) -> bool:
    return abs(float(expected) - float(given)) < tol


def num_to_clean_str(x: float) -> str:
    if math.isfinite(x) and abs(x - round(x)) < 1e-12:
        return str(int(round(x)))
    return str(x)
