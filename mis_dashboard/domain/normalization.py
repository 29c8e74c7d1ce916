"""Key normalization and lenient numeric parsing for backend values."""
from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[_\s-]")
_ASSEMBLY_TOKENS = re.compile(r"ASSM|ASSLY|ASSY|ASSEMBLY")
_NON_NUMERIC = re.compile(r"[^0-9.-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def normalize_key(raw: object) -> str:
    """Canonical join key for a category label.

    ``"bogie_assly"``, ``"BOGIE-ASSY"`` and ``"Bogie Assembly"`` all map to
    ``"BOGIE"``; ``"D_GEAR"`` maps to ``"DRAFTGEAR"``.
    """
    if raw is None or raw == "":
        return ""
    key = _SEPARATORS.sub("", str(raw).upper())
    # Removing one token can splice another together ("ASASSYSY").
    stripped = _ASSEMBLY_TOKENS.sub("", key)
    while stripped != key:
        key = stripped
        stripped = _ASSEMBLY_TOKENS.sub("", key)
    return key.replace("DGEAR", "DRAFTGEAR")


def to_float(value: object) -> float:
    """Parse values such as ``"12.5/pc"`` or ``"-3.2kg"``; anything unparseable is 0."""
    if not value:
        return 0.0
    head = str(value).split("/", 1)[0]
    cleaned = _NON_NUMERIC.sub("", head)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group(0))
