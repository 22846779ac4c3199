"""
Interpretation of raw vPIC decode results.

vPIC answers every DecodeVinValues call with a flat mapping of named
vehicle elements plus status fields (ErrorCode, ErrorText, SuggestedVIN...).
This module decides whether that mapping is a usable decode and reshapes it
into a SearchByVinResultDto: canonical make/model/year plus a camelCased
attribute bag of everything else.

Pure functions only: no I/O, no logging.
"""

import math
import re
from collections.abc import Mapping
from typing import Any, Literal

from app.errors import SearchByVinError
from app.schemas.vpic import SearchByVinResultDto

VehicleElements = Mapping[str, Any]
EmptyPolicy = Literal["zero", "omit"]

IDENTITY_ELEMENTS = ("Make", "MakeId", "Model", "ModelId", "ModelYear")

# Never copied into the attribute bag
EXCLUDED_ELEMENTS = frozenset(
    {
        "Make",
        "MakeId",
        "Model",
        "ModelId",
        "ModelYear",
        "ErrorCode",
        "SuggestedVIN",
        "ErrorText",
        "ErrorCodeId",
        "PossibleValues",
        "AdditionalErrorText",
    }
)

SUCCESS_ERROR_CODE = "0"

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def camel_case(key: str) -> str:
    """
    Convert a vPIC element name to camelCase.

    Words are split on spaces/punctuation, case changes, acronym runs and
    digit runs: "Transmission Style" -> "transmissionStyle",
    "EngineHP" -> "engineHp", "DisplacementL" -> "displacementL".
    """
    words = _WORD_RE.findall(key)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in rest)


def coerce_attribute_value(raw: Any) -> str | int | float:
    """
    Coerce a raw element value to text or a number.

    Numbers pass through. Text that is a plain decimal literal becomes an
    int (or float when it has a fraction/exponent); any other text is kept.
    Empty or blank text and None become 0.
    """
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        return raw
    if raw is None:
        return 0
    text = str(raw).strip()
    if not text:
        return 0
    if not _NUMBER_RE.match(text):
        return str(raw)
    if "." not in text and "e" not in text.lower():
        return int(text)
    number = float(text)
    if not math.isfinite(number):
        return str(raw)
    return number


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_empty(value: Any) -> bool:
    # whitespace-only text still counts as a value here
    return value is None or value == ""


def _present(elements: VehicleElements, key: str) -> bool:
    return not _is_empty(elements.get(key))


def build_attributes(elements: VehicleElements, empty: EmptyPolicy = "zero") -> dict[str, str | int | float]:
    """Attribute bag: every non-excluded element, camelCased and coerced."""
    attributes: dict[str, str | int | float] = {}
    for key, value in elements.items():
        if key in EXCLUDED_ELEMENTS:
            continue
        if empty == "omit" and _is_blank(value):
            continue
        attributes[camel_case(key)] = coerce_attribute_value(value)
    return attributes


def parse_error_text(error_text: str | None) -> str | None:
    """
    Extract the message part of a "<code> - <message>" ErrorText.

    Everything after the first hyphen is the message. Text without a hyphen
    is returned whole (trimmed).
    """
    if error_text is None:
        return None
    _, sep, message = error_text.partition("-")
    return (message if sep else error_text).strip()


def capitalize_make(make: str) -> str:
    """Lower-case everything, then upper-case the first letter ("FORD" -> "Ford")."""
    lowered = make.lower()
    return lowered[:1].upper() + lowered[1:]


def _to_int(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int(str(value).strip())


def _missing_identity(vin: str, elements: VehicleElements) -> SearchByVinError:
    data: dict[str, Any] = {"vin": vin}
    if "ErrorCode" in elements and elements["ErrorCode"] is not None:
        data["errorCode"] = elements["ErrorCode"]
    data["errorText"] = parse_error_text(elements["ErrorText"]) if _present(elements, "ErrorText") else None
    return SearchByVinError("Failed to decode VIN", SearchByVinError.MISSING_IDENTITY, data)


def normalize_vin_decode(vin: str, elements: VehicleElements, empty: EmptyPolicy = "zero") -> SearchByVinResultDto:
    """
    Turn a raw decode into a SearchByVinResultDto or raise SearchByVinError.

    A decode is usable only when all identity elements (Make, MakeId, Model,
    ModelId, ModelYear) are non-empty, and then only if ErrorCode is "0" or
    the provider suggested a corrected VIN.
    """
    if not all(_present(elements, key) for key in IDENTITY_ELEMENTS):
        raise _missing_identity(vin, elements)

    suggested_vin = elements.get("SuggestedVIN")
    has_suggestion = not _is_empty(suggested_vin)

    if elements.get("ErrorCode") != SUCCESS_ERROR_CODE and not has_suggestion:
        raise SearchByVinError("Failed to decode VIN", SearchByVinError.REJECTED_STATUS, {"vin": vin})

    try:
        make_id = _to_int(elements["MakeId"])
        model_id = _to_int(elements["ModelId"])
        year = _to_int(elements["ModelYear"])
    except ValueError:
        raise _missing_identity(vin, elements) from None

    return SearchByVinResultDto(
        vin=vin,
        suggested_vin=suggested_vin if has_suggestion else None,
        make_id=make_id,
        make=capitalize_make(str(elements["Make"])),
        model_id=model_id,
        model=str(elements["Model"]),
        year=year,
        attributes=build_attributes(elements, empty),
    )
