"""Symbolic names for HTTP status codes."""

from http import HTTPStatus

# Python 3.13 follows RFC 9110 names for these; keep the established ones.
_STABLE_NAMES = {
    413: "RequestEntityTooLarge",
    416: "RequestedRangeNotSatisfiable",
    422: "UnprocessableEntity",
}


def status_name(status_code: int) -> str:
    """Return the PascalCase name of an HTTP status code.

    ``400`` becomes ``"BadRequest"`` and ``503`` becomes
    ``"ServiceUnavailable"``. Codes without a registered name are rendered
    as the bare number.
    """
    if status_code in _STABLE_NAMES:
        return _STABLE_NAMES[status_code]
    try:
        name = HTTPStatus(status_code).name
    except ValueError:
        return str(status_code)
    return "".join(part.capitalize() for part in name.split("_"))


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299
