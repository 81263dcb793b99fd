"""HTTP status code to symbolic name lookup."""

STATUS_NAMES: dict[int, str] = {
    200: "OK",
    201: "Created",
    202: "Accepted",
    204: "NoContent",
    301: "MovedPermanently",
    302: "Found",
    304: "NotModified",
    307: "TemporaryRedirect",
    308: "PermanentRedirect",
    400: "BadRequest",
    401: "Unauthorized",
    402: "PaymentRequired",
    403: "Forbidden",
    404: "NotFound",
    405: "MethodNotAllowed",
    406: "NotAcceptable",
    408: "RequestTimeout",
    500: "InternalServerError",
    502: "BadGateway",
    503: "GatewayTimeout",
}

UNKNOWN = "UNKNOWN"


def status_code(status: str | int) -> int | None:
    """Parse a status key; None for keys like 'default'."""
    if isinstance(status, bool):
        return None
    if isinstance(status, int):
        return status
    try:
        return int(str(status).strip())
    except ValueError:
        return None


def status_name(status: str | int) -> str:
    """Return the PascalCase name for *status*, or UNKNOWN."""
    code = status_code(status)
    if code is None:
        return UNKNOWN
    return STATUS_NAMES.get(code, UNKNOWN)


def is_success(status: str | int) -> bool:
    code = status_code(status)
    return code is not None and 200 <= code < 300
