from pydantic import ValidationError


def describe_validation_error(exc: ValidationError) -> str:
    """First error of a pydantic ValidationError as a short, user facing message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    msg = first.get("msg", "Invalid value")
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    if not loc or msg == "Name is required":
        return msg
    return f"{'.'.join(loc)}: {msg}"
