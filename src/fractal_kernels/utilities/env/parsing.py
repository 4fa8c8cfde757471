import os


def _coerce_int(env_var: str, raw: str, minimum: int | None) -> int:
    try:
        parsed = int(raw)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional lower bound."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return _coerce_int(env_var, value, minimum)


def _env_optional_int(env_var: str, *, minimum: int | None = None) -> int | None:
    """Return the integer value of ``env_var``, or ``None`` when unset or blank."""

    value = os.environ.get(env_var)
    if value is None or value.strip() == "":
        return None
    return _coerce_int(env_var, value, minimum)
