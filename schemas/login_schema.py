"""Login request payload and its validation rules."""
from typing import List, NamedTuple, Optional, Set

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict

EMAIL_REQUIRED = "Email is required."
EMAIL_MALFORMED = "must be a well-formed email address"
PASSWORD_REQUIRED = "Password is required."

_FIELD_ORDER = ("email", "password")


class FieldError(NamedTuple):
    field: str
    message: str


def _sort_key(error: FieldError):
    position = _FIELD_ORDER.index(error.field) if error.field in _FIELD_ORDER else len(_FIELD_ORDER)
    return position, error.message


class ValidationError(ValueError):
    """One or more field-level validation failures."""

    def __init__(self, errors):
        self.errors: List[FieldError] = sorted(errors, key=_sort_key)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))

    def to_dict(self) -> List[dict]:
        return [{"field": e.field, "message": e.message} for e in self.errors]


class LoginRequest(BaseModel):
    """
    Credentials submitted to the login endpoint. Immutable once built.

    Missing or null fields are accepted here and reported by
    validate_login_request, so every field gets its own message.
    """
    model_config = ConfigDict(frozen=True)

    email: Optional[str] = None
    password: Optional[str] = None


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def _neutral_top_label(address: str) -> str:
    # Reserved names like localhost are well-formed; only their syntax is judged
    local, at, domain = address.rpartition("@")
    if not at:
        return address
    labels = domain.split(".")
    if labels[-1].lower() in SPECIAL_USE_DOMAIN_NAMES:
        labels[-1] = "x" * len(labels[-1])
    return local + "@" + ".".join(labels)


def _is_well_formed_email(value: str) -> bool:
    try:
        validate_email(
            _neutral_top_label(value),
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def validate_login_request(request: LoginRequest) -> Set[FieldError]:
    """
    Evaluate every rule on ``request`` and return all violations.

    Rules are independent: a malformed email is reported whether or not the
    password is present, and a blank email only reports the required message.
    """
    errors = set()

    if _is_blank(request.email):
        errors.add(FieldError("email", EMAIL_REQUIRED))
    elif not _is_well_formed_email(request.email):
        errors.add(FieldError("email", EMAIL_MALFORMED))

    if _is_blank(request.password):
        errors.add(FieldError("password", PASSWORD_REQUIRED))

    return errors


def ensure_valid_login(request: LoginRequest) -> LoginRequest:
    """Return ``request`` unchanged or raise ValidationError listing every failure."""
    errors = validate_login_request(request)
    if errors:
        raise ValidationError(errors)
    return request
