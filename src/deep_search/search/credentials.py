"""Resolution of per-call credentials against process defaults."""

from pydantic import SecretStr

from ..errors import MissingCredentials
from ..models.params import Credentials


def resolve_credentials(
    explicit: Credentials | None,
    default: Credentials | None,
) -> Credentials:
    """Resolve the credentials for one invocation.

    Explicit per-call values take precedence field by field over the process
    defaults.

    Raises:
        MissingCredentials: If the API key or search engine ID is still empty
    """
    explicit = explicit or Credentials()
    default = default or Credentials()

    api_key = explicit.api_key if _filled(explicit.api_key) else default.api_key
    cx = explicit.cx or default.cx

    if not _filled(api_key):
        raise MissingCredentials(
            "GOOGLE_API_KEY is required (provide via environment variable or request parameter)"
        )
    if not cx:
        raise MissingCredentials(
            "GOOGLE_CX is required (provide via environment variable or request parameter)"
        )

    return Credentials(api_key=api_key, cx=cx)


def _filled(secret: SecretStr | None) -> bool:
    return secret is not None and bool(secret.get_secret_value())
