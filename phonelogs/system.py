"""API systems (base URLs) phonelogs can talk to."""

import os
from dataclasses import dataclass

API_URL_ENV = "PHONELOGS_API_URL"


@dataclass(frozen=True)
class System:
    """A named API deployment.

    Attributes:
        name: Short label for the deployment, e.g. ``"PROD"``.
        api_url: Base URL every resource path is joined to. Always ends with ``/``.
    """

    name: str
    api_url: str

    def __post_init__(self) -> None:
        if not self.api_url.endswith("/"):
            object.__setattr__(self, "api_url", self.api_url + "/")

    def url_for(self, path: str) -> str:
        """Join a resource path (e.g. ``phone/call_logs``) to the base URL."""
        return self.api_url + path.lstrip("/")


PROD = System("PROD", "https://api.zoom.us/v2/")


def get_system() -> System:
    """Return the system to use by default.

    `PROD` unless the ``PHONELOGS_API_URL`` environment variable is set.
    """
    api_url = os.environ.get(API_URL_ENV)
    if api_url:
        return System("CUSTOM", api_url)
    return PROD
