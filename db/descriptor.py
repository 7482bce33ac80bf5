"""Value object holding the settings needed to open a connection."""

import re
from dataclasses import dataclass
from typing import Dict

_MASK = "****"

# user:secret@host in URLs (up to the last @) and PWD=secret or PWD={se;cret} in ODBC strings
_URL_PASSWORD_RE = re.compile(r"(//[^:/@]+:).*@(?=[^@]*$)")
_ODBC_PASSWORD_RE = re.compile(r"(\bPWD=)(?:\{(?:[^}]|\}\})*\}|[^;]*)", re.IGNORECASE)


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Driver, URL and credentials read from a properties file."""

    driver: str
    url: str
    username: str = ""
    password: str = ""

    def __repr__(self) -> str:
        password = _MASK if self.password else ""
        return (
            f"ConnectionDescriptor(driver={self.driver!r}, url={self.redacted_url()!r}, "
            f"username={self.username!r}, password={password!r})"
        )

    def redacted_url(self) -> str:
        """Return the URL with any embedded password masked."""
        url = _URL_PASSWORD_RE.sub(rf"\g<1>{_MASK}@", self.url)
        return _ODBC_PASSWORD_RE.sub(rf"\g<1>{_MASK}", url)

    def as_dict(self, mask_password: bool = False) -> Dict[str, str]:
        if not mask_password:
            return {
                "driver": self.driver,
                "url": self.url,
                "username": self.username,
                "password": self.password,
            }
        return {
            "driver": self.driver,
            "url": self.redacted_url(),
            "username": self.username,
            "password": _MASK if self.password else "",
        }
