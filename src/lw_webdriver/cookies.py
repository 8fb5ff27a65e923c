"""Cookie value object."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Cookie:
    name: str
    value: str
    domain: Optional[str] = None
    path: Optional[str] = None
    secure: Optional[bool] = None
    http_only: Optional[bool] = None
    expiry: Optional[int] = None
    same_site: Optional[str] = None

    def to_json(self) -> dict:
        """Wire shape; unset optional fields are omitted so the driver applies its defaults."""
        data = {"name": self.name, "value": self.value}
        optional = {
            "domain": self.domain,
            "path": self.path,
            "secure": self.secure,
            "httpOnly": self.http_only,
            "expiry": self.expiry,
            "sameSite": self.same_site,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data

    @classmethod
    def from_json(cls, data) -> Optional["Cookie"]:
        """Parse one serialized cookie; None when name or value is missing."""
        if not isinstance(data, dict):
            return None
        name = data.get("name")
        value = data.get("value")
        if not isinstance(name, str) or not isinstance(value, str):
            return None
        expiry = data.get("expiry")
        return cls(
            name=name,
            value=value,
            domain=data.get("domain"),
            path=data.get("path"),
            secure=data.get("secure"),
            http_only=data.get("httpOnly"),
            expiry=int(expiry) if isinstance(expiry, (int, float)) and not isinstance(expiry, bool) else None,
            same_site=data.get("sameSite"),
        )


__all__ = ["Cookie"]
