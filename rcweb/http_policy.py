"""HTTP response policies: CORS rules and default security headers."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CorsPolicy", "cors", "security_headers"]

_CORS_METHODS = ("GET", "POST", "PUT", "DELETE")
_CORS_HEADERS = ("Authorization", "Content-Type")
_CORS_MAX_AGE = 86_400

_SECURITY_HEADERS = (
    ("X-XSS-Protection", "0"),
    ("Strict-Transport-Security", "max-age=31536000 ; includeSubDomains"),
    ("X-Frame-Options", "deny"),
    ("X-Content-Type-Options", "nosniff"),
    ("Content-Security-Policy", "default-src 'self'; frame-ancestors 'none';"),
    ("Cache-Control", "no-cache, no-store, max-age=0, must-revalidate"),
    ("Pragma", "no-cache"),
    ("Expires", "0"),
)


@dataclass(frozen=True)
class CorsPolicy:
    """Cross-origin rules for a single allowed client origin."""

    allowed_origin: str
    allowed_methods: tuple[str, ...] = _CORS_METHODS
    allowed_headers: tuple[str, ...] = _CORS_HEADERS
    supports_credentials: bool = True
    max_age: int = _CORS_MAX_AGE

    def allows_origin(self, origin: str) -> bool:
        """Whether requests from ``origin`` are permitted."""
        return origin == self.allowed_origin

    def allows_method(self, method: str) -> bool:
        """Whether the (case-sensitive) HTTP ``method`` is permitted."""
        return method in self.allowed_methods

    def allows_header(self, header: str) -> bool:
        """Whether the request header ``header`` is permitted (case-insensitive)."""
        wanted = header.lower()
        return any(wanted == allowed.lower() for allowed in self.allowed_headers)

    def response_headers(self, origin: str) -> dict[str, str]:
        """CORS headers to send back to ``origin``; empty when it is not allowed."""
        if not self.allows_origin(origin):
            return {}
        headers = {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": ", ".join(self.allowed_methods),
            "Access-Control-Allow-Headers": ", ".join(
                header.lower() for header in self.allowed_headers
            ),
            "Access-Control-Max-Age": str(self.max_age),
            "Vary": "Origin",
        }
        if self.supports_credentials:
            headers["Access-Control-Allow-Credentials"] = "true"
        return headers


def cors(client_origin_url: str) -> CorsPolicy:
    """Build the CORS policy for the given client origin."""
    return CorsPolicy(allowed_origin=client_origin_url)


def security_headers() -> dict[str, str]:
    """Return the default security headers added to every response."""
    return dict(_SECURITY_HEADERS)