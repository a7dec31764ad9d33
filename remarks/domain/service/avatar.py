"""Avatar URLs for commenters."""

import hashlib
from html import escape
from urllib.parse import quote, urlencode

# Gravatar mirror reachable from mainland China
GRAVATAR_BASE_URL = "https://gravatar.loli.net/avatar"

AVATAR_COLORS = [
    "6366f1",
    "8b5cf6",
    "ec4899",
    "f43f5e",
    "f97316",
    "eab308",
    "22c55e",
    "14b8a6",
    "0ea5e9",
    "3b82f6",
]


def gravatar_url(email: str, size: int = 80) -> str:
    """Gravatar URL for an email, falling back to a generated retro face."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE_URL}/{digest}?{urlencode({'s': size, 'd': 'retro'})}"


def initial_avatar_url(nickname: str, size: int = 80) -> str:
    """Inline SVG avatar showing the nickname's initial.

    The background colour is picked from the first character so the same
    nickname always gets the same colour.
    """
    initial = escape(nickname.strip()[:1].upper() or "?")
    index = ord(nickname[0]) % len(AVATAR_COLORS) if nickname else 0
    color = AVATAR_COLORS[index]
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size} {size}" '
        f'width="{size}" height="{size}">'
        f'<rect width="{size}" height="{size}" fill="#{color}"/>'
        f'<text x="50%" y="50%" dominant-baseline="central" text-anchor="middle" '
        f'font-size="{size * 0.45:g}" fill="white" '
        f'font-family="system-ui, -apple-system, sans-serif" font-weight="600">'
        f"{initial}</text></svg>"
    )
    return f"data:image/svg+xml,{quote(svg, safe='')}"


def avatar_url(email: str | None, nickname: str, size: int = 80) -> str:
    """Gravatar when an email is known, otherwise the initial avatar."""
    if email and "@" in email:
        return gravatar_url(email, size)
    return initial_avatar_url(nickname, size)
