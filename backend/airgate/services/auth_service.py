"""Cookie-token authentication for reservation requests."""

from collections.abc import Iterable


class AuthenticationService:
    def __init__(self, cookie_name: str, valid_tokens: Iterable[str]):
        self.cookie_name = cookie_name
        self.valid_tokens = frozenset(valid_tokens)

    def check(self, cookie_headers: list[str] | None) -> bool:
        """True if one of the Cookie headers carries a valid auth token.

        Each header may hold several ``key=value`` pairs separated by ``;``.
        """
        if not cookie_headers:
            return False
        return any(
            key == self.cookie_name and value in self.valid_tokens
            for key, value in _cookie_pairs(cookie_headers)
        )


def _cookie_pairs(cookie_headers: list[str]):
    for header in cookie_headers:
        for pair in header.split(";"):
            pair = pair.strip()
            if "=" not in pair or len(pair) <= 2:
                continue
            key, _, value = pair.partition("=")
            yield key, value
