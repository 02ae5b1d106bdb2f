"""
Per-request context.

Carries what the renderer and the bootstrap need to know about the current
request: which kind of request it is, the locale, and the URL being viewed.
"""

from dataclasses import dataclass


@dataclass
class RequestContext:
    is_admin: bool = False
    doing_ajax: bool = False
    doing_cron: bool = False
    locale: str = "en_US"
    user_locale: str = ""
    current_url: str = ""

    def determine_locale(self) -> str:
        """Admin requests use the user's locale when one is set."""
        if self.is_admin and self.user_locale:
            return self.user_locale
        return self.locale
