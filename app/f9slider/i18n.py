"""
Translation text domains.

Each domain maps to a chain of compiled gettext catalogs (.mo). Catalogs
loaded earlier take precedence: a later catalog only answers strings the
earlier ones do not translate.
"""

import gettext

from aide_frame.log import logger


class TextDomains:
    """Loaded translation catalogs, by domain."""

    def __init__(self):
        self._domains = {}

    def load(self, domain, mofile) -> bool:
        """
        Load a .mo file into domain.

        Returns:
            True if the file was loaded, False if it is missing or unreadable
        """
        try:
            with open(mofile, 'rb') as f:
                catalog = gettext.GNUTranslations(f)
        except FileNotFoundError:
            logger.debug(f"No translation file {mofile}")
            return False
        except OSError as e:
            logger.warning(f"Cannot read translation file {mofile}: {e}")
            return False

        current = self._domains.get(domain)
        if current is None:
            self._domains[domain] = catalog
        else:
            current.add_fallback(catalog)
        logger.info(f"Loaded {mofile} into textdomain {domain}")
        return True

    def unload(self, domain) -> bool:
        return self._domains.pop(domain, None) is not None

    def is_loaded(self, domain) -> bool:
        return domain in self._domains

    def translate(self, domain, text):
        catalog = self._domains.get(domain)
        if catalog is None:
            return text
        return catalog.gettext(text)

    def translate_plural(self, domain, single, plural, number):
        catalog = self._domains.get(domain)
        if catalog is None:
            return single if number == 1 else plural
        return catalog.ngettext(single, plural, number)
