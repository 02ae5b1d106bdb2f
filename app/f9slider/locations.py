"""
Theme slider locations.

A location is a named slot in a theme ("header", "front-page") where a slider
may be shown. Themes register the locations they offer; site configuration
assigns a slider to each location.
"""

from aide_frame.log import logger

FEATURE = "image-sliders"


class ThemeFeatures:
    """Set of features the active theme declares support for."""

    def __init__(self):
        self._features = set()

    def add(self, feature):
        self._features.add(feature)

    def remove(self, feature) -> bool:
        if feature in self._features:
            self._features.discard(feature)
            return True
        return False

    def supports(self, feature) -> bool:
        return feature in self._features


class LocationRegistry:
    """Registered slider locations and their slider assignments."""

    def __init__(self, features=None):
        self.features = features if features is not None else ThemeFeatures()
        self._locations = {}
        self._assignments = {}

    def register(self, locations=None):
        """
        Register slider locations for the theme.

        Args:
            locations: Mapping of location slug to descriptive label. Keys
                       already registered are overwritten, others are kept.
        """
        self.features.add(FEATURE)
        self._locations.update(locations or {})
        logger.debug(f"Registered slider locations: {', '.join(self._locations) or '-'}")

    def unregister(self, location) -> bool:
        """
        Unregister one slider location.

        Returns:
            True if the location was registered, False otherwise
        """
        if location not in self._locations:
            return False
        del self._locations[location]
        if not self._locations:
            self.features.remove(FEATURE)
        return True

    def registered(self) -> dict:
        return dict(self._locations)

    def assign(self, location, slider):
        """Assign a slider reference (id, slug, name) to a location."""
        self._assignments[location] = slider

    def assigned(self) -> dict:
        return dict(self._assignments)


__all__ = [
    'FEATURE',
    'ThemeFeatures',
    'LocationRegistry',
]
