"""
Admin-side integration.

Loaded by the plugin only for admin requests. Hooks the update directory in:
it is created on 'init' and the plugin registers itself on 'selfd_register'.
"""

from aide_frame.log import logger
from aide_frame.update import UpdateDirectory


class SliderAdmin:
    """Admin component of the slider plugin."""

    def __init__(self, plugin):
        self.plugin = plugin
        self.updates = None
        plugin.hooks.add_action('init', self.includes)
        plugin.hooks.add_action('selfd_register', self.register_selfdirectory)

    def includes(self):
        """Load the update directory."""
        if self.updates is None:
            self.updates = UpdateDirectory(self.plugin.config.get("update", {}))
            logger.debug("Update directory loaded")
            self.plugin.hooks.do_action('selfd_register')

    def register_selfdirectory(self):
        """Register the plugin file for update checks."""
        self.includes()
        return self.updates.register(self.plugin.plugin_file)

    def check_for_updates(self):
        self.includes()
        if not self.updates.is_registered(self.plugin.plugin_file):
            self.register_selfdirectory()
        return self.updates.check_for_updates(self.plugin.plugin_file)
