"""Configuration management for the PFP editor"""

import os
import json
import logging

from pfp_editor.utils.logger import loggerRaise
from pfp_editor.constants import CONFIG_FILE_NAME
from pfp_editor.utils.path_resolver import get_config_dir

logger = logging.getLogger(__name__)

CONFIG_KEYS = ('last_open_dir', 'last_export_dir', 'assets_dir')


class ConfigMixin:
	"""Config file operations: remembered directories and the assets override"""

	def _init_config(self, config_dir=None):
		"""Set config paths and defaults, then load the file if there is one"""
		self.config_dir = str(config_dir) if config_dir else str(get_config_dir())
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		for key in CONFIG_KEYS:
			setattr(self, key, None)
		self._load_config()

	def _load_config(self):
		"""Load settings from config file. Missing or corrupt files keep the defaults."""
		if not os.path.exists(self.config_file):
			return
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				config = json.load(f)
		except (OSError, ValueError) as e:
			logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
			return
		if not isinstance(config, dict):
			logger.warning("Ignoring malformed config %s", self.config_file)
			return

		for key in CONFIG_KEYS:
			value = config.get(key)
			setattr(self, key, value if isinstance(value, str) and value else None)

		# Forget remembered directories that no longer exist
		for key in ('last_open_dir', 'last_export_dir'):
			if getattr(self, key) and not os.path.isdir(getattr(self, key)):
				setattr(self, key, None)

	def _save_config(self):
		"""Save settings to config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)

			config = {key: getattr(self, key) for key in CONFIG_KEYS if getattr(self, key)}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except OSError as e:
			loggerRaise(e, "Error saving config")
