"""Configuration management for GearboxEditor"""

import os
import json
import logging
from utils.logger import loggerRaise
from constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_SNAP_ENABLED, DEFAULT_SHOW_GRID


class ConfigMixin:
	"""Persisted editor preferences (snapping and grid visibility)"""

	def _init_config_paths(self, config_dir=None):
		"""Set config_dir/config_file; defaults to a folder in the user's home"""
		self.config_dir = config_dir or os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME)
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		self.snap_enabled = DEFAULT_SNAP_ENABLED
		self.show_grid = DEFAULT_SHOW_GRID

	def _load_config(self):
		"""Load settings from config file, keeping defaults for missing keys"""
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					config = json.load(f)
					self.snap_enabled = bool(config.get('snap_enabled', DEFAULT_SNAP_ENABLED))
					self.show_grid = bool(config.get('show_grid', DEFAULT_SHOW_GRID))
				logging.getLogger('GearboxEditor').debug("Loaded config from %s", self.config_file)
		except Exception as e:
			loggerRaise(e, "Error loading config")

	def _save_config(self):
		"""Save settings to config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)

			config = {
				'snap_enabled': self.snap_enabled,
				'show_grid': self.show_grid,
			}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
