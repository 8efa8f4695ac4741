# -*- coding: utf-8 -*-
"""Application constants and default paths."""
import os
from pathlib import Path


# Release feed
GITHUB_API_URL = "https://api.github.com"
DEFAULT_OWNER = "AU-Avengers"
DEFAULT_REPO = "TOU-Mira"
# Asset name must include this string
DEFAULT_MATCH = "steam-itch"

# Installation layout
DEFAULT_MOD_NAME = "toum"
DEFAULT_GAME_FOLDER = "Among Us"
DEFAULT_DOWNLOAD_DIR = Path.home() / ".steam" / "steam" / "steamapps" / "common"
VERSION_FILE_NAME = "version.txt"
SCRATCH_DIR_NAME = "tmp_extract"

# Paths (XDG locations, falling back to the usual defaults)
CONFIG_HOME = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
STATE_HOME = Path(os.environ.get("XDG_STATE_HOME") or Path.home() / ".local" / "state")
CONFIG_FILE = CONFIG_HOME / "toum-updater" / "config.json"
LOG_FILE = STATE_HOME / "toum-updater" / "toum-updater.log"

# Network timeouts & download
URL_PROBE_TIMEOUT_HEAD = 10
REQUEST_TIMEOUT = 30
CHUNK_SIZE = 8192
USER_AGENT = "toum-updater"

# Progress reporting
POLL_INTERVAL = 0.2
PROGRESS_BAR_WIDTH = 30
CANCEL_JOIN_TIMEOUT = 2.0

# Pre-flight checks
MIN_FREE_SPACE_GB = 1
