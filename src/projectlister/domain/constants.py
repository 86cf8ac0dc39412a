from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed strings and identifiers shared by the core, the
adapters and the command-line host.
"""

APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

SEPARATOR_CHAR = "-"
SEPARATOR_WIDTH = 80
NO_ACTIVE_DOCUMENT = "There is no active document"

# Visual Studio project type GUID for solution folders
SOLUTION_FOLDER_TYPE_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"

# Snapshot "kind" values treated as organizational containers
CONTAINER_KIND_ALIASES = frozenset({"container", "solution_folder", "solutionfolder", "folder"})
