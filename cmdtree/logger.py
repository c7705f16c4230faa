# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for cmdtree."""
import logging

logger: logging.Logger = logging.getLogger("cmdtree")
