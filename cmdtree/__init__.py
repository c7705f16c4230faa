"""
cmdtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .app import App
from .help import format_help, render_help
from .parser import Coercion, Command, Fixed, Operand, Option, Transform
from .version import __version__

logger = logging.getLogger("cmdtree")


__all__ = [
    "App",
    "Coercion",
    "Command",
    "Fixed",
    "Operand",
    "Option",
    "Transform",
    "format_help",
    "render_help",
    "__version__",
]
