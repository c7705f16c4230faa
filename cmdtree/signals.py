# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised after help or version output.

These signals interrupt parsing once the requested information has been
printed, without being treated as traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Help text was rendered.
- VersionSignal: The version string was printed.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in cmdtree.

    These are not errors. `App.run()` exits with status 0 when it sees one.
    """


class HelpSignal(FlowSignal):
    """Raised after help information was displayed."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised after the version string was displayed."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
