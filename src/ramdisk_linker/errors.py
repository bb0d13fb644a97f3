from __future__ import annotations


class RamdiskLinkerError(Exception):
    """Base for errors that abort a redirect before the build starts."""


class ExtensionAlreadyInstalledError(RamdiskLinkerError):
    pass


class UnsafeRedirectPathError(RamdiskLinkerError):
    pass


class OptionsError(RamdiskLinkerError, ValueError):
    pass
