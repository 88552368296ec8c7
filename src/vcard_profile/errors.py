from __future__ import annotations


class VCardProfileError(Exception):
    """Base class for every error raised by vcard_profile."""


class MalformedComplexAttributeError(VCardProfileError, ValueError):
    """A complex field carried fewer sub-values than it has sub-field names."""

    def __init__(self, attribute: str, raw_value: str, expected: int, found: int):
        self.attribute = attribute
        self.raw_value = raw_value
        self.expected = expected
        self.found = found
        super().__init__(
            f"complex attribute {attribute!r} expects {expected} value(s), "
            f"got {found}: {raw_value!r}"
        )


class ExtensionRecordError(VCardProfileError, ValueError):
    """An extension property value could not be split into its sub-values."""

    def __init__(self, raw_value: str, reason: str):
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"{reason}: {raw_value!r}")


class ConfigurationFileError(VCardProfileError):
    """A mapping configuration file is unreadable or has the wrong shape."""
