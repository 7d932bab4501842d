"""Canonical user-facing error messages.

Form layers display these strings next to fields whose text could not be
turned into a value, so they are kept short and free of technical detail.
"""

INVALID_VALUE = "Invalid value"
