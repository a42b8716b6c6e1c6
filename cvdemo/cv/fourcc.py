"""
Four-character codec identifiers for cv2.VideoWriter.
"""

import cv2

from .errors import FourCCError


class FourCC:
    """A codec identifier such as "DIVX", "XVID" or "MJPG"."""

    def __init__(self, code: str):
        if not isinstance(code, str) or len(code) != 4:
            raise FourCCError(f"FourCC must be exactly 4 characters, got {code!r}")
        self.code = code

    def to_int(self) -> int:
        """Pack the code the way OpenCV expects it."""
        return cv2.VideoWriter_fourcc(*self.code)

    @classmethod
    def from_int(cls, value) -> "FourCC":
        """Decode a packed value, e.g. as reported by CAP_PROP_FOURCC."""
        value = int(value)
        return cls("".join([chr((value >> 8 * i) & 0xFF) for i in range(4)]))

    def __eq__(self, other):
        if isinstance(other, FourCC):
            return self.code == other.code
        return NotImplemented

    def __hash__(self):
        return hash(self.code)

    def __str__(self):
        return self.code

    def __repr__(self):
        return f"FourCC({self.code!r})"
