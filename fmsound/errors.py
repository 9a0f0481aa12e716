"""Error codes and the exception raised by the audio loading helpers."""

from __future__ import annotations

import os
import sys
from enum import Enum, auto


class AlutErrorCode(Enum):
    """Kinds of failure reported by the audio loading helpers."""

    NO_ERROR = auto()
    OUT_OF_MEMORY = auto()
    INVALID_ENUM = auto()
    INVALID_VALUE = auto()
    INVALID_OPERATION = auto()
    NO_CURRENT_CONTEXT = auto()
    AL_ERROR_ON_ENTRY = auto()
    ALC_ERROR_ON_ENTRY = auto()
    OPEN_DEVICE = auto()
    CLOSE_DEVICE = auto()
    CREATE_CONTEXT = auto()
    MAKE_CONTEXT_CURRENT = auto()
    DESTROY_CONTEXT = auto()
    GEN_BUFFERS = auto()
    BUFFER_DATA = auto()
    IO_ERROR = auto()
    UNSUPPORTED_FILE_TYPE = auto()
    UNSUPPORTED_FILE_SUBTYPE = auto()
    CORRUPT_OR_TRUNCATED_DATA = auto()


_MESSAGES = {
    AlutErrorCode.NO_ERROR: "No ALUT error found",
    AlutErrorCode.OUT_OF_MEMORY: "ALUT ran out of memory",
    AlutErrorCode.INVALID_ENUM: "ALUT was given an invalid enumeration token",
    AlutErrorCode.INVALID_VALUE: "ALUT was given an invalid value",
    AlutErrorCode.INVALID_OPERATION: "The operation was invalid in the current ALUT state",
    AlutErrorCode.NO_CURRENT_CONTEXT: "There is no current AL context",
    AlutErrorCode.AL_ERROR_ON_ENTRY: "There was already an AL error on entry to an ALUT function",
    AlutErrorCode.ALC_ERROR_ON_ENTRY: "There was already an ALC error on entry to an ALUT function",
    AlutErrorCode.OPEN_DEVICE: "There was an error opening the ALC device",
    AlutErrorCode.CLOSE_DEVICE: "There was an error closing the ALC device",
    AlutErrorCode.CREATE_CONTEXT: "There was an error creating an ALC context",
    AlutErrorCode.MAKE_CONTEXT_CURRENT: "Could not change the current ALC context",
    AlutErrorCode.DESTROY_CONTEXT: "There was an error destroying the ALC context",
    AlutErrorCode.GEN_BUFFERS: "There was an error generating an AL buffer",
    AlutErrorCode.BUFFER_DATA: "There was an error passing buffer data to AL",
    AlutErrorCode.IO_ERROR: "I/O error",
    AlutErrorCode.UNSUPPORTED_FILE_TYPE: "Unsupported file type",
    AlutErrorCode.UNSUPPORTED_FILE_SUBTYPE: "Unsupported mode within an otherwise usable file type",
    AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA: "The sound data was corrupt or truncated",
}

_UNKNOWN_MESSAGE = "An impossible ALUT error condition was reported?!?"


def error_string(code):
    """Return the human-readable message for an error code."""
    return _MESSAGES.get(code, _UNKNOWN_MESSAGE) if isinstance(code, AlutErrorCode) else _UNKNOWN_MESSAGE


class AlutError(Exception):
    """Raised when loading or decoding sound data fails."""

    def __init__(self, code):
        self.code = code
        message = error_string(code)
        super().__init__(message)
        if os.environ.get("ALUT_DEBUG") is not None:
            print(f"ALUT error: {message}", file=sys.stderr)