# topmark:header:start
#
#   project      : HyprConf
#   file         : exit_codes.py
#   file_relpath : src/hyprconf/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the HyprConf CLI.

HyprConf aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `WOULD_CHANGE=2`,
used by editing commands run without ``--apply`` when the file would change. Click's own
usage errors also exit with 2, so tests must assert `result.exception is None` to tell
the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the HyprConf CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, e.g. settings that fail validation.
        WOULD_CHANGE: Dry-run: the file would change if ``--apply`` were set.
        USAGE_ERROR: Invalid arguments such as a malformed key path. Mirrors BSD
            ``EX_USAGE (64)``.
        ENCODING_ERROR: The config file is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: The config file (or HyprConf's settings file) cannot be parsed.
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
