# topmark:header:start
#
#   project      : Implementor
#   file         : exit_codes.py
#   file_relpath : src/implementor/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the Implementor CLI application.

The values follow the BSD ``sysexits.h`` conventions where one applies, so
scripts can tell a bad type reference from a failed compile:

```python
import subprocess
from implementor.cli.exit_codes import ExitCode

result = subprocess.run(["implementor", "archive", "pkg.mod:Api", "api.zip"])
if result.returncode == ExitCode.TYPE_NOT_FOUND:
    print("No such type.")
elif result.returncode == ExitCode.COMPILATION_ERROR:
    print("The generated implementation does not compile.")
```

Click's own usage errors (unknown option, missing argument) exit with 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Implementor CLI.

    Attributes:
        SUCCESS (int): Generation succeeded.
        FAILURE (int): Unspecified failure.
        USAGE_ERROR (int): Invalid option values.
        GENERATION_ERROR (int): The type cannot be implemented (not an
            interface, private, or referencing private types).
        TYPE_NOT_FOUND (int): The type reference does not resolve.
        TOOLCHAIN_UNAVAILABLE (int): No Python interpreter to compile with.
        COMPILATION_ERROR (int): The generated unit failed to compile or verify.
        IO_ERROR (int): Source, workspace or archive could not be written.
        CONFIG_ERROR (int): A configuration file could not be loaded.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    GENERATION_ERROR = 65  # EX_DATAERR
    TYPE_NOT_FOUND = 66  # EX_NOINPUT
    TOOLCHAIN_UNAVAILABLE = 69  # EX_UNAVAILABLE
    COMPILATION_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
