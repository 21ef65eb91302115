# topmark:header:start
#
#   project      : Implementor
#   file         : compiler.py
#   file_relpath : src/implementor/toolchain/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte-compile a generated unit with an external Python interpreter.

The interpreter runs as a child process so that the generated code is compiled
(and optionally imported) in a clean environment whose ``PYTHONPATH`` is the
code-source root of the implemented interface. It blocks until the child exits.

The child process:

1. byte-compiles the source with ``py_compile`` (unchecked-hash ``.pyc``, so the
   artifact does not depend on the source file's timestamp);
2. when verification is enabled, loads the generated module and checks that the
   generated class subclasses the interface and leaves nothing abstract.

Any non-zero exit is a ``COMPILATION_FAILURE``; failing to start the
interpreter is ``TOOLCHAIN_UNAVAILABLE``.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from implementor.config.logging import get_logger
from implementor.constants import COMPILED_EXTENSION
from implementor.core.errors import ErrorKind, ImplementorError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from implementor.config.logging import ImplementorLogger
    from implementor.introspection.types import TargetType

logger: ImplementorLogger = get_logger(__name__)

_COMPILE_SCRIPT: Final[str] = textwrap.dedent(
    """\
    import functools
    import importlib
    import importlib.util
    import inspect
    import py_compile
    import sys

    source, cfile, module, name, target_module, target_qualname, verify = sys.argv[1:8]
    py_compile.compile(
        source,
        cfile=cfile,
        doraise=True,
        invalidation_mode=py_compile.PycInvalidationMode.UNCHECKED_HASH,
    )
    if verify == "1":
        spec = importlib.util.spec_from_file_location(module, source)
        generated = importlib.util.module_from_spec(spec)
        sys.modules[module] = generated
        spec.loader.exec_module(generated)
        impl = getattr(generated, name)
        target = functools.reduce(
            getattr, target_qualname.split("."), importlib.import_module(target_module)
        )
        if target not in impl.__mro__:
            sys.exit(f"{name} is not a subclass of {target_module}.{target_qualname}")
        if inspect.isabstract(impl):
            missing = ", ".join(sorted(impl.__abstractmethods__))
            sys.exit(f"{name} leaves abstract members unimplemented: {missing}")
    """
)

# Lines of child stderr kept in the error message.
_STDERR_TAIL: Final[int] = 20


@dataclass(frozen=True)
class PythonToolchain:
    """A located Python interpreter used to compile generated units.

    Attributes:
        executable (str): Absolute path of the interpreter.
        verify (bool): Whether to import-check the compiled unit.
    """

    executable: str
    verify: bool = True

    @classmethod
    def locate(cls, python: str | None = None, *, verify: bool = True) -> PythonToolchain:
        """Find the interpreter to use.

        Args:
            python (str | None): Interpreter name or path; the running
                interpreter when None.
            verify (bool): Whether to import-check compiled units.

        Returns:
            PythonToolchain: The located toolchain.

        Raises:
            ImplementorError: ``TOOLCHAIN_UNAVAILABLE`` if no interpreter is found.
        """
        candidate = python or sys.executable
        executable = shutil.which(candidate) if candidate else None
        if executable is None:
            raise ImplementorError(
                ErrorKind.TOOLCHAIN_UNAVAILABLE,
                f"Could not find a Python interpreter ({candidate or 'none configured'})",
            )
        logger.debug("Using Python interpreter %s", executable)
        return cls(executable=executable, verify=verify)

    def compile(
        self,
        source: Path,
        *,
        target: TargetType,
        suffix: str,
        classpath: Iterable[Path] = (),
    ) -> Path:
        """Compile ``source`` into a ``.pyc`` next to it.

        Args:
            source (Path): The generated source file.
            target (TargetType): The implemented interface.
            suffix (str): Suffix of the generated class name.
            classpath (Iterable[Path]): Import roots passed as ``PYTHONPATH``.

        Returns:
            Path: The compiled artifact.

        Raises:
            ImplementorError: ``TOOLCHAIN_UNAVAILABLE`` if the interpreter
                cannot be started, ``COMPILATION_FAILURE`` on a non-zero exit.
        """
        compiled = source.with_suffix(COMPILED_EXTENSION)
        cmd = [
            self.executable,
            "-c",
            _COMPILE_SCRIPT,
            str(source),
            str(compiled),
            target.implementation_module(suffix),
            target.implementation_name(suffix),
            target.module,
            target.qualname,
            "1" if self.verify else "0",
        ]
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(str(p) for p in classpath)
        env["PYTHONDONTWRITEBYTECODE"] = "1"
        env["PYTHONIOENCODING"] = "utf-8"
        logger.debug("Compiling %s (PYTHONPATH=%s)", source, env["PYTHONPATH"])
        try:
            proc = subprocess.run(
                cmd, capture_output=True, text=True, encoding="utf-8", errors="replace", env=env
            )
        except OSError as exc:
            raise ImplementorError(
                ErrorKind.TOOLCHAIN_UNAVAILABLE,
                f"Could not run Python interpreter {self.executable}: {exc}",
            ) from exc
        if proc.returncode != 0:
            details = "\n".join(proc.stderr.strip().splitlines()[-_STDERR_TAIL:])
            logger.debug("Compiler stderr:\n%s", proc.stderr)
            raise ImplementorError(
                ErrorKind.COMPILATION_FAILURE,
                f"Unable to compile {source.name} (exit code {proc.returncode})"
                + (f":\n{details}" if details else ""),
                type_name=target.qualified_name,
            )
        logger.debug("Compiled %s -> %s", source, compiled)
        return compiled
