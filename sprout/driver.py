"""Runs a program: the bundled standard library first, then the user unit,
printing each form's Python source and its value."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from sprout import HostValue
from sprout.config import get_prelude_path, get_strict, get_verbose
from sprout.debug_utils.pprint import format_ir, format_sexp
from sprout.reader.parser import read
from sprout.session import CompilationSession


def as_comment(text: str, label: str = "") -> str:
    lines = text.splitlines() or [""]
    first = f"# {label}{lines[0]}"
    rest = [f"#   {line}" for line in lines[1:]]
    return "\n".join([first, *rest])


class Driver:
    """
    One run of the compiler. A single session (macro registry plus execution
    context) is shared by every unit loaded, so macros from the standard
    library are available to the user program.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        *,
        prelude_path: str | Path | None = None,
        strict: bool | None = None,
        verbose: bool | None = None,
    ):
        self.out = out if out is not None else sys.stdout
        self.prelude_path = Path(prelude_path) if prelude_path else get_prelude_path()
        self.verbose = get_verbose() if verbose is None else verbose
        self.session = CompilationSession(strict=get_strict() if strict is None else strict)

    def write(self, text: str) -> None:
        print(text, file=self.out)

    def load_prelude(self) -> list[HostValue]:
        return self.load_file(self.prelude_path)

    def load_file(self, path: str | Path) -> list[HostValue]:
        path = Path(path)
        return self.load_source(path.read_text(encoding="utf-8"), str(path))

    def load_source(self, code: str, name: str = "<string>") -> list[HostValue]:
        """Grow, emit and execute each top-level form of `code` in order."""
        forms = read(code)
        self.write(f"# ---- {name} ----")
        values = []
        for form in forms:
            node = self.session.grow(form)
            source = self.session.emit(node)
            if self.verbose:
                self.write(as_comment(format_sexp(form), "form: "))
                self.write(as_comment(format_ir(node), "ir: "))
            self.write(source)
            value = self.session.execute(source)
            self.write(f"# => {value!r}")
            values.append(value)
        return values


def run(
    path: str | Path,
    out: TextIO | None = None,
    *,
    prelude_path: str | Path | None = None,
    strict: bool | None = None,
    verbose: bool | None = None,
) -> list[HostValue]:
    """Load the standard library, then the program at `path`. Returns the
    values of the program's top-level forms."""
    driver = Driver(out, prelude_path=prelude_path, strict=strict, verbose=verbose)
    driver.load_prelude()
    return driver.load_file(path)
