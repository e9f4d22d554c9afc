from typing import Protocol

from mad_navigation_cli.models import CompilationUnit


class SyntaxParser(Protocol):
    """Turns Dart source into the top-level class declarations the locator needs."""

    def parse(self, source: bytes) -> CompilationUnit: ...
