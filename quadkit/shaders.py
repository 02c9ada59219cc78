"""Shader source preprocessing: expansion of ``#include "file"`` directives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

_DIRECTIVE = "#include"


class ShaderPreprocessError(ValueError):
    """A shader source could not be preprocessed."""


@dataclass
class PreprocessorConfig:
    """Named include files available to ``#include`` directives."""

    includes: List[Tuple[str, str]] = field(default_factory=list)

    def lookup(self, filename: str) -> Optional[str]:
        """Content of the first include registered under ``filename``, or None."""
        return next(
            (content for name, content in self.includes if name == filename), None
        )


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every ``#include "name"`` directive with the named include's content.

    Included text is inserted verbatim and is not scanned for further directives.
    """
    result = source
    pos = 0
    while True:
        start = result.find(_DIRECTIVE, pos)
        if start < 0:
            return result

        i = start + len(_DIRECTIVE)
        while i < len(result) and result[i] == " ":
            i += 1
        if i >= len(result) or result[i] != '"':
            raise ShaderPreprocessError(
                f"expected '\"' after {_DIRECTIVE} at offset {start}"
            )

        name_start = i + 1
        name_end = result.find('"', name_start)
        if name_end < 0:
            raise ShaderPreprocessError(
                f"unterminated include file name at offset {name_start}"
            )
        filename = result[name_start:name_end]

        content = config.lookup(filename)
        if content is None:
            raise ShaderPreprocessError(
                f'Include file {filename} is not on "includes" list'
            )

        result = result[:start] + content + result[name_end + 1 :]
        pos = start + len(content)