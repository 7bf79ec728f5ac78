"""Built-in asset transforms."""

from __future__ import annotations

import esprima
from esprima.error_handler import Error as EsprimaError
from rjsmin import jsmin

from asset_fingerprint.errors import TransformError


class PassthroughTransform:
    """Return content unchanged, byte for byte."""

    name = "passthrough"

    def transform(self, data: bytes) -> bytes:
        return data


class JavaScriptMinifier:
    """Minify JavaScript source with ``rjsmin``.

    The source is parsed with ``esprima`` first, as a script and then as a
    module, so syntax errors are rejected instead of shipped. Comments and
    insignificant whitespace are removed; identifiers are left untouched.
    Input must be UTF-8.
    """

    name = "rjsmin"

    def __init__(self, keep_bang_comments: bool = False) -> None:
        self.keep_bang_comments = keep_bang_comments

    def transform(self, data: bytes) -> bytes:
        """Return minified JavaScript bytes.

        Raises
        ------
        TransformError
            If ``data`` is not valid UTF-8, is not valid JavaScript, or the
            minifier fails.
        """
        try:
            source = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TransformError(f"JavaScript source is not valid UTF-8: {exc}") from exc
        _check_syntax(source)
        try:
            minified = jsmin(source, keep_bang_comments=self.keep_bang_comments)
        except (TypeError, ValueError) as exc:
            raise TransformError(f"JavaScript minification failed: {exc}") from exc
        return minified.encode("utf-8")


def _check_syntax(source: str) -> None:
    """Raise ``TransformError`` unless ``source`` parses as a script or module."""
    try:
        esprima.parseScript(source)
    except EsprimaError as exc:
        try:
            esprima.parseModule(source)
        except EsprimaError:
            raise TransformError(f"JavaScript syntax error: {exc}") from exc
