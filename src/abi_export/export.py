"""Protocol and driver for exporting Solidity interfaces.

An exportable entity is a *class* carrying a ``NAME`` and a ``fmt_abi``
classmethod. It writes its own fragment into whatever text sink it is
given and delegates to nested entities for theirs::

    class Counter(Interface):
        NAME = "Counter"
        FUNCTIONS = (Increment, Number)

    print_abi(Counter)

The driver only adds the provenance banner and passes the sink through
to the entity untouched.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import ClassVar, Protocol, TextIO, runtime_checkable

from abi_export.core.config import DEFAULT_CONFIG, ExportConfig

_logger = logging.getLogger(__name__)


class FormatError(Exception):
    """The output sink refused a write."""


@runtime_checkable
class GenerateAbi(Protocol):
    """Every exportable entity exposes ``NAME`` and ``fmt_abi()``."""

    NAME: ClassVar[str]

    @classmethod
    def fmt_abi(cls, f: TextIO) -> None:
        """Write this entity's fragment of the interface into *f*."""
        ...


def write_fragment(f: TextIO, text: str) -> None:
    """Write *text* to *f*, reporting a refused write as ``FormatError``."""
    try:
        f.write(text)
    except (OSError, ValueError) as exc:
        raise FormatError(f"sink rejected write: {exc}") from exc


def render_abi(entity: type[GenerateAbi], f: TextIO) -> None:
    """Render *entity* onto *f*.

    A ``FormatError`` propagates unchanged; a refused write the entity made
    on the sink directly is reported as ``FormatError`` too.
    """
    _logger.debug("rendering %s (%s)", entity.NAME, entity.__qualname__)
    try:
        entity.fmt_abi(f)
    except (OSError, ValueError) as exc:
        raise FormatError(
            f"sink rejected write while rendering {entity.NAME}: {exc}"
        ) from exc


def abi_to_string(entity: type[GenerateAbi]) -> str:
    """Render *entity* into a string, without the banner."""
    buf = io.StringIO()
    render_abi(entity, buf)
    return buf.getvalue()


def print_abi(
    entity: type[GenerateAbi],
    out: TextIO | None = None,
    *,
    config: ExportConfig = DEFAULT_CONFIG,
) -> None:
    """Print the full contract ABI to *out* (standard output by default).

    Writes the banner, one blank line, then the entity's own rendering.
    Text already written stays on the sink if a later write fails.
    """
    sink = sys.stdout if out is None else out
    write_fragment(sink, config.banner())
    write_fragment(sink, "\n")
    render_abi(entity, sink)
