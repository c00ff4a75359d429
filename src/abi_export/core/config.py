"""Export configuration dataclass.

Environment variables override defaults:

    ABI_EXPORT_TOOL, ABI_EXPORT_LANGUAGE, ABI_EXPORT_DOCS_NAME, ABI_EXPORT_DOCS_URL
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Mapping

_ENV_PREFIX = "ABI_EXPORT_"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportConfig:
    """Immutable export configuration.

    The defaults reproduce the provenance banner downstream tooling expects.
    """

    tool: str = "Stylus"
    language: str = "Rust"
    docs_name: str = "The Stylus SDK"
    docs_url: str = "https://github.com/OffchainLabs/stylus-sdk-rs"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExportConfig":
        env = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            key = _ENV_PREFIX + f.name.upper()
            value = env.get(key)
            if value is not None:
                _logger.debug("banner field %s overridden by %s", f.name, key)
                overrides[f.name] = value
        return replace(cls(), **overrides)

    def banner(self) -> str:
        """Header comment block, without the trailing blank line."""
        return (
            "/**\n"
            f" * This file was automatically generated by {self.tool}"
            f" and represents a {self.language} program.\n"
            f" * For more information, please see [{self.docs_name}]({self.docs_url}).\n"
            " */\n"
        )


DEFAULT_CONFIG = ExportConfig()
