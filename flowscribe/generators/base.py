"""Base generator interface for flowscribe output formats."""

from __future__ import annotations

import abc
import re
from datetime import datetime, timezone
from typing import Callable, Optional

from ..config import FlowscribeConfig
from ..models import Catalog, Flow

Clock = Callable[[], datetime]

BANNER = "═" * 39
RULE = "─" * 39


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def safe_filename(name: str) -> str:
    """Replace every non-alphanumeric character of ``name`` with ``_``."""
    return re.sub(r"[^a-z0-9]", "_", name, flags=re.IGNORECASE)


def one_line(text: str) -> str:
    """Collapse whitespace so ``text`` fits on a single line."""
    return " ".join(text.split())


def mermaid_text(text: str) -> str:
    """Make free text safe inside a Mermaid message, note or quoted label."""
    return one_line(text).replace(";", ",").replace('"', "#quot;")


class BaseGenerator(metaclass=abc.ABCMeta):
    """Abstract base for a pure ``(flow, catalog) -> str`` rendering."""

    #: Format key used by the factory and the CLI.
    format_name: str = ""
    #: Appended to the sanitized flow name to suggest an output filename.
    filename_suffix: str = ".txt"
    media_type: str = "text/plain"

    def __init__(
        self, config: Optional[FlowscribeConfig] = None, clock: Optional[Clock] = None
    ) -> None:
        self.config = config or FlowscribeConfig()
        self.clock = clock or utc_now

    @abc.abstractmethod
    def generate(self, flow: Flow, catalog: Catalog) -> str:
        """Render ``flow`` against ``catalog``."""
        raise NotImplementedError

    def filename_for(self, flow: Flow) -> str:
        return f"{safe_filename(flow.name)}{self.filename_suffix}"

    def timestamp(self) -> str:
        return self.clock().isoformat()
