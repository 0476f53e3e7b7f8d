"""Render entry points and output sinks."""

from __future__ import annotations

import abc
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import typer
from pydantic import BaseModel

from .config import FlowscribeConfig
from .generators import Clock, get_generator
from .models import Catalog, Flow

logger = logging.getLogger(__name__)


class RenderedOutput(BaseModel):
    """A rendered artifact plus the filename a sink should store it under."""

    format: str
    filename: str
    media_type: str
    content: str


def render(
    flow: Flow,
    catalog: Catalog,
    fmt: str,
    config: Optional[FlowscribeConfig] = None,
    clock: Optional[Clock] = None,
) -> RenderedOutput:
    """Render ``flow`` against ``catalog`` in a single output format."""

    generator = get_generator(fmt, config=config, clock=clock)
    content = generator.generate(flow, catalog)
    return RenderedOutput(
        format=generator.format_name,
        filename=generator.filename_for(flow),
        media_type=generator.media_type,
        content=content,
    )


def render_all(
    flow: Flow,
    catalog: Catalog,
    formats: Optional[Iterable[str]] = None,
    config: Optional[FlowscribeConfig] = None,
    clock: Optional[Clock] = None,
) -> List[RenderedOutput]:
    """Render several formats independently of each other."""

    config = config or FlowscribeConfig()
    selected = list(formats) if formats is not None else config.output.default_formats
    return [render(flow, catalog, fmt, config=config, clock=clock) for fmt in selected]


class BaseSink(metaclass=abc.ABCMeta):
    """Destination for rendered output."""

    @abc.abstractmethod
    def write(self, output: RenderedOutput) -> Optional[Path]:
        """Deliver ``output``. Returns the written path when there is one."""
        raise NotImplementedError


class FileSink(BaseSink):
    """Write each output to ``directory`` under its suggested filename."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def write(self, output: RenderedOutput) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / output.filename
        path.write_text(output.content, encoding="utf-8")
        logger.info(f"Wrote {output.format} output to {path}")
        return path


class StdoutSink(BaseSink):
    def write(self, output: RenderedOutput) -> None:
        typer.echo(output.content, nl=not output.content.endswith("\n"))
        return None


__all__ = [
    "RenderedOutput",
    "render",
    "render_all",
    "BaseSink",
    "FileSink",
    "StdoutSink",
]
