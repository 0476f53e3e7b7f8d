"""Generator factory and format registry."""

from __future__ import annotations

from typing import Dict, Optional, Type

from ..config import FlowscribeConfig
from ..exceptions import UnsupportedFormatError
from .base import BaseGenerator, Clock, safe_filename
from .document import MarkdownDocGenerator
from .matrix import InteractionMatrixGenerator
from .passthrough import JSONExportGenerator, SimplePromptGenerator
from .prompt import DrawioPromptGenerator
from .sequence import SequenceDiagramGenerator
from .topology import ArchitectureDiagramGenerator

FORMATS: Dict[str, Type[BaseGenerator]] = {
    generator.format_name: generator
    for generator in (
        DrawioPromptGenerator,
        MarkdownDocGenerator,
        SequenceDiagramGenerator,
        ArchitectureDiagramGenerator,
        InteractionMatrixGenerator,
        JSONExportGenerator,
        SimplePromptGenerator,
    )
}


def get_generator(
    fmt: str,
    config: Optional[FlowscribeConfig] = None,
    clock: Optional[Clock] = None,
) -> BaseGenerator:
    """Factory function returning a generator for the ``fmt`` format key."""

    try:
        generator_cls = FORMATS[fmt.lower()]
    except KeyError:
        raise UnsupportedFormatError(
            f"Unsupported output format: {fmt} (choose from {', '.join(FORMATS)})"
        ) from None
    return generator_cls(config=config, clock=clock)


__all__ = [
    "FORMATS",
    "BaseGenerator",
    "Clock",
    "DrawioPromptGenerator",
    "MarkdownDocGenerator",
    "SequenceDiagramGenerator",
    "ArchitectureDiagramGenerator",
    "InteractionMatrixGenerator",
    "JSONExportGenerator",
    "SimplePromptGenerator",
    "get_generator",
    "safe_filename",
]
