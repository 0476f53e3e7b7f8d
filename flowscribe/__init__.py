"""Flowscribe: render documented microservice flows into prompts, diagrams and docs."""

from .config import FlowscribeConfig, load_config
from .engine import FileSink, RenderedOutput, StdoutSink, render, render_all
from .exceptions import (
    FlowscribeError,
    ModelLoadError,
    UnknownTemplateError,
    UnsupportedFormatError,
)
from .generators import FORMATS, get_generator
from .loader import load_catalog, load_flow
from .models import Catalog, Flow
from .resolver import CatalogResolver, Found, Missing

__version__ = "0.1.0"
__all__ = [
    "Catalog",
    "CatalogResolver",
    "FileSink",
    "Flow",
    "FlowscribeConfig",
    "FlowscribeError",
    "FORMATS",
    "Found",
    "Missing",
    "ModelLoadError",
    "RenderedOutput",
    "StdoutSink",
    "UnknownTemplateError",
    "UnsupportedFormatError",
    "get_generator",
    "load_catalog",
    "load_config",
    "load_flow",
    "render",
    "render_all",
]
