from unicode_art.aspect_ratio import AspectFitter, TermFit, fit_grid
from unicode_art.config import Preset, RenderOptions
from unicode_art.converter import image_to_text, render_to
from unicode_art.engine import Renderer, create_renderer
from unicode_art.errors import ConfigurationError, ImageTooSmallError, PipelineError, UnicodeArtError

__all__ = [
    "AspectFitter",
    "ConfigurationError",
    "ImageTooSmallError",
    "PipelineError",
    "Preset",
    "RenderOptions",
    "Renderer",
    "TermFit",
    "UnicodeArtError",
    "create_renderer",
    "fit_grid",
    "image_to_text",
    "render_to",
]
