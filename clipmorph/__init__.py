"""clipmorph — aligned clip-path polygons for CSS shape morphing."""

from clipmorph.engine.config import MorphConfig
from clipmorph.morph import generate_clip_paths, run_morph
from clipmorph.shapes.catalog import BUILTIN_SHAPES, build_polygon_table
from clipmorph.shapes.cycle import ShapeCycle
from clipmorph.svg.parser import PathDataError, parse_path_data
from clipmorph.svg.serializer import format_clip_path, polygon, render_shape_styles

__all__ = [
    "generate_clip_paths",
    "run_morph",
    "MorphConfig",
    "parse_path_data",
    "PathDataError",
    "format_clip_path",
    "polygon",
    "render_shape_styles",
    "build_polygon_table",
    "BUILTIN_SHAPES",
    "ShapeCycle",
]
