"""
Image Extender

Extend raster images to a target size by adding transparent margins,
keeping the original pixels centered on the new canvas.
"""

__version__ = "1.0.0"

# Main exports
from .adapter import load_rgba, output_path_for, transform_file
from .batch import BatchSummary, run_batch
from .compositor import compose, compute_layout
from .errors import (
    DecodeError,
    ImageExtenderError,
    InvalidArgumentError,
    InvalidPathError,
    OutputWriteError,
    ProtocolError,
)
from .types import (
    IMAGE_EXTENSIONS,
    OUTPUT_DIR_NAME,
    CanvasLayout,
    Dimensions,
    ScanResult,
    TransformResult,
)
from .validation import ExtendImageArgs, validate_target_size
from .walker import find_images, scan_directory

__all__ = [
    # Compositor
    "compose",
    "compute_layout",
    # Adapter
    "transform_file",
    "load_rgba",
    "output_path_for",
    # Walker
    "scan_directory",
    "find_images",
    # Batch
    "run_batch",
    "BatchSummary",
    # Validation
    "ExtendImageArgs",
    "validate_target_size",
    # Types
    "Dimensions",
    "CanvasLayout",
    "TransformResult",
    "ScanResult",
    "OUTPUT_DIR_NAME",
    "IMAGE_EXTENSIONS",
    # Errors
    "ImageExtenderError",
    "DecodeError",
    "OutputWriteError",
    "InvalidArgumentError",
    "InvalidPathError",
    "ProtocolError",
]
