"""
Image Extender Errors

모든 예외는 ImageExtenderError를 상속한다.
Front end(batch CLI, MCP server)가 경계에서 각자의 방식으로 변환한다.
"""


class ImageExtenderError(Exception):
    """Base class for image extender failures"""


class DecodeError(ImageExtenderError):
    """Source image could not be opened or parsed"""


class OutputWriteError(ImageExtenderError):
    """Output directory could not be created or the output could not be written"""


class InvalidArgumentError(ImageExtenderError):
    """Target size or tool arguments rejected before any file I/O"""


class InvalidPathError(ImageExtenderError):
    """Batch root is neither an existing file nor a directory"""


class ProtocolError(ImageExtenderError):
    """Request line is not a valid JSON-RPC envelope"""


class CanvasAllocationError(ImageExtenderError):
    """Output canvas of the requested size could not be allocated"""
