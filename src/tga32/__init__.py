__version__ = "0.1.0"

from .core import Image, Tga32Error, effective_size, file_size  # noqa: E402

__all__ = ["Image", "Tga32Error", "effective_size", "file_size", "__version__"]
