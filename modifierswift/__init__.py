from .core.constants import TOOL_VERSION

__version__ = TOOL_VERSION
