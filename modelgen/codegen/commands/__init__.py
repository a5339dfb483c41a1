"""
Generator commands available on the command line.
"""

from .base import Command
from .model import ModelCommand

__all__ = ["Command", "ModelCommand"]
