"""
Sprig Expression Core

Syntax nodes, runtime values and evaluation engine for the expressions of a
small, dynamically typed scripting language meant for embedding.
"""

__version__ = "0.1.0"


from ._error import *
from ._config import *
from ._cancel import *
from ._printer import *
from ._value import *
from ._env import *
from ._engine import *
from . import ast
