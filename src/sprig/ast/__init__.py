"""AST nodes designed for evaluation."""

from ._base import *
from ._literal import *
from ._sequence import *
from ._visitor import *
