"""Protoobj Prototype Object Runtime

Objects are functions that map message names onto method implementations.
Messages an object does not understand are forwarded to a prototype.
"""

__version__ = "0.1.0"


from ._error import *
from ._imp import *
from ._dispatch import *
from ._access import *
from ._objects import *
