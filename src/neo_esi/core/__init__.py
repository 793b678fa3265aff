"""Core domain of neo-esi: entities, value objects, protocols and exceptions."""

from .value_objects import *
from .entities import *
from .protocols import *
from .exceptions import *
