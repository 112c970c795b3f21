"""The ECMA-48 control functions, as plain Python values."""

from .characters import *
from .control import *
from .cursor import *
from .device import *
from .display import *
from .editor import *
from .formatting import *
from .mode import *
from .presentation import *
from .rendition import *
