"""This module contains the schemas for serialization/deserialization
of various models."""

from .announcement import *
from .company import *
from .contact_form import *
from .district import *
from .gallery import *
from .industry import *
from .member import *
from .policy import *
from .popup import *
from .startup import *
from .top_utility import *
