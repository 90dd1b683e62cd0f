from .response_renderer import *  # NOQA
