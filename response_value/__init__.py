# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.domain.enveloped_response import *  # NOQA
from .base.domain.http_response import *  # NOQA
from .base.domain.status import *  # NOQA
from .base.domain.types import *  # NOQA
from .base.domain.value_object import *  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
