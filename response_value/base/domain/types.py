# (c) Nelen & Schuurmans

from typing import Any

__all__ = ["Json", "Headers"]


Json = dict[str, Any]
Headers = dict[str, Any]
