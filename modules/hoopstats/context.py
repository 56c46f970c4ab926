from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class RequestContext:
    """What a handler may know about the incoming request."""
    method: str = 'GET'
    path_params: Dict[str, str] = field(default_factory=dict)
    form: Dict[str, str] = field(default_factory=dict)
    user: str = ''


@dataclass
class PageResponse:
    """A template name plus the data to render it with."""
    template: str
    data: Dict[str, Any]
    status: int = 200
