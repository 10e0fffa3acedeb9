from dataclasses import dataclass
from typing import Optional

from ..services.codec import WireCodec
from ..services.event_router import EventRouter
from .config import Settings


@dataclass(slots=True)
class CodecContainer:
    """Dependency registry shared by the public decode/encode functions."""

    settings: Settings
    codec: WireCodec
    event_router: EventRouter


def build_container(settings: Optional[Settings] = None) -> CodecContainer:
    """Wire the codec and event router for ``settings`` (read from the environment if omitted)."""
    settings = settings or Settings()
    codec = WireCodec(settings)
    return CodecContainer(
        settings=settings,
        codec=codec,
        event_router=EventRouter(codec),
    )
