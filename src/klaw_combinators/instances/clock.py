"""Time producers."""

from __future__ import annotations

from datetime import datetime

from klaw_combinators.decorators import mapper
from klaw_combinators.interfaces import Producer

__all__ = ['iso_format', 'now', 'now_iso']

now: Producer[datetime] = Producer(datetime.now, name='now')


@mapper
def iso_format(moment: datetime) -> str:
    return moment.isoformat()


now_iso: Producer[str] = now.map(iso_format)
