"""Logic for recording which members listen to which events."""

from doclinks.doclet import Doclet
from doclinks.doclet_store import DocletStore


def add_event_listeners(store: DocletStore) -> None:
    """Add each listener's longname to the ``listeners`` of the events it listens to."""
    events: dict[str, Doclet | None] = {}
    for listener in store.find(lambda d: bool(d.listens)):
        for event_longname in listener.listens:
            if event_longname not in events:
                events[event_longname] = store.find_one(longname=event_longname, kind="event")
            event = events[event_longname]
            if event is None:
                continue
            if event.listeners is None:
                event.listeners = []
            event.listeners.append(listener.longname)
