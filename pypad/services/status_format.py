"""Text for the document window's status bar."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from pypad.domain.interfaces import IFileService
from pypad.domain.models import Document
from pypad.utils.constants import LAST_EDITED_FORMAT


def format_last_edited(moment: datetime, *, today: date | None = None) -> str:
    """'Today', 'Yesterday', or dd/mm/yy - HH:MM."""
    today = today or date.today()
    day = moment.date()
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return moment.strftime(LAST_EDITED_FORMAT)


def last_edited_label(
    doc: Document,
    files: IFileService,
    *,
    now: datetime | None = None,
) -> str:
    """
    Last-edited text for a document.

    Saved documents use the file's modification time ("Unknown" when the file
    cannot be stat'ed). Never-saved documents show the current time, formatted.
    """
    now = now or datetime.now()
    if doc.location is None:
        return now.strftime(LAST_EDITED_FORMAT)
    try:
        mtime = files.modified_at(doc.location)
    except OSError:
        return "Unknown"
    return format_last_edited(mtime, today=now.date())


def name_label(doc: Document) -> str:
    return f"{doc.display_name} *" if doc.is_dirty else doc.display_name


def kind_label(doc: Document) -> str:
    if doc.kind == "markdown":
        kind = "Markdown"
    elif doc.extension:
        kind = doc.extension.upper()
    else:
        kind = "Unknown"
    return f"{kind} | {len(doc.text)} c"
