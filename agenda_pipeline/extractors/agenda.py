"""Extract agenda items from conference schedule pages.

The schedule is a table of `tr.agenda-item` rows. Two markup shapes exist
for the same logical row:

1. Title as a link directly inside `td.title-speakers-td`
2. Title wrapped in `span.presentation-title` (optionally holding the link)

Rows belonging to a shared session carry a `psid` attribute. Only the row
marked `primary-session` is guaranteed to hold the location, so the other
rows of the session borrow it from there.
"""

from typing import Optional, Union

from bs4 import BeautifulSoup, Tag
from rich.console import Console

from agenda_pipeline.config import HTML_PARSER
from agenda_pipeline.models import AgendaItem, PresenterRef
from agenda_pipeline.normalizers import normalize, resolve_link

console = Console(stderr=True)

ROW_SELECTOR = "tr.agenda-item"
PRIMARY_CLASS = "primary-session"
SESSION_ID_ATTR = "psid"

TITLE_LINK_SELECTOR = "td.title-speakers-td > a"
TITLE_SPAN_SELECTOR = "span.presentation-title"
LOCATION_SELECTOR = "span.presentation-location"
PRESENTER_SELECTOR = "div.presenter-details"
TRACK_LIST_SELECTOR = "div.ptrack-list"
TRACK_SELECTOR = "div.program-track"

Location = tuple[str, Optional[str]]


class AgendaError(Exception):
    """Base error for agenda extraction."""


class MissingRequiredField(AgendaError):
    """A row produced no title or no location.

    Means the page uses a markup variant the extractor does not know yet.
    """

    def __init__(self, field: str, markup: str, source: Optional[str] = None):
        self.field = field
        self.markup = markup
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Agenda row{where} has no {field}")


def _text(elements: list[Tag]) -> str:
    """Concatenated text of all matched elements."""
    return "".join(el.get_text() for el in elements)


def _first_link(elements: list[Tag]) -> Optional[str]:
    """Resolved href of the first element, if any."""
    if not elements:
        return None
    return resolve_link(elements[0].get("href"))


def _is_primary(row: Tag) -> bool:
    return PRIMARY_CLASS in row.get("class", [])


def extract_location(row: Tag) -> Optional[Location]:
    """Location text and link from a row's own location span."""
    spans = row.select(LOCATION_SELECTOR)
    if not spans:
        return None
    links = [a for span in spans for a in span.select("a")]
    return normalize(_text(spans)), _first_link(links)


def build_primary_index(soup: BeautifulSoup) -> dict[str, Location]:
    """Map session id → location of the primary row for that session.

    First primary row with a non-empty location wins.
    """
    index: dict[str, Location] = {}
    for row in soup.select(ROW_SELECTOR):
        session_id = row.get(SESSION_ID_ATTR)
        if not session_id or not _is_primary(row):
            continue
        found = extract_location(row)
        if found and found[0]:
            index.setdefault(session_id, found)
    return index


def parse_row(
    row: Tag,
    primary_index: dict[str, Location],
    source: Optional[str] = None,
) -> AgendaItem:
    """Build an AgendaItem from one `tr.agenda-item` row.

    Raises:
        MissingRequiredField: if no title or no location could be resolved.
    """
    fields: dict = {
        "start_utc": row.get("s_utc"),
        "end_utc": row.get("e_utc"),
    }
    session_id = row.get(SESSION_ID_ATTR)

    # Title: direct link in the title cell
    title_links = row.select(TITLE_LINK_SELECTOR)
    if title_links:
        fields["event_link"] = _first_link(title_links)
        fields["event_title"] = normalize(_text(title_links))

    # Title: wrapped span, which may hold the link
    if not fields.get("event_title"):
        title_spans = row.select(TITLE_SPAN_SELECTOR)
        if title_spans:
            fields["event_title"] = normalize(_text(title_spans))
        span_links = [a for span in title_spans for a in span.select("a")]
        if span_links:
            fields["event_link"] = _first_link(span_links)

    # Location: own span first, then the primary row of the session
    own = extract_location(row)
    if own:
        fields["location"], fields["location_link"] = own
    if not fields.get("location") and session_id and session_id in primary_index:
        location, location_link = primary_index[session_id]
        fields["location"] = location
        if location_link:
            fields["location_link"] = location_link

    if not _is_primary(row):
        fields["primary_session_id"] = session_id

    presenters = []
    for detail in row.select(PRESENTER_SELECTOR):
        links = detail.select("a")
        if links:
            presenters.append(PresenterRef(
                name=normalize(_text(links)),
                link=_first_link(links),
            ))
    fields["presenters"] = presenters

    track_lists = row.select(TRACK_LIST_SELECTOR)
    if track_lists:
        fields["tags"] = [
            normalize(track.get_text())
            for track_list in track_lists
            for track in track_list.select(TRACK_SELECTOR)
        ]

    for required in ("event_title", "location"):
        if not fields.get(required):
            console.print(f"[red]Unparseable agenda row ({required} missing):[/red]")
            console.print(str(row), markup=False, highlight=False)
            raise MissingRequiredField(required, str(row), source)

    return AgendaItem(**fields)


def extract_agenda(
    document: Union[str, BeautifulSoup],
    source: Optional[str] = None,
) -> list[AgendaItem]:
    """Extract every agenda row from one schedule page.

    Args:
        document: Raw HTML or an already parsed soup
        source: Name used in diagnostics (usually the file name)

    Returns:
        Agenda items in document order.

    Raises:
        MissingRequiredField: on the first row without title or location.
            Nothing from the document is returned in that case.
    """
    if isinstance(document, BeautifulSoup):
        soup = document
    else:
        soup = BeautifulSoup(document, HTML_PARSER)

    primary_index = build_primary_index(soup)
    return [parse_row(row, primary_index, source) for row in soup.select(ROW_SELECTOR)]
