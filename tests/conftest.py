"""Shared test fixtures and configuration."""

import pytest


def make_page(*rows: str) -> str:
    """Wrap agenda rows in a minimal schedule page."""
    return (
        "<html><body><table class=\"agenda\"><tbody>"
        + "".join(rows)
        + "</tbody></table></body></html>"
    )


@pytest.fixture
def page():
    """Factory wrapping rows into a page."""
    return make_page


@pytest.fixture
def keynote_row() -> str:
    """A primary row with a title-cell link, location, presenters and tags."""
    return """
    <tr class="agenda-item primary-session" psid="7" s_utc="1721667600" e_utc="1721671200">
      <td class="title-speakers-td">
        <a href="/event/1">Keynote</a>
        <div class="presenter-details"><a href="/presenter/10">Ada  Lovelace</a></div>
        <div class="presenter-details">Unlinked Speaker</div>
        <div class="presenter-details"><a href="https://example.org/grace">Grace Hopper</a></div>
      </td>
      <td>
        <span class="presentation-location"><a href="/room/hall-a">Hall Â A</a></span>
        <div class="ptrack-list">
          <div class="program-track"> Keynotes </div>
          <div class="program-track">Real-Time</div>
        </div>
      </td>
    </tr>
    """


@pytest.fixture
def span_title_row() -> str:
    """A row using the wrapped title span with its own link."""
    return """
    <tr class="agenda-item primary-session" s_utc="1721660400" e_utc="1721664000">
      <td class="title-speakers-td">
        <span class="presentation-title"><a href="/event/2">Itâ€™s   a
          Workshop</a></span>
      </td>
      <td><span class="presentation-location">Room 502</span></td>
    </tr>
    """


@pytest.fixture
def shared_session_page() -> str:
    """A non-primary row borrowing its location from the primary row."""
    return make_page(
        """
        <tr class="agenda-item" psid="42" s_utc="1721750400" e_utc="1721754000">
          <td class="title-speakers-td"><a href="/event/43">Paper Talk</a></td>
        </tr>
        """,
        """
        <tr class="agenda-item primary-session" psid="42" s_utc="1721750400" e_utc="1721757600">
          <td class="title-speakers-td"><a href="/event/42">Papers Session</a></td>
          <td><span class="presentation-location"><a href="/room/101">Room 101</a></span></td>
        </tr>
        """,
    )


@pytest.fixture
def broken_page() -> str:
    """A row with neither title markup shape."""
    return make_page(
        """
        <tr class="agenda-item primary-session" s_utc="1721750400">
          <td class="title-speakers-td">No title here</td>
          <td><span class="presentation-location">Room 1</span></td>
        </tr>
        """
    )
