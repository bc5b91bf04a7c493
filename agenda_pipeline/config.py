"""Pipeline configuration.

Values come from the environment (a local .env is honoured).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Site-relative links in the schedule pages are anchored here
BASE_URL = "https://s2024.conference-program.org"

# Where `agenda-pipeline parse` looks for pages when no directory is given
DEFAULT_HTML_DIR = os.environ.get("AGENDA_HTML_DIR", ".")

# BeautifulSoup tree builder
HTML_PARSER = os.environ.get("AGENDA_HTML_PARSER", "lxml")
