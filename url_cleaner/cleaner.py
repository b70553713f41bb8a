from urllib.parse import urlsplit

from .config import load_keywords
from .logger import Logger

SEPARATOR = "/"


def _with_separator(url):
    return url if url.endswith(SEPARATOR) else f"{url}{SEPARATOR}"


def _is_valid(url):
    """Lenient URI-reference check: only what urlsplit refuses is invalid."""
    try:
        urlsplit(url).port
    except ValueError:
        return False
    return True


def _dedupe(keywords):
    return list(dict.fromkeys(keywords))


class KeywordUrlCleaner:
    """Cut a URL at the earliest case-insensitive occurrence of any keyword.

    Keywords are literal substrings kept in insertion order, unique by exact
    string equality. Every URL returned by `clean` ends with a slash:

        >>> KeywordUrlCleaner(["?xmt"]).clean("xxx.com/?XMT=111")
        'xxx.com/'

    Offsets are taken from the lower-cased URL, so characters whose lower-case
    form has a different length (outside ASCII) can shift the cut point.
    """

    def __init__(self, keywords=None, logger: Logger = None):
        self.logger = logger
        self._keywords = []
        if keywords is not None:
            self.set_keywords(keywords)

    @classmethod
    def from_config(cls, path, logger: Logger = None):
        """Build a cleaner seeded from the `keywords` list of a YAML file."""
        return cls(load_keywords(path), logger=logger)

    def clean(self, url):
        if not _is_valid(url):
            if self.logger:
                self.logger.warning(f"{url} — not a valid URL, left as is")
            return _with_separator(url)
        if not self._keywords:
            return _with_separator(url)

        url_lower = url.lower()
        earliest = -1
        match = None
        for keyword in self._keywords:
            index = url_lower.find(keyword.lower())
            if index != -1 and (earliest == -1 or index < earliest):
                earliest = index
                match = keyword

        if earliest == -1:
            return _with_separator(url)

        if self.logger:
            self.logger.info(f"{url} — cut at {match!r} (index {earliest})")
        return _with_separator(url[:earliest])

    def add_keyword(self, keyword):
        if keyword not in self._keywords:
            self._keywords.append(keyword)

    def remove_keyword(self, keyword):
        if keyword in self._keywords:
            self._keywords.remove(keyword)

    def clear_keywords(self):
        self._keywords.clear()

    def set_keywords(self, keywords):
        """Replace all keywords. Exact duplicates keep their first position."""
        keywords = list(keywords)
        unique = _dedupe(keywords)
        if self.logger and len(unique) != len(keywords):
            self.logger.warning(f"Dropped {len(keywords) - len(unique)} duplicate keyword(s)")
        self._keywords = unique

    def get_keywords(self):
        return list(self._keywords)

    def has_keyword(self, keyword):
        return keyword in self._keywords
