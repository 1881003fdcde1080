"""
Parsing of repository object references.

An object reference has the form ``scheme://repositoryId/objectId``, e.g.
``ccrep://homeRepository/abc-123-xyz-456789``.
"""
import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


class UnparsableReferenceError(ValueError):
    """Raised when an object reference cannot be parsed."""

    def __init__(self, url: str, reason: str = ""):
        super().__init__(f"Could not get repository id from object url '{url}'{': ' + reason if reason else ''}")
        self.url = url


def get_object_id_from_url(url: str) -> str:
    """
    Get the object id from an object url.

    Returns an empty string (and logs a warning) if the url cannot be parsed.
    """
    try:
        path = urlsplit(url).path
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Could not get object id from object url '{url}': {e}")
        return ''

    return path.replace('/', '')


def get_repository_id_from_url(url: str) -> str:
    """
    Get the repository id from an object url.

    Raises:
        UnparsableReferenceError: If the url cannot be parsed or has no host
    """
    try:
        netloc = urlsplit(url).netloc
    except (ValueError, TypeError, AttributeError) as e:
        raise UnparsableReferenceError(str(url), str(e)) from e

    # Keep the original case, urlsplit().hostname would lower it
    repository_id = netloc.rpartition('@')[2].split(':', 1)[0]
    if not repository_id:
        raise UnparsableReferenceError(url, "no repository id")

    return repository_id
