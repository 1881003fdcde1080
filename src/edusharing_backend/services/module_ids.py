"""
Recover resource ids from editor markup.

Objects embedded through the HTML editor are rendered as ``<img>`` or ``<a>``
tags with the ``edusharing_atto`` class. Their ``resourceId`` query parameter
points to the local resource record.
"""
import logging
import re
from typing import Literal, Set

from ..repositories.base import RepositoryError
from ..repositories.edusharing import EdusharingRepository

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.MULTILINE | re.DOTALL

IMG_TAG_PATTERN = re.compile(r'<img(.*?)class="(.*?)edusharing_atto(.*?)"(.*?)>', _FLAGS)
LINK_TAG_PATTERN = re.compile(r'<a(.*?)class="(.*?)edusharing_atto(.*?)">(.*?)</a>', _FLAGS)
# value runs up to the next "&", without one there is no id
RESOURCE_ID_PATTERN = re.compile(r'resourceId=([^&]*)&')

IdType = Literal["module_id", "section_id"]
ID_TYPES = ("module_id", "section_id")


def extract_resource_ids(text: str) -> Set[str]:
    """Resource ids referenced by embedded objects in ``text``."""
    resource_ids = set()
    if not text:
        return resource_ids

    tags = [m.group(0) for m in IMG_TAG_PATTERN.finditer(text)]
    tags += [m.group(0) for m in LINK_TAG_PATTERN.finditer(text)]

    for tag in tags:
        match = RESOURCE_ID_PATTERN.search(tag)
        if match and match.group(1):
            resource_ids.add(match.group(1))

    return resource_ids


def set_module_id_in_db(repository: EdusharingRepository, text: str, object_id: int, id_type: IdType) -> Set[str]:
    """
    Write ``object_id`` into the ``id_type`` column of every resource
    embedded in ``text``. Returns the ids that were updated.
    """
    if id_type not in ID_TYPES:
        raise ValueError(f"Unknown id type '{id_type}', expected one of {', '.join(ID_TYPES)}")

    updated = set()
    for resource_id in extract_resource_ids(text):
        if not resource_id.isdigit():
            logger.warning(f"Skipping invalid resource id '{resource_id}'")
            continue
        try:
            if repository.set_field(int(resource_id), id_type, object_id):
                updated.add(resource_id)
        except RepositoryError as e:
            logger.error(f"Could not set {id_type}: {e}")

    return updated
