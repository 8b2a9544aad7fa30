"""Logic for removing doclets that are excluded from the output."""

import logging

from doclinks.doclet_store import UNDEFINED, DocletStore

logger = logging.getLogger(__name__)


def prune(
    store: DocletStore, access: list[str] | None = None, private: bool = False
) -> DocletStore:
    """Remove members that will not be included in the output.

    Removes undocumented and ignored members, members of anonymous classes and
    members whose access level is not requested. Without ``access``, private
    members are kept only when ``private`` is set.
    """
    removed = store.remove(undocumented=True)
    removed += store.remove(ignore=True)
    removed += store.remove(memberof="<anonymous>")

    if access is None or "all" not in access:
        if access is not None and "public" not in access:
            removed += store.remove(access="public")
        if access is not None and "protected" not in access:
            removed += store.remove(access="protected")
        if not private and (access is None or "private" not in access):
            removed += store.remove(access="private")
        if access is not None and "undefined" not in access:
            removed += store.remove(access=UNDEFINED)

    logger.debug("Pruned %d doclets", removed)
    return store
