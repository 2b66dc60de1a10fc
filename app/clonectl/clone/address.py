"""Repository URL parsing.

Extracts host, namespace and repository name from SSH
(``git@host:owner/repo.git`` or ``ssh://git@host/owner/repo.git``) and
HTTPS (``https://host/owner/repo``) addresses. The repository name is the
default clone directory.
"""

import logging
import re

from clonectl.clone.models import RepositoryAddress, RepositoryAddressError

logger = logging.getLogger(__name__)

_ADDRESS_PATTERN = re.compile(
    r"(?P<hostname>(?:ssh://git@|git@|https://)[\w.@-]+(?::\d+)?[/:])"
    r"(?P<namespace>[\w.-]+)/"
    r"(?P<name>[\w.-]+?)"
    r"(?:\.git)?/?$",
    re.IGNORECASE,
)


def parse_repository(url: str) -> RepositoryAddress:
    """Parse a repository URL.

    Args:
        url: SSH, ssh:// or HTTPS repository address.

    Returns:
        RepositoryAddress with hostname, namespace and name.

    Raises:
        RepositoryAddressError: If the URL is not a recognised address.
    """
    match = _ADDRESS_PATTERN.match(url.strip())
    if match is None:
        raise RepositoryAddressError(f"Not a repository address: {url!r}")

    address = RepositoryAddress(
        hostname=match.group("hostname"),
        namespace=match.group("namespace"),
        name=match.group("name"),
    )
    logger.debug(
        "Parsed %s: hostname=%s namespace=%s name=%s",
        url,
        address.hostname,
        address.namespace,
        address.name,
    )
    return address
