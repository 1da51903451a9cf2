from __future__ import annotations

from ..clients.base import ExternalDataSource
from ..constants import ORACLE_CONTACTS_METHOD
from ..domain import PriceRecord
from ..errors import NoOracleContact
from ..logger import get_logger
from .oracle_parser import parse_price_record

logger = get_logger(__name__)


def fetch_from_oracle(
    source: ExternalDataSource, method: str = ORACLE_CONTACTS_METHOD
) -> PriceRecord:
    """Read prices from the first oracle contact without persisting them.

    Args:
        source: Data source answering the contacts lookup
        method: Custom query method that lists oracle contacts

    Returns:
        Fully populated price record parsed from the contact text

    Raises:
        NoOracleContact: If the contact list is empty
        OracleFieldError: If any of the five fields cannot be parsed
        UpstreamQueryFailed: If the contacts lookup fails
    """
    response = source.get_all_contacts(method)
    logger.debug("Got %d oracle contact(s)", len(response.contacts))
    if not response.contacts:
        raise NoOracleContact()

    contact = response.contacts[0]
    logger.debug("Parsing prices from contact %s", contact.address)
    return parse_price_record(contact.contact)
