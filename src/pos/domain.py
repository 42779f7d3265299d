"""POS bounded context: catalogue, inventory, ordering and payments.

Items and orders live in one domain so that stock decrements and the order
they belong to commit in the same unit of work.
"""

from protean.domain import Domain

from pos.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="pos")

logger = get_logger(__name__)

# Domain Composition Root
pos = Domain(name="pos")
