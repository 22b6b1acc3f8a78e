"""SQLAlchemy implementation of the UnitOfWork port."""

import structlog
from sqlalchemy.orm import Session

from lodging.application.common.event_publisher import EventPublisherProtocol
from lodging.application.common.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work bound to one SQLAlchemy session.

    Repositories built on the same session flush into its transaction; row
    locks they take are released by commit or rollback here.
    """

    def __init__(
        self, session: Session, event_publisher: EventPublisherProtocol | None = None
    ) -> None:
        super().__init__()
        self.session = session
        if event_publisher is not None:
            self.register_event_handler(event_publisher.publish)

    def _commit_transaction(self) -> None:
        self.session.commit()

    def _rollback_transaction(self) -> None:
        self.session.rollback()
        logger.debug("unit_of_work_rolled_back")
