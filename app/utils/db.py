from contextlib import contextmanager
import logging
from models import db
from app.services.errors import ServiceError

@contextmanager
def transactional(message="DB transaction failed"):
    """Unit of work: commit on success, roll back everything on any error.

    Business rule violations (ServiceError) are raised before any staged
    change reaches the database and are not logged as failures.
    """
    try:
        yield
        db.session.commit()
    except ServiceError:
        db.session.rollback()
        raise
    except Exception as e:
        logging.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise
