import logging
from typing import List

from sqlalchemy.orm import sessionmaker

from .auth import AuthService

logger = logging.getLogger(__name__)


def seed_default_users(session_factory: sessionmaker) -> List[str]:
    """Create the default admin/user accounts if they don't exist yet."""
    with session_factory() as session:
        created = AuthService(session).initialize_default_users()

    if created:
        logger.info("Default users created: %s", ", ".join(created))
    else:
        logger.info("Default users already exist, skipping creation")
    return created
