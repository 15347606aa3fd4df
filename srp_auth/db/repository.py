# SQLAlchemy-backed SRP account repository
import logging
from typing import Callable, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from srp_auth.db.models import SrpAccountRecord
from srp_auth.schemas.srp import AuthenticatedIdentity, SrpAccount

logger = logging.getLogger(__name__)


class SqlAlchemyAccountRepository:
    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def add(self, account: SrpAccount) -> SrpAccount:
        # add account to db
        with self.session_factory() as db:
            db.add(SrpAccountRecord(
                user_name=account.user_name,
                srp_salt=account.salt,
                srp_verifier=account.verifier,
            ))
            db.commit()
        logger.info(">Registered SRP account %s.", account.user_name)
        return account

    def find_by_name(self, user_name: str) -> Optional[SrpAccount]:
        with self.session_factory() as db:
            result = db.execute(select(SrpAccountRecord).where(SrpAccountRecord.user_name == user_name))
            record = result.scalar_one_or_none() # None if not found
            if record is None:
                return None
            return SrpAccount(user_name=record.user_name, salt=record.srp_salt, verifier=record.srp_verifier)

    def get_identity(self, account: SrpAccount) -> AuthenticatedIdentity:
        return AuthenticatedIdentity(name=account.user_name)
