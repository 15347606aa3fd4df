from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import declarative_base
import uuid
import datetime

# base class for declarative class definitions
Base = declarative_base()

# SRP account model for the database
class SrpAccountRecord(Base):
    __tablename__ = "srp_accounts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_name = Column(String, unique=True, index=True, nullable=False)
    srp_salt = Column(String, nullable=False) # hex
    srp_verifier = Column(String, nullable=False) # hex
    created_at = Column(DateTime, default=lambda: datetime.datetime.now(datetime.timezone.utc))
