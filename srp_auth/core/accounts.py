# === Account repository contract + registration helper ===
import logging
import threading
from typing import Optional, Protocol

from srp_auth.core.srp_client import SrpClient
from srp_auth.schemas.srp import AuthenticatedIdentity, SrpAccount

logger = logging.getLogger(__name__)


class SrpAccountRepository(Protocol):
    def find_by_name(self, user_name: str) -> Optional[SrpAccount]: ...

    def get_identity(self, account: SrpAccount) -> AuthenticatedIdentity: ...


def create_account(user_name: str, password: str, client: SrpClient) -> SrpAccount:
    """Salt + verifier for a new account; the password itself is never stored."""
    salt = client.generate_salt()
    private_key = client.derive_private_key(salt, user_name, password)
    verifier = client.derive_verifier(private_key)
    return SrpAccount(user_name=user_name, salt=salt, verifier=verifier)


class InMemoryAccountRepository:
    def __init__(self, accounts: Optional[list[SrpAccount]] = None):
        self._lock = threading.Lock()
        self._accounts: dict[str, SrpAccount] = {a.user_name: a for a in accounts or []}

    def add(self, account: SrpAccount) -> SrpAccount:
        with self._lock:
            if account.user_name in self._accounts:
                raise ValueError(f"Account {account.user_name!r} already exists")
            self._accounts[account.user_name] = account
        logger.info(">Registered SRP account %s.", account.user_name)
        return account

    def find_by_name(self, user_name: str) -> Optional[SrpAccount]:
        with self._lock:
            return self._accounts.get(user_name)

    def get_identity(self, account: SrpAccount) -> AuthenticatedIdentity:
        return AuthenticatedIdentity(name=account.user_name)
