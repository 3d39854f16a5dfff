from abc import ABC, abstractmethod

from docvault.app.repositories.audit_event_repository import IAuditEventRepository
from docvault.app.repositories.file_repository import IFileRepository
from docvault.app.repositories.folder_repository import IFolderRepository
from docvault.app.repositories.membership_repository import IMembershipRepository
from docvault.app.repositories.tenant_repository import ITenantRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    folders: IFolderRepository
    files: IFileRepository
    memberships: IMembershipRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
