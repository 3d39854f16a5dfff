from sqlmodel.ext.asyncio.session import AsyncSession

from docvault.adapter.repositories.audit_event_repository import AuditEventRepository
from docvault.adapter.repositories.file_repository import FileRepository
from docvault.adapter.repositories.folder_repository import FolderRepository
from docvault.adapter.repositories.membership_repository import MembershipRepository
from docvault.adapter.repositories.tenant_repository import TenantRepository
from docvault.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.folders = FolderRepository(self.session)
        self.files = FileRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
