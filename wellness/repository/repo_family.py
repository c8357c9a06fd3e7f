from typing import List

from wellness.models.model_family_member import FamilyMember
from wellness.repository.repo_base import BaseRepository


class FamilyMemberRepository(BaseRepository[FamilyMember]):
    model = FamilyMember

    def get_by_group(self, family_group_id: str) -> List[FamilyMember]:
        return self.db.query(FamilyMember).filter(
            FamilyMember.family_group_id == family_group_id
        ).order_by(FamilyMember.id.asc()).all()
