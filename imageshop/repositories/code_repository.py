from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from imageshop.models.code import CodeGroup as CodeGroupModel, CodeDetail as CodeDetailModel
from imageshop.schemas.code import CodeGroup as CodeGroupSchema, CodeDetail as CodeDetailSchema
from imageshop.repositories.base import BaseRepository


class CodeGroupRepository(BaseRepository[CodeGroupModel, CodeGroupSchema]):
    def __init__(self, db: Session):
        super().__init__(CodeGroupModel, CodeGroupSchema, db)

    def list_groups(self, only_used: bool = False) -> List[CodeGroupSchema]:
        filters = {"use_yn": "Y"} if only_used else None
        return self.find_all(filters=filters, order_by="group_code")


class CodeDetailRepository(BaseRepository[CodeDetailModel, CodeDetailSchema]):
    """코드 상세 - (group_code, code_value) 복합 키"""

    def __init__(self, db: Session):
        super().__init__(CodeDetailModel, CodeDetailSchema, db)

    def _get_detail_model(self, group_code: str, code_value: str) -> Optional[CodeDetailModel]:
        return (
            self.db.query(self.model_class)
            .filter(
                self.model_class.group_code == group_code,
                self.model_class.code_value == code_value,
            )
            .first()
        )

    def get_detail(self, group_code: str, code_value: str) -> Optional[CodeDetailSchema]:
        self._ensure_clean_session()
        return self._to_schema(self._get_detail_model(group_code, code_value))

    def list_by_group(self, group_code: str, only_used: bool = False) -> List[CodeDetailSchema]:
        filters = {"group_code": group_code}
        if only_used:
            filters["use_yn"] = "Y"
        return self.find_all(filters=filters, order_by="sort_seq")

    def next_sort_seq(self, group_code: str) -> int:
        max_seq = (
            self.db.query(func.max(self.model_class.sort_seq))
            .filter(self.model_class.group_code == group_code)
            .scalar()
        )
        return (max_seq or 0) + 1

    def update_detail(self, group_code: str, code_value: str, **kwargs) -> Optional[CodeDetailSchema]:
        self._ensure_clean_session()
        instance = self._get_detail_model(group_code, code_value)
        if not instance:
            return None

        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        self._save(instance, commit=True)
        return self._to_schema(instance)

    def delete_detail(self, group_code: str, code_value: str) -> bool:
        self._ensure_clean_session()
        instance = self._get_detail_model(group_code, code_value)
        if not instance:
            return False

        try:
            self.db.delete(instance)
            self.db.commit()
            return True
        except Exception:
            self.db.rollback()
            raise
