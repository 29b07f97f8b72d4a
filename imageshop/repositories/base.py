from abc import ABC
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type
from sqlalchemy import inspect
from sqlalchemy.orm import Query, Session
from pydantic import BaseModel

T = TypeVar("T")
SchemaType = TypeVar("SchemaType", bound=BaseModel)


class BaseRepository(Generic[T, SchemaType], ABC):
    """리포지토리 베이스 - 조회 결과는 항상 Pydantic 스키마로 반환

    쓰기 메서드는 ``commit=False`` 이면 flush 까지만 하므로, 서비스가 여러
    리포지토리 작업을 한 트랜잭션으로 묶고 직접 commit/rollback 할 수 있다.
    """

    def __init__(
        self, model_class: Type[T], schema_class: Type[SchemaType], db: Session
    ):
        self.model_class = model_class
        self.schema_class = schema_class
        self.db = db
        # get_by_id/update/delete 는 첫 번째 PK 컬럼 기준
        self.pk_column = inspect(model_class).primary_key[0]

    # 변환

    def _to_schema(self, model_instance: Any) -> Optional[SchemaType]:
        if model_instance is None:
            return None
        return self.schema_class.model_validate(model_instance)

    def _to_schemas(self, model_instances: List[Any]) -> List[SchemaType]:
        return [self.schema_class.model_validate(m) for m in model_instances]

    # 세션/쿼리 헬퍼

    def _ensure_clean_session(self) -> None:
        """이전 flush 실패로 비활성화된 세션만 롤백 (진행 중인 트랜잭션은 유지)"""
        if not getattr(self.db, "is_active", True):
            self.db.rollback()

    def _query(self, filters: Optional[Dict[str, Any]] = None) -> Query:
        self._ensure_clean_session()
        query = self.db.query(self.model_class)
        for key, value in (filters or {}).items():
            if hasattr(self.model_class, key):
                query = query.filter(getattr(self.model_class, key) == value)
        return query

    def _get_model(self, id: Any) -> Optional[T]:
        return self._query().filter(self.pk_column == id).first()

    def _save(self, instance: Any, commit: bool) -> None:
        try:
            self.db.add(instance)
            self.db.flush()
            self.db.refresh(instance)
            if commit:
                self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # 조회

    def get_by_id(self, id: Any) -> Optional[SchemaType]:
        return self._to_schema(self._get_model(id))

    def first_by(self, **filters: Any) -> Optional[SchemaType]:
        """조건에 맞는 첫 레코드"""
        return self._to_schema(self._query(filters).first())

    def find_all(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[SchemaType]:
        query = self._query(filters)

        if order_by and hasattr(self.model_class, order_by):
            column = getattr(self.model_class, order_by)
            query = query.order_by(column.desc() if descending else column)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        return self._to_schemas(query.all())

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return self._query(filters).count()

    def exists(self, filters: Dict[str, Any]) -> bool:
        return self._query(filters).first() is not None

    # 쓰기

    def create(self, commit: bool = True, **kwargs) -> Optional[SchemaType]:
        instance = self.model_class(**kwargs)
        self._ensure_clean_session()
        self._save(instance, commit)
        return self._to_schema(instance)

    def update(
        self, instance_id: Any, commit: bool = True, **kwargs
    ) -> Optional[SchemaType]:
        """없는 PK 면 None, 모델에 없는 필드는 무시"""
        instance = self._get_model(instance_id)
        if not instance:
            return None

        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        self._save(instance, commit)
        return self._to_schema(instance)

    def delete(self, instance_id: Any, commit: bool = True) -> bool:
        instance = self._get_model(instance_id)
        if not instance:
            return False

        try:
            self.db.delete(instance)
            self.db.flush()
            if commit:
                self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return True
