from typing import Optional, List
from sqlalchemy.orm import Session
from datetime import datetime, timezone

from imageshop.models.member import Member as MemberModel, MemberRole
from imageshop.schemas.member import Member as MemberSchema
from imageshop.repositories.base import BaseRepository


class MemberRepository(BaseRepository[MemberModel, MemberSchema]):
    """회원 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(MemberModel, MemberSchema, db)

    def get_by_user_id(self, user_id: str) -> Optional[MemberSchema]:
        """로그인 아이디로 회원 조회"""
        return self.first_by(user_id=user_id)

    def get_password_hash(self, user_id: str) -> Optional[str]:
        """로그인 검증용 비밀번호 해시 (스키마에는 노출하지 않음)"""
        model_instance = (
            self.db.query(self.model_class)
            .filter(self.model_class.user_id == user_id)
            .first()
        )
        return model_instance.user_pw if model_instance else None

    def create_member(
        self,
        user_id: str,
        password_hash: str,
        user_name: str,
        job: Optional[str] = None,
        role: MemberRole = MemberRole.MEMBER,
    ) -> Optional[MemberSchema]:
        return self.create(
            user_id=user_id,
            user_pw=password_hash,
            user_name=user_name,
            job=job,
            coin=0,
            enabled=True,
            role=role.value,
        )

    def update_last_login(
        self, user_no: int, ip: Optional[str], login_time: Optional[datetime] = None
    ) -> Optional[MemberSchema]:
        """마지막 로그인 시간/IP 업데이트"""
        if login_time is None:
            login_time = datetime.now(timezone.utc)

        return self.update(user_no, last_login_at=login_time, last_login_ip=ip)

    def get_coin(self, user_no: int) -> int:
        """현재 코인 잔액"""
        coin = (
            self.db.query(self.model_class.coin)
            .filter(self.model_class.user_no == user_no)
            .scalar()
        )
        return int(coin or 0)

    def change_coin(self, user_no: int, delta: int, commit: bool = True) -> Optional[MemberSchema]:
        """코인 증감 - 잔액 검증은 서비스 책임

        같은 세션 안에서 행을 다시 읽어 갱신하므로 서비스의 트랜잭션에 포함된다.
        """
        instance = (
            self.db.query(self.model_class)
            .filter(self.model_class.user_no == user_no)
            .with_for_update()
            .first()
        )
        if not instance:
            return None

        instance.coin = int(instance.coin or 0) + delta
        self._save(instance, commit)
        return self._to_schema(instance)

    def list_members(self, limit: int = 50, offset: int = 0) -> List[MemberSchema]:
        """회원 목록 (가입순 역순)"""
        return self.find_all(
            order_by="user_no", descending=True, limit=limit, offset=offset
        )

    def user_id_exists(self, user_id: str) -> bool:
        """아이디 중복 체크"""
        return self.exists(filters={"user_id": user_id})
