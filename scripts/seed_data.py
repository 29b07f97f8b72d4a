"""
기본 데이터 시드 스크립트
직업 코드(A01)와 선택적으로 최초 관리자 계정을 생성
"""

import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from imageshop.core.security import hash_password
from imageshop.database.session import session_scope
from imageshop.models.code import CodeDetail, CodeGroup
from imageshop.models.member import Member, MemberRole


def seed_code_data():
    """직업 코드 시드"""
    job_codes = [
        ("00", "Developer"),
        ("01", "Designer"),
        ("02", "Planner"),
    ]

    with session_scope() as db:
        group = db.query(CodeGroup).filter(CodeGroup.group_code == "A01").first()
        if not group:
            db.add(CodeGroup(group_code="A01", group_name="Job", use_yn="Y"))
            db.flush()
            print("✅ 코드 그룹 추가: A01")

        for seq, (code_value, code_name) in enumerate(job_codes, start=1):
            existing = (
                db.query(CodeDetail)
                .filter(CodeDetail.group_code == "A01", CodeDetail.code_value == code_value)
                .first()
            )
            if existing:
                print(f"⏭️  이미 존재하는 코드: A01/{code_value}")
                continue
            db.add(
                CodeDetail(
                    group_code="A01",
                    code_value=code_value,
                    code_name=code_name,
                    sort_seq=seq,
                    use_yn="Y",
                )
            )
            print(f"✅ 코드 추가: A01/{code_value} {code_name}")


def seed_admin():
    """ADMIN_USER_ID / ADMIN_PASSWORD 환경 변수가 있으면 관리자 생성"""
    user_id = os.getenv("ADMIN_USER_ID")
    password = os.getenv("ADMIN_PASSWORD")
    if not user_id or not password:
        print("⏭️  ADMIN_USER_ID/ADMIN_PASSWORD 미설정 - 관리자 생성 생략")
        return

    with session_scope() as db:
        if db.query(Member).filter(Member.user_id == user_id).first():
            print(f"⏭️  이미 존재하는 회원: {user_id}")
            return
        db.add(
            Member(
                user_id=user_id,
                user_pw=hash_password(password),
                user_name="Administrator",
                coin=0,
                enabled=True,
                role=MemberRole.ADMIN.value,
            )
        )
        print(f"✅ 관리자 추가: {user_id}")


def main():
    print("🌱 시드 데이터 생성을 시작합니다...")
    seed_code_data()
    seed_admin()
    print("🎉 시드 데이터 생성이 완료되었습니다!")


if __name__ == "__main__":
    main()
