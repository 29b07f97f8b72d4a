class TestAuthRouter:
    def test_login_and_me(self, client, member):
        res = client.post("/auth/login", json={"userId": "alice", "userPw": "secret123"})

        assert res.status_code == 200
        token = res.json()["data"]["access_token"]

        me = client.get("/user/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        data = me.json()["data"]
        assert data["user_id"] == "alice"
        assert data["coin"] == 1000
        assert data["last_login_ip"] == "testclient"

    def test_login_ignores_forwarded_header_from_untrusted_peer(self, client, member):
        res = client.post(
            "/auth/login",
            json={"userId": "alice", "userPw": "secret123"},
            headers={"X-Forwarded-For": "203.0.113.50"},
        )
        token = res.json()["data"]["access_token"]

        me = client.get("/user/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["data"]["last_login_ip"] == "testclient"

    def test_login_wrong_password(self, client, member):
        res = client.post("/auth/login", json={"userId": "alice", "userPw": "nope"})
        assert res.status_code == 401
        assert res.json()["error"]["code"] == "AUTH_001"

    def test_me_with_invalid_token(self, client):
        res = client.get("/user/me", headers={"Authorization": "Bearer garbage"})
        assert res.status_code == 401

    def test_disabled_member_is_rejected(self, client, login_as, member):
        login_as(member.model_copy(update={"enabled": False}))
        res = client.get("/user/me")
        assert res.status_code == 400
        assert res.json()["error"]["message"] == "Inactive user account"


class TestMemberRouter:
    def test_register_then_duplicate(self, client):
        payload = {"userId": "erin", "userPw": "pw12345", "userName": "Erin"}
        assert client.post("/user/register", json=payload).status_code == 200

        res = client.post("/user/register", json=payload)
        assert res.status_code == 409

    def test_register_rejects_password_over_72_bytes(self, client):
        # 30글자지만 UTF-8 로는 90바이트
        payload = {"userId": "kim", "userPw": "가" * 30, "userName": "Kim"}
        res = client.post("/user/register", json=payload)

        assert res.status_code == 422
        assert res.json()["error"]["code"] == "VALIDATION_001"
        assert client.post("/user/setup", json=payload).status_code == 422

    def test_register_accepts_multibyte_password_within_limit(self, client):
        payload = {"userId": "lee", "userPw": "가" * 24, "userName": "Lee"}
        assert client.post("/user/register", json=payload).status_code == 200

        res = client.post("/auth/login", json={"userId": "lee", "userPw": "가" * 24})
        assert res.status_code == 200

    def test_list_requires_admin(self, client, login_as, member, admin):
        login_as(member)
        assert client.get("/user/list").status_code == 403

        login_as(admin)
        res = client.get("/user/list")
        assert res.status_code == 200
        assert res.json()["data"]["count"] == 2


class TestCoinRouter:
    def test_charge_and_history(self, client, login_as, member):
        login_as(member)

        res = client.post("/coin/charge", json={"amount": 250})
        assert res.status_code == 200
        assert res.json()["data"]["coin_after"] == 1250

        history = client.get("/coin/list").json()["data"]
        assert history["count"] == 1
        assert history["entries"][0]["amount"] == 250

    def test_charge_rejects_non_positive(self, client, login_as, member):
        login_as(member)
        assert client.post("/coin/charge", json={"amount": 0}).status_code == 422


class TestCodeRouter:
    def test_code_admin_flow(self, client, login_as, admin):
        login_as(admin)
        client.post("/codegroup/register", json={"group_code": "A01", "group_name": "Job"})
        client.post(
            "/codedetail/register",
            json={"group_code": "A01", "code_value": "00", "code_name": "Developer"},
        )

        res = client.get("/code/list", params={"groupCode": "A01"})

        assert res.json()["data"]["codes"] == [{"value": "00", "label": "Developer"}]
        job_list = client.get("/user/register").json()["data"]["jobList"]
        assert job_list == [{"value": "00", "label": "Developer"}]


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["database"] == "connected"
    assert body["status"] == "healthy"
    assert body["upload_path_writable"] is True
