"""
用户档案接口测试
测试用户创建、获取、更新等基本功能
"""

from fastapi import status


class TestUserCreation:
    """用户创建测试"""

    def test_create_user_success(self, client, sample_user_data):
        response = client.post("/users/", json=sample_user_data)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()

        assert data["name"] == sample_user_data["name"]
        assert data["height_cm"] == sample_user_data["height_cm"]
        assert data["gender"] == sample_user_data["gender"]
        assert "id" in data

    def test_create_user_minimal_data(self, client):
        """只有 name 时，所有档案字段为空（计算时走默认值）"""
        response = client.post("/users/", json={"name": "最小用户"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()

        assert data["name"] == "最小用户"
        assert data["height_cm"] is None
        assert data["gender"] is None
        assert data["activity_level_multiplier"] is None

    def test_create_user_missing_name(self, client):
        response = client.post("/users/", json={"height_cm": 170})
        assert response.status_code == 422

    def test_create_user_invalid_gender(self, client):
        response = client.post("/users/", json={"name": "x", "gender": "robot"})
        assert response.status_code == 422

    def test_create_user_invalid_height(self, client):
        response = client.post("/users/", json={"name": "x", "height_cm": -5})
        assert response.status_code == 422


class TestUserRetrieval:
    """用户获取测试"""

    def test_get_user_success(self, client, user_id, sample_user_data):
        response = client.get(f"/users/{user_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == user_id
        assert data["email"] == sample_user_data["email"]

    def test_get_user_not_found(self, client):
        response = client.get("/users/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "User not found"

    def test_get_users_list(self, client, sample_user_data):
        for i in range(3):
            user_data = dict(sample_user_data, name=f"用户{i + 1}", email=f"user{i + 1}@example.com")
            client.post("/users/", json=user_data)

        response = client.get("/users/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 3
        assert [u["name"] for u in data] == ["用户1", "用户2", "用户3"]


class TestUserUpdate:
    """用户信息更新测试"""

    def test_update_user_success(self, client, user_id, sample_user_data, sample_user_update_data):
        response = client.put(f"/users/{user_id}", json=sample_user_update_data)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == sample_user_data["name"]  # name应该保持不变
        assert data["height_cm"] == 180.0
        assert data["gender"] == "female"
        assert data["activity_level"] == "moderately_active"

    def test_update_user_partial(self, client, user_id, sample_user_data):
        response = client.put(f"/users/{user_id}", json={"date_of_birth": "1990-05-20"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["date_of_birth"] == "1990-05-20"
        assert data["height_cm"] == sample_user_data["height_cm"]  # 其他字段保持不变

    def test_update_user_not_found(self, client, sample_user_update_data):
        response = client.put("/users/99999", json=sample_user_update_data)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "User not found"
