"""수강 등록 API 테스트.

Enrollment API tests — enrolling, listing, status transitions, deletion,
and the cascade from student deletion.
"""

import uuid

from httpx import AsyncClient

from tests.conftest import student_payload

URL = "/api/students"


class TestEnroll:
    """수강 등록 생성 테스트."""

    async def test_enroll_student(self, client: AsyncClient, student):
        """수강 등록 성공 — ACTIVE, 수료 일시 없음."""
        res = await client.post(f"{URL}/{student.id}/enrollments", params={"classId": "PHYS201"})
        assert res.status_code == 201
        data = res.json()
        assert data["student_id"] == str(student.id)
        assert data["class_id"] == "PHYS201"
        assert data["status"] == "ACTIVE"
        assert data["enrollment_date"] is not None
        assert data["completion_date"] is None

    async def test_enroll_twice_same_class(self, client: AsyncClient, student):
        """같은 수업에 두 번 등록 시 400, 등록은 1건만 존재."""
        student_id = str(student.id)
        first = await client.post(f"{URL}/{student_id}/enrollments", params={"classId": "MATH101"})
        assert first.status_code == 201
        res = await client.post(f"{URL}/{student_id}/enrollments", params={"classId": "MATH101"})
        assert res.status_code == 400
        assert "MATH101" in res.json()["detail"]

        listed = await client.get(f"{URL}/{student_id}/enrollments")
        assert [e["class_id"] for e in listed.json()] == ["MATH101"]

    async def test_enroll_nonexistent_student(self, client: AsyncClient):
        """존재하지 않는 학생 등록 시 404."""
        res = await client.post(f"{URL}/{uuid.uuid4()}/enrollments", params={"classId": "MATH101"})
        assert res.status_code == 404

    async def test_enroll_missing_class_id(self, client: AsyncClient, student):
        """classId 누락 시 400."""
        res = await client.post(f"{URL}/{student.id}/enrollments")
        assert res.status_code == 400
        assert res.json()["errors"][0]["field"] == "classId"

    async def test_enroll_blank_class_id(self, client: AsyncClient, student):
        """공백 classId 시 400."""
        res = await client.post(f"{URL}/{student.id}/enrollments", params={"classId": "  "})
        assert res.status_code == 400

    async def test_enroll_class_id_length(self, client: AsyncClient, student):
        """컬럼 길이를 넘는 classId는 400, 최대 길이는 허용."""
        student_id = str(student.id)
        res = await client.post(f"{URL}/{student_id}/enrollments", params={"classId": "C" * 256})
        assert res.status_code == 400
        assert res.json()["errors"][0]["field"] == "classId"

        res = await client.post(f"{URL}/{student_id}/enrollments", params={"classId": "C" * 255})
        assert res.status_code == 201


class TestEnrollmentRead:
    """수강 등록 조회 테스트."""

    async def test_list_enrollments(self, client: AsyncClient, student, enrollment):
        """학생별 수강 등록 목록."""
        res = await client.get(f"{URL}/{student.id}/enrollments")
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["id"] == str(enrollment.id)

    async def test_list_enrollments_nonexistent_student(self, client: AsyncClient):
        """존재하지 않는 학생의 목록 조회 시 404."""
        res = await client.get(f"{URL}/{uuid.uuid4()}/enrollments")
        assert res.status_code == 404

    async def test_get_enrollment(self, client: AsyncClient, enrollment):
        """수강 등록 단건 조회."""
        res = await client.get(f"{URL}/enrollments/{enrollment.id}")
        assert res.status_code == 200
        assert res.json()["class_id"] == "MATH101"

    async def test_get_nonexistent_enrollment(self, client: AsyncClient):
        """존재하지 않는 수강 등록 조회 시 404."""
        res = await client.get(f"{URL}/enrollments/{uuid.uuid4()}")
        assert res.status_code == 404


class TestEnrollmentStatus:
    """수강 등록 상태 변경 테스트."""

    async def test_complete_then_reactivate(self, client: AsyncClient, enrollment):
        """COMPLETED 시 수료 일시 설정, ACTIVE로 되돌리면 초기화."""
        status_url = f"{URL}/enrollments/{enrollment.id}/status"

        res = await client.put(status_url, params={"newStatus": "COMPLETED"})
        assert res.status_code == 200
        assert res.json()["status"] == "COMPLETED"
        assert res.json()["completion_date"] is not None

        res = await client.put(status_url, params={"newStatus": "ACTIVE"})
        assert res.status_code == 200
        assert res.json()["status"] == "ACTIVE"
        assert res.json()["completion_date"] is None

    async def test_dropped_has_no_completion_date(self, client: AsyncClient, enrollment):
        """DROPPED 상태는 수료 일시 없음."""
        res = await client.put(
            f"{URL}/enrollments/{enrollment.id}/status", params={"newStatus": "DROPPED"}
        )
        assert res.status_code == 200
        assert res.json()["status"] == "DROPPED"
        assert res.json()["completion_date"] is None

    async def test_invalid_status(self, client: AsyncClient, enrollment):
        """정의되지 않은 상태 값은 400."""
        res = await client.put(
            f"{URL}/enrollments/{enrollment.id}/status", params={"newStatus": "GRADUATED"}
        )
        assert res.status_code == 400
        assert res.json()["errors"][0]["field"] == "newStatus"

    async def test_status_nonexistent_enrollment(self, client: AsyncClient):
        """존재하지 않는 수강 등록 상태 변경 시 404."""
        res = await client.put(
            f"{URL}/enrollments/{uuid.uuid4()}/status", params={"newStatus": "ACTIVE"}
        )
        assert res.status_code == 404


class TestEnrollmentDelete:
    """수강 등록 삭제 테스트."""

    async def test_delete_enrollment(self, client: AsyncClient, student, enrollment):
        """수강 등록 삭제 후 학생 목록에서 사라짐."""
        student_id = str(student.id)
        res = await client.delete(f"{URL}/enrollments/{enrollment.id}")
        assert res.status_code == 204

        listed = await client.get(f"{URL}/{student_id}/enrollments")
        assert listed.json() == []

    async def test_delete_nonexistent_enrollment(self, client: AsyncClient):
        """존재하지 않는 수강 등록 삭제 시 404."""
        res = await client.delete(f"{URL}/enrollments/{uuid.uuid4()}")
        assert res.status_code == 404

    async def test_delete_student_removes_enrollments(self, client: AsyncClient, student):
        """학생 삭제 시 모든 수강 등록도 삭제."""
        student_id = str(student.id)
        enrollment_ids = []
        for class_id in ("MATH101", "PHYS201", "CHEM301"):
            res = await client.post(f"{URL}/{student_id}/enrollments", params={"classId": class_id})
            enrollment_ids.append(res.json()["id"])

        res = await client.delete(f"{URL}/{student_id}")
        assert res.status_code == 204

        res = await client.get(f"{URL}/{student_id}/enrollments")
        assert res.status_code == 404
        for enrollment_id in enrollment_ids:
            res = await client.get(f"{URL}/enrollments/{enrollment_id}")
            assert res.status_code == 404


class TestEnrollmentScenario:
    """학생 생성부터 삭제까지 전체 흐름."""

    async def test_full_lifecycle(self, client: AsyncClient):
        """Jane Doe — 생성, MATH101 등록, 중복 등록, 수료, 삭제."""
        res = await client.post(URL, json=student_payload())
        assert res.status_code == 201
        student_id = res.json()["id"]
        assert res.json()["enrollment_date"] is not None

        res = await client.post(f"{URL}/{student_id}/enrollments", params={"classId": "MATH101"})
        assert res.status_code == 201
        assert res.json()["status"] == "ACTIVE"
        enrollment_id = res.json()["id"]

        res = await client.post(f"{URL}/{student_id}/enrollments", params={"classId": "MATH101"})
        assert res.status_code == 400

        res = await client.put(
            f"{URL}/enrollments/{enrollment_id}/status", params={"newStatus": "COMPLETED"}
        )
        assert res.status_code == 200
        assert res.json()["completion_date"] is not None

        res = await client.get(f"{URL}/{student_id}")
        assert res.json()["enrollments"][0]["status"] == "COMPLETED"

        res = await client.delete(f"{URL}/{student_id}")
        assert res.status_code == 204

        res = await client.get(f"{URL}/{student_id}/enrollments")
        assert res.status_code == 404
