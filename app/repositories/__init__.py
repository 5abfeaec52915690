"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
student_repository, enrollment_repository and teacher_repository each extend
BaseRepository for generic CRUD and add their domain-specific lookups.
"""
