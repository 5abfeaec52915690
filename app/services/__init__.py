"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services receive their repositories through the constructor and raise
NotFoundError/ConflictError; routers own the commit.
"""
