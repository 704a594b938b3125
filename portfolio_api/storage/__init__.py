"""
데이터 저장 (메모리 기반)

- answer_store.py: 답변 카탈로그
- question_store.py: 질문 이력 / 상태
- feedback_store.py: 답변 피드백
- catalog.py: 기본 답변 데이터
- memory_storage.py: 위 저장소 묶음 (앱당 1개)

프로덕션에서는 DB(PostgreSQL 등) 사용 권장
"""
