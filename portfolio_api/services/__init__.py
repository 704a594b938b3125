"""
비즈니스 로직

- matching_service.py: 키워드 점수 기반 답변 매칭
- classification_service.py: 매칭 실패 질문 분류
- question_service.py: 질문 접수 → 매칭/분류 → 상태 갱신
- answer_service.py: 답변 카탈로그 조회/관리
- feedback_service.py: 피드백 저장/조회
"""
