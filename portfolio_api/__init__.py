"""
Portfolio Q&A API

포트폴리오 질문을 기본 답변 카탈로그와 키워드 매칭하고,
매칭 실패 시 규칙 기반으로 분류하여 안내 / 어드바이저 검토 대기열로 보냄
"""
