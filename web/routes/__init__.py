"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- rules: 차변/대변 규칙 및 배지 스타일
- journal: 거래 분류 / 분개장
- ledger: 총계정원장 / 회계 등식 검증
"""
