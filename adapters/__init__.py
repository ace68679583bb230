"""
어댑터 레이어

외부 입출력(CSV 파일 등)과의 연동을 담당.
장부 엔진(core.ledger)은 파싱된 레코드와 행 목록만 다룸.
"""
