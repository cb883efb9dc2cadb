"""
웹 UI 대신 사용하는 클라이언트 패키지: 입력 검증, 세션, API 호출, 화면 흐름.
"""
