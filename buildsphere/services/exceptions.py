# buildsphere/services/exceptions.py

# 서비스 계층의 "찾을 수 없음"과 "거부된 커맨드"는 예외가 아니라 None으로 표현됩니다.
# 여기의 예외는 요청 자체를 해석할 수 없을 때만 사용합니다.

class InvalidRequestBodyError(ValueError):
    """요청 본문이 JSON 객체가 아니거나 파싱할 수 없을 때"""
    pass
