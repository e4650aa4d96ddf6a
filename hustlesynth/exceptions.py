# hustlesynth/exceptions.py

class HustleSynthException(Exception):
    """기본 예외 클래스"""
    def __init__(self, message):
        super().__init__(message)
        self.message = message

# 클라이언트 측 예외 (4xx)
class ClientException(HustleSynthException):
    """클라이언트 측 오류"""

class InvalidRequestException(ClientException):
    """클라이언트로부터 잘못된 요청이 왔을 때"""

# 서버 측 오류 (5xx)
class ServerException(HustleSynthException):
    """서버 측 오류"""

class NotFoundException(ServerException):
    """데이터를 찾지 못했을 때"""

class ConfigurationException(ServerException):
    """설정값이 누락되었거나 잘못되었을 때 (기동 시점)"""

# 프로젝트 특화 예외들
class SessionNotFoundException(NotFoundException):
    """세션을 찾을 수 없을 때"""

class UpstreamUnavailableException(ServerException):
    """업스트림 LLM 호출 실패 (응답 형식 오류 포함)"""
