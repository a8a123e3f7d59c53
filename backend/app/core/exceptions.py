# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스/저장소 레이어는 HTTPException 대신 아래 예외를 발생시키고,
# HTTP 상태 코드와 응답 형식으로의 변환은 api/errors.py의 예외 핸들러가 담당합니다.

from fastapi import status


class ShopServiceError(Exception):
    """쇼핑몰 서비스 관련 기본 예외 클래스

    Attributes:
        message: 클라이언트에게 노출되는 에러 메시지
        status_code: 매핑될 HTTP 상태 코드
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateUserError(ShopServiceError):
    """이미 가입된 이메일로 회원가입을 시도한 경우"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class InvalidCredentialsError(ShopServiceError):
    """로그인 실패 (이메일 없음 / 비밀번호 불일치)

    주니어 개발자님께: 두 경우 모두 같은 메시지를 사용해야
    계정 존재 여부가 외부에 드러나지 않습니다.
    """
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class NotFoundError(ShopServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageUnavailableError(ShopServiceError):
    """MongoDB 호출 실패 시 발생하는 예외

    Attributes:
        operation: 실패한 저장소 작업 이름 (서버 로그용, 응답에는 노출하지 않음)
    """
    def __init__(self, operation: str = None):
        self.operation = operation
        super().__init__()
