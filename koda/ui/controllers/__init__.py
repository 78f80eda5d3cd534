"""UI Controllers — 화면과 변환 로직의 분리.

Controller는 QObject를 상속하여 시그널/슬롯 사용 가능.
화면은 Controller의 session을 읽고 명령 메서드만 호출한다.
"""

from koda.ui.controllers.conversion_controller import ConversionController

__all__ = ["ConversionController"]
