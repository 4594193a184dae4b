from hotel_reservation.reservation.domain.entity import Booking
from hotel_reservation.reservation.domain.exception import (
    BookingNumberGenerationExhaustedException,
    PersistenceInconsistencyException,
)
from hotel_reservation.reservation.domain.factory import (
    BookingDetails,
    BookingFactory,
    BookingNumberGenerator,
)
from hotel_reservation.reservation.domain.repository import (
    BookingRepository,
    RoomRepository,
)
from hotel_reservation.reservation.domain.service import BookingValidator
from hotel_reservation.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from hotel_reservation.shared.utils import get_logger

logger = get_logger()


class CreateBookingService:
    """予約作成のユースケース

    検証 → 予約番号の発行 → 保存 → 再取得 の順に進め、
    いずれかで失敗した場合は保存を行わずに例外を送出する。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        room_repository: RoomRepository,
        validator: BookingValidator,
        number_generator: BookingNumberGenerator,
        factory: BookingFactory,
    ) -> None:
        self._booking_repository = booking_repository
        self._room_repository = room_repository
        self._validator = validator
        self._number_generator = number_generator
        self._factory = factory

    def create(self, booking_details: BookingDetails) -> Booking:
        """予約を作成する

        Returns:
            Booking: 保存後に再取得した予約エンティティ
        """
        room_id = booking_details["room_id"]

        # 1. 部屋を解決してビジネスルールを検証
        room = self._room_repository.find_by_id(room_id)
        try:
            self._validator.validate(booking_details, room)
        except (BusinessRuleViolationException, ResourceNotFoundException) as e:
            logger.info(
                "Booking request rejected",
                extra={"room_id": room_id, "error_code": e.error_code},
            )
            raise

        # 2. 予約番号を発行
        try:
            booking_number = self._number_generator.generate()
        except BookingNumberGenerationExhaustedException as e:
            logger.error(
                "Booking number generation exhausted",
                extra={"room_id": room_id, "attempts": e.attempts},
            )
            raise

        # 3. Factory でエンティティを生成し、Repository で永続化
        booking = self._factory.create(booking_number, booking_details)
        self._booking_repository.save(booking)

        # 4. 保存した予約を再取得して返却
        created = self._booking_repository.find_by_booking_number(booking_number)
        if created is None:
            logger.error(
                "Created booking could not be retrieved",
                extra={"booking_number": str(booking_number), "room_id": room_id},
            )
            raise PersistenceInconsistencyException(str(booking_number))

        logger.info(
            "Booking created",
            extra={"booking_number": str(created.booking_number), "room_id": room_id},
        )
        return created
