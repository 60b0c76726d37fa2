import pytest

from bus_booking.booking.applications.submit_booking import SubmitBookingService
from bus_booking.booking.domain.exception import EmptySelectionException
from bus_booking.booking.domain.value_object import BookingConfirmation
from bus_booking.shared.auth import InMemorySessionProvider
from bus_booking.shared.domain.exception import AuthenticationRequiredException


class TestSubmitBookingService:
    @pytest.mark.asyncio
    async def test_submit_uses_session_token(
        self, create_composer, fill_passengers, mock_gateway, session_provider
    ):
        composer = create_composer()
        composer.toggle_seat(1)
        fill_passengers(composer)
        service = SubmitBookingService(
            gateway=mock_gateway, session_provider=session_provider
        )

        result = await service.submit(composer)

        assert isinstance(result, BookingConfirmation)
        _, token = mock_gateway.submit.await_args.args
        assert token == "token-abc"

    @pytest.mark.asyncio
    async def test_domain_events_are_flushed(
        self, create_composer, fill_passengers, mock_gateway, session_provider
    ):
        composer = create_composer()
        composer.toggle_seat(1)
        fill_passengers(composer)
        service = SubmitBookingService(
            gateway=mock_gateway, session_provider=session_provider
        )

        await service.submit(composer)

        assert composer.flush_domain_events() == []

    @pytest.mark.asyncio
    async def test_validation_error_propagates(
        self, create_composer, mock_gateway, session_provider
    ):
        service = SubmitBookingService(
            gateway=mock_gateway, session_provider=session_provider
        )

        with pytest.raises(EmptySelectionException):
            await service.submit(create_composer())

        mock_gateway.submit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_logged_out_session_is_rejected(
        self, create_composer, fill_passengers, mock_gateway
    ):
        composer = create_composer()
        composer.toggle_seat(1)
        fill_passengers(composer)
        service = SubmitBookingService(
            gateway=mock_gateway, session_provider=InMemorySessionProvider()
        )

        with pytest.raises(AuthenticationRequiredException):
            await service.submit(composer)

        mock_gateway.submit.assert_not_awaited()
