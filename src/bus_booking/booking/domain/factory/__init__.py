from .booking_composer_factory import BookingComposerFactory as BookingComposerFactory
