from tests.test_utils.factories.dispatch import NotificationPayloadFactory

__all__ = ["NotificationPayloadFactory"]
