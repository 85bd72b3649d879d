from cmc_listings_notifier.clients.twilio.messages_client import TwilioMessagesClient

__all__ = ["TwilioMessagesClient"]
