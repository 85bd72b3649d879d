from cmc_listings_notifier.services.dispatch.listing_dispatcher import DispatchReport, ListingDispatcher

__all__ = ["DispatchReport", "ListingDispatcher"]
