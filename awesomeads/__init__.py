"""AwesomeAds campaign API."""
