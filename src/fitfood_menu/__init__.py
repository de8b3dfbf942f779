"""Daily fitfoodway menu scraper with macro supplements."""
