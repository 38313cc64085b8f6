"""Internal endpoint modules for the weather service API."""
